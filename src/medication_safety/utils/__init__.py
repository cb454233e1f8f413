# ============================================================================
# src/medication_safety/utils/__init__.py
# ============================================================================
"""
Utility modules for the medication safety engine.
"""

from .exceptions import (
    MedicationSafetyError,
    ValidationError,
    InteractionBlockedError,
    AllergyConflictError,
    PrescriptionStateError,
    MedicalEntryValidationError,
    RefillError,
    ConfigurationError,
)

from .logging import (
    setup_logging,
    get_logger,
    JsonFormatter,
    LogAdapter,
    prescription_logger,
)

from .metrics import (
    MetricsCollector,
    Timer,
    get_metrics,
)

from .name_normalizer import (
    NameNormalizer,
    normalize_medication_name,
    capitalize_first,
)

__all__ = [
    # Exceptions
    'MedicationSafetyError',
    'ValidationError',
    'InteractionBlockedError',
    'AllergyConflictError',
    'PrescriptionStateError',
    'MedicalEntryValidationError',
    'RefillError',
    'ConfigurationError',
    # Logging
    'setup_logging',
    'get_logger',
    'JsonFormatter',
    'LogAdapter',
    'prescription_logger',
    # Metrics
    'MetricsCollector',
    'Timer',
    'get_metrics',
    # Normalization
    'NameNormalizer',
    'normalize_medication_name',
    'capitalize_first',
]
