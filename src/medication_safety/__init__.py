# ============================================================================
# src/medication_safety/__init__.py
# ============================================================================
"""
Medication Safety Engine

Rule-based safety checks for prescriptions:
- Drug interaction detection (pairwise facts and drug-class rules)
- Prescription content validation and allergy cross-check
- Controlled substance classification
- Refill accounting and prescription lifecycle
"""

__version__ = "0.1.0"

from .core import (
    Prescription,
    PrescriptionItem,
    PrescriptionItemRequest,
    PrescriptionRequest,
    PrescriptionStatus,
)
from .interactions import InteractionDetector, has_potential_interaction
from .services import PrescriptionSafetyService, SafetyResult
from .utils.name_normalizer import normalize_medication_name
from .classifiers import is_controlled_substance

__all__ = [
    '__version__',
    'Prescription',
    'PrescriptionItem',
    'PrescriptionItemRequest',
    'PrescriptionRequest',
    'PrescriptionStatus',
    'InteractionDetector',
    'has_potential_interaction',
    'PrescriptionSafetyService',
    'SafetyResult',
    'normalize_medication_name',
    'is_controlled_substance',
]
