# ============================================================================
# src/medication_safety/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the medication safety engine.
"""


class MedicationSafetyError(Exception):
    """Base exception for all medication safety errors."""
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ValidationError(MedicationSafetyError):
    """Prescription content violates a rule. Recoverable by correcting input."""
    pass


class InteractionBlockedError(ValidationError):
    """Prescription combines medications that must never be issued together."""
    pass


class AllergyConflictError(ValidationError):
    """Medication conflicts with a recorded patient allergy."""
    def __init__(self, reason: str, medication_name: str):
        super().__init__(reason)
        self.medication_name = medication_name


class PrescriptionStateError(ValidationError):
    """Requested lifecycle transition is not allowed from the current status."""
    def __init__(self, reason: str, status=None):
        super().__init__(reason)
        self.status = status


class MedicalEntryValidationError(ValidationError):
    """Medical record entry or record field fails validation."""
    pass


class RefillError(MedicationSafetyError):
    """Refill request violates the refill ledger invariant."""
    def __init__(self, reason: str, medication_name: str = None):
        super().__init__(reason)
        self.medication_name = medication_name


class ConfigurationError(MedicationSafetyError):
    """Invalid configuration."""
    pass
