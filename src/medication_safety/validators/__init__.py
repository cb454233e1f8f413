# ============================================================================
# src/medication_safety/validators/__init__.py
# ============================================================================
"""
Validators
- Prescription content rules
- Allergy cross-check
- Medical record entries
"""

from .allergy import AllergyChecker
from .prescription_validator import PrescriptionContentValidator
from .medical_entry_validator import MedicalEntryValidator

__all__ = [
    'AllergyChecker',
    'PrescriptionContentValidator',
    'MedicalEntryValidator',
]
