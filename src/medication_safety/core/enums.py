# ============================================================================
# src/medication_safety/core/enums.py
# ============================================================================
"""
Domain Enums
- Prescription status
- Medical record entry types
- Interaction dedup strategies
"""

from enum import Enum

class PrescriptionStatus(str, Enum):
    ACTIVE = "ACTIVE"         # initial
    COMPLETED = "COMPLETED"   # terminal
    CANCELED = "CANCELED"     # terminal

    @property
    def is_terminal(self) -> bool:
        return self is not PrescriptionStatus.ACTIVE

class EntryType(str, Enum):
    CONSULTATION = "CONSULTATION"
    LAB_RESULT = "LAB_RESULT"
    IMAGING = "IMAGING"
    DIAGNOSIS = "DIAGNOSIS"
    TREATMENT = "TREATMENT"
    SURGERY = "SURGERY"
    FOLLOW_UP = "FOLLOW_UP"
    PRESCRIPTION = "PRESCRIPTION"
    OTHER = "OTHER"

class DedupStrategy(str, Enum):
    PAIR_KEY = "pair_key"              # unordered medication pair set
    MESSAGE_PREFIX = "message_prefix"  # legacy: textual prefix match
