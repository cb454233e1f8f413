# ============================================================================
# src/medication_safety/lifecycle/__init__.py
# ============================================================================
"""
Lifecycle Package
- Refill ledger
- Prescription status transitions
"""

from .refill_ledger import RefillLedger
from .prescription_lifecycle import PrescriptionLifecycle, append_marker

__all__ = [
    'RefillLedger',
    'PrescriptionLifecycle',
    'append_marker',
]
