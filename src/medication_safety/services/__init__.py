# ============================================================================
# src/medication_safety/services/__init__.py
# ============================================================================
from .prescription_service import PrescriptionSafetyService, SafetyResult

__all__ = ['PrescriptionSafetyService', 'SafetyResult']
