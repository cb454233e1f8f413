# ============================================================================
# src/medication_safety/classifiers/__init__.py
# ============================================================================
"""
Medication classifiers.
"""

from .controlled_substance import ControlledSubstanceClassifier, is_controlled_substance

__all__ = [
    'ControlledSubstanceClassifier',
    'is_controlled_substance',
]
