# ============================================================================
# src/medication_safety/core/__init__.py
# ============================================================================
"""
Domain records shared by every component.
"""

from .enums import PrescriptionStatus, EntryType, DedupStrategy
from .interaction import InteractionFact, DrugGroup, GroupInteractionRule, InteractionReport
from .prescription import (
    PrescriptionItemRequest,
    PrescriptionRequest,
    PrescriptionItem,
    Prescription,
)

__all__ = [
    'PrescriptionStatus',
    'EntryType',
    'DedupStrategy',
    'InteractionFact',
    'DrugGroup',
    'GroupInteractionRule',
    'InteractionReport',
    'PrescriptionItemRequest',
    'PrescriptionRequest',
    'PrescriptionItem',
    'Prescription',
]
