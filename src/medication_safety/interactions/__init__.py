# ============================================================================
# src/medication_safety/interactions/__init__.py
# ============================================================================
"""
Interactions Package

- Drug group registry (class membership)
- Pairwise interaction index (directional facts)
- Interaction detector (advisory warnings)
- Blood thinner + NSAID guard (blocking check at creation time)
"""

from .drug_groups import DrugGroupRegistry, load_group_rules
from .index import PairwiseInteractionIndex
from .detector import InteractionDetector, format_interaction
from .guard import BloodThinnerNsaidGuard, has_potential_interaction

__all__ = [
    'DrugGroupRegistry',
    'load_group_rules',
    'PairwiseInteractionIndex',
    'InteractionDetector',
    'format_interaction',
    'BloodThinnerNsaidGuard',
    'has_potential_interaction',
]
