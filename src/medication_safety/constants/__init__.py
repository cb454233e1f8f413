# ============================================================================
# src/medication_safety/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .synonyms import MEDICATION_SYNONYMS
from .controlled_substances import CONTROLLED_SUBSTANCES
from .drug_groups import DRUG_GROUPS, GROUP_INTERACTION_RULES
from .interactions import PAIRWISE_INTERACTIONS
from .prescription_rules import (
    DOSAGE_UNITS,
    FREQUENCY_TOKENS,
    BLOOD_THINNER_TOKENS,
    NSAID_TOKENS,
    QUICK_SCREEN_EXISTING_TOKENS,
    QUICK_SCREEN_NEW_TOKENS,
    ALLERGY_CLASSES,
)
