# ============================================================================
# src/medication_safety/interactions/guard.py
# ============================================================================
"""
Blood Thinner + NSAID Guard

Creation-time hard block, independent of the advisory detector: a
prescription that names any blood thinner together with any NSAID is
rejected outright. Matching is substring containment on lower-cased raw
names ("Warfarina 5mg" contains "warfarin").
"""

import logging
from typing import Iterable, Optional, Sequence

from ..constants.prescription_rules import (
    BLOOD_THINNER_TOKENS,
    NSAID_TOKENS,
    QUICK_SCREEN_EXISTING_TOKENS,
    QUICK_SCREEN_NEW_TOKENS,
)
from ..utils.exceptions import InteractionBlockedError

logger = logging.getLogger(__name__)


def _contains_any(name: str, tokens: Sequence[str]) -> bool:
    return any(token in name for token in tokens)


class BloodThinnerNsaidGuard:

    def __init__(
        self,
        blood_thinner_tokens: Sequence[str] = BLOOD_THINNER_TOKENS,
        nsaid_tokens: Sequence[str] = NSAID_TOKENS
    ):
        self.blood_thinner_tokens = tuple(blood_thinner_tokens)
        self.nsaid_tokens = tuple(nsaid_tokens)

    def is_blocked(self, medication_names: Iterable[Optional[str]]) -> bool:
        has_blood_thinner = False
        has_nsaid = False

        for raw in medication_names:
            name = (raw or "").lower()
            if _contains_any(name, self.blood_thinner_tokens):
                has_blood_thinner = True
            if _contains_any(name, self.nsaid_tokens):
                has_nsaid = True

        return has_blood_thinner and has_nsaid

    def check(self, medication_names: Iterable[Optional[str]]) -> None:
        """Raise InteractionBlockedError if the combination is present."""
        if self.is_blocked(medication_names):
            reason = "Dangerous interaction: Blood thinners and NSAIDs should not be prescribed together"
            logger.warning(reason)
            raise InteractionBlockedError(reason)


def has_potential_interaction(existing_medication: Optional[str], new_medication: Optional[str]) -> bool:
    """
    Quick one-pair screen for adding a medication to a patient.

    Only flags warfarin/heparin already taken plus ibuprofen/aspirin added.
    """
    existing = (existing_medication or "").lower()
    new = (new_medication or "").lower()
    return (
        _contains_any(existing, QUICK_SCREEN_EXISTING_TOKENS)
        and _contains_any(new, QUICK_SCREEN_NEW_TOKENS)
    )
