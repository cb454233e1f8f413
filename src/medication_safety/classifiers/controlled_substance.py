# ============================================================================
# src/medication_safety/classifiers/controlled_substance.py
# ============================================================================
"""
Controlled Substance Classifier

Flags medications subject to controlled-substance rules (refill caps,
one-refill-per-request). Matching is substring containment on the
lower-cased name, so strengths and salt forms in the name still match.
"""

import logging
from typing import FrozenSet, Iterable, Optional

from ..constants.controlled_substances import CONTROLLED_SUBSTANCES

logger = logging.getLogger(__name__)


class ControlledSubstanceClassifier:
    """Membership test against a fixed controlled-substance set."""

    def __init__(self, substances: Optional[Iterable[str]] = None):
        source = CONTROLLED_SUBSTANCES if substances is None else substances
        self.substances: FrozenSet[str] = frozenset(s.lower() for s in source)

    def is_controlled(self, medication_name: Optional[str]) -> bool:
        """
        Check if medication is a controlled substance.

        Args:
            medication_name: Raw or normalized medication name

        Returns:
            True if any controlled fragment occurs in the name
        """
        if not medication_name:
            return False

        name = medication_name.lower()
        return any(substance in name for substance in self.substances)

    def matching_substance(self, medication_name: Optional[str]) -> Optional[str]:
        """Return the first matching fragment (alphabetical), or None."""
        if not medication_name:
            return None

        name = medication_name.lower()
        for substance in sorted(self.substances):
            if substance in name:
                return substance
        return None


_default_classifier = ControlledSubstanceClassifier()


def is_controlled_substance(medication_name: Optional[str]) -> bool:
    """Quick check against the default controlled-substance set."""
    return _default_classifier.is_controlled(medication_name)
