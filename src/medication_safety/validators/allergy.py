# ============================================================================
# src/medication_safety/validators/allergy.py
# ============================================================================
"""
Allergy Cross-Check

Rejects a medication when the patient's recorded allergies mention it
directly, or when it belongs to a drug class (penicillins, sulfonamides)
that the patient is recorded as allergic to.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..constants.prescription_rules import ALLERGY_CLASSES
from ..utils.exceptions import AllergyConflictError

logger = logging.getLogger(__name__)

Allergies = Union[str, Sequence[str], None]


def _allergy_entries(allergies: Allergies) -> List[str]:
    if not allergies:
        return []
    if isinstance(allergies, str):
        return [allergies.lower()]
    return [entry.lower() for entry in allergies if entry]


class AllergyChecker:
    """Checks medication names against a patient's recorded allergies."""

    def __init__(self, allergy_classes: Optional[Mapping[str, Tuple]] = None):
        self.allergy_classes = ALLERGY_CLASSES if allergy_classes is None else allergy_classes

    def check(self, medication_names: Iterable[Optional[str]], allergies: Allergies) -> None:
        """
        Raise AllergyConflictError on the first conflicting medication.

        Args:
            medication_names: Raw medication names, in prescription order
            allergies: Recorded allergies, free text or a list of entries
        """
        entries = _allergy_entries(allergies)
        if not entries:
            return

        for raw in medication_names:
            if not raw:
                continue
            name = raw.lower()

            if any(name in entry for entry in entries):
                reason = f"Patient is allergic to {raw}"
                logger.warning(reason)
                raise AllergyConflictError(reason, medication_name=raw)

            self._check_drug_class(raw, name, entries)

    def _check_drug_class(self, raw: str, name: str, entries: List[str]) -> None:
        for class_name, (name_fragments, allergy_terms, message) in self.allergy_classes.items():
            if not any(fragment in name for fragment in name_fragments):
                continue
            if any(term in entry for entry in entries for term in allergy_terms):
                logger.warning(f"{message}: {raw} ({class_name} class)")
                raise AllergyConflictError(message, medication_name=raw)
