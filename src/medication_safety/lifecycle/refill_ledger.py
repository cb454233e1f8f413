# ============================================================================
# src/medication_safety/lifecycle/refill_ledger.py
# ============================================================================
"""
Refill Ledger

Per-item refill accounting. refills_used only grows, never past
refills_allowed, and is only written after every check has passed.
"""

import logging
from typing import Optional

from ..classifiers.controlled_substance import ControlledSubstanceClassifier
from ..core.prescription import PrescriptionItem
from ..utils.exceptions import RefillError

logger = logging.getLogger(__name__)


def _reject(reason: str, medication_name: str) -> None:
    logger.warning(f"Refill rejected: {reason}")
    raise RefillError(reason, medication_name=medication_name)


class RefillLedger:

    def __init__(self, classifier: Optional[ControlledSubstanceClassifier] = None):
        self.classifier = classifier or ControlledSubstanceClassifier()

    def can_refill(self, item: PrescriptionItem) -> bool:
        return item.refillable and item.remaining_refills > 0

    def request_refill(self, item: PrescriptionItem, requested_count: int = 1) -> int:
        """
        Dispense refills for one item.

        Args:
            item: Prescription item to refill (mutated on success)
            requested_count: Number of refills requested

        Returns:
            Updated refills_used

        Raises:
            RefillError: if the request is not allowed
        """
        name = item.medication_name

        if not item.refillable:
            _reject(f"Medication is not refillable: {name}", name)

        if requested_count < 1:
            _reject(
                f"Requested refills must be at least 1, got {requested_count} for {name}",
                name
            )

        remaining = item.remaining_refills
        if requested_count > remaining:
            _reject(
                f"Requested refills ({requested_count}) exceed remaining refills ({remaining}) for {name}",
                name
            )

        if requested_count > 1 and self.classifier.is_controlled(name):
            _reject(
                f"Controlled substances can only be refilled one at a time: {name}",
                name
            )

        item.refills_used += requested_count
        logger.info(
            f"Refill processed for {name}: {item.refills_used}/{item.refills_allowed} used"
        )
        return item.refills_used
