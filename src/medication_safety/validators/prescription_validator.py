# ============================================================================
# src/medication_safety/validators/prescription_validator.py
# ============================================================================
"""
Prescription Content Validator

Validates one prescription before it is created or edited:
1. Item count
2. Per-item required fields, dosage and frequency format, quantity
3. Duplicate medications (case/whitespace-insensitive)
4. Diagnosis detail
5. Controlled substance refill caps
6. Blood thinner + NSAID hard block
7. Patient allergy cross-check

Rules run in this order and the first failure raises ValidationError.
Soft findings (missing dosage unit, large controlled quantity) are
returned as warnings.
"""

import re
import logging
from typing import List, Optional, Sequence

from ..classifiers.controlled_substance import ControlledSubstanceClassifier
from ..config import SafetySettings, safety_settings
from ..constants.prescription_rules import DOSAGE_UNITS, FREQUENCY_TOKENS
from ..core.prescription import PrescriptionItemRequest
from ..interactions.guard import BloodThinnerNsaidGuard
from ..utils.exceptions import ValidationError
from .allergy import Allergies, AllergyChecker

logger = logging.getLogger(__name__)

DIGIT_PATTERN = re.compile(r'\d')


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _reject(reason: str) -> None:
    logger.warning(f"Prescription rejected: {reason}")
    raise ValidationError(reason)


class PrescriptionContentValidator:
    """
    Rule-based validation for prescription content.

    Stateless apart from injected reference data; safe to share.
    """

    def __init__(
        self,
        settings: Optional[SafetySettings] = None,
        classifier: Optional[ControlledSubstanceClassifier] = None,
        guard: Optional[BloodThinnerNsaidGuard] = None,
        allergy_checker: Optional[AllergyChecker] = None,
    ):
        self.settings = settings or safety_settings
        self.classifier = classifier or ControlledSubstanceClassifier()
        self.guard = guard or BloodThinnerNsaidGuard()
        self.allergy_checker = allergy_checker or AllergyChecker()

    def validate(
        self,
        items: Optional[Sequence[PrescriptionItemRequest]],
        diagnosis: Optional[str],
        allergies: Allergies = None
    ) -> List[str]:
        """
        Validate a prescription.

        Args:
            items: Requested medication lines
            diagnosis: Diagnosis text
            allergies: Patient's recorded allergies (optional)

        Returns:
            Warnings that do not block the prescription

        Raises:
            ValidationError: on the first rule violation
        """
        items = list(items or [])
        warnings: List[str] = []

        self._check_item_count(items)

        for item in items:
            warnings.extend(self.validate_item(item))

        self._check_duplicates(items)
        self._check_diagnosis(diagnosis)

        for item in items:
            warnings.extend(self._check_controlled_substance(item))

        self.guard.check(item.medication_name for item in items)
        self.allergy_checker.check((item.medication_name for item in items), allergies)

        logger.info(
            f"Prescription content valid: {len(items)} items, {len(warnings)} warnings"
        )
        return warnings

    def validate_item(self, item: PrescriptionItemRequest) -> List[str]:
        """
        Validate required fields and formats of one item.

        Returns:
            Warnings for this item
        """
        if _is_blank(item.medication_name):
            _reject("Medication name is required")

        if _is_blank(item.dosage):
            _reject("Dosage is required")

        if _is_blank(item.frequency):
            _reject("Frequency is required")

        if not self._is_positive_int(item.quantity):
            _reject("Quantity must be positive")

        if item.refills_allowed is not None and item.refills_allowed < 0:
            _reject(f"Refills allowed cannot be negative: {item.medication_name}")

        warnings = []
        unit_warning = self._check_dosage_format(item.dosage, item.medication_name)
        if unit_warning:
            warnings.append(unit_warning)

        self._check_frequency_format(item.frequency)
        return warnings

    def _check_item_count(self, items: List[PrescriptionItemRequest]) -> None:
        if not items:
            _reject("At least one medication item is required")

        max_items = self.settings.MAX_ITEMS_PER_PRESCRIPTION
        if len(items) > max_items:
            _reject(f"Maximum {max_items} medications allowed per prescription")

    @staticmethod
    def _is_positive_int(value) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value > 0

    def _check_dosage_format(self, dosage: str, medication_name: str) -> Optional[str]:
        dosage = dosage.lower().strip()

        if not DIGIT_PATTERN.search(dosage):
            _reject(f"Dosage must include numeric value: {dosage}")

        if not any(unit in dosage for unit in DOSAGE_UNITS):
            warning = f"Dosage may be missing unit: {dosage} for {medication_name}"
            logger.warning(warning)
            return warning

        return None

    def _check_frequency_format(self, frequency: str) -> None:
        frequency = frequency.lower().strip()

        if not any(token in frequency for token in FREQUENCY_TOKENS):
            _reject(f"Invalid frequency format: {frequency}")

    def _check_duplicates(self, items: List[PrescriptionItemRequest]) -> None:
        seen = set()
        for item in items:
            key = item.medication_name.lower().strip()
            if key in seen:
                _reject("Duplicate medications found in prescription")
            seen.add(key)

    def _check_diagnosis(self, diagnosis: Optional[str]) -> None:
        if _is_blank(diagnosis):
            _reject("Diagnosis is required for prescription")

        min_length = self.settings.MIN_DIAGNOSIS_LENGTH
        if len(diagnosis) < min_length:
            _reject(f"Diagnosis should be more detailed (minimum {min_length} characters)")

        max_length = self.settings.MAX_DIAGNOSIS_LENGTH
        if len(diagnosis) > max_length:
            _reject(f"Diagnosis must not exceed {max_length} characters")

    def _check_controlled_substance(self, item: PrescriptionItemRequest) -> List[str]:
        if not self.classifier.is_controlled(item.medication_name):
            return []

        max_refills = self.settings.MAX_CONTROLLED_REFILLS
        if item.refills_allowed is not None and item.refills_allowed > max_refills:
            _reject(
                f"Controlled substances cannot have more than {max_refills} refills: "
                f"{item.medication_name}"
            )

        if item.quantity > self.settings.CONTROLLED_QUANTITY_WARNING:
            warning = (
                f"Large quantity prescribed for controlled substance: "
                f"{item.medication_name} - {item.quantity} units"
            )
            logger.warning(warning)
            return [warning]

        return []
