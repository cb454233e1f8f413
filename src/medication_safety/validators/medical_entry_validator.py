# ============================================================================
# src/medication_safety/validators/medical_entry_validator.py
# ============================================================================
"""
Medical Record Entry Validator

Separate from prescription validation: checks free-text medical record
entries and record field updates.
"""

import re
import logging
from typing import List, Optional, Union

from ..core.enums import EntryType
from ..utils.exceptions import MedicalEntryValidationError

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONTENT_LENGTH = 10

# Entry type -> (minimum content length, rejection message)
CONTENT_MINIMUMS = {
    EntryType.DIAGNOSIS: (20, "Diagnosis content should be detailed (minimum 20 characters)"),
    EntryType.LAB_RESULT: (15, "Lab result content should include detailed results"),
    EntryType.SURGERY: (50, "Surgery records must contain detailed information (minimum 50 characters)"),
}

PRESCRIPTION_DETAIL_TOKENS = ("medication", "dosage", "mg", "ml")

SHORT_FIELD_LIMIT = 500
LONG_FIELD_LIMIT = 1000

UNSAFE_MARKUP = ("<script>", "javascript:")
LONG_DIGIT_RUN = re.compile(r'\d{10,}')


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _reject(reason: str) -> None:
    logger.warning(f"Medical record entry rejected: {reason}")
    raise MedicalEntryValidationError(reason)


class MedicalEntryValidator:

    def validate_entry(
        self,
        entry_type: Union[EntryType, str, None],
        title: Optional[str],
        content: Optional[str]
    ) -> List[str]:
        """
        Validate a new or edited medical record entry.

        Returns:
            Warnings (currently only for thin PRESCRIPTION entries)

        Raises:
            MedicalEntryValidationError: on the first violation
        """
        if entry_type is None:
            _reject("Entry type is required")

        try:
            entry_type = EntryType(entry_type)
        except ValueError:
            _reject(f"Unknown entry type: {entry_type}")

        if _is_blank(title):
            _reject("Entry title is required")

        if _is_blank(content):
            _reject("Entry content is required")

        if entry_type is EntryType.PRESCRIPTION:
            return self._check_prescription_content(content)

        min_length, message = CONTENT_MINIMUMS.get(
            entry_type,
            (DEFAULT_MIN_CONTENT_LENGTH, "Entry content seems too short for meaningful medical information")
        )
        if len(content) < min_length:
            _reject(message)

        return []

    def _check_prescription_content(self, content: str) -> List[str]:
        lowered = content.lower()
        if any(token in lowered for token in PRESCRIPTION_DETAIL_TOKENS):
            return []

        warning = "Prescription entry might be missing medication details"
        logger.warning(warning)
        return [warning]

    def validate_record_update(
        self,
        allergies: Optional[str] = None,
        chronic_conditions: Optional[str] = None,
        current_medications: Optional[str] = None,
        surgical_history: Optional[str] = None,
        family_history: Optional[str] = None,
        notes: Optional[str] = None
    ) -> List[str]:
        """
        Validate free-text medical record fields.

        Returns:
            Warnings for suspicious but accepted content
        """
        limits = (
            (allergies, "Allergies", SHORT_FIELD_LIMIT),
            (chronic_conditions, "Chronic conditions", SHORT_FIELD_LIMIT),
            (current_medications, "Current medications", SHORT_FIELD_LIMIT),
            (surgical_history, "Surgical history", SHORT_FIELD_LIMIT),
            (family_history, "Family history", LONG_FIELD_LIMIT),
            (notes, "Notes", LONG_FIELD_LIMIT),
        )
        for value, label, limit in limits:
            if value is not None and len(value) > limit:
                _reject(f"{label} text cannot exceed {limit} characters")

        warnings = []
        if not _is_blank(allergies):
            warnings.extend(self._check_medical_text(allergies, "allergies"))

        if not _is_blank(current_medications):
            warnings.extend(self._check_medication_text(current_medications))

        return warnings

    def _check_medical_text(self, text: str, field_name: str) -> List[str]:
        if any(marker in text for marker in UNSAFE_MARKUP):
            _reject(f"Invalid characters detected in {field_name}")

        if LONG_DIGIT_RUN.search(text):
            warning = f"Suspicious numeric content in {field_name}: might contain unintended data"
            logger.warning(warning)
            return [warning]

        return []

    def _check_medication_text(self, medications: str) -> List[str]:
        warnings = []
        lowered = medications.lower()

        if "unknown" in lowered and len(medications.strip()) < 20:
            warnings.append("Current medications marked as unknown - might need follow-up")

        if "warfarin" in lowered and "aspirin" in lowered:
            warnings.append("Potential medication interaction detected: warfarin + aspirin")

        for warning in warnings:
            logger.warning(warning)
        return warnings
