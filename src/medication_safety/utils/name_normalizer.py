# ============================================================================
# src/medication_safety/utils/name_normalizer.py
# ============================================================================
"""
Medication Name Normalization

Turns a raw, display-form medication name into a comparable key:
- Lower-cases
- Drops parenthesized brand annotations ("Aspirina (Bayer)")
- Replaces punctuation and symbols with spaces
- Collapses whitespace
- Maps known synonyms and misspellings to one canonical name

The result is idempotent: normalizing a key returns the same key.
"""

import re
import logging
from typing import Mapping, Optional

from ..constants.synonyms import MEDICATION_SYNONYMS

logger = logging.getLogger(__name__)

# Parenthesized annotations, e.g. brand names
PARENTHESIZED_PATTERN = re.compile(r'\([^)]*\)')

# Anything that is not a digit, an ASCII letter or a Spanish letter
NON_NAME_CHAR_PATTERN = re.compile(r'[^a-zñáéíóúü0-9]')

WHITESPACE_PATTERN = re.compile(r'\s+')


def normalize_medication_name(
    raw: Optional[str],
    synonyms: Mapping[str, str] = MEDICATION_SYNONYMS
) -> str:
    """
    Normalize a medication name to its canonical key.

    Examples:
        "Aspirina (Bayer)" -> "aspirina"
        "Ácido acetilsalicílico" -> "ácido acetilsalicílico"
        "acido-acetilsalicilico" -> "aspirina"
        "Paracetamol" -> "acetaminofen"
        "" -> ""
    """
    if not raw:
        return ""

    normalized = raw.lower()
    normalized = PARENTHESIZED_PATTERN.sub('', normalized)
    normalized = NON_NAME_CHAR_PATTERN.sub(' ', normalized)
    normalized = WHITESPACE_PATTERN.sub(' ', normalized).strip()

    canonical = synonyms.get(normalized)
    if canonical is not None:
        logger.debug(f"Synonym mapped: '{normalized}' -> '{canonical}'")
        return canonical

    return normalized


def capitalize_first(text: Optional[str]) -> Optional[str]:
    """Upper-case only the first character, for display."""
    if not text:
        return text
    return text[0].upper() + text[1:]


class NameNormalizer:
    """
    Normalizer bound to a synonym table.

    The default table is the shared read-only one; tests and callers may
    inject their own.
    """

    def __init__(self, synonyms: Optional[Mapping[str, str]] = None):
        self.synonyms = MEDICATION_SYNONYMS if synonyms is None else synonyms

    def normalize(self, raw: Optional[str]) -> str:
        return normalize_medication_name(raw, self.synonyms)

    def normalize_all(self, names) -> list:
        """Normalize every name, preserving order and repeats."""
        return [self.normalize(name) for name in names]
