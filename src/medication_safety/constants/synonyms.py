# ============================================================================
# src/medication_safety/constants/synonyms.py
# ============================================================================
"""
Medication name synonyms.

Keys are already-normalized strings (lower-case, no punctuation, single
spaces). A normalized name that equals a key exactly is replaced by the
canonical value. Values must never themselves be keys.
"""

from types import MappingProxyType

MEDICATION_SYNONYMS = MappingProxyType({
    # Aspirin
    "acido acetilsalicilico": "aspirina",
    "asa": "aspirina",
    "aas": "aspirina",

    # Paracetamol / acetaminophen
    "paracetamol": "acetaminofen",
    "acetaminofeno": "acetaminofen",

    # Salt forms
    "levotiroxina sodica": "levotiroxina",
    "omeprazol sodico": "omeprazol",
    "acido valproico": "valproato",

    # Class abbreviations
    "aines": "antiinflamatorio no esteroideo",

    # Common misspellings
    "metroprolol": "metoprolol",
})
