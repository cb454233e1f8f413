# ============================================================================
# src/medication_safety/constants/prescription_rules.py
# ============================================================================
"""
Token tables for prescription content rules.

All matching is substring containment on lower-cased text.
"""

from types import MappingProxyType

# Dosage text without one of these only raises a warning
DOSAGE_UNITS = ("mg", "ml", "g", "mcg", "unit", "tablet")

# Frequency text must contain at least one of these
FREQUENCY_TOKENS = (
    "daily", "twice", "three times", "four times", "every",
    "as needed", "bid", "tid", "qid", "prn",
)

# Creation-time hard block: any blood thinner together with any NSAID
BLOOD_THINNER_TOKENS = ("warfarin", "heparin", "rivaroxaban", "apixaban", "dabigatran")
NSAID_TOKENS = ("ibuprofen", "aspirin", "naproxen", "diclofenac", "celecoxib")

# Quick single-pair screen used when adding one medication to a patient
QUICK_SCREEN_EXISTING_TOKENS = ("warfarin", "heparin")
QUICK_SCREEN_NEW_TOKENS = ("ibuprofen", "aspirin")

# Allergy class -> (medication name fragments, allergy text fragments, message)
ALLERGY_CLASSES = MappingProxyType({
    "penicillin": (
        ("penicillin", "amoxicillin", "penicilina", "amoxicilina"),
        ("penicillin", "penicilina"),
        "Patient is allergic to penicillin class drugs",
    ),
    "sulfa": (
        ("sulfa",),
        ("sulfa",),
        "Patient is allergic to sulfa drugs",
    ),
})
