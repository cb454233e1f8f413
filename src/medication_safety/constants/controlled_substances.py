# ============================================================================
# src/medication_safety/constants/controlled_substances.py
# ============================================================================
"""
Controlled substance fragments.

Matching is substring containment on the lower-cased medication name, so
"Morphine sulfate 10mg" and "Tramadol ER" both match.
"""

CONTROLLED_SUBSTANCES = frozenset({
    # Opioids
    "morphine", "oxycodone", "fentanyl", "tramadol", "codeine",
    # Benzodiazepines and hypnotics
    "alprazolam", "lorazepam", "diazepam", "zolpidem",
    # Spanish spellings of the opioids above
    "morfina", "oxicodona", "fentanilo", "codeina", "codeína",
})
