# ============================================================================
# src/medication_safety/constants/drug_groups.py
# ============================================================================
"""
Drug classes and class-level interaction rules.

Members are normalized medication keys. Group membership is exact key
equality, never substring.
"""

from types import MappingProxyType

NSAIDS = "nsaids"
CORTICOSTEROIDS = "corticosteroids"
ANTICOAGULANTS = "anticoagulants"
ANTIPLATELETS = "antiplatelets"
SSRIS = "ssris"
MAOIS = "maois"
DIURETICS = "diuretics"
BETA_BLOCKERS = "beta_blockers"
CALCIUM_CHANNEL_BLOCKERS = "calcium_channel_blockers"
ACEI_ARBS = "acei_arbs"

DRUG_GROUPS = MappingProxyType({
    NSAIDS: frozenset({
        "aspirina", "ibuprofeno", "naproxeno", "diclofenaco", "meloxicam", "ketorolaco",
    }),
    CORTICOSTEROIDS: frozenset({
        "prednisona", "dexametasona", "betametasona", "hidrocortisona", "metilprednisolona",
    }),
    ANTICOAGULANTS: frozenset({
        "warfarina", "heparina", "enoxaparina", "rivaroxaban", "apixaban", "dabigatran",
    }),
    ANTIPLATELETS: frozenset({
        "aspirina", "clopidogrel", "prasugrel", "ticagrelor",
    }),
    SSRIS: frozenset({
        "fluoxetina", "sertralina", "paroxetina", "escitalopram", "citalopram", "fluvoxamina",
    }),
    MAOIS: frozenset({
        "fenelzina", "tranilcipromina", "isocarboxazida", "moclobemida",
    }),
    DIURETICS: frozenset({
        "hidroclorotiazida", "furosemida", "espironolactona", "indapamida", "clortalidona",
    }),
    BETA_BLOCKERS: frozenset({
        "atenolol", "metoprolol", "propranolol", "bisoprolol", "carvedilol",
    }),
    CALCIUM_CHANNEL_BLOCKERS: frozenset({
        "amlodipino", "nifedipino", "verapamilo", "diltiazem",
    }),
    ACEI_ARBS: frozenset({
        "enalapril", "lisinopril", "ramipril", "losartan", "valsartan", "candesartan",
    }),
})

# Evaluated in this order; each rule fires at most once.
GROUP_INTERACTION_RULES = (
    ((NSAIDS, CORTICOSTEROIDS),
     "AINEs + Corticosteroides: Aumento del riesgo de úlcera péptica y sangrado gastrointestinal"),
    ((NSAIDS, ANTICOAGULANTS),
     "AINEs + Anticoagulantes: Aumento significativo del riesgo de sangrado"),
    ((ANTICOAGULANTS, ANTIPLATELETS),
     "Anticoagulantes + Antiplaquetarios: Aumento sustancial del riesgo de sangrado mayor"),
    ((SSRIS, MAOIS),
     "ISRS + IMAOs: Riesgo potencialmente mortal de síndrome serotoninérgico"),
    ((BETA_BLOCKERS, CALCIUM_CHANNEL_BLOCKERS),
     "Beta-bloqueantes + Bloqueantes de canales de calcio: Mayor riesgo de bradicardia, "
     "hipotensión y bloqueo cardiaco"),
    ((NSAIDS, DIURETICS),
     "AINEs + Diuréticos: Reducción de la eficacia antihipertensiva y diurética"),
    ((NSAIDS, ACEI_ARBS),
     "AINEs + IECA/ARA-II: Reducción del efecto antihipertensivo y mayor riesgo de insuficiencia renal"),
    ((ACEI_ARBS, DIURETICS, NSAIDS),
     "IECA/ARA-II + Diurético + AINE: 'Triple whammy' con alto riesgo de lesión renal aguda"),
)
