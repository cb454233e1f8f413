# ============================================================================
# src/medication_safety/constants/interactions.py
# ============================================================================
"""
Known pairwise drug interactions.

Each entry is (subjects, facts): every subject key gets the same fact list.
Facts are directional (subject -> object); the detector checks both
directions. Keys are normalized medication names.
"""

_BLEEDING_GI = "Aumenta el riesgo de sangrado gastrointestinal"
_MYOPATHY_RHABDO = "Aumenta el riesgo de miopatía y rabdomiólisis"
_MYOPATHY = "Puede aumentar el riesgo de miopatía"
_SEROTONIN = "Riesgo de síndrome serotoninérgico"
_HYPERKALEMIA = "Riesgo de hiperpotasemia"
_DIGOXIN_TOXICITY = "Aumenta los niveles de digoxina, riesgo de toxicidad"
_AV_BLOCK = "Riesgo de bradicardia y bloqueo AV"
_ANTIHYPERTENSIVE = "Puede reducir el efecto antihipertensivo"

PAIRWISE_INTERACTIONS = (
    (("warfarina",), (
        ("aspirina", "Aumenta el riesgo de sangrado"),
        ("ibuprofeno", _BLEEDING_GI),
        ("naproxeno", _BLEEDING_GI),
        ("diclofenaco", _BLEEDING_GI),
        ("amiodarona", "Potencia el efecto anticoagulante, aumentando riesgo de sangrado"),
        ("levotiroxina", "Puede aumentar los efectos anticoagulantes"),
    )),
    (("simvastatina",), (
        ("eritromicina", _MYOPATHY_RHABDO),
        ("claritromicina", _MYOPATHY_RHABDO),
        ("itraconazol", _MYOPATHY_RHABDO),
        ("ketoconazol", _MYOPATHY_RHABDO),
        ("gemfibrozilo", _MYOPATHY_RHABDO),
    )),
    (("atorvastatina",), (
        ("eritromicina", _MYOPATHY),
        ("claritromicina", _MYOPATHY),
        ("itraconazol", _MYOPATHY),
        ("ketoconazol", _MYOPATHY),
    )),
    (("fluoxetina", "sertralina", "paroxetina"), (
        ("tramadol", _SEROTONIN),
        ("sumatriptan", _SEROTONIN),
        ("moclobemida", "Riesgo grave de síndrome serotoninérgico"),
        ("litio", "Aumento de efectos serotoninérgicos"),
    )),
    (("enalapril", "lisinopril", "ramipril"), (
        ("espironolactona", _HYPERKALEMIA),
        ("suplementos de potasio", _HYPERKALEMIA),
        ("indometacina", "Reduce el efecto antihipertensivo"),
        ("litio", "Aumento de los niveles de litio"),
    )),
    (("digoxina",), (
        ("amiodarona", _DIGOXIN_TOXICITY),
        ("verapamilo", _DIGOXIN_TOXICITY),
        ("espironolactona", "Interfiere con la medición de digoxina sérica"),
    )),
    (("metformina",), (
        ("cimetidina", "Aumenta los niveles de metformina"),
        ("contraste yodado", "Riesgo de acidosis láctica, suspender temporalmente"),
    )),
    (("ciprofloxacina",), (
        ("teofilina", "Aumenta los niveles de teofilina, riesgo de toxicidad"),
        ("warfarina", "Aumenta el efecto anticoagulante"),
        ("antiácidos", "Reduce la absorción de ciprofloxacina"),
    )),
    (("carbamazepina",), (
        ("eritromicina", "Aumenta los niveles de carbamazepina"),
        ("fluoxetina", "Aumenta los niveles de carbamazepina"),
        ("anticonceptivos orales", "Reduce la eficacia de los anticonceptivos"),
    )),
    (("diazepam", "alprazolam"), (
        ("alcohol", "Potencia la depresión del sistema nervioso central"),
        ("fluoxetina", "Aumenta los niveles de diazepam"),
        ("cimetidina", "Aumenta los niveles de diazepam"),
    )),
    (("atenolol", "metoprolol", "propranolol"), (
        ("insulina", "Puede enmascarar síntomas de hipoglucemia"),
        ("verapamilo", _AV_BLOCK),
        ("diltiazem", _AV_BLOCK),
    )),
    (("ibuprofeno", "naproxeno", "diclofenaco"), (
        ("enalapril", _ANTIHYPERTENSIVE),
        ("lisinopril", _ANTIHYPERTENSIVE),
        ("ramipril", _ANTIHYPERTENSIVE),
        ("losartan", _ANTIHYPERTENSIVE),
        ("diuréticos", "Puede reducir el efecto diurético"),
        ("litio", "Aumenta los niveles de litio"),
    )),
)
