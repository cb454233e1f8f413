# ============================================================================
# FILE: tests/unit/test_interaction_detector.py
# ============================================================================
"""
Unit tests for the interaction detector
"""

import pytest
from medication_safety.core.enums import DedupStrategy
from medication_safety.interactions.detector import (
    InteractionDetector,
    format_interaction,
)
from medication_safety.interactions.drug_groups import DrugGroupRegistry
from medication_safety.interactions.index import PairwiseInteractionIndex
from medication_safety.utils.exceptions import ConfigurationError

AINE_IECA = (
    "AINEs + IECA/ARA-II: Reducción del efecto antihipertensivo y mayor riesgo de insuficiencia renal"
)
TRIPLE_WHAMMY = (
    "IECA/ARA-II + Diurético + AINE: 'Triple whammy' con alto riesgo de lesión renal aguda"
)


def _pairwise_only(table, strategy):
    """Detector with a custom table and no group rules"""
    return InteractionDetector(
        index=PairwiseInteractionIndex(table=table),
        registry=DrugGroupRegistry({}),
        rules=(),
        dedup_strategy=strategy,
    )


@pytest.mark.parametrize("medications", [[], ["Warfarina"], None])
def test_fewer_than_two_medications(medications):
    """Test nothing is reported for fewer than two medications"""
    detector = InteractionDetector()

    assert detector.detect(medications) == []


def test_warfarin_aspirin_single_pairwise_message():
    """Test the warfarin/aspirin bleeding fact is reported exactly once"""
    detector = InteractionDetector()
    warnings = detector.detect(["Warfarina", "Aspirina"])

    pairwise = [
        w for w in warnings
        if w.startswith("Warfarina + Aspirina") or w.startswith("Aspirina + Warfarina")
    ]
    assert pairwise == ["Warfarina + Aspirina: Aumenta el riesgo de sangrado"]


def test_warfarin_aspirin_group_messages():
    """Test group rules fire for anticoagulant + NSAID/antiplatelet"""
    detector = InteractionDetector()
    report = detector.detect_report(["Warfarina", "Aspirina"])

    assert report.group == [
        "AINEs + Anticoagulantes: Aumento significativo del riesgo de sangrado",
        "Anticoagulantes + Antiplaquetarios: Aumento sustancial del riesgo de sangrado mayor",
    ]


def test_candidate_is_appended():
    """Test candidate medication is checked against the current list"""
    detector = InteractionDetector()

    assert detector.detect(["Warfarina"], "Aspirina") == detector.detect(["Warfarina", "Aspirina"])


def test_empty_candidate_ignored():
    """Test an empty candidate adds nothing"""
    detector = InteractionDetector()

    assert detector.detect(["Warfarina"], "") == []


def test_reverse_direction_reported():
    """Test a fact registered under the later medication is found"""
    detector = InteractionDetector()
    report = detector.detect_report(["Warfarina", "Ciprofloxacina"])

    assert report.forward == []
    assert report.reverse == ["Ciprofloxacina + Warfarina: Aumenta el efecto anticoagulante"]


def test_synonyms_resolved_before_matching():
    """Test synonym names match interaction keys"""
    detector = InteractionDetector()
    warnings = detector.detect(["Warfarina (Coumadin)", "ASA"])

    assert "Warfarina + Aspirina: Aumenta el riesgo de sangrado" in warnings


def test_nsaid_acei_group_rule():
    """Test NSAID + ACEI/ARB class rule"""
    detector = InteractionDetector()
    warnings = detector.detect(["Ibuprofeno", "Enalapril"])

    assert AINE_IECA in warnings
    assert TRIPLE_WHAMMY not in warnings
    assert "Ibuprofeno + Enalapril: Puede reducir el efecto antihipertensivo" in warnings


def test_triple_whammy_added_with_diuretic():
    """Test adding a diuretic adds the three-group rule"""
    detector = InteractionDetector()
    warnings = detector.detect(["Ibuprofeno", "Enalapril", "Hidroclorotiazida"])

    assert AINE_IECA in warnings
    assert warnings[-1] == TRIPLE_WHAMMY


def test_group_rule_fires_once():
    """Test several members of one class still fire each rule once"""
    detector = InteractionDetector()
    report = detector.detect_report(["Ibuprofeno", "Naproxeno", "Enalapril", "Losartan"])

    assert report.group.count(AINE_IECA) == 1


def test_message_order_forward_reverse_group():
    """Test forward messages come before reverse, then group"""
    detector = InteractionDetector()
    report = detector.detect_report(["Warfarina", "Aspirina", "Ciprofloxacina"])

    assert report.all == report.forward + report.reverse + report.group
    assert report.forward and report.reverse and report.group


def test_repeated_medication_not_deduplicated():
    """Test repeated identical names each produce a pairwise message"""
    detector = InteractionDetector()
    report = detector.detect_report(["Warfarina", "Aspirina", "aspirina"])

    assert report.forward.count("Warfarina + Aspirina: Aumenta el riesgo de sangrado") == 2


def test_unknown_medications_produce_nothing():
    """Test unknown names never raise and never match"""
    detector = InteractionDetector()

    assert detector.detect(["Agua", "Sal", ""]) == []


@pytest.mark.parametrize("strategy", [DedupStrategy.PAIR_KEY, DedupStrategy.MESSAGE_PREFIX])
def test_both_directions_reported_once(strategy):
    """Test a pair with facts in both directions is reported from the forward side only"""
    table = [(("a",), (("b", "x"),)), (("b",), (("a", "y"),))]
    detector = _pairwise_only(table, strategy)

    assert detector.detect(["a", "b"]) == ["A + B: x"]


def test_pair_key_dedup_ignores_similar_names():
    """Test pair-key dedup does not confuse a name with a longer one sharing its prefix"""
    table = [(("a",), (("bc", "x"),)), (("b",), (("a", "y"),))]
    detector = _pairwise_only(table, DedupStrategy.PAIR_KEY)

    assert detector.detect(["a", "bc", "b"]) == ["A + Bc: x", "B + A: y"]


def test_message_prefix_dedup_legacy_behavior():
    """Test legacy prefix dedup suppresses a pair whose display prefix collides"""
    table = [(("a",), (("bc", "x"),)), (("b",), (("a", "y"),))]
    detector = _pairwise_only(table, "message_prefix")

    assert detector.detect(["a", "bc", "b"]) == ["A + Bc: x"]


def test_dedup_strategy_from_string():
    """Test strategy accepts the setting string"""
    detector = InteractionDetector(dedup_strategy="pair_key")

    assert detector.dedup_strategy is DedupStrategy.PAIR_KEY


def test_invalid_dedup_strategy():
    """Test unknown strategy is rejected"""
    with pytest.raises(ConfigurationError, match="fuzzy"):
        InteractionDetector(dedup_strategy="fuzzy")


def test_format_interaction():
    """Test display format capitalizes only the first letter of each name"""
    message = format_interaction("suplementos de potasio", "enalapril", "Riesgo")

    assert message == "Suplementos de potasio + Enalapril: Riesgo"


def test_report_has_interactions():
    """Test report flag"""
    detector = InteractionDetector()

    assert detector.detect_report(["Warfarina", "Aspirina"]).has_interactions is True
    assert detector.detect_report(["Warfarina"]).has_interactions is False


def test_empty_key_names_never_match():
    """Test names that normalize to an empty key produce no interactions"""
    detector = InteractionDetector()

    assert detector.detect(["(Bayer)", "!!!"], candidate_medication="Warfarina") == []
