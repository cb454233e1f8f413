# ============================================================================
# FILE: tests/unit/test_prescription_service.py
# ============================================================================
"""
Unit tests for the prescription safety service
"""

import pytest
from medication_safety.core.enums import PrescriptionStatus
from medication_safety.core.prescription import PrescriptionItemRequest
from medication_safety.services import PrescriptionSafetyService
from medication_safety.utils.exceptions import (
    AllergyConflictError,
    PrescriptionStateError,
    RefillError,
    ValidationError,
)


@pytest.fixture
def service(metrics):
    return PrescriptionSafetyService(metrics=metrics)


def test_create_prescription(service, metrics, prescription_request):
    """Test valid request creates an ACTIVE prescription"""
    result = service.create_prescription(prescription_request)

    assert result.prescription.status is PrescriptionStatus.ACTIVE
    assert result.prescription.medication_names == ["Enalapril", "Metformina"]
    assert result.warnings == []
    assert result.interactions == []
    assert metrics.get_counter("prescriptions.created") == 1
    assert metrics.get_timer_stats("prescriptions.create")["count"] == 1


def test_create_reports_interactions_with_current_medications(service, metrics, prescription_request):
    """Test current medications are checked against the new items"""
    prescription_request.items[0] = PrescriptionItemRequest("Ibuprofeno", "400mg", "every 8 hours", 20)

    result = service.create_prescription(prescription_request, current_medications=["Enalapril"])

    assert result.has_interactions is True
    assert any("AINEs + IECA/ARA-II" in message for message in result.interactions)
    assert metrics.get_counter("interactions.detected") == 1


def test_create_rejected_counts(service, metrics, prescription_request):
    """Test rejected creation is counted and nothing is created"""
    prescription_request.diagnosis = "Gripe"

    with pytest.raises(ValidationError):
        service.create_prescription(prescription_request)

    assert metrics.get_counter("prescriptions.rejected") == 1
    assert metrics.get_counter("prescriptions.created") == 0


def test_create_allergy_conflict(service, prescription_request):
    """Test allergy conflict rejects creation"""
    with pytest.raises(AllergyConflictError):
        service.create_prescription(prescription_request, allergies=["Metformina"])


def test_update_prescription(service, active_prescription, prescription_request):
    """Test update validates and replaces the items"""
    result = service.update_prescription(active_prescription, prescription_request)

    assert result.prescription is active_prescription
    assert active_prescription.medication_names == ["Enalapril", "Metformina"]
    assert active_prescription.notes == "Control en 3 meses"


def test_update_terminal_rejected_before_validation(service, active_prescription, prescription_request):
    """Test terminal prescriptions are rejected even for invalid requests"""
    service.complete_prescription(active_prescription)
    prescription_request.items = []

    with pytest.raises(PrescriptionStateError):
        service.update_prescription(active_prescription, prescription_request)


def test_update_invalid_leaves_prescription(service, active_prescription, prescription_request):
    """Test failed validation does not modify the prescription"""
    prescription_request.items.append(PrescriptionItemRequest("enalapril ", "5mg", "daily", 30))

    with pytest.raises(ValidationError, match="Duplicate"):
        service.update_prescription(active_prescription, prescription_request)

    assert active_prescription.medication_names == ["Losartan", "Tramadol"]


def test_update_keeps_refills_used(service, active_prescription):
    """Test editing notes does not give back refills already used"""
    service.process_refill(active_prescription, item_id=1)

    service.update_prescription(active_prescription, active_prescription.to_request(notes="nota"))

    assert active_prescription.items[0].refills_used == 3
    with pytest.raises(RefillError):
        service.process_refill(active_prescription, item_id=1)


def test_check_interactions(service):
    """Test advisory check with a candidate"""
    warnings = service.check_interactions(["Warfarina"], candidate="Aspirina")

    assert warnings[0] == "Warfarina + Aspirina: Aumenta el riesgo de sangrado"


def test_current_medications_only_active(service, active_prescription, prescription_request):
    """Test current medications come from ACTIVE prescriptions only"""
    other = service.create_prescription(prescription_request).prescription
    service.cancel_prescription(other, "reemplazada")

    assert service.current_medications([active_prescription, other]) == ["Losartan", "Tramadol"]


def test_process_refill(service, metrics, active_prescription):
    """Test refill through the service"""
    assert service.process_refill(active_prescription, item_id=1) == 3
    assert metrics.get_counter("refills.processed") == 1


def test_process_refill_requires_active(service, metrics, active_prescription):
    """Test refills are rejected on canceled prescriptions"""
    service.cancel_prescription(active_prescription, "x")

    with pytest.raises(RefillError, match="active prescription"):
        service.process_refill(active_prescription, item_id=1)

    assert active_prescription.items[0].refills_used == 2
    assert metrics.get_counter("refills.rejected") == 1


def test_process_refill_unknown_item(service, active_prescription):
    """Test unknown item id"""
    with pytest.raises(ValidationError, match="Prescription item not found: 99"):
        service.process_refill(active_prescription, item_id=99)


def test_process_refill_ledger_rejection_counted(service, metrics, active_prescription):
    """Test ledger rejections are counted"""
    with pytest.raises(RefillError):
        service.process_refill(active_prescription, item_id=2, count=2)

    assert metrics.get_counter("refills.rejected") == 1


def test_renew_prescription(service, active_prescription):
    """Test renewal is validated and leaves the original alone"""
    service.complete_prescription(active_prescription)

    result = service.renew_prescription(active_prescription)

    assert result.prescription.status is PrescriptionStatus.ACTIVE
    assert result.prescription.notes == "Renewed from prescription #100"
    assert active_prescription.status is PrescriptionStatus.COMPLETED


def test_renew_rejected_on_new_allergy(service, active_prescription):
    """Test renewal catches an allergy recorded since issue"""
    with pytest.raises(AllergyConflictError):
        service.renew_prescription(active_prescription, allergies="Losartan")


def test_renew_reports_interactions_with_current_medications(service, metrics, active_prescription):
    """Test renewal checks the renewed items against current medications"""
    result = service.renew_prescription(active_prescription, current_medications=["Ibuprofeno"])

    assert result.prescription.status is PrescriptionStatus.ACTIVE
    assert result.has_interactions is True
    assert any("AINEs + IECA/ARA-II" in message for message in result.interactions)
    assert metrics.get_counter("interactions.detected") == 1


def test_renew_without_current_medications_has_no_interactions(service, active_prescription):
    """Test renewal of non-interacting items reports nothing"""
    result = service.renew_prescription(active_prescription)

    assert result.interactions == []
