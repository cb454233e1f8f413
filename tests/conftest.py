# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import logging
from datetime import datetime, timedelta

import pytest

from medication_safety.core.prescription import (
    Prescription,
    PrescriptionItem,
    PrescriptionItemRequest,
    PrescriptionRequest,
)
from medication_safety.utils.metrics import MetricsCollector


@pytest.fixture
def diagnosis():
    """Diagnosis text long enough to pass the detail check"""
    return "Hipertensión arterial esencial"


@pytest.fixture
def enalapril_request():
    """Plain, valid medication line"""
    return PrescriptionItemRequest(
        medication_name="Enalapril",
        dosage="10mg",
        frequency="twice daily",
        quantity=60,
    )


@pytest.fixture
def metformina_request():
    """Second valid medication line with refills"""
    return PrescriptionItemRequest(
        medication_name="Metformina",
        dosage="850 mg",
        frequency="three times daily",
        quantity=90,
        refillable=True,
        refills_allowed=2,
    )


@pytest.fixture
def prescription_request(diagnosis, enalapril_request, metformina_request):
    """Valid two-item creation request"""
    return PrescriptionRequest(
        doctor_id=7,
        patient_id=42,
        diagnosis=diagnosis,
        items=[enalapril_request, metformina_request],
        notes="Control en 3 meses",
    )


@pytest.fixture
def refillable_item():
    """Refillable item with 3 refills allowed and 2 used"""
    return PrescriptionItem(
        medication_name="Losartan",
        dosage="50mg",
        frequency="daily",
        quantity=30,
        refillable=True,
        refills_allowed=3,
        refills_used=2,
        id=1,
    )


@pytest.fixture
def controlled_item():
    """Controlled substance item with refills remaining"""
    return PrescriptionItem(
        medication_name="Tramadol",
        dosage="50mg",
        frequency="every 8 hours",
        quantity=20,
        refillable=True,
        refills_allowed=3,
        refills_used=0,
        id=2,
    )


@pytest.fixture
def active_prescription(refillable_item, controlled_item):
    """ACTIVE prescription issued today"""
    return Prescription(
        doctor_id=7,
        patient_id=42,
        diagnosis="Dolor lumbar crónico con hipertensión",
        items=[refillable_item, controlled_item],
        notes="Paciente estable",
        id=100,
    )


@pytest.fixture
def stale_prescription(active_prescription):
    """ACTIVE prescription issued 45 days ago"""
    active_prescription.issue_date = datetime.now() - timedelta(days=45)
    return active_prescription


@pytest.fixture
def metrics():
    """Isolated metrics collector"""
    return MetricsCollector()


@pytest.fixture
def restore_root_logging():
    """Undo root logger changes made by setup_logging()"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
