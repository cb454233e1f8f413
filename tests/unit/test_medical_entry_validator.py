# ============================================================================
# FILE: tests/unit/test_medical_entry_validator.py
# ============================================================================
"""
Unit tests for medical record entry validation
"""

import logging

import pytest
from medication_safety.core.enums import EntryType
from medication_safety.utils.exceptions import MedicalEntryValidationError, ValidationError
from medication_safety.validators import MedicalEntryValidator


def test_valid_consultation():
    """Test ordinary entry passes"""
    validator = MedicalEntryValidator()

    assert validator.validate_entry(EntryType.CONSULTATION, "Control", "Paciente asintomático") == []


@pytest.mark.parametrize("entry_type,title,content,message", [
    (None, "Control", "Contenido suficiente", "Entry type is required"),
    ("BOGUS", "Control", "Contenido suficiente", "Unknown entry type"),
    (EntryType.OTHER, " ", "Contenido suficiente", "Entry title is required"),
    (EntryType.OTHER, "Control", None, "Entry content is required"),
])
def test_required_entry_fields(entry_type, title, content, message):
    """Test type, title and content are required"""
    validator = MedicalEntryValidator()

    with pytest.raises(MedicalEntryValidationError, match=message):
        validator.validate_entry(entry_type, title, content)


@pytest.mark.parametrize("entry_type,length", [
    (EntryType.DIAGNOSIS, 20),
    (EntryType.LAB_RESULT, 15),
    (EntryType.SURGERY, 50),
    (EntryType.FOLLOW_UP, 10),
])
def test_per_type_minimum_length(entry_type, length):
    """Test minimum content length per entry type"""
    validator = MedicalEntryValidator()

    validator.validate_entry(entry_type, "Título", "x" * length)
    with pytest.raises(ValidationError):
        validator.validate_entry(entry_type, "Título", "x" * (length - 1))


def test_entry_type_from_string():
    """Test entry type given by value"""
    validator = MedicalEntryValidator()

    with pytest.raises(MedicalEntryValidationError, match="minimum 20 characters"):
        validator.validate_entry("DIAGNOSIS", "Dx", "Gripe")


def test_prescription_entry_warns_without_details(caplog):
    """Test prescription entry lacking medication details warns"""
    validator = MedicalEntryValidator()

    with caplog.at_level(logging.WARNING):
        warnings = validator.validate_entry(EntryType.PRESCRIPTION, "Receta", "Ver indicaciones")

    assert warnings == ["Prescription entry might be missing medication details"]
    assert "missing medication details" in caplog.text


def test_prescription_entry_has_no_minimum():
    """Test short prescription entries with dosage details pass"""
    validator = MedicalEntryValidator()

    assert validator.validate_entry(EntryType.PRESCRIPTION, "Receta", "5 ml") == []


@pytest.mark.parametrize("field,limit,label", [
    ("allergies", 500, "Allergies"),
    ("chronic_conditions", 500, "Chronic conditions"),
    ("current_medications", 500, "Current medications"),
    ("surgical_history", 500, "Surgical history"),
    ("family_history", 1000, "Family history"),
    ("notes", 1000, "Notes"),
])
def test_record_field_length_caps(field, limit, label):
    """Test each record field length cap"""
    validator = MedicalEntryValidator()

    validator.validate_record_update(**{field: "a" * limit})
    with pytest.raises(MedicalEntryValidationError, match=f"{label} text cannot exceed {limit}"):
        validator.validate_record_update(**{field: "a" * (limit + 1)})


@pytest.mark.parametrize("allergies", ["<script>alert(1)</script>", "javascript:void(0)"])
def test_allergy_markup_rejected(allergies):
    """Test script markup in allergies is rejected"""
    validator = MedicalEntryValidator()

    with pytest.raises(MedicalEntryValidationError, match="Invalid characters detected in allergies"):
        validator.validate_record_update(allergies=allergies)


def test_long_digit_run_warns():
    """Test ten or more digits in allergies only warns"""
    validator = MedicalEntryValidator()
    warnings = validator.validate_record_update(allergies="Penicilina 1234567890")

    assert warnings == ["Suspicious numeric content in allergies: might contain unintended data"]


def test_current_medications_warnings():
    """Test warfarin + aspirin and unknown medication warnings"""
    validator = MedicalEntryValidator()

    assert validator.validate_record_update(current_medications="warfarin 5mg, aspirin 81mg") == [
        "Potential medication interaction detected: warfarin + aspirin"
    ]
    assert validator.validate_record_update(current_medications="unknown") == [
        "Current medications marked as unknown - might need follow-up"
    ]


def test_empty_record_update():
    """Test no fields given passes"""
    validator = MedicalEntryValidator()

    assert validator.validate_record_update() == []
