from __future__ import annotations

from decimal import Decimal

import pytest

from patient_console.models import EmergencyPatient, InPatient, OutPatient, Patient


def test_type_tags() -> None:
    assert InPatient("1").type == "InPatient"
    assert OutPatient("2").type == "OutPatient"
    assert EmergencyPatient("3").type == "Emergency"


def test_variant_defaults() -> None:
    p = InPatient("1")
    assert p.days_admitted == 1
    assert p.room_rate == Decimal("1000")
    assert EmergencyPatient("2").critical is False
    assert p.name == "" and p.email == ""


def test_id_is_immutable_but_contact_fields_are_not() -> None:
    p = OutPatient("abc", name="Ann")
    p.name = "Anne"
    p.email = "anne@example.org"
    assert (p.name, p.email) == ("Anne", "anne@example.org")
    with pytest.raises(AttributeError):
        p.id = "other"
    assert p.id == "abc"


def test_base_patient_cannot_be_built() -> None:
    with pytest.raises(TypeError):
        Patient("x")
