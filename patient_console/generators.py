"""Synthetic patient generators (InPatient / OutPatient / Emergency)."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Callable

from faker import Faker

from .models import EmergencyPatient, InPatient, OutPatient, Patient
from .utils import new_patient_id, one_line

fake = Faker()

ROOM_RATE_POOL = [Decimal("800"), Decimal("1000"), Decimal("1500"), Decimal("2500")]

PATIENT_KINDS = ["InPatient", "OutPatient", "Emergency"]

def gen_patient(id_factory: Callable[[], str] = new_patient_id) -> Patient:
    pid = id_factory()
    name = one_line(fake.name())
    email = fake.email()

    kind = random.choice(PATIENT_KINDS)
    if kind == "InPatient":
        return InPatient(
            pid,
            name=name,
            email=email,
            days_admitted=random.randint(1, 14),
            room_rate=random.choice(ROOM_RATE_POOL),
        )
    if kind == "Emergency":
        return EmergencyPatient(pid, name=name, email=email, critical=random.random() < 0.3)
    return OutPatient(pid, name=name, email=email)
