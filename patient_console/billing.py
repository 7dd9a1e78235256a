"""Billing strategies, one per patient type.

choose_billing_strategy() inspects the record's variant and hands back a pure
callable; the amount is only computed when the caller invokes it.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from lib.tariff import DEFAULT_TARIFF, Tariff

from .models import EmergencyPatient, InPatient, OutPatient, Patient

BillingStrategy = Callable[[Patient], Decimal]

def inpatient_amount(p: InPatient, tariff: Tariff = DEFAULT_TARIFF) -> Decimal:
    room = p.days_admitted * p.room_rate
    treatment = tariff.inpatient_base + p.days_admitted * tariff.inpatient_per_day
    return room + treatment

def emergency_amount(p: EmergencyPatient, tariff: Tariff = DEFAULT_TARIFF) -> Decimal:
    surcharge = tariff.critical_surcharge if p.critical else Decimal("0")
    return tariff.emergency_consult + surcharge

def outpatient_amount(p: OutPatient, tariff: Tariff = DEFAULT_TARIFF) -> Decimal:
    return tariff.outpatient_flat

def choose_billing_strategy(p: Patient, tariff: Tariff = DEFAULT_TARIFF) -> BillingStrategy:
    if isinstance(p, InPatient):
        return lambda patient: inpatient_amount(patient, tariff)
    if isinstance(p, EmergencyPatient):
        return lambda patient: emergency_amount(patient, tariff)
    if isinstance(p, OutPatient):
        return lambda patient: outpatient_amount(patient, tariff)
    raise TypeError(f"No billing strategy for {type(p).__name__}")
