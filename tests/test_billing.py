"""Per-type billing strategies and their selection."""

from __future__ import annotations

from decimal import Decimal

import pytest

from lib.tariff import Tariff
from patient_console.billing import choose_billing_strategy
from patient_console.models import EmergencyPatient, InPatient, OutPatient


@pytest.mark.parametrize(
    "days, rate",
    [(0, Decimal("1000")), (1, Decimal("1000")), (3, Decimal("1000")), (7, Decimal("250.50")), (30, Decimal("0"))],
)
def test_inpatient_amount_formula(days: int, rate: Decimal) -> None:
    p = InPatient("a1", days_admitted=days, room_rate=rate)
    amount = choose_billing_strategy(p)(p)
    assert amount == days * rate + 500 + days * 200


def test_inpatient_three_days_at_standard_rate() -> None:
    p = InPatient("a1", name="Ann", days_admitted=3, room_rate=Decimal("1000"))
    assert choose_billing_strategy(p)(p) == Decimal("4100")


def test_emergency_amounts() -> None:
    critical = EmergencyPatient("e1", critical=True)
    stable = EmergencyPatient("e2", critical=False)
    assert choose_billing_strategy(critical)(critical) == Decimal("2300")
    assert choose_billing_strategy(stable)(stable) == Decimal("800")


@pytest.mark.parametrize("name, email", [("", ""), ("Bob", "bob@example.org"), ("X" * 200, "nope")])
def test_outpatient_is_flat(name: str, email: str) -> None:
    p = OutPatient("o1", name=name, email=email)
    assert choose_billing_strategy(p)(p) == Decimal("300")


def test_strategy_is_deterministic() -> None:
    p = InPatient("a1", days_admitted=2, room_rate=Decimal("1500"))
    strategy = choose_billing_strategy(p)
    assert strategy(p) == strategy(p) == choose_billing_strategy(p)(p)


def test_tariff_overrides_constants() -> None:
    tariff = Tariff(outpatient_flat=Decimal("120"), critical_surcharge=Decimal("1000"))
    o = OutPatient("o1")
    e = EmergencyPatient("e1", critical=True)
    assert choose_billing_strategy(o, tariff)(o) == Decimal("120")
    assert choose_billing_strategy(e, tariff)(e) == Decimal("1800")


def test_unknown_record_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        choose_billing_strategy(object())
