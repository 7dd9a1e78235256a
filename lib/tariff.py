# tariff.py
"""
Tariff (pricing constants + input defaults)
- DEFAULT_TARIFF carries the stock prices used by the console
- load_tariff_yaml() overrides any subset of them from a YAML mapping

Keys recognised in the YAML file:
  inpatient_base, inpatient_per_day, emergency_consult, critical_surcharge,
  outpatient_flat, default_days_admitted, default_room_rate, currency_symbol
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict

import yaml

_MONEY_KEYS = {
    "inpatient_base",
    "inpatient_per_day",
    "emergency_consult",
    "critical_surcharge",
    "outpatient_flat",
    "default_room_rate",
}

@dataclass(frozen=True)
class Tariff:
    inpatient_base: Decimal = Decimal("500")        # treatment base
    inpatient_per_day: Decimal = Decimal("200")     # treatment per day
    emergency_consult: Decimal = Decimal("800")
    critical_surcharge: Decimal = Decimal("1500")
    outpatient_flat: Decimal = Decimal("300")       # flat consultation fee
    default_days_admitted: int = 1
    default_room_rate: Decimal = Decimal("1000")
    currency_symbol: str = "$"


DEFAULT_TARIFF = Tariff()


def _coerce(key: str, value: Any) -> Any:
    if key in _MONEY_KEYS:
        return Decimal(str(value))
    if key == "default_days_admitted":
        return int(value)
    return str(value)


def tariff_from_dict(data: Dict[str, Any], base: Tariff = DEFAULT_TARIFF) -> Tariff:
    known = {f.name for f in fields(Tariff)}
    overrides = {k: _coerce(k, v) for k, v in (data or {}).items() if k in known and v is not None}
    return replace(base, **overrides)


def load_tariff_yaml(path: str | Path | None = None) -> Tariff:
    """Load a tariff override file; None -> DEFAULT_TARIFF."""
    if path is None:
        return DEFAULT_TARIFF
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Tariff file not found: {p}")
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Tariff file must contain a mapping: {p}")
    return tariff_from_dict(data)
