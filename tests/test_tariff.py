from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from lib.tariff import DEFAULT_TARIFF, load_tariff_yaml, tariff_from_dict


def test_default_tariff_constants() -> None:
    t = DEFAULT_TARIFF
    assert (t.inpatient_base, t.inpatient_per_day) == (Decimal("500"), Decimal("200"))
    assert (t.emergency_consult, t.critical_surcharge) == (Decimal("800"), Decimal("1500"))
    assert t.outpatient_flat == Decimal("300")
    assert (t.default_days_admitted, t.default_room_rate) == (1, Decimal("1000"))
    assert t.currency_symbol == "$"


def test_load_without_path_returns_defaults() -> None:
    assert load_tariff_yaml(None) is DEFAULT_TARIFF


def test_yaml_overrides_known_keys(tmp_path: Path) -> None:
    path = tmp_path / "tariff.yaml"
    path.write_text("outpatient_flat: 250.5\ndefault_days_admitted: 2\ncurrency_symbol: 'EUR '\nunknown_key: 9\n", encoding="utf-8")
    t = load_tariff_yaml(path)
    assert t.outpatient_flat == Decimal("250.5")
    assert t.default_days_admitted == 2
    assert t.currency_symbol == "EUR "
    assert t.inpatient_base == Decimal("500")


def test_empty_yaml_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_tariff_yaml(path) == DEFAULT_TARIFF


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_tariff_yaml(tmp_path / "nope.yaml")


def test_non_mapping_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_tariff_yaml(path)


def test_tariff_from_dict_ignores_none() -> None:
    assert tariff_from_dict({"emergency_consult": None}) == DEFAULT_TARIFF
