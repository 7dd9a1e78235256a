"""Utility helpers for ids, console field parsing and money formatting."""

from __future__ import annotations

import re
import uuid
from decimal import Decimal, InvalidOperation
from typing import Optional

def new_patient_id() -> str:
    """Short opaque id: first block of a random UUID."""
    return str(uuid.uuid4()).split("-")[0]

def one_line(s: Optional[str]) -> str:
    if not s:
        return ""
    return re.sub(r"\s+", " ", s.replace("\r", " ").replace("\n", " ")).strip()

# Plain ASCII digits only: no exponents, underscores or non-ASCII digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")
# Digits with optional thousands commas and a fractional part, e.g. "1,500.25".
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9][0-9,]*(?:\.[0-9]*)?|\.[0-9]+)")

INT_MAX = 2**31 - 1
DECIMAL_MAX = Decimal(2**96 - 1)

def parse_int_or_default(raw: Optional[str], default: int) -> int:
    """Non-negative 32-bit int from console text; anything else -> default."""
    text = (raw or "").strip()
    if not _INT_RE.fullmatch(text):
        return default
    value = int(text)
    return value if 0 <= value <= INT_MAX else default

def parse_decimal_or_default(raw: Optional[str], default: Decimal) -> Decimal:
    """Non-negative plain-notation Decimal from console text; anything else -> default."""
    text = (raw or "").strip()
    if not _DECIMAL_RE.fullmatch(text):
        return default
    try:
        value = Decimal(text.replace(",", ""))
    except InvalidOperation:
        return default
    return value if 0 <= value <= DECIMAL_MAX else default

def is_affirmative(raw: Optional[str]) -> bool:
    # "y", "yes", "yep", "Y " ... all count
    return (raw or "").strip().lower().startswith("y")

def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """4100 -> '$4,100.00'."""
    return f"{symbol}{Decimal(amount):,.2f}"
