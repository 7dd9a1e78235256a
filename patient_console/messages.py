"""Console text builders (banner, menu, prompts, notifications, receipt).

Keeps every user-visible string in one place so the session loop, the
department subscribers and the batch runner print identical text.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from .models import Patient
from .utils import format_currency

WELCOME = "Welcome to the Hospital Patient Management Console"
GOODBYE = "Exiting. Goodbye."

MENU_LINES = ["1) Admit Patient", "2) Exit"]
MENU_PROMPT = "Select option: "

PROMPT_NAME = "Name: "
PROMPT_EMAIL = "Email: "
PROMPT_TYPE = "Select patient type: 1-InPatient 2-OutPatient 3-Emergency"
PROMPT_DAYS = "Days admitted: "
PROMPT_ROOM_RATE = "Room rate per day: "
PROMPT_CRITICAL = "Is critical? (y/n): "

def admissions_notice(p: Patient) -> str:
    return f"[NOTIFY] Admissions: Patient {p.name} ({p.type}) admitted."

def nursing_notice(p: Patient) -> str:
    return f"[NOTIFY] Nursing: Prepare bed and chart for {p.name}."

def billing_notice(p: Patient, amount: Decimal, symbol: str = "$") -> str:
    return f"[NOTIFY] Billing: Bill for {p.name} generated. Amount: {format_currency(amount, symbol)}"

def pharmacy_notice(p: Patient) -> str:
    return f"[NOTIFY] Pharmacy: Prepare medications for {p.name} if applicable."

def receipt_lines(p: Patient, amount: Decimal, symbol: str = "$") -> List[str]:
    return [
        "---- BILL ----",
        f"Patient: {p.name} ({p.type})",
        f"Amount Due: {format_currency(amount, symbol)}",
        "---------------",
    ]
