"""Interactive admission console.

Reads menu choices and patient fields from an input handle, admits and bills
each patient through a PatientManager, and prints a receipt. Input that does
not parse never produces an error: numeric fields fall back to the tariff
defaults and an unknown patient type is admitted as an OutPatient.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, Set, TextIO

from lib.tariff import DEFAULT_TARIFF, Tariff

from .billing import choose_billing_strategy
from .departments import register_default_departments
from .messages import (
    GOODBYE,
    MENU_LINES,
    MENU_PROMPT,
    PROMPT_CRITICAL,
    PROMPT_DAYS,
    PROMPT_EMAIL,
    PROMPT_NAME,
    PROMPT_ROOM_RATE,
    PROMPT_TYPE,
    WELCOME,
    receipt_lines,
)
from .models import EmergencyPatient, InPatient, OutPatient, Patient
from .notifications import NotificationBroadcaster, PatientManager
from .utils import is_affirmative, new_patient_id, parse_decimal_or_default, parse_int_or_default

class ConsoleSession:
    def __init__(
        self,
        manager: PatientManager,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        tariff: Tariff = DEFAULT_TARIFF,
        id_factory: Callable[[], str] = new_patient_id,
    ) -> None:
        self.manager = manager
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.tariff = tariff
        self.id_factory = id_factory
        self._issued_ids: Set[str] = set()

    # --- console I/O ---

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.stdout)
        self.stdout.flush()

    def _read_line(self) -> Optional[str]:
        """One line without its terminator; None at end of input."""
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def _ask(self, prompt: str) -> str:
        self._print(prompt, end="")
        return self._read_line() or ""

    # --- admission ---

    def _next_id(self) -> str:
        pid = self.id_factory()
        while pid in self._issued_ids:
            pid = self.id_factory()
        self._issued_ids.add(pid)
        return pid

    def read_patient(self) -> Patient:
        pid = self._next_id()
        name = self._ask(PROMPT_NAME)
        email = self._ask(PROMPT_EMAIL)

        self._print(PROMPT_TYPE)
        choice = (self._read_line() or "").strip()

        if choice == "1":
            days = parse_int_or_default(self._ask(PROMPT_DAYS), self.tariff.default_days_admitted)
            rate = parse_decimal_or_default(self._ask(PROMPT_ROOM_RATE), self.tariff.default_room_rate)
            return InPatient(pid, name=name, email=email, days_admitted=days, room_rate=rate)
        if choice == "3":
            critical = is_affirmative(self._ask(PROMPT_CRITICAL))
            return EmergencyPatient(pid, name=name, email=email, critical=critical)
        return OutPatient(pid, name=name, email=email)

    def admit_once(self) -> Patient:
        p = self.read_patient()

        self.manager.admit_patient(p)
        strategy = choose_billing_strategy(p, self.tariff)
        amount = self.manager.apply_billing_strategy(p, strategy)

        for line in receipt_lines(p, amount, self.tariff.currency_symbol):
            self._print(line)
        return p

    def run(self) -> int:
        self._print(WELCOME)
        while True:
            self._print()
            for line in MENU_LINES:
                self._print(line)
            self._print(MENU_PROMPT, end="")

            opt = self._read_line()
            if opt is None:
                break
            opt = opt.strip()
            if opt == "2":
                break
            if opt == "1":
                self.admit_once()

        self._print(GOODBYE)
        return 0

def build_session(
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    tariff: Tariff = DEFAULT_TARIFF,
    id_factory: Callable[[], str] = new_patient_id,
) -> ConsoleSession:
    out = stdout if stdout is not None else sys.stdout
    broadcaster = register_default_departments(NotificationBroadcaster(), out, tariff=tariff)
    return ConsoleSession(PatientManager(broadcaster), stdin=stdin, stdout=out, tariff=tariff, id_factory=id_factory)

def main() -> int:
    return build_session().run()

if __name__ == "__main__":
    raise SystemExit(main())
