"""Admission / bill-generated broadcasting.

Subscribers run synchronously in registration order. A subscriber that raises
stops the broadcast and the exception reaches the caller.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, List, Optional

from .models import Patient

AdmissionCallback = Callable[[Patient], None]
BillCallback = Callable[[Patient, Decimal], None]

class NotificationBroadcaster:
    def __init__(self) -> None:
        self._admission: List[AdmissionCallback] = []
        self._bill: List[BillCallback] = []

    def subscribe_admission(self, callback: AdmissionCallback) -> None:
        self._admission.append(callback)

    def subscribe_bill(self, callback: BillCallback) -> None:
        self._bill.append(callback)

    def notify_admission(self, patient: Patient) -> None:
        for cb in self._admission:
            cb(patient)

    def notify_bill(self, patient: Patient, amount: Decimal) -> None:
        for cb in self._bill:
            cb(patient, amount)

class PatientManager:
    """Admits patients and applies billing strategies, raising the matching events."""

    def __init__(self, broadcaster: Optional[NotificationBroadcaster] = None) -> None:
        self.broadcaster = broadcaster or NotificationBroadcaster()

    def admit_patient(self, patient: Patient) -> None:
        self.broadcaster.notify_admission(patient)

    def apply_billing_strategy(self, patient: Patient, strategy: Optional[Callable[[Patient], Decimal]]) -> Decimal:
        if strategy is None:
            raise ValueError("strategy is required")
        amount = strategy(patient)
        self.broadcaster.notify_bill(patient, amount)
        return amount
