"""Patient records for the admission console."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Tuple

INPATIENT = "InPatient"
OUTPATIENT = "OutPatient"
EMERGENCY = "Emergency"

PATIENT_TYPES: Tuple[str, ...] = (INPATIENT, OUTPATIENT, EMERGENCY)

@dataclass
class Patient:
    id: str
    name: str = ""
    email: str = ""

    type_tag: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if self.__class__ is Patient:
            raise TypeError("Patient is abstract; build an InPatient, OutPatient or EmergencyPatient")

    def __setattr__(self, key, value) -> None:
        if key == "id" and "id" in self.__dict__:
            raise AttributeError("Patient id is immutable")
        super().__setattr__(key, value)

    @property
    def type(self) -> str:
        return self.type_tag

@dataclass
class InPatient(Patient):
    days_admitted: int = 1
    room_rate: Decimal = Decimal("1000")

    type_tag: ClassVar[str] = INPATIENT

@dataclass
class OutPatient(Patient):
    type_tag: ClassVar[str] = OUTPATIENT

@dataclass
class EmergencyPatient(Patient):
    critical: bool = False

    type_tag: ClassVar[str] = EMERGENCY
