"""
Record entities
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass
class Patient:
    """A registered patient; patient_id is stored upper-case"""
    name: str
    date_of_birth: str
    gender: str
    patient_id: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self):
        return (
            f"\tName: {self.name}\n"
            f"\tDate of birth: {self.date_of_birth}\n"
            f"\tGender: {self.gender}\n"
            f"\tID: {self.patient_id}"
        )


@dataclass
class Visit:
    """A visit of a patient; an empty reason means none was given"""
    patient_id: str
    date: str
    time: str
    reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self):
        return (
            f"\tID: {self.patient_id}\n"
            f"\tDate: {self.date}\n"
            f"\tTime: {self.time}\n"
            f"\tReason: {self.reason or 'NIL'}"
        )


@dataclass
class Prescription:
    patient_id: str
    name: str
    dosage: str
    instruction: str
    active: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self):
        return (
            f"\tID: {self.patient_id}\n"
            f"\tName: {self.name}\n"
            f"\tDosage: {self.dosage}\n"
            f"\tTime interval: {self.instruction}\n"
            f"\tStatus: {'Active' if self.active else 'Inactive'}"
        )
