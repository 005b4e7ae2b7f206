"""
Command nodes produced by the command grammar

One dataclass per command form. Fields hold the captured text in the order
it appears in the command; index fields are already converted to int.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class EditTarget(Enum):
    """The single field an edit command changes"""
    NAME = "name"
    GENDER = "gender"
    DATE = "date"
    DOSAGE = "dosage"
    INSTRUCTION = "instruction"


# --- Patient ---

@dataclass
class AddPatient:
    name: str
    gender: str
    date_of_birth: str
    patient_id: str


@dataclass
class RetrievePatient:
    patient_id: str


@dataclass
class EditPatient:
    """edit i/<id> <marker>/<value> (marker is the bare letter, e.g. g)"""
    patient_id: str
    marker: str
    value: str


# --- Visit ---

@dataclass
class AddVisit:
    """
    add i/<id> d/<date> t/<time> [r/<reason>]

    reason is None when no r/ clause was given and "" when r/ was given
    without any text.
    """
    patient_id: str
    date: str
    time: str
    reason: Optional[str] = None


@dataclass
class EditVisitReason:
    index: int
    reason: str


@dataclass
class DeleteVisitReason:
    index: int


@dataclass
class ViewPatientVisits:
    patient_id: str


@dataclass
class ViewVisit:
    index: int


# --- Prescription ---

@dataclass
class AddPrescription:
    patient_id: str
    name: str
    dosage: str
    instruction: str


@dataclass
class EditPrescription:
    index: int
    marker: str
    value: str


@dataclass
class ViewPatientPrescriptions:
    patient_id: str


@dataclass
class ViewActivePrescriptions:
    patient_id: str


@dataclass
class ActivatePrescription:
    index: int


@dataclass
class DeactivatePrescription:
    index: int


PatientCommand = Union[AddPatient, RetrievePatient, EditPatient]
VisitCommand = Union[AddVisit, EditVisitReason, DeleteVisitReason, ViewPatientVisits, ViewVisit]
PrescriptionCommand = Union[
    AddPrescription,
    EditPrescription,
    ViewPatientPrescriptions,
    ViewActivePrescriptions,
    ActivatePrescription,
    DeactivatePrescription,
]
Command = Union[PatientCommand, VisitCommand, PrescriptionCommand]
