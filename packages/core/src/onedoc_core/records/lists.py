"""
In-memory record lists

Visits and prescriptions are addressed by a 1-based index in insertion order.
Looking up an index that does not exist raises IndexError.
"""

import logging
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .models import Patient, Visit, Prescription

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PatientList:
    """
    All known patients, keyed by their upper-case ID.
    """

    def __init__(self, patients: Iterable[Patient] = ()):
        self.patients: List[Patient] = list(patients)

    def __len__(self):
        return len(self.patients)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self.patients)

    def find_patient(self, patient_id: str) -> Optional[Patient]:
        patient_id = patient_id.upper()
        for patient in self.patients:
            if patient.patient_id == patient_id:
                return patient
        return None

    def is_unique_id(self, patient_id: str) -> bool:
        return self.find_patient(patient_id) is None

    def add_patient(self, name: str, date_of_birth: str, gender: str, patient_id: str) -> Patient:
        patient = Patient(
            name=name,
            date_of_birth=date_of_birth,
            gender=gender.upper(),
            patient_id=patient_id.upper(),
        )
        self.patients.append(patient)
        logger.info("Added patient %s", patient.patient_id)
        return patient

    def modify_patient_details(
        self,
        patient_id: str,
        name: Optional[str] = None,
        date_of_birth: Optional[str] = None,
        gender: Optional[str] = None,
    ) -> Patient:
        """
        Change some details of a patient. Fields left as None are not touched.

        Raises:
            KeyError: If no patient has this ID
        """
        patient = self.find_patient(patient_id)
        if patient is None:
            raise KeyError(patient_id)
        if name is not None:
            patient.name = name
        if date_of_birth is not None:
            patient.date_of_birth = date_of_birth
        if gender is not None:
            patient.gender = gender.upper()
        logger.info("Modified patient %s", patient.patient_id)
        return patient


class IndexedList(Generic[T]):
    """Records addressed by their 1-based position"""

    record_name = "record"

    def __init__(self, records: Iterable[T] = ()):
        self._records: List[T] = list(records)

    def __len__(self):
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self._records)

    def get(self, index: int) -> T:
        if not 1 <= index <= len(self._records):
            raise IndexError(f"There is no {self.record_name} with index {index}")
        return self._records[index - 1]

    def indexed(self) -> List[Tuple[int, T]]:
        return list(enumerate(self._records, start=1))

    def _append(self, record: T) -> int:
        self._records.append(record)
        return len(self._records)


class VisitList(IndexedList[Visit]):

    record_name = "visit"

    @property
    def visits(self) -> List[Visit]:
        return self._records

    def add_visit(self, patient_id: str, date: str, time: str, reason: str = "") -> int:
        index = self._append(Visit(patient_id=patient_id.upper(), date=date, time=time, reason=reason))
        logger.info("Added visit %d for patient %s", index, patient_id.upper())
        return index

    def edit_reason(self, index: int, reason: str) -> Visit:
        visit = self.get(index)
        visit.reason = reason
        logger.info("Changed reason of visit %d", index)
        return visit

    def delete_reason(self, index: int) -> Visit:
        visit = self.get(index)
        visit.reason = ""
        logger.info("Removed reason of visit %d", index)
        return visit

    def visits_for_patient(self, patient_id: str) -> List[Tuple[int, Visit]]:
        patient_id = patient_id.upper()
        return [(i, v) for i, v in self.indexed() if v.patient_id == patient_id]


class PrescriptionList(IndexedList[Prescription]):

    record_name = "prescription"

    @property
    def prescriptions(self) -> List[Prescription]:
        return self._records

    def add(self, patient_id: str, name: str, dosage: str, instruction: str) -> int:
        index = self._append(Prescription(
            patient_id=patient_id.upper(),
            name=name,
            dosage=dosage,
            instruction=instruction,
        ))
        logger.info("Added prescription %d for patient %s", index, patient_id.upper())
        return index

    def edit(
        self,
        index: int,
        name: Optional[str] = None,
        dosage: Optional[str] = None,
        instruction: Optional[str] = None,
    ) -> Prescription:
        """Change some fields of a prescription. Fields left as None are not touched."""
        prescription = self.get(index)
        if name is not None:
            prescription.name = name
        if dosage is not None:
            prescription.dosage = dosage
        if instruction is not None:
            prescription.instruction = instruction
        logger.info("Edited prescription %d", index)
        return prescription

    def activate(self, index: int) -> Prescription:
        prescription = self.get(index)
        prescription.active = True
        return prescription

    def deactivate(self, index: int) -> Prescription:
        prescription = self.get(index)
        prescription.active = False
        return prescription

    def for_patient(self, patient_id: str, active_only: bool = False) -> List[Tuple[int, Prescription]]:
        patient_id = patient_id.upper()
        return [
            (i, p) for i, p in self.indexed()
            if p.patient_id == patient_id and (p.active or not active_only)
        ]
