"""
Shared pytest fixtures for OneDoc tests.
"""

import io
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "cli" / "src"))

from onedoc_core.parser import CommandGrammar
from onedoc_core.records import (
    Patient,
    Visit,
    Prescription,
    PatientList,
    VisitList,
    PrescriptionList,
)
from onedoc_core.dispatch import PatientDispatcher, VisitDispatcher, PrescriptionDispatcher
from onedoc_core.ui import UI


class RecordingStorage:
    """Stands in for Storage; remembers which lists were saved."""

    def __init__(self):
        self.saves = []

    def save_patient_data(self, patient_list):
        self.saves.append("patients")

    def save_visit_data(self, visit_list):
        self.saves.append("visits")

    def save_prescription_data(self, prescription_list):
        self.saves.append("prescriptions")


class FailingStorage(RecordingStorage):
    """Every save fails, as a full disk would."""

    def save_patient_data(self, patient_list):
        raise OSError("disk full")

    def save_visit_data(self, visit_list):
        raise OSError("disk full")

    def save_prescription_data(self, prescription_list):
        raise OSError("disk full")


def scripted(lines):
    """A read_line callable that replays lines, then signals end of input."""
    remaining = iter(lines)

    def read_line():
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return read_line


@pytest.fixture(scope="session")
def grammar():
    return CommandGrammar()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def ui(output):
    return UI(output)


@pytest.fixture
def storage():
    return RecordingStorage()


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def patients():
    """Patient P001 (John Tan) is registered."""
    return PatientList([
        Patient(name="John Tan", date_of_birth="01-02-1990", gender="M", patient_id="P001"),
    ])


@pytest.fixture
def visits():
    """Visit 1 belongs to P001 and has a reason."""
    return VisitList([
        Visit(patient_id="P001", date="01-01-2024", time="10:00", reason="Fever"),
    ])


@pytest.fixture
def prescriptions():
    """Three prescriptions of P001; number 2 is inactive."""
    return PrescriptionList([
        Prescription(patient_id="P001", name="Panadol", dosage="500 mg", instruction="twice a day"),
        Prescription(patient_id="P001", name="Aspirin", dosage="100 mg", instruction="once a day", active=False),
        Prescription(patient_id="P001", name="Ibuprofen", dosage="200 mg", instruction="after meals"),
    ])


@pytest.fixture
def patient_dispatcher(patients, storage, ui, grammar):
    return PatientDispatcher(patients, storage, ui, grammar)


@pytest.fixture
def visit_dispatcher(visits, patients, storage, ui, grammar):
    return VisitDispatcher(visits, patients, storage, ui, grammar)


@pytest.fixture
def prescription_dispatcher(prescriptions, patients, storage, ui, grammar):
    return PrescriptionDispatcher(prescriptions, patients, storage, ui, grammar)
