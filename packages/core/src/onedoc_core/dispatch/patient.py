"""
Patient sub-menu
"""

from typing import Optional

from ..commands import AddPatient, RetrievePatient, EditPatient, EditTarget
from ..errors import ValidationError
from ..parser import CommandGrammar, PATIENT_PATTERNS, validator
from ..records import PatientList
from .base import EditRule, SubMenuDispatcher, require_patient, resolve_edit

PATIENT_EDIT_RULES = {
    "n": EditRule(
        EditTarget.NAME,
        validator.is_name,
        "Name is incorrectly formatted! Please use First and Last name or just one name",
    ),
    "g": EditRule(
        EditTarget.GENDER,
        validator.is_gender,
        "Gender is incorrectly formatted! Please use only one letter, M or F",
    ),
    "d": EditRule(
        EditTarget.DATE,
        validator.is_date,
        "DOB is incorrectly formatted! Please use DD-MM-YYYY format",
    ),
}

UNKNOWN_PATIENT_FIELD = (
    "Type is incorrectly formatted! "
    "Please use n/ for name, g/ for gender, and d/ for DOB"
)

DUPLICATE_ID_MESSAGE = (
    "Please only use unique IDs to create patients! "
    "A patient with this ID already exists"
)


class PatientDispatcher(SubMenuDispatcher):

    title = "Patient"
    patterns = PATIENT_PATTERNS

    def __init__(self, patients: PatientList, storage, ui, grammar: Optional[CommandGrammar] = None):
        super().__init__(storage, ui, grammar)
        self.patients = patients
        self.handlers = {
            AddPatient: self._add,
            RetrievePatient: self._retrieve,
            EditPatient: self._edit,
        }

    def view_all(self):
        self.ui.show_records("Here are all the patients:", self.patients, "There are no patients yet.")

    def _add(self, command: AddPatient):
        patient_id = command.patient_id.upper()
        if not self.patients.is_unique_id(patient_id):
            raise ValidationError(DUPLICATE_ID_MESSAGE)

        patient = self.patients.add_patient(
            command.name,
            command.date_of_birth,
            command.gender.upper(),
            patient_id,
        )
        self.storage.save_patient_data(self.patients)
        self.ui.show_record("The patient has been added:", patient)

    def _retrieve(self, command: RetrievePatient):
        patient_id = command.patient_id.upper()
        require_patient(self.patients, patient_id)
        self.ui.show_record("Here are the patient's details:", self.patients.find_patient(patient_id))

    def _edit(self, command: EditPatient):
        changes = resolve_edit(command.marker, command.value, PATIENT_EDIT_RULES, UNKNOWN_PATIENT_FIELD)
        patient_id = command.patient_id.upper()
        require_patient(self.patients, patient_id)

        patient = self.patients.modify_patient_details(
            patient_id,
            name=changes.get(EditTarget.NAME),
            date_of_birth=changes.get(EditTarget.DATE),
            gender=changes.get(EditTarget.GENDER),
        )
        self.storage.save_patient_data(self.patients)
        self.ui.show_record("The patient's details have been updated:", patient)
