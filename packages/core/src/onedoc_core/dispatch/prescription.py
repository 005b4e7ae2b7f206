"""
Prescription sub-menu
"""

from typing import Optional

from ..commands import (
    AddPrescription,
    EditPrescription,
    ViewPatientPrescriptions,
    ViewActivePrescriptions,
    ActivatePrescription,
    DeactivatePrescription,
    EditTarget,
)
from ..parser import CommandGrammar, PRESCRIPTION_PATTERNS, validator
from ..records import PatientList, PrescriptionList
from .base import EditRule, SubMenuDispatcher, require_patient, resolve_edit

PRESCRIPTION_EDIT_RULES = {
    "n": EditRule(
        EditTarget.NAME,
        validator.is_name,
        "Prescription name is incorrectly formatted! "
        "Please use one or two names without dashes or special characters",
    ),
    "d": EditRule(
        EditTarget.DOSAGE,
        validator.is_dosage,
        "Dosage is incorrectly formatted! Please use [amount] [portion] format, i.e. 10 mg",
    ),
    "t": EditRule(
        EditTarget.INSTRUCTION,
        validator.is_free_text,
        "Time instruction is incorrectly formatted! "
        "Please use words and numbers to describe the time interval",
    ),
}

UNKNOWN_PRESCRIPTION_FIELD = (
    "Type is incorrectly formatted! "
    "Please use n/ for name, d/ for dosage, and t/ for time interval"
)


class PrescriptionDispatcher(SubMenuDispatcher):

    title = "Prescription"
    patterns = PRESCRIPTION_PATTERNS

    def __init__(
        self,
        prescriptions: PrescriptionList,
        patients: PatientList,
        storage,
        ui,
        grammar: Optional[CommandGrammar] = None,
    ):
        super().__init__(storage, ui, grammar)
        self.prescriptions = prescriptions
        self.patients = patients
        self.handlers = {
            AddPrescription: self._add,
            EditPrescription: self._edit,
            ViewPatientPrescriptions: self._view_patient,
            ViewActivePrescriptions: self._view_active,
            ActivatePrescription: self._activate,
            DeactivatePrescription: self._deactivate,
        }

    def view_all(self):
        self.ui.show_indexed_records(
            "Here are all the prescriptions:",
            self.prescriptions.indexed(),
            "There are no prescriptions yet.",
        )

    def _add(self, command: AddPrescription):
        patient_id = command.patient_id.upper()
        require_patient(self.patients, patient_id)

        index = self.prescriptions.add(patient_id, command.name, command.dosage, command.instruction)
        self.storage.save_prescription_data(self.prescriptions)
        self.ui.show_record(f"Prescription {index} has been added:", self.prescriptions.get(index))

    def _edit(self, command: EditPrescription):
        changes = resolve_edit(command.marker, command.value, PRESCRIPTION_EDIT_RULES, UNKNOWN_PRESCRIPTION_FIELD)

        prescription = self.prescriptions.edit(
            command.index,
            name=changes.get(EditTarget.NAME),
            dosage=changes.get(EditTarget.DOSAGE),
            instruction=changes.get(EditTarget.INSTRUCTION),
        )
        self.storage.save_prescription_data(self.prescriptions)
        self.ui.show_record(f"Prescription {command.index} has been updated:", prescription)

    def _view_patient(self, command: ViewPatientPrescriptions):
        patient_id = command.patient_id.upper()
        require_patient(self.patients, patient_id)
        self.ui.show_indexed_records(
            f"Here are the prescriptions of patient {patient_id}:",
            self.prescriptions.for_patient(patient_id),
            f"Patient {patient_id} has no prescriptions yet.",
        )

    def _view_active(self, command: ViewActivePrescriptions):
        patient_id = command.patient_id.upper()
        require_patient(self.patients, patient_id)
        self.ui.show_indexed_records(
            f"Here are the active prescriptions of patient {patient_id}:",
            self.prescriptions.for_patient(patient_id, active_only=True),
            f"Patient {patient_id} has no active prescriptions.",
        )

    def _activate(self, command: ActivatePrescription):
        prescription = self.prescriptions.activate(command.index)
        self.storage.save_prescription_data(self.prescriptions)
        self.ui.show_record(f"Prescription {command.index} is now active:", prescription)

    def _deactivate(self, command: DeactivatePrescription):
        prescription = self.prescriptions.deactivate(command.index)
        self.storage.save_prescription_data(self.prescriptions)
        self.ui.show_record(f"Prescription {command.index} is now inactive:", prescription)
