"""
Visit sub-menu
"""

from typing import Optional

from ..commands import (
    AddVisit,
    EditVisitReason,
    DeleteVisitReason,
    ViewPatientVisits,
    ViewVisit,
)
from ..errors import ValidationError
from ..parser import CommandGrammar, VISIT_PATTERNS
from ..records import PatientList, VisitList
from .base import SubMenuDispatcher, require_patient

EMPTY_EDIT_REASON_MESSAGE = "Please don't use edit to put in an empty reason! Use deleteReason"
EMPTY_ADD_REASON_MESSAGE = "Please leave out r/ to add a visit without a reason!"


class VisitDispatcher(SubMenuDispatcher):

    title = "Visit"
    patterns = VISIT_PATTERNS

    def __init__(
        self,
        visits: VisitList,
        patients: PatientList,
        storage,
        ui,
        grammar: Optional[CommandGrammar] = None,
    ):
        super().__init__(storage, ui, grammar)
        self.visits = visits
        self.patients = patients
        self.handlers = {
            AddVisit: self._add,
            EditVisitReason: self._edit_reason,
            DeleteVisitReason: self._delete_reason,
            ViewPatientVisits: self._view_patient,
            ViewVisit: self._view_visit,
        }

    def view_all(self):
        self.ui.show_indexed_records("Here are all the visits:", self.visits.indexed(), "There are no visits yet.")

    def _add(self, command: AddVisit):
        patient_id = command.patient_id.upper()
        require_patient(self.patients, patient_id)
        if command.reason == "":
            raise ValidationError(EMPTY_ADD_REASON_MESSAGE)

        index = self.visits.add_visit(patient_id, command.date, command.time, command.reason or "")
        self.storage.save_visit_data(self.visits)
        self.ui.show_record(f"Visit {index} has been added:", self.visits.get(index))

    def _edit_reason(self, command: EditVisitReason):
        if not command.reason:
            raise ValidationError(EMPTY_EDIT_REASON_MESSAGE)

        visit = self.visits.edit_reason(command.index, command.reason)
        self.storage.save_visit_data(self.visits)
        self.ui.show_record(f"The reason of visit {command.index} has been changed:", visit)

    def _delete_reason(self, command: DeleteVisitReason):
        visit = self.visits.delete_reason(command.index)
        self.storage.save_visit_data(self.visits)
        self.ui.show_record(f"The reason of visit {command.index} has been removed:", visit)

    def _view_patient(self, command: ViewPatientVisits):
        patient_id = command.patient_id.upper()
        require_patient(self.patients, patient_id)
        self.ui.show_indexed_records(
            f"Here are the visits of patient {patient_id}:",
            self.visits.visits_for_patient(patient_id),
            f"Patient {patient_id} has no visits yet.",
        )

    def _view_visit(self, command: ViewVisit):
        self.ui.show_record(f"Visit {command.index}:", self.visits.get(command.index))
