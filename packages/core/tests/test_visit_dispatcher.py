"""
Tests for the visit sub-menu
"""

from onedoc_core.dispatch import VisitDispatcher
from onedoc_core.errors import ErrorKind
from onedoc_core.records import PatientList, VisitList


class TestAddVisit:

    def test_unknown_patient_creates_no_visit(self, storage, ui, grammar):
        visits = VisitList()
        dispatcher = VisitDispatcher(visits, PatientList(), storage, ui, grammar)

        result = dispatcher.execute("add i/P001 d/05-05-2020 t/09:30")

        assert result.kind is ErrorKind.VALIDATION
        assert result.error.message == "That patient ID doesn't exist!"
        assert len(visits) == 0
        assert storage.saves == []

    def test_add_without_reason_stores_empty_reason(self, visit_dispatcher, visits, storage):
        result = visit_dispatcher.execute("add i/p001 d/05-05-2020 t/09:30")

        assert result.is_ok
        assert len(visits) == 2
        visit = visits.get(2)
        assert visit.patient_id == "P001"
        assert visit.date == "05-05-2020"
        assert visit.time == "09:30"
        assert visit.reason == ""
        assert storage.saves == ["visits"]

    def test_explicit_empty_reason_is_rejected(self, visit_dispatcher, visits, storage):
        result = visit_dispatcher.execute("add i/P001 d/05-05-2020 t/09:30 r/")

        assert result.kind is ErrorKind.VALIDATION
        assert len(visits) == 1
        assert storage.saves == []

    def test_add_with_reason(self, visit_dispatcher, visits):
        assert visit_dispatcher.execute("add i/P001 d/05-05-2020 t/09:30 r/Sore throat").is_ok
        assert visits.get(2).reason == "Sore throat"

    def test_visit_without_reason_shows_nil(self, visit_dispatcher, output):
        visit_dispatcher.execute("add i/P001 d/05-05-2020 t/09:30")
        assert "Reason: NIL" in output.getvalue()


class TestVisitReason:

    def test_edit_to_empty_reason_points_to_delete(self, visit_dispatcher, visits, storage):
        result = visit_dispatcher.execute("edit x/1 r/")

        assert result.kind is ErrorKind.VALIDATION
        assert "deleteReason" in result.error.message
        assert visits.get(1).reason == "Fever"
        assert storage.saves == []

    def test_edit_reason(self, visit_dispatcher, visits, storage):
        assert visit_dispatcher.execute("edit x/1 r/High fever").is_ok
        assert visits.get(1).reason == "High fever"
        assert storage.saves == ["visits"]

    def test_edit_missing_visit(self, visit_dispatcher, storage):
        result = visit_dispatcher.execute("edit x/9 r/Cough")

        assert result.kind is ErrorKind.UNEXPECTED
        assert storage.saves == []

    def test_delete_reason(self, visit_dispatcher, visits, storage):
        assert visit_dispatcher.execute("deleteReason x/1").is_ok
        assert visits.get(1).reason == ""
        assert storage.saves == ["visits"]


class TestViewVisits:

    def test_view_patient_visits(self, visit_dispatcher, output):
        assert visit_dispatcher.execute("viewPatient i/p001").is_ok
        assert "Fever" in output.getvalue()

    def test_view_visits_of_unknown_patient(self, visit_dispatcher):
        result = visit_dispatcher.execute("viewPatient i/P404")
        assert result.kind is ErrorKind.VALIDATION

    def test_view_one_visit(self, visit_dispatcher, output):
        assert visit_dispatcher.execute("viewVisit x/1").is_ok
        assert "10:00" in output.getvalue()

    def test_view_missing_visit_is_unexpected(self, visit_dispatcher, output):
        visit_dispatcher.dispatch("viewVisit x/0")
        assert output.getvalue().startswith("Unexpected issue:")

    def test_viewall(self, visit_dispatcher, output):
        assert visit_dispatcher.execute("viewAll").is_ok
        assert "01-01-2024" in output.getvalue()


def test_unmatched_input_lists_visit_forms(visit_dispatcher):
    result = visit_dispatcher.execute("add i/P001 d/05-05-2020")

    assert result.kind is ErrorKind.FORMAT
    assert "deleteReason x/[index]" in result.error.message
    assert "viewVisit x/[index]" in result.error.message
