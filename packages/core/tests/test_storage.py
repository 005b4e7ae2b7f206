"""
Tests for JSON persistence
"""

import json

import pytest

from onedoc_core.menu import Session
from onedoc_core.records import PatientList, VisitList, PrescriptionList
from onedoc_core.states import MenuState
from onedoc_core.storage import Storage, StorageError

from conftest import scripted


class TestRoundTrip:

    def test_saved_lists_load_back(self, tmp_path, patients, visits, prescriptions):
        storage = Storage(tmp_path)
        storage.save_patient_data(patients)
        storage.save_visit_data(visits)
        storage.save_prescription_data(prescriptions)

        loaded_patients = storage.load_patient_list()
        assert loaded_patients.find_patient("p001").name == "John Tan"

        loaded_visits = storage.load_visit_list()
        assert loaded_visits.get(1).reason == "Fever"

        loaded_prescriptions = storage.load_prescription_list()
        assert [p.active for p in loaded_prescriptions] == [True, False, True]

    def test_files_are_plain_json_lists(self, tmp_path, visits):
        Storage(tmp_path).save_visit_data(visits)

        raw = json.loads((tmp_path / "visits.json").read_text())
        assert raw == [{"patient_id": "P001", "date": "01-01-2024", "time": "10:00", "reason": "Fever"}]

    def test_data_dir_is_created_on_save(self, tmp_path, patients):
        data_dir = tmp_path / "nested" / "data"
        Storage(data_dir).save_patient_data(patients)
        assert (data_dir / "patients.json").exists()


class TestLoading:

    def test_missing_files_give_empty_lists(self, tmp_path):
        storage = Storage(tmp_path / "nothing-here")

        assert len(storage.load_patient_list()) == 0
        assert len(storage.load_visit_list()) == 0
        assert len(storage.load_prescription_list()) == 0

    def test_corrupt_json(self, tmp_path):
        (tmp_path / "patients.json").write_text("[{not json")

        with pytest.raises(StorageError) as excinfo:
            Storage(tmp_path).load_patient_list()
        assert "invalid JSON" in str(excinfo.value)
        assert excinfo.value.path == tmp_path / "patients.json"

    def test_not_a_list(self, tmp_path):
        (tmp_path / "visits.json").write_text('{"patient_id": "P001"}')

        with pytest.raises(StorageError, match="expected a list"):
            Storage(tmp_path).load_visit_list()

    def test_record_with_missing_field(self, tmp_path):
        (tmp_path / "prescriptions.json").write_text('[{"patient_id": "P001", "name": "Panadol"}]')

        with pytest.raises(StorageError, match="malformed record"):
            Storage(tmp_path).load_prescription_list()


class TestSessionFromStorage:

    def test_changes_survive_a_new_session(self, tmp_path, ui, grammar):
        first = Session.from_storage(Storage(tmp_path), ui, grammar)
        first.run(scripted([
            "1",
            "add n/Amy Lee g/F d/03-04-1985 i/P010",
            "main",
            "2",
            "add i/P010 d/05-05-2020 t/09:30 r/Checkup",
            "bye",
        ]))

        second = Session.from_storage(Storage(tmp_path), ui, grammar)
        patients = second.dispatchers[MenuState.PATIENT].patients
        visits = second.dispatchers[MenuState.VISIT].visits
        assert patients.find_patient("P010").gender == "F"
        assert visits.get(1).reason == "Checkup"

    def test_dispatchers_share_one_patient_list(self, tmp_path, ui, grammar):
        session = Session.from_storage(Storage(tmp_path), ui, grammar)

        patients = session.dispatchers[MenuState.PATIENT].patients
        assert session.dispatchers[MenuState.VISIT].patients is patients
        assert session.dispatchers[MenuState.PRESCRIPTION].patients is patients

    def test_empty_directory_starts_empty(self, tmp_path, ui, grammar):
        session = Session.from_storage(Storage(tmp_path), ui, grammar)

        assert isinstance(session.dispatchers[MenuState.PATIENT].patients, PatientList)
        assert isinstance(session.dispatchers[MenuState.VISIT].visits, VisitList)
        assert isinstance(session.dispatchers[MenuState.PRESCRIPTION].prescriptions, PrescriptionList)
        assert len(session.dispatchers[MenuState.PATIENT].patients) == 0
