"""
JSON persistence for the record lists.

Each list is saved whole to its own file in the data directory after every
successful change, and read back when a session starts.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .records import (
    Patient,
    Visit,
    Prescription,
    PatientList,
    VisitList,
    PrescriptionList,
)

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a data file cannot be read back."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load {path}: {reason}")


class Storage:
    """
    Saves and loads patients, visits and prescriptions as JSON files.
    """

    PATIENT_FILE = "patients.json"
    VISIT_FILE = "visits.json"
    PRESCRIPTION_FILE = "prescriptions.json"

    def __init__(self, data_dir: Union[str, Path] = "data"):
        self.data_dir = Path(data_dir)

    def save_patient_data(self, patient_list: PatientList):
        self._write(self.PATIENT_FILE, [p.to_dict() for p in patient_list])

    def save_visit_data(self, visit_list: VisitList):
        self._write(self.VISIT_FILE, [v.to_dict() for v in visit_list])

    def save_prescription_data(self, prescription_list: PrescriptionList):
        self._write(self.PRESCRIPTION_FILE, [p.to_dict() for p in prescription_list])

    def load_patient_list(self) -> PatientList:
        return PatientList(self._load(self.PATIENT_FILE, Patient))

    def load_visit_list(self) -> VisitList:
        return VisitList(self._load(self.VISIT_FILE, Visit))

    def load_prescription_list(self) -> PrescriptionList:
        return PrescriptionList(self._load(self.PRESCRIPTION_FILE, Prescription))

    def _write(self, filename: str, records: List[Dict[str, Any]]):
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self.data_dir / filename
        with open(path, 'w') as f:
            json.dump(records, f, indent=2)
        logger.info("Saved %d records to %s", len(records), path)

    def _load(self, filename: str, record_type) -> list:
        path = self.data_dir / filename
        if not path.exists():
            logger.debug("No data file at %s, starting empty", path)
            return []

        with open(path) as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as e:
                raise StorageError(path, f"invalid JSON ({e})") from e

        if not isinstance(raw, list):
            raise StorageError(path, "expected a list of records")

        try:
            records = [record_type(**item) for item in raw]
        except TypeError as e:
            raise StorageError(path, f"malformed record ({e})") from e

        logger.info("Loaded %d records from %s", len(records), path)
        return records
