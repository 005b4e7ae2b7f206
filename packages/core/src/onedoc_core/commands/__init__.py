"""
Command nodes for OneDoc
"""

from .nodes import (
    EditTarget,
    AddPatient,
    RetrievePatient,
    EditPatient,
    AddVisit,
    EditVisitReason,
    DeleteVisitReason,
    ViewPatientVisits,
    ViewVisit,
    AddPrescription,
    EditPrescription,
    ViewPatientPrescriptions,
    ViewActivePrescriptions,
    ActivatePrescription,
    DeactivatePrescription,
    PatientCommand,
    VisitCommand,
    PrescriptionCommand,
    Command,
)

__all__ = [
    'EditTarget',
    'AddPatient',
    'RetrievePatient',
    'EditPatient',
    'AddVisit',
    'EditVisitReason',
    'DeleteVisitReason',
    'ViewPatientVisits',
    'ViewVisit',
    'AddPrescription',
    'EditPrescription',
    'ViewPatientPrescriptions',
    'ViewActivePrescriptions',
    'ActivatePrescription',
    'DeactivatePrescription',
    'PatientCommand',
    'VisitCommand',
    'PrescriptionCommand',
    'Command',
]
