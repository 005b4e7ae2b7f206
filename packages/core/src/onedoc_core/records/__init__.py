"""
Record entities and their in-memory lists
"""

from .models import Patient, Visit, Prescription
from .lists import PatientList, VisitList, PrescriptionList

__all__ = [
    'Patient',
    'Visit',
    'Prescription',
    'PatientList',
    'VisitList',
    'PrescriptionList',
]
