"""
Sub-menu dispatchers
"""

from .base import SubMenuDispatcher, EditRule, resolve_edit, require_patient
from .patient import PatientDispatcher
from .visit import VisitDispatcher
from .prescription import PrescriptionDispatcher

__all__ = [
    'SubMenuDispatcher',
    'EditRule',
    'resolve_edit',
    'require_patient',
    'PatientDispatcher',
    'VisitDispatcher',
    'PrescriptionDispatcher',
]
