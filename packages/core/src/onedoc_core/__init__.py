"""
OneDoc Core - Command grammar, sub-menu dispatch and records for OneDoc
"""

from .parser import (
    CommandGrammar,
    CommandPattern,
    PATIENT_PATTERNS,
    VISIT_PATTERNS,
    PRESCRIPTION_PATTERNS,
)
from .errors import (
    ErrorKind,
    CommandError,
    FormatError,
    FieldShapeError,
    ValidationError,
    UnexpectedError,
    CommandResult,
)
from .states import (
    MenuState,
    SubMenuState,
    evaluate_main_menu,
    check_universal_controls,
)
from .dispatch import (
    SubMenuDispatcher,
    PatientDispatcher,
    VisitDispatcher,
    PrescriptionDispatcher,
)
from .records import (
    Patient,
    Visit,
    Prescription,
    PatientList,
    VisitList,
    PrescriptionList,
)
from .storage import Storage, StorageError
from .ui import UI
from .menu import Session
from .config import Settings

__all__ = [
    # Parser
    'CommandGrammar',
    'CommandPattern',
    'PATIENT_PATTERNS',
    'VISIT_PATTERNS',
    'PRESCRIPTION_PATTERNS',
    # Errors
    'ErrorKind',
    'CommandError',
    'FormatError',
    'FieldShapeError',
    'ValidationError',
    'UnexpectedError',
    'CommandResult',
    # Menus
    'MenuState',
    'SubMenuState',
    'evaluate_main_menu',
    'check_universal_controls',
    'Session',
    # Dispatch
    'SubMenuDispatcher',
    'PatientDispatcher',
    'VisitDispatcher',
    'PrescriptionDispatcher',
    # Records
    'Patient',
    'Visit',
    'Prescription',
    'PatientList',
    'VisitList',
    'PrescriptionList',
    # Collaborators
    'Storage',
    'StorageError',
    'UI',
    'Settings',
]
