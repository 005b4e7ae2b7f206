"""
Shared dispatch algorithm for the patient, visit and prescription sub-menus.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence

from ..commands import EditTarget
from ..errors import (
    CommandError,
    CommandResult,
    FieldShapeError,
    FormatError,
    UnexpectedError,
    ValidationError,
)
from ..parser import CommandGrammar, CommandPattern, VIEW_ALL_USAGE
from ..records import PatientList
from ..states import SubMenuState, check_universal_controls, is_view_all

logger = logging.getLogger(__name__)

UNKNOWN_PATIENT_MESSAGE = "That patient ID doesn't exist!"


@dataclass(frozen=True)
class EditRule:
    """
    How one edit marker is checked and which field it changes.

    Attributes:
        target: The field the marker selects
        is_valid: Shape check for the new value
        message: Shown when the value fails the shape check
    """
    target: EditTarget
    is_valid: Callable[[str], bool]
    message: str


def resolve_edit(
    marker: str,
    value: str,
    rules: Mapping[str, EditRule],
    unknown_marker_message: str,
) -> Dict[EditTarget, str]:
    """
    Check an edit and return the single field it changes.

    Raises:
        FieldShapeError: If the marker is unknown or the value has the wrong shape
    """
    rule = rules.get(marker.lower())
    if rule is None:
        raise FieldShapeError(unknown_marker_message)
    if not rule.is_valid(value):
        raise FieldShapeError(rule.message)
    return {rule.target: value}


def require_patient(patients: PatientList, patient_id: str):
    """Raise ValidationError unless the patient exists."""
    if patients.find_patient(patient_id) is None:
        raise ValidationError(UNKNOWN_PATIENT_MESSAGE)


class SubMenuDispatcher:
    """
    Runs the lines typed in one sub-menu.

    Order of evaluation for each line:
    1. bye / main / help (any letter case)
    2. viewall
    3. The sub-menu's command forms, in priority order
    4. Otherwise a FormatError listing every accepted form

    Subclasses set title and patterns, fill self.handlers with one handler
    per command node type, and implement view_all().
    """

    title = ""
    patterns: Sequence[CommandPattern] = ()

    def __init__(self, storage, ui, grammar: Optional[CommandGrammar] = None):
        self.storage = storage
        self.ui = ui
        self.grammar = grammar if grammar is not None else CommandGrammar()
        self.handlers: Dict[type, Callable] = {}

    @property
    def usages(self):
        return [pattern.usage for pattern in self.patterns] + [VIEW_ALL_USAGE]

    def dispatch(self, text: str) -> SubMenuState:
        """Run one line and report any failure; never raises."""
        control = check_universal_controls(text)
        if control is not None:
            return control

        result = self.execute(text)
        if not result.is_ok:
            self.ui.show_error(result.error)
        return SubMenuState.IN_SUB_MENU

    def execute(self, text: str) -> CommandResult:
        """Run one command line and classify the outcome."""
        logger.debug("%s menu input: %r", self.title, text)
        try:
            if is_view_all(text):
                self.view_all()
            else:
                command = self.grammar.match(text, self.patterns)
                if command is None:
                    raise FormatError(self.usages)
                self.handlers[type(command)](command)
        except CommandError as e:
            logger.warning("%s command rejected (%s): %s", self.title, e.kind.value, e.message)
            return CommandResult(error=e)
        except Exception as e:
            logger.exception("Unexpected failure running %r", text)
            return CommandResult(error=UnexpectedError(str(e)))
        return CommandResult()

    def view_all(self):
        raise NotImplementedError
