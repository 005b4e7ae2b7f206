"""
Command grammar engine using Lark
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from ..commands import (
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
    Command,
)
from . import validator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandPattern:
    """
    One command form of a sub-menu.

    Attributes:
        start: Start rule of the form in the grammar
        usage: Accepted surface form, shown in help and format errors
        description: What the command does
    """
    start: str
    usage: str
    description: str


VIEW_ALL_USAGE = "viewall"

# Forms are tried in the order listed; the first that matches wins.
PATIENT_PATTERNS = (
    CommandPattern(
        "patient_add",
        "add n/[name] g/[M/F] d/[DD-MM-YYYY] i/[ID]",
        "Add a patient",
    ),
    CommandPattern(
        "patient_retrieve",
        "retrieve i/[ID]",
        "Show the details of one patient",
    ),
    CommandPattern(
        "patient_edit",
        "edit i/[ID] (n/[name] or g/[M/F] or d/[DD-MM-YYYY])",
        "Change the name, gender or date of birth of a patient",
    ),
)

VISIT_PATTERNS = (
    CommandPattern(
        "visit_add",
        "add i/[ID] d/[DD-MM-YYYY] t/[HH:MM] r/[reason]",
        "Add a visit; r/ is optional",
    ),
    CommandPattern(
        "visit_edit",
        "edit x/[index] r/[reason]",
        "Change the reason of a visit",
    ),
    CommandPattern(
        "visit_delete_reason",
        "deleteReason x/[index]",
        "Remove the reason of a visit",
    ),
    CommandPattern(
        "visit_view_patient",
        "viewPatient i/[ID]",
        "Show all visits of a patient",
    ),
    CommandPattern(
        "visit_view",
        "viewVisit x/[index]",
        "Show one visit",
    ),
)

PRESCRIPTION_PATTERNS = (
    CommandPattern(
        "prescription_add",
        "add i/[ID] n/[name] d/[dosage] t/[time interval]",
        "Add a prescription",
    ),
    CommandPattern(
        "prescription_edit",
        "edit x/[index] (n/[name] or d/[dosage] or t/[time interval])",
        "Change the name, dosage or time interval of a prescription",
    ),
    CommandPattern(
        "prescription_view_patient",
        "viewPatientPres i/[ID]",
        "Show all prescriptions of a patient",
    ),
    CommandPattern(
        "prescription_view_active",
        "viewActPatientPres i/[ID]",
        "Show the active prescriptions of a patient",
    ),
    CommandPattern(
        "prescription_activate",
        "activate x/[index]",
        "Mark a prescription as active",
    ),
    CommandPattern(
        "prescription_deactivate",
        "deactivate x/[index]",
        "Mark a prescription as inactive",
    ),
)

ALL_PATTERNS = PATIENT_PATTERNS + VISIT_PATTERNS + PRESCRIPTION_PATTERNS


class CommandTransformer(Transformer):
    """
    Transforms a Lark parse tree into a command node.

    Add commands whose fields have the wrong shape transform to None, which
    the grammar treats as "this form did not match".
    """

    def WORD(self, token):
        return str(token)

    def INDEX(self, token):
        return validator.parse_index(str(token))

    def FIELD_M(self, token):
        """Marker letter of an edit command, e.g. N/ -> n"""
        return str(token)[0].lower()

    def text(self, items):
        """Field value; whitespace between words collapses to one space"""
        return " ".join(items)

    def reason(self, items):
        """r/ clause; present but empty gives "" """
        return items[0] if items else ""

    # --- Patient ---

    def patient_add(self, items):
        name, gender, date_of_birth, patient_id = items
        if not (validator.is_name(name)
                and validator.is_gender(gender)
                and validator.is_date(date_of_birth)
                and validator.is_identifier(patient_id)):
            return None
        return AddPatient(
            name=name,
            gender=gender,
            date_of_birth=date_of_birth,
            patient_id=patient_id,
        )

    def patient_retrieve(self, items):
        patient_id = items[0]
        if not validator.is_identifier(patient_id):
            return None
        return RetrievePatient(patient_id=patient_id)

    def patient_edit(self, items):
        patient_id, marker, value = items
        if not validator.is_identifier(patient_id):
            return None
        return EditPatient(patient_id=patient_id, marker=marker, value=value)

    # --- Visit ---

    def visit_add(self, items):
        patient_id, date, time = items[:3]
        reason = items[3] if len(items) > 3 else None
        if not (validator.is_identifier(patient_id)
                and validator.is_date(date)
                and validator.is_time(time)):
            return None
        # An empty reason is still a match; the handler rejects it
        if reason and not validator.is_free_text(reason):
            return None
        return AddVisit(patient_id=patient_id, date=date, time=time, reason=reason)

    def visit_edit(self, items):
        index = items[0]
        reason = items[1] if len(items) > 1 else ""
        if reason and not validator.is_free_text(reason):
            return None
        return EditVisitReason(index=index, reason=reason)

    def visit_delete_reason(self, items):
        return DeleteVisitReason(index=items[0])

    def visit_view_patient(self, items):
        patient_id = items[0]
        if not validator.is_identifier(patient_id):
            return None
        return ViewPatientVisits(patient_id=patient_id)

    def visit_view(self, items):
        return ViewVisit(index=items[0])

    # --- Prescription ---

    def prescription_add(self, items):
        patient_id, name, dosage, instruction = items
        if not (validator.is_identifier(patient_id)
                and validator.is_name(name)
                and validator.is_dosage(dosage)
                and validator.is_free_text(instruction)):
            return None
        return AddPrescription(
            patient_id=patient_id,
            name=name,
            dosage=dosage,
            instruction=instruction,
        )

    def prescription_edit(self, items):
        index, marker, value = items
        return EditPrescription(index=index, marker=marker, value=value)

    def prescription_view_patient(self, items):
        patient_id = items[0]
        if not validator.is_identifier(patient_id):
            return None
        return ViewPatientPrescriptions(patient_id=patient_id)

    def prescription_view_active(self, items):
        patient_id = items[0]
        if not validator.is_identifier(patient_id):
            return None
        return ViewActivePrescriptions(patient_id=patient_id)

    def prescription_activate(self, items):
        return ActivatePrescription(index=items[0])

    def prescription_deactivate(self, items):
        return DeactivatePrescription(index=items[0])


class CommandGrammar:
    """
    Matches input lines against the command forms of a sub-menu
    """

    def __init__(self, grammar_path: str = None):
        if grammar_path is None:
            # Default grammar path
            current_dir = Path(__file__).parent.parent
            grammar_path = current_dir / "grammar" / "commands.lark"

        with open(grammar_path, 'r') as f:
            grammar = f.read()

        self.parser = Lark(
            grammar,
            parser='lalr',
            start=[pattern.start for pattern in ALL_PATTERNS],
        )
        self.transformer = CommandTransformer()

    def match(self, text: str, patterns: Sequence[CommandPattern]) -> Optional[Command]:
        """
        Match a line against the given forms in order.

        Returns:
            The command node of the first form that matches, or None
        """
        for pattern in patterns:
            try:
                tree = self.parser.parse(text, start=pattern.start)
            except UnexpectedInput:
                continue
            command = self.transformer.transform(tree)
            if command is not None:
                logger.debug("Matched %r as %s", text, pattern.start)
                return command
        return None
