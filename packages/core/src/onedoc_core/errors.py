"""
Error taxonomy for command handling.

Handlers raise these; the sub-menu dispatcher catches them at its boundary
and turns them into a CommandResult, so nothing escapes to the menu loop.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class ErrorKind(Enum):
    """The four kinds of failure a command can end in"""
    FORMAT = "format"
    FIELD_SHAPE = "field_shape"
    VALIDATION = "validation"
    UNEXPECTED = "unexpected"


class CommandError(Exception):
    """Base class for command errors."""

    kind = ErrorKind.UNEXPECTED
    prefix = "Incorrect format"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def report(self) -> str:
        """The text shown to the user."""
        return f"{self.prefix}: {self.message}"


class FormatError(CommandError):
    """Raised when the input matches none of the sub-menu's command forms."""

    kind = ErrorKind.FORMAT

    def __init__(self, forms: Iterable[str]):
        self.forms = list(forms)
        msg = "Your input is incorrect! Please format it as such:"
        msg += "".join(f"\n\t{form}" for form in self.forms)
        super().__init__(msg)


class FieldShapeError(CommandError):
    """Raised when an edited value, or the edit marker itself, is malformed."""

    kind = ErrorKind.FIELD_SHAPE


class ValidationError(CommandError):
    """Raised when a well-formed command breaks a record rule."""

    kind = ErrorKind.VALIDATION


class UnexpectedError(CommandError):
    """Any other failure while running a command."""

    kind = ErrorKind.UNEXPECTED
    prefix = "Unexpected issue"


@dataclass
class CommandResult:
    """Outcome of running one sub-menu command"""
    error: Optional[CommandError] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None
