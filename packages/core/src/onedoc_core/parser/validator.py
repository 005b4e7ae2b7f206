"""
Field validators for OneDoc commands

Each constrained field shape has a predicate. The grammar uses them when it
captures the fields of an add command, and the edit handlers use them again to
check a single edited value.
"""

import re


NAME_PATTERN = re.compile(r"^\w+(?:\s+\w+)?$")
GENDER_PATTERN = re.compile(r"^[MF]$", re.IGNORECASE)
DATE_PATTERN = re.compile(r"^\d\d-\d\d-\d\d\d\d$")
TIME_PATTERN = re.compile(r"^\d\d:\d\d$")
DOSAGE_PATTERN = re.compile(r"^\d+\s*\w+$")
FREE_TEXT_PATTERN = re.compile(r"^\w+(?:\s+\w+)*$")
IDENTIFIER_PATTERN = re.compile(r"^\w+$")
INDEX_PATTERN = re.compile(r"^\d+$")


def is_name(text: str) -> bool:
    """One or two word tokens, e.g. "John Tan" or "Panadol"."""
    return bool(NAME_PATTERN.match(text))


def is_gender(text: str) -> bool:
    return bool(GENDER_PATTERN.match(text))


def is_date(text: str) -> bool:
    """DD-MM-YYYY digit shape. The calendar itself is not checked."""
    return bool(DATE_PATTERN.match(text))


def is_time(text: str) -> bool:
    """HH:MM digit shape."""
    return bool(TIME_PATTERN.match(text))


def is_dosage(text: str) -> bool:
    """An amount followed by a unit, e.g. "10 mg"."""
    return bool(DOSAGE_PATTERN.match(text))


def is_free_text(text: str) -> bool:
    """A non-empty sequence of words (visit reasons, time instructions)."""
    return bool(FREE_TEXT_PATTERN.match(text))


def is_identifier(text: str) -> bool:
    return bool(IDENTIFIER_PATTERN.match(text))


def parse_index(text: str) -> int:
    """
    Parse a record index.

    Raises:
        ValueError: If the text is not a non-negative integer
    """
    text = text.strip()
    if not INDEX_PATTERN.match(text):
        raise ValueError(f"'{text}' is not a valid index")
    return int(text)
