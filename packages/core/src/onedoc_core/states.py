"""
Menu states and the control words shared by every sub-menu
"""

from enum import Enum
from typing import Optional


class MenuState(Enum):
    """Outcome of a main menu selection"""
    PATIENT = "patient"
    VISIT = "visit"
    PRESCRIPTION = "prescription"
    EXIT = "exit"
    INVALID = "invalid"


class SubMenuState(Enum):
    """Outcome of one line typed in a sub-menu"""
    IN_SUB_MENU = "in_sub_menu"
    BACK_TO_MAIN = "back_to_main"
    HELP = "help"
    EXIT = "exit"


MAIN_PATIENT_COMMAND = "1"
MAIN_VISIT_COMMAND = "2"
MAIN_PRESCRIPTION_COMMAND = "3"
EXIT_COMMAND = "bye"

VIEW_ALL_COMMAND = "viewall"
BACK_TO_MAIN_COMMAND = "main"
HELP_COMMAND = "help"

MAIN_MENU_STATES = {
    MAIN_PATIENT_COMMAND: MenuState.PATIENT,
    MAIN_VISIT_COMMAND: MenuState.VISIT,
    MAIN_PRESCRIPTION_COMMAND: MenuState.PRESCRIPTION,
    EXIT_COMMAND: MenuState.EXIT,
}

UNIVERSAL_CONTROLS = {
    EXIT_COMMAND: SubMenuState.EXIT,
    BACK_TO_MAIN_COMMAND: SubMenuState.BACK_TO_MAIN,
    HELP_COMMAND: SubMenuState.HELP,
}


def evaluate_main_menu(text: str) -> MenuState:
    """Map a main menu selection to its state; unknown input is INVALID."""
    return MAIN_MENU_STATES.get(text.strip().lower(), MenuState.INVALID)


def check_universal_controls(text: str) -> Optional[SubMenuState]:
    """
    Check a sub-menu line for bye, main or help (any letter case).

    Returns:
        The matching state, or None when the line is not a control word
    """
    return UNIVERSAL_CONTROLS.get(text.strip().lower())


def is_view_all(text: str) -> bool:
    return text.strip().lower() == VIEW_ALL_COMMAND
