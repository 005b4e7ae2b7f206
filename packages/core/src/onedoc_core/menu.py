"""
Menu state machine for a OneDoc session

The session shows the main menu, enters the chosen sub-menu and forwards
every line typed there to that sub-menu's dispatcher until the user goes
back to the main menu or leaves with bye.
"""

import logging
from typing import Callable, Dict, Optional

from .dispatch import (
    SubMenuDispatcher,
    PatientDispatcher,
    VisitDispatcher,
    PrescriptionDispatcher,
)
from .parser import CommandGrammar
from .states import MenuState, SubMenuState, evaluate_main_menu
from .ui import UI

logger = logging.getLogger(__name__)


class Session:
    """
    One interactive session over a set of sub-menu dispatchers.

    Example:
        session = Session.from_storage(Storage("data"), UI())
        session.run()
    """

    def __init__(
        self,
        ui: UI,
        patient_dispatcher: PatientDispatcher,
        visit_dispatcher: VisitDispatcher,
        prescription_dispatcher: PrescriptionDispatcher,
    ):
        self.ui = ui
        self.dispatchers: Dict[MenuState, SubMenuDispatcher] = {
            MenuState.PATIENT: patient_dispatcher,
            MenuState.VISIT: visit_dispatcher,
            MenuState.PRESCRIPTION: prescription_dispatcher,
        }

    @classmethod
    def from_storage(cls, storage, ui: UI, grammar: Optional[CommandGrammar] = None) -> "Session":
        """
        Load every record list from storage and wire up the dispatchers.

        Raises:
            StorageError: If a data file cannot be read back
        """
        grammar = grammar if grammar is not None else CommandGrammar()
        patients = storage.load_patient_list()
        visits = storage.load_visit_list()
        prescriptions = storage.load_prescription_list()
        return cls(
            ui,
            PatientDispatcher(patients, storage, ui, grammar),
            VisitDispatcher(visits, patients, storage, ui, grammar),
            PrescriptionDispatcher(prescriptions, patients, storage, ui, grammar),
        )

    def run(self, read_line: Callable[[], str] = input):
        """Run until bye or end of input."""
        self.ui.show_welcome()
        while True:
            self.ui.show_main_menu()
            line = self._read(read_line)
            if line is None:
                break

            state = evaluate_main_menu(line)
            logger.debug("Main menu selection %r -> %s", line, state.name)
            if state is MenuState.EXIT:
                break
            if state is MenuState.INVALID:
                self.ui.show_invalid_selection()
                continue

            if self.run_sub_menu(self.dispatchers[state], read_line) is SubMenuState.EXIT:
                break

        self.ui.show_farewell()

    def run_sub_menu(self, dispatcher: SubMenuDispatcher, read_line: Callable[[], str]) -> SubMenuState:
        """
        Forward lines to one dispatcher.

        Returns:
            BACK_TO_MAIN or EXIT
        """
        self.ui.show_help(dispatcher.title, dispatcher.patterns)
        while True:
            line = self._read(read_line)
            if line is None:
                return SubMenuState.EXIT

            state = dispatcher.dispatch(line)
            if state is SubMenuState.HELP:
                self.ui.show_help(dispatcher.title, dispatcher.patterns)
            elif state in (SubMenuState.BACK_TO_MAIN, SubMenuState.EXIT):
                return state

    @staticmethod
    def _read(read_line: Callable[[], str]) -> Optional[str]:
        """Read one line; None at end of input."""
        try:
            return read_line().strip()
        except EOFError:
            return None
