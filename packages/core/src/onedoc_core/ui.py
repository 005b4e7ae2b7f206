"""
Console output for OneDoc
"""

import sys
from typing import Iterable, Optional, Sequence, TextIO, Tuple

from .errors import CommandError
from .parser import CommandPattern, VIEW_ALL_USAGE

LINE = "_" * 60


class UI:
    """
    Writes menus, results and errors to a text stream (stdout by default).
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def show(self, message: str = ""):
        print(message, file=self.stream)

    def show_welcome(self):
        self.show(LINE)
        self.show("Welcome to OneDoc, your clinical records assistant.")

    def show_main_menu(self):
        self.show(LINE)
        self.show("Main menu, please choose a record type:")
        self.show("\t1: Patients")
        self.show("\t2: Visits")
        self.show("\t3: Prescriptions")
        self.show("\tbye: Exit OneDoc")

    def show_invalid_selection(self):
        self.show("Please choose 1, 2, 3 or bye.")

    def show_help(self, title: str, patterns: Sequence[CommandPattern]):
        self.show(LINE)
        self.show(f"{title} menu commands:")
        for pattern in patterns:
            self.show(f"\t{pattern.usage}")
            self.show(f"\t\t{pattern.description}")
        self.show(f"\t{VIEW_ALL_USAGE}")
        self.show(f"\t\tShow all {title.lower()} records")
        self.show("\tmain: Back to the main menu")
        self.show("\thelp: Show this list again")
        self.show("\tbye: Exit OneDoc")

    def show_farewell(self):
        self.show("Goodbye! Your records have been saved.")
        self.show(LINE)

    def show_error(self, error: CommandError):
        self.show(error.report())

    def show_record(self, heading: str, record):
        self.show(heading)
        self.show(str(record))

    def show_records(self, heading: str, records: Iterable, empty_message: str):
        records = list(records)
        if not records:
            self.show(empty_message)
            return
        self.show(heading)
        for record in records:
            self.show(str(record))
            self.show()

    def show_indexed_records(self, heading: str, entries: Iterable[Tuple[int, object]], empty_message: str):
        entries = list(entries)
        if not entries:
            self.show(empty_message)
            return
        self.show(heading)
        for index, record in entries:
            self.show(f"{index}.")
            self.show(str(record))
            self.show()
