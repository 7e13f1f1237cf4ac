"""
Interactive menu session over a loaded friendship graph.

Loops on the main menu until the user picks Exit or input runs out.
A failed query prints an error and returns to the menu.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from friendgraph.session.render import MENU_LINES, describe_connection, describe_friends

if TYPE_CHECKING:
    from friendgraph.graph.store import FriendGraph

logger = logging.getLogger(__name__)

CHOICE_FRIENDS = 1
CHOICE_CONNECTION = 2
CHOICE_EXIT = 3


class _EndOfInput(Exception):
    """Input stream closed while the session was waiting."""


class MenuSession:
    """
    Menu-driven session for friend-list and connection queries.

    Input and output are injectable so the session can be scripted.

    Attributes:
        graph: The graph every query runs against
        queries_run: Number of friend/connection queries answered
    """

    def __init__(
        self,
        graph: FriendGraph,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.graph = graph
        self.queries_run = 0
        self._input = input_fn
        self._output = output_fn

    def run(self) -> None:
        """Show the menu repeatedly until the user exits."""
        logger.debug(f"Session started on {self.graph!r}")
        while True:
            self._emit(MENU_LINES)
            try:
                if not self.handle_choice(self._read_line("Enter your choice: ")):
                    break
            except _EndOfInput:
                logger.debug("Input closed, ending session")
                self._output("Goodbye!")
                break
        logger.debug(f"Session ended after {self.queries_run} queries")

    def handle_choice(self, raw_choice: str) -> bool:
        """
        Dispatch one menu choice.

        Returns:
            False when the session should end, True otherwise
        """
        choice = _parse_int(raw_choice)

        if choice == CHOICE_FRIENDS:
            person_id = self._read_int("Enter ID of person: ")
            if person_id is not None:
                self._emit(describe_friends(self.graph, person_id))
                self.queries_run += 1
        elif choice == CHOICE_CONNECTION:
            src = self._read_int("Enter ID of first person: ")
            if src is None:
                return True
            dest = self._read_int("Enter ID of second person: ")
            if dest is not None:
                self._emit(describe_connection(self.graph, src, dest))
                self.queries_run += 1
        elif choice == CHOICE_EXIT:
            self._output("Goodbye!")
            return False
        else:
            self._output("Invalid choice. Please try again.")

        return True

    def _read_line(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            raise _EndOfInput from None

    def _read_int(self, prompt: str) -> int | None:
        value = _parse_int(self._read_line(prompt))
        if value is None:
            self._output("Error: Please enter a whole number.")
        return value

    def _emit(self, lines: list[str]) -> None:
        for line in lines:
            self._output(line)


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None
