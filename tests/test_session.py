"""
Tests for the interactive menu session and result rendering.
"""

import pytest

from friendgraph.graph import find_connection
from friendgraph.session import (
    MenuSession,
    describe_connection,
    describe_friends,
    render_connection,
)


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything shown."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = iter(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    def print(self, line: str) -> None:
        self.lines.append(line)


def run_session(graph, answers: list[str]) -> ScriptedConsole:
    console = ScriptedConsole(answers)
    MenuSession(graph, input_fn=console.input, output_fn=console.print).run()
    return console


class TestRendering:
    """Test message text."""

    def test_friend_list(self, line_graph):
        """Friend lists show the count and the IDs."""
        assert describe_friends(line_graph, 1) == [
            "Person 1 has 2 friends!",
            "List of friends: 2 0",
        ]

    def test_friend_list_empty(self, split_graph):
        """No list line is shown for someone without friends."""
        assert describe_friends(split_graph, 2) == ["Person 2 has 0 friends!"]

    def test_unknown_person(self, line_graph):
        """Unknown IDs produce an error line instead of raising."""
        assert describe_friends(line_graph, 7) == [
            "Error: Person ID 7 does not exist in the dataset."
        ]

    def test_connection_path(self, line_graph):
        """Each hop is printed from the source side."""
        assert describe_connection(line_graph, 0, 3) == [
            "There is a connection from 0 to 3!",
            "0 is friends with 1",
            "1 is friends with 2",
            "2 is friends with 3",
        ]

    def test_connection_other_statuses(self, split_graph):
        """Same person, missing IDs and no path each have their message."""
        assert render_connection(find_connection(split_graph, 1, 1)) == [
            "Person 1 is the same as person 1."
        ]
        assert render_connection(find_connection(split_graph, 0, 9)) == [
            "Error: One or both person IDs do not exist in the dataset."
        ]
        assert render_connection(find_connection(split_graph, 0, 2)) == [
            "Cannot find a connection between 0 and 2"
        ]


class TestMenuSession:
    """Test the menu loop."""

    def test_exit(self, line_graph):
        """Choosing 3 says goodbye and stops."""
        console = run_session(line_graph, ["3"])
        assert console.lines[-1] == "Goodbye!"
        assert console.prompts == ["Enter your choice: "]
        assert "MAIN MENU" in console.lines

    def test_friend_then_connection(self, line_graph):
        """Queries are answered in order and the menu reappears."""
        console = run_session(line_graph, ["1", "2", "2", "0", "3", "3"])
        assert "Person 2 has 2 friends!" in console.lines
        assert "There is a connection from 0 to 3!" in console.lines
        assert console.prompts == [
            "Enter your choice: ",
            "Enter ID of person: ",
            "Enter your choice: ",
            "Enter ID of first person: ",
            "Enter ID of second person: ",
            "Enter your choice: ",
        ]
        assert console.lines.count("MAIN MENU") == 3

    def test_errors_keep_session_alive(self, line_graph):
        """Bad IDs and bad choices never end the session."""
        session_answers = ["1", "42", "2", "0", "-1", "9", "abc", "1", "x", "3"]
        console = run_session(line_graph, session_answers)
        assert "Error: Person ID 42 does not exist in the dataset." in console.lines
        assert "Error: One or both person IDs do not exist in the dataset." in console.lines
        assert console.lines.count("Invalid choice. Please try again.") == 2
        assert "Error: Please enter a whole number." in console.lines
        assert console.lines[-1] == "Goodbye!"

    def test_end_of_input_exits(self, line_graph):
        """Running out of input ends the session cleanly."""
        console = run_session(line_graph, ["1"])
        assert console.lines[-1] == "Goodbye!"

    def test_queries_counted(self, line_graph):
        """Only answered queries are counted."""
        console = ScriptedConsole(["1", "0", "2", "1", "1", "1", "oops", "3"])
        session = MenuSession(line_graph, input_fn=console.input, output_fn=console.print)
        session.run()
        assert session.queries_run == 2

    @pytest.mark.parametrize("choice", ["0", "4", "", "  "])
    def test_invalid_choices(self, line_graph, choice):
        """Unknown menu choices print the retry message."""
        console = ScriptedConsole([])
        session = MenuSession(line_graph, input_fn=console.input, output_fn=console.print)
        assert session.handle_choice(choice) is True
        assert console.lines == ["Invalid choice. Please try again."]
