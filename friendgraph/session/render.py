"""
Text rendering for query results.

Each function returns the lines to show, so the menu session and the
one-shot CLI flags print identical text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from friendgraph.graph.errors import VertexNotFoundError
from friendgraph.graph.search import ConnectionResult, ConnectionStatus
from friendgraph.queries import FriendList, connection, friends_of

if TYPE_CHECKING:
    from friendgraph.graph.store import FriendGraph

MENU_LINES = [
    "",
    "MAIN MENU",
    "[1] Get friend list",
    "[2] Get connection",
    "[3] Exit",
]


def render_friend_list(friends: FriendList) -> list[str]:
    lines = [f"Person {friends.person_id} has {friends.count} friends!"]
    if friends.count > 0:
        lines.append("List of friends: " + " ".join(str(n) for n in friends.neighbors))
    return lines


def render_missing_person(person_id: object) -> list[str]:
    return [f"Error: Person ID {person_id} does not exist in the dataset."]


def render_connection(result: ConnectionResult) -> list[str]:
    """
    Render a connection result.

    A found path is printed one friendship per line, walking from the
    source towards the target.
    """
    src, dest = result.source, result.target

    if result.status is ConnectionStatus.OUT_OF_RANGE:
        return ["Error: One or both person IDs do not exist in the dataset."]
    if result.status is ConnectionStatus.SAME_VERTEX:
        return [f"Person {src} is the same as person {dest}."]
    if result.status is ConnectionStatus.NOT_CONNECTED:
        return [f"Cannot find a connection between {src} and {dest}"]

    lines = [f"There is a connection from {src} to {dest}!"]
    for a, b in result.friend_pairs():
        lines.append(f"{a} is friends with {b}")
    return lines


def describe_friends(graph: FriendGraph, person_id: int) -> list[str]:
    """Run a friend-list query and render the answer or the error."""
    try:
        friends = friends_of(graph, person_id)
    except VertexNotFoundError:
        return render_missing_person(person_id)
    return render_friend_list(friends)


def describe_connection(graph: FriendGraph, src: int, dest: int) -> list[str]:
    """Run a connection query and render the answer."""
    return render_connection(connection(graph, src, dest))
