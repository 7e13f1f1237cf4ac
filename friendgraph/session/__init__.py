"""
Session module.

Provides the console front end:
- MenuSession: Interactive main-menu loop
- describe_friends / describe_connection: Query + render helpers
"""

from friendgraph.session.menu import MenuSession
from friendgraph.session.render import (
    describe_connection,
    describe_friends,
    render_connection,
    render_friend_list,
)

__all__ = [
    "MenuSession",
    "describe_connection",
    "describe_friends",
    "render_connection",
    "render_friend_list",
]
