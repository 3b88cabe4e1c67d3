"""Terminal output helpers."""

from __future__ import annotations

import sys
from typing import TextIO

_CLEAR = "\033[;H\033[J"

_ADMIN_ACTIONS = (
    "delete-user <username>",
    "delete-group <chatId>",
    "view-all-chats",
)

_USER_ACTIONS = (
    "view-chats",
    "select-chat <chatId>",
    "create-group <groupName> <username1> <username2> ....",
    "leave-group <chatId>",
    "add-to-group <chatId> <username>",
    "kick-from-group <chatId> <username>",
    "set-group-admin <chatId> <username>",
    "group-stats <chatId>",
)

_SESSION_ACTIONS = ("logout", "quit")


def clear_console(stream: TextIO | None = None) -> None:
    """Move the cursor home and clear the screen."""
    (sys.stdout if stream is None else stream).write(_CLEAR)


def _block(lines: tuple[str, ...]) -> str:
    return "".join(line + "\n" for line in lines)


def actions_text(user_type: str) -> str:
    """The list of commands available to a user of ``user_type``."""
    parts = ["You are able to use the following commands:\n\n"]
    if user_type == "Admin":
        parts.append(_block(_ADMIN_ACTIONS) + "\n")
    parts.append(_block(_USER_ACTIONS) + "\n")
    parts.append(_block(_SESSION_ACTIONS))
    return "".join(parts)


def print_actions(user_type: str, stream: TextIO | None = None) -> None:
    """Write the list of available commands to ``stream``."""
    (sys.stdout if stream is None else stream).write(actions_text(user_type))