"""User accounts: regular users and administrators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class User:
    """An account with a username, a password and the chats it takes part in."""

    username: str = ""
    password: str = ""
    chats: list[Any] = field(default_factory=list, repr=False, compare=False)

    def user_type(self) -> str:
        """The name of the account's kind, such as ``RegularUser`` or ``Admin``."""
        return type(self).__name__


@dataclass
class RegularUser(User):
    """An ordinary account."""


@dataclass(init=False)
class Admin(User):
    """An administrator account with its own numeric id."""

    admin_id: int = 0

    def __init__(self, admin_id: int, username: str = "", password: str = "") -> None:
        super().__init__(username, password)
        self.admin_id = admin_id