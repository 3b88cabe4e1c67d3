"""Conversations between users: one-to-one chats and named groups."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, TextIO

from blahchat.message import Message

if TYPE_CHECKING:
    from blahchat.users import User


class Chat:
    """A conversation with an id, its participants and its messages."""

    def __init__(self, chat_id: int, participants: Iterable[User] = ()) -> None:
        self.chat_id = chat_id
        self.participants: list[User] = list(participants)
        self.messages: list[Message] = []

    def __repr__(self) -> str:
        names = [user.username for user in self.participants]
        return f"{type(self).__name__}(chat_id={self.chat_id!r}, participants={names!r})"

    def format_chat(self) -> str:
        """The transcript, one line per message."""
        return "".join(message.format_line() + "\n" for message in self.messages)

    def print_chat(self, stream: TextIO | None = None) -> None:
        """Write the transcript to ``stream`` (standard output by default)."""
        (stream or sys.stdout).write(self.format_chat())


class GroupChat(Chat):
    """A named chat among any number of participants."""

    def __init__(self, chat_id: int, chat_name: str, participants: Iterable[User]) -> None:
        super().__init__(chat_id, participants)
        self.chat_name = chat_name


class IndividualChat(Chat):
    """A chat between exactly two users."""

    def __init__(self, chat_id: int, participant1: User, participant2: User) -> None:
        super().__init__(chat_id, (participant1, participant2))