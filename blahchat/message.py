"""Chat messages stamped with the local date and time they were sent."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


def format_date(moment: datetime) -> str:
    """Format a date as ``day.month.year`` without zero padding."""
    return f"{moment.day}.{moment.month}.{moment.year}"


def format_time(moment: datetime) -> str:
    """Format a time as ``hour:minute`` with a two-digit minute."""
    return f"{moment.hour}:{moment.minute:02d}"


@dataclass(frozen=True)
class Message:
    """A single message from ``sender``; ``sent_at`` defaults to now."""

    sender: str = ""
    content: str = ""
    sent_at: datetime = field(default_factory=datetime.now)

    def date(self) -> str:
        """The date the message was sent."""
        return format_date(self.sent_at)

    def time(self) -> str:
        """The time the message was sent."""
        return format_time(self.sent_at)

    def format_line(self) -> str:
        """The message as one line of a chat transcript."""
        return f"{self.date()}, {self.time()} | {self.sender}: {self.content}"