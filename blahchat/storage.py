"""Persistence of user accounts in a text file and a binary file."""

from __future__ import annotations

import io
import os
import struct
from pathlib import Path
from typing import BinaryIO, Union

from blahchat.text import split, to_int
from blahchat.users import Admin, RegularUser, User

USERS_FILE = "users.txt"
USERS_FILE_BIN = "users.bin"
CHATS_FILE = "chats_"

PathLike = Union[str, "os.PathLike[str]"]

_INT = struct.Struct("<i")


def format_user_line(user: User) -> str:
    """One record of the text file: ``type|[adminId|]username|password|chatIds``."""
    fields = [user.user_type()]
    if isinstance(user, Admin):
        fields.append(str(user.admin_id))
    fields.extend([user.username, user.password])
    chat_ids = ",".join(str(chat.chat_id) for chat in user.chats)
    return "|".join(fields) + "|" + chat_ids + "\n"


def save_user(user: User, path: PathLike = USERS_FILE) -> None:
    """Append ``user`` to the text users file."""
    with open(path, "a", encoding="utf-8") as stream:
        stream.write(format_user_line(user))


def _write_int(stream: BinaryIO, value: int) -> None:
    stream.write(_INT.pack(value))


def _read_int(stream: BinaryIO) -> int:
    raw = stream.read(_INT.size)
    if len(raw) != _INT.size:
        raise ValueError("Unexpected end of data!")
    return _INT.unpack(raw)[0]


def write_string(stream: BinaryIO, text: str) -> None:
    """Write ``text`` as a 32-bit length followed by its UTF-8 bytes."""
    data = text.encode("utf-8")
    _write_int(stream, len(data))
    stream.write(data)


def read_string(stream: BinaryIO) -> str:
    """Read a string written by :func:`write_string`."""
    length = _read_int(stream)
    if length < 0:
        raise ValueError("Negative string length!")
    if length == 0:
        return ""
    data = stream.read(length)
    if len(data) != length:
        raise ValueError("Unexpected end of data!")
    return data.decode("utf-8")


def save_user_binary(user: User, path: PathLike = USERS_FILE_BIN) -> None:
    """Append ``user`` to the binary users file."""
    with open(path, "ab") as stream:
        write_string(stream, user.user_type())
        if isinstance(user, Admin):
            _write_int(stream, user.admin_id)
        write_string(stream, user.username)
        write_string(stream, user.password)
        _write_int(stream, len(user.chats))
        for chat in user.chats:
            _write_int(stream, chat.chat_id)


def load_users(path: PathLike = USERS_FILE) -> list[User]:
    """Read every account from the text users file."""
    users: list[User] = []
    with open(path, encoding="utf-8") as stream:
        for line in stream:
            tokens = split(line.rstrip("\r\n"), "|")
            kind = tokens[0]
            if kind == "RegularUser":
                if len(tokens) < 3:
                    raise ValueError("Malformed user record!")
                users.append(RegularUser(tokens[1], tokens[2]))
            elif kind == "Admin":
                if len(tokens) < 4:
                    raise ValueError("Malformed user record!")
                users.append(Admin(to_int(tokens[1]), tokens[2], tokens[3]))
    return users


def load_users_binary(path: PathLike = USERS_FILE_BIN) -> list[User]:
    """Read every account from the binary users file; chat ids are skipped."""
    data = Path(path).read_bytes()
    stream = io.BytesIO(data)
    users: list[User] = []
    while stream.tell() < len(data):
        kind = read_string(stream)
        admin_id = _read_int(stream) if kind == "Admin" else 0
        username = read_string(stream)
        password = read_string(stream)
        chat_count = _read_int(stream)
        for _ in range(chat_count):
            _read_int(stream)

        if kind == "Admin":
            users.append(Admin(admin_id, username, password))
        elif kind == "RegularUser":
            users.append(RegularUser(username, password))
        else:
            raise ValueError(f"Unknown user type: {kind!r}")
    return users