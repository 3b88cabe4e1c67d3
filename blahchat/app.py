"""The interactive chat client loop."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from blahchat.accounts import create_account, login
from blahchat.console import clear_console
from blahchat.storage import USERS_FILE, USERS_FILE_BIN, PathLike, load_users
from blahchat.text import split
from blahchat.users import User

WELCOME = (
    "Welcome to BlahBlah! To login or register use the following commands:\n"
    "login <username> <password>\n"
    "register <username> <password>\n"
)


def run(
    users: list[User],
    lines: Iterable[str],
    out: TextIO | None = None,
    text_path: PathLike = USERS_FILE,
    binary_path: PathLike = USERS_FILE_BIN,
) -> User | None:
    """Process commands from ``lines`` until ``quit`` or end of input.

    Returns the user logged in when the session ended, if any.
    """
    out = sys.stdout if out is None else out
    pending = (line.rstrip("\r\n") for line in lines)

    def confirm() -> str:
        return next(pending, "")

    logged: User | None = None
    while True:
        if logged is None:
            out.write(WELCOME)
            line = next(pending, None)
            if line is None:
                return None
            tokens = split(line, " ")
            if tokens[0] == "login" and len(tokens) >= 3:
                logged = login(tokens[1], tokens[2], users, confirm, text_path, binary_path, out)
            elif tokens[0] == "register" and len(tokens) >= 3:
                create_account(tokens[1], tokens[2], users, text_path, binary_path, out)
        else:
            line = next(pending, None)
            if line is None:
                return logged
            command = split(line, " ")[0]
            if command == "logout":
                logged = None
                clear_console(out)
            elif command == "quit":
                return logged


def main(argv: list[str] | None = None) -> int:
    """Start the chat client on standard input and output."""
    argparse.ArgumentParser(prog="blahchat", description="Terminal chat client.").parse_args(argv)
    try:
        users = load_users(USERS_FILE)
    except FileNotFoundError:
        print("File does not exist", file=sys.stderr)
        return 1
    run(users, sys.stdin, sys.stdout)
    return 0