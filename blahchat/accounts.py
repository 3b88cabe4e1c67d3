"""Account lookup, registration and login."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, TextIO

from blahchat.console import clear_console, print_actions
from blahchat.storage import USERS_FILE, USERS_FILE_BIN, PathLike, save_user, save_user_binary
from blahchat.users import RegularUser, User


def find_user(username: str, users: Iterable[User]) -> User | None:
    """The first user called ``username``, or ``None``."""
    return next((user for user in users if user.username == username), None)


def authenticate(username: str, password: str, users: Iterable[User]) -> User | None:
    """The user matching both credentials, or ``None``."""
    user = find_user(username, users)
    if user is None or user.password != password:
        return None
    return user


def create_account(
    username: str,
    password: str,
    users: list[User],
    text_path: PathLike = USERS_FILE,
    binary_path: PathLike = USERS_FILE_BIN,
    out: TextIO | None = None,
) -> User | None:
    """Register a regular user, store it, and return it; ``None`` if refused."""
    out = sys.stdout if out is None else out
    if not username or not password:
        print("Username and password cannot be empty!", file=out)
        return None
    if find_user(username, users) is not None:
        print("User with given username already exists! Please try again.", file=out)
        return None

    user = RegularUser(username, password)
    users.append(user)
    save_user(user, text_path)
    save_user_binary(user, binary_path)
    print("Account created successfully.", file=out)
    return user


def login(
    username: str,
    password: str,
    users: list[User],
    confirm: Callable[[], str] = input,
    text_path: PathLike = USERS_FILE,
    binary_path: PathLike = USERS_FILE_BIN,
    out: TextIO | None = None,
) -> User | None:
    """Log in and return the user; offer to register when no account matches."""
    out = sys.stdout if out is None else out
    if not username or not password:
        print("Username and password cannot be empty!", file=out)
        return None

    user = authenticate(username, password, users)
    if user is not None:
        user_type = user.user_type()
        clear_console(out)
        role = "an admin" if user_type == "Admin" else "a regular user"
        print(f"You logged in as {role}.\nUsername: {user.username}\n", file=out)
        print_actions(user_type, out)
        print(file=out)
        return user

    print("Account does not exist. Create? (y/n)", file=out)
    answer = confirm()
    if answer in ("y", "yes"):
        create_account(username, password, users, text_path, binary_path, out)
    elif answer not in ("n", "no"):
        print("Error: Wrong command.", file=out)
    return None