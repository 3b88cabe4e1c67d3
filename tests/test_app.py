import io
import sys

from blahchat.app import WELCOME, main, run
from blahchat.storage import load_users, load_users_binary
from blahchat.users import Admin, RegularUser


def _run(tmp_path, users, lines):
    out = io.StringIO()
    result = run(users, lines, out, tmp_path / "users.txt", tmp_path / "users.bin")
    return result, out.getvalue()


def test_welcome_mentions_commands():
    assert "login <username> <password>" in WELCOME
    assert WELCOME.startswith("Welcome to BlahBlah!")


def test_login_then_quit(tmp_path):
    users = [RegularUser("alice", "password")]
    result, text = _run(tmp_path, users, ["login alice password\n", "quit\n"])
    assert result is users[0]
    assert text.count(WELCOME) == 1
    assert "Username: alice" in text


def test_admin_login_shows_admin_commands(tmp_path):
    users = [Admin(2, "root", "password")]
    result, text = _run(tmp_path, users, ["login root password", "quit"])
    assert result is users[0]
    assert "You logged in as an admin." in text
    assert "view-all-chats" in text


def test_logout_returns_to_welcome(tmp_path):
    users = [RegularUser("alice", "password")]
    result, text = _run(tmp_path, users, ["login alice password", "logout"])
    assert result is None
    assert text.count(WELCOME) == 2
    assert text.count("\033[;H\033[J") == 2


def test_register_persists_user(tmp_path):
    users = []
    result, text = _run(tmp_path, users, ["register bob password"])
    assert result is None
    assert users == [RegularUser("bob", "password")]
    assert load_users(tmp_path / "users.txt") == users
    assert load_users_binary(tmp_path / "users.bin") == users
    assert "Account created successfully." in text


def test_incomplete_command_is_ignored(tmp_path):
    users = [RegularUser("alice", "password")]
    result, text = _run(tmp_path, users, ["login alice", "hello"])
    assert result is None
    assert text == WELCOME * 3


def test_unknown_login_offers_registration(tmp_path):
    users = []
    result, text = _run(tmp_path, users, ["login carol password", "y", "login carol password", "quit"])
    assert result == RegularUser("carol", "password")
    assert "Account does not exist. Create? (y/n)" in text
    assert "You logged in as a regular user." in text


def test_main_without_users_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "File does not exist" in capsys.readouterr().err


def test_main_runs_session(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "users.txt").write_text("RegularUser|alice|password|\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("login alice password\nquit\n"))
    assert main([]) == 0
    assert "Username: alice" in capsys.readouterr().out