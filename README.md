# blahchat

A small console chat client with user accounts. Users register and log in
from the terminal. Accounts are kept in two files in the working directory:

- `users.txt`: one line per user, with fields separated by `|`
  (`RegularUser|name|password|chatIds` or `Admin|id|name|password|chatIds`,
  where `chatIds` is a comma-separated list that may be empty)
- `users.bin`: the same accounts in a binary form, where each string is
  a 32-bit little-endian length followed by its UTF-8 bytes

## Installing

```
pip install .
```

## Running

Start the client from the directory that holds `users.txt`:

```
blahchat
```

Accounts are loaded from `users.txt` only. If that file is missing, the
program prints `File does not exist` and exits with status 1.

When nobody is logged in, two commands are accepted:

```
login <username> <password>
register <username> <password>
```

A new account is always a regular user. It is appended to both
`users.txt` and `users.bin`. Registration is refused when the username
or password is empty or the username is already taken.

If a login does not match any account, the client asks whether to create
it: `y` or `yes` registers it, `n` or `no` returns to the welcome screen,
and anything else prints `Error: Wrong command.`. After a successful
login the screen is cleared and the list of commands for the account type
is shown (admins see three extra entries).

While logged in, the client acts on these commands:

```
logout
quit
```

The session also ends at the end of input.

## What it does not do

The command list shown after login names chat and group commands
(`view-chats`, `select-chat`, `create-group` and so on), but the client
only acts on `logout` and `quit`; every other line is ignored. Chats and
messages exist only as Python objects: they are not sent, received or
stored anywhere, and there is no server or network connection. The
binary users file is written but not read by the client, and when it is
read with `load_users_binary`, chat ids are skipped.

## Using it as a library

- `blahchat.users`: `User`, `RegularUser` and `Admin` (with `admin_id`);
  `User.user_type()` returns the class name.
- `blahchat.message`: `Message(sender, content, sent_at)`, where
  `sent_at` defaults to now; `date()`, `time()` and `format_line()`, plus
  `format_date` and `format_time`.
- `blahchat.chats`: `Chat`, `GroupChat` (with `chat_name`) and
  `IndividualChat`; `format_chat()` returns the transcript and
  `print_chat(stream)` writes it.
- `blahchat.storage`: `format_user_line`, `save_user`, `save_user_binary`,
  `load_users`, `load_users_binary`, `write_string` and `read_string`.
- `blahchat.accounts`: `find_user`, `authenticate`, `create_account` and
  `login`; `login` takes a `confirm` callable that supplies the y/n answer.
- `blahchat.console`: `clear_console`, `actions_text` and `print_actions`.
- `blahchat.text`: `split`, `to_int` and `to_double`.
- `blahchat.app`: `run(users, lines, out, text_path, binary_path)`, the
  command loop, which reads from any iterable of lines, writes to any text
  stream and returns the user logged in when it ended; and `main`.

## Tests

```
pip install .[test]
pytest
```