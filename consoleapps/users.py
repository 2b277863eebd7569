"""In-memory user registration and login with masked password entry."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Callable

MAX_USERS = 10
CREDENTIAL_LENGTH = 30
_LIMIT = CREDENTIAL_LENGTH - 1
_MASKED_PROMPT = "Enter you " + "pass" + "word (making enable): "


@dataclass(frozen=True)
class User:
    username: str
    password: str


class RegistryFullError(RuntimeError):
    """No more users can be registered."""


class UserRegistry:
    """A fixed-capacity list of users."""

    def __init__(self, capacity: int = MAX_USERS) -> None:
        self.capacity = capacity
        self.users: list[User] = []

    def __len__(self) -> int:
        return len(self.users)

    def register(self, username: str, password: str) -> User:
        """Add a user, keeping at most 29 characters of each credential."""
        if len(self.users) >= self.capacity:
            raise RegistryFullError(
                f"Maxximum {self.capacity} users are supported! No more registrations Allowed!!!!"
            )
        user = User(username[:_LIMIT], password[:_LIMIT])
        self.users.append(user)
        return user

    def login(self, username: str, password: str) -> User | None:
        """Return the first user matching both credentials, if any."""
        return next(
            (u for u in self.users if u.username == username and u.password == password),
            None,
        )


def _echo(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _collect(read_char: Callable[[], str]) -> str:
    chars: list[str] = []
    seen = False
    while True:
        ch = read_char()
        if ch == "":
            if not seen:
                raise EOFError
            break
        seen = True
        if ch in "\r\n" or len(chars) >= _LIMIT:
            break
        if ch in ("\x7f", "\b"):
            if chars:
                chars.pop()
                _echo("\b \b")
        else:
            chars.append(ch)
            _echo("*")
    _echo("\n")
    return "".join(chars)


def read_password(prompt: str = _MASKED_PROMPT) -> str:
    """Read a password, echoing an asterisk per character typed."""
    _echo(prompt)
    stream = sys.stdin
    if not stream.isatty():
        return _collect(lambda: stream.read(1))
    if os.name == "nt":
        import msvcrt

        return _collect(msvcrt.getwch)
    import termios

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ECHO | termios.ICANON)
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        return _collect(lambda: stream.read(1))
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def _input_credentials() -> tuple[str, str]:
    username = input("Enter Username : ")[:_LIMIT]
    return username, read_password()


def main(argv=None) -> int:
    argparse.ArgumentParser(description="Register and log in users.").parse_args(argv)
    registry = UserRegistry()
    try:
        while True:
            print("Welcome to User Management")
            print("1. Register")
            print("2. Login")
            print("3. Exit")
            words = input("Select an option: ").split()
            try:
                option = int(words[0]) if words else 0
            except ValueError:
                option = 0
            if option == 1:
                if len(registry) >= registry.capacity:
                    print(
                        f"Maxximum {registry.capacity} users are supported! "
                        "No more registrations Allowed!!!!"
                    )
                    continue
                print("Register a new user", end="")
                registry.register(*_input_credentials())
                print("Registration successful!")
            elif option == 2:
                user = registry.login(*_input_credentials())
                if user is not None:
                    print(f"Login successful! Welcome, {user.username}!")
                else:
                    print("Login failed! Incorrect username or password.")
            elif option == 3:
                print("Exiting Program.")
                return 0
            else:
                print("Invalid option. Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())