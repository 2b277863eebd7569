import io
import sys

import pytest

from consoleapps.users import (
    CREDENTIAL_LENGTH,
    MAX_USERS,
    RegistryFullError,
    User,
    UserRegistry,
    read_password,
)


def test_register_then_login():
    registry = UserRegistry()
    password = "password"
    registry.register("alice", password)
    assert registry.login("alice", password) == User("alice", password)


def test_wrong_password_fails():
    registry = UserRegistry()
    password = "password"
    registry.register("alice", password)
    assert registry.login("alice", "secret") is None
    assert registry.login("bob", password) is None


def test_empty_registry_rejects_empty_credentials():
    assert UserRegistry().login("", "") is None


def test_default_capacity_then_full():
    registry = UserRegistry()
    for n in range(MAX_USERS):
        registry.register(f"user{n}", "secret")
    assert len(registry) == MAX_USERS
    with pytest.raises(RegistryFullError):
        registry.register("extra", "secret")


def test_credentials_truncated():
    registry = UserRegistry()
    user = registry.register("a" * 40, "secret")
    assert len(user.username) == CREDENTIAL_LENGTH - 1
    assert registry.login("a" * (CREDENTIAL_LENGTH - 1), "secret") == user


def test_read_password_handles_backspace(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("passx\x7fword\nrest"))
    assert read_password("> ") == "password"
    out = capsys.readouterr().out
    assert out.startswith("> ")
    assert out.count("*") == len("passx") + len("word")
    assert out.endswith("\n")


def test_read_password_truncates(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x" * 40 + "\n"))
    assert read_password("> ") == "x" * (CREDENTIAL_LENGTH - 1)


def test_read_password_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(EOFError):
        read_password("> ")