"""
Shared pytest fixtures for the Lockbox test suite.

Stores are created under tmp_path so no test touches ~/.lockbox, and
interactive input comes from ScriptedPrompt instead of the terminal.
"""

import pytest


MASTER = "test_master"


class ScriptedPrompt:
    """Replays prepared answers in place of TerminalPrompt"""

    def __init__(self, passwords=None, lines=None):
        self.passwords = list(passwords or [])
        self.lines = list(lines or [])
        self.password_labels = []

    def prompt_password(self, label):
        self.password_labels.append(label)
        if not self.passwords:
            raise AssertionError(f"Unexpected password prompt: {label}")
        return self.passwords.pop(0)

    def read_line(self, prompt):
        if not self.lines:
            raise AssertionError(f"Unexpected input prompt: {prompt}")
        return self.lines.pop(0)


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "store"


@pytest.fixture(autouse=True)
def _isolate_store_env(monkeypatch, tmp_path):
    """Keep LOCKBOX_STORE from pointing tests at a real store"""
    monkeypatch.delenv("LOCKBOX_STORE", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
