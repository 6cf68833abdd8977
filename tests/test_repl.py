"""Tests for the interactive menu."""

from conftest import MASTER, ScriptedPrompt
from lockbox.repl import run_repl
from lockbox.store import CredentialStore


def _unlocked(path):
    return CredentialStore(path, MASTER).load()


class TestRepl:

    def test_exit(self, store_path, capsys):
        run_repl(_unlocked(store_path), ScriptedPrompt(lines=["7"]))
        assert "Exiting Lockbox." in capsys.readouterr().out

    def test_invalid_choice_reprompts(self, store_path, capsys):
        run_repl(_unlocked(store_path), ScriptedPrompt(lines=["9", "7"]))
        assert "Invalid input" in capsys.readouterr().out

    def test_add_is_saved_immediately(self, store_path):
        prompt = ScriptedPrompt(passwords=["secret"], lines=["1", "github", "octocat", "7"])
        run_repl(_unlocked(store_path), prompt)
        entry = _unlocked(store_path).find("github", "octocat")
        assert entry.password == "secret"

    def test_add_without_username(self, store_path):
        prompt = ScriptedPrompt(passwords=["secret"], lines=["1", "mail", "", "7"])
        run_repl(_unlocked(store_path), prompt)
        assert _unlocked(store_path).find("mail", None).password == "secret"

    def test_back_from_add(self, store_path):
        prompt = ScriptedPrompt(lines=["1", "b", "7"])
        run_repl(_unlocked(store_path), prompt)
        assert len(_unlocked(store_path)) == 0

    def test_show_and_remove(self, store_path, capsys):
        _unlocked(store_path).push("svc", None, "p1").dump()
        prompt = ScriptedPrompt(lines=["3", "svc", "", "5", "svc", "", "5", "svc", "", "7"])
        run_repl(_unlocked(store_path), prompt)
        out = capsys.readouterr().out
        assert "Password: p1" in out
        assert "Password deleted" in out
        assert "Password not found" in out
        assert len(_unlocked(store_path)) == 0

    def test_list(self, store_path, capsys):
        _unlocked(store_path).push("svc", "u", "p1").dump()
        run_repl(_unlocked(store_path), ScriptedPrompt(lines=["4", "n", "7"]))
        out = capsys.readouterr().out
        assert "Service: svc, Username: u, Password: ***" in out
        assert "Total: 1 passwords" in out

    def test_generate_and_save(self, store_path):
        prompt = ScriptedPrompt(lines=["2", "32", "n", "y", "bank", "", "7"])
        run_repl(_unlocked(store_path), prompt)
        entry = _unlocked(store_path).find("bank", None)
        assert len(entry.password) == 32
        assert entry.password.isalnum()

    def test_update_master(self, store_path):
        prompt = ScriptedPrompt(passwords=["rotated", "rotated"], lines=["6", "7"])
        run_repl(_unlocked(store_path), prompt)
        assert len(CredentialStore(store_path, "rotated").load()) == 0
