"""Tests for llmwrap/runner.py"""

from __future__ import annotations

import io

import pytest

from llmwrap.errors import CommandExecutionError
from llmwrap.runner import CONFIRM_PROMPT, confirm_run, run_command


# ──────────────────────────────────────────────────────────────────────────────
# TestConfirmRun
# ──────────────────────────────────────────────────────────────────────────────

class TestConfirmRun:
    @pytest.mark.parametrize("answer", ["y\n", "Y\n", "yes\n", "YES\n", "  Yes  \n", "y"])
    def test_affirmative(self, answer):
        assert confirm_run(io.StringIO(answer), io.StringIO()) is True

    @pytest.mark.parametrize("answer", ["\n", "n\n", "no\n", "maybe\n", "yess\n", "y es\n"])
    def test_declined(self, answer):
        assert confirm_run(io.StringIO(answer), io.StringIO()) is False

    def test_eof_declines(self):
        assert confirm_run(io.StringIO(""), io.StringIO()) is False

    def test_writes_prompt(self):
        out = io.StringIO()
        confirm_run(io.StringIO("n\n"), out)
        assert out.getvalue() == CONFIRM_PROMPT
        assert CONFIRM_PROMPT == "Run this command? [y/N]: "

    def test_reads_only_one_line(self):
        stdin = io.StringIO("n\ny\n")
        assert confirm_run(stdin, io.StringIO()) is False
        assert stdin.read() == "y\n"

    def test_defaults_to_process_streams(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("yes\n"))
        assert confirm_run() is True
        assert CONFIRM_PROMPT in capsys.readouterr().out


# ──────────────────────────────────────────────────────────────────────────────
# TestRunCommand
# ──────────────────────────────────────────────────────────────────────────────

class TestRunCommand:
    def test_success(self, capfd):
        run_command("echo hello_from_shell")
        out = capfd.readouterr().out
        assert "Executing: echo hello_from_shell" in out
        assert "hello_from_shell" in out

    def test_shell_semantics(self, tmp_path, capfd):
        target = tmp_path / "out.txt"
        run_command(f"echo a | tr a b > '{target}' && echo done")
        assert target.read_text() == "b\n"
        assert "done" in capfd.readouterr().out

    def test_nonzero_exit_raises_with_status(self):
        with pytest.raises(CommandExecutionError) as exc:
            run_command("exit 3")
        assert exc.value.returncode == 3
        assert "Command exited with status: 3" in str(exc.value)

    def test_false_raises(self):
        with pytest.raises(CommandExecutionError):
            run_command("false")

    def test_killed_by_signal(self):
        with pytest.raises(CommandExecutionError) as exc:
            run_command("kill -TERM $$")
        assert exc.value.returncode == -15
        assert "signal 15" in str(exc.value)

    def test_spawn_failure(self, tmp_path):
        missing = str(tmp_path / "no-such-shell")
        with pytest.raises(CommandExecutionError) as exc:
            run_command("true", shell=missing)
        assert "Failed to spawn shell" in str(exc.value)
        assert isinstance(exc.value.__cause__, OSError)
        assert exc.value.returncode is None

    def test_stderr_inherited(self, capfd):
        run_command("echo to_stderr 1>&2")
        assert "to_stderr" in capfd.readouterr().err
