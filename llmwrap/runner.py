"""
runner.py — Confirmation gate and shell executor.

The proposed command runs only after the user answers "y" or "yes". It is
handed to the shell unmodified as `sh -c <command>`: globbing, pipes,
redirection and chaining all behave as typed. The child inherits this
process's stdin/stdout/stderr and is waited on to completion.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import TextIO

from .errors import CommandExecutionError

logger = logging.getLogger("llmwrap.runner")

CONFIRM_PROMPT = "Run this command? [y/N]: "
AFFIRMATIVE = frozenset({"y", "yes"})


def confirm_run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> bool:
    """Ask once; anything other than y/yes (including EOF) declines."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(CONFIRM_PROMPT)
    stdout.flush()

    line = stdin.readline()
    return line.strip().lower() in AFFIRMATIVE


def run_command(command: str, shell: str = "sh") -> None:
    """
    Execute `command` through `shell -c` and wait for it.

    Raises:
        CommandExecutionError: the shell could not be started, or the command
            exited with a non-zero status (available as .returncode).
    """
    print(f"Executing: {command}", flush=True)
    logger.info("Starting: %s -c %r", shell, command)

    try:
        result = subprocess.run([shell, "-c", command])
    except OSError as e:
        raise CommandExecutionError(f"Failed to spawn shell {shell!r}") from e

    returncode = result.returncode
    logger.info("Exited with status %d", returncode)
    if returncode < 0:
        raise CommandExecutionError(
            f"Command terminated by signal {-returncode}", returncode=returncode
        )
    if returncode != 0:
        raise CommandExecutionError(
            f"Command exited with status: {returncode}", returncode=returncode
        )
