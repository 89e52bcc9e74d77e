"""
errors.py — Exception types raised by the llmwrap pipeline.

Every failure is terminal for the run. cli.main() catches LlmwrapError once,
prints it (with its __cause__ chain) to stderr and exits non-zero.
"""

from __future__ import annotations


class LlmwrapError(Exception):
    pass


class UsageError(LlmwrapError, ValueError):
    pass


class ConfigError(LlmwrapError, EnvironmentError):
    pass


class TransportError(LlmwrapError, RuntimeError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseDecodeError(LlmwrapError, ValueError):
    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class ExtractionError(LlmwrapError, ValueError):
    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class CommandExecutionError(LlmwrapError, RuntimeError):
    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode
