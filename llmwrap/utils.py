"""
utils.py — Shared helper functions used across llmwrap modules.
"""

from __future__ import annotations

import logging


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the 'llmwrap' logger with a single stderr handler.
    Calling it again only updates the level.
    Returns the 'llmwrap' logger.
    """
    logger = logging.getLogger("llmwrap")
    logger.setLevel(level)
    if logger.handlers:
        return logger  # already configured

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # StreamHandler defaults to stderr, keeping stdout for the prompt and command.
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    return logger


def format_error(exc: BaseException, context: str = "") -> str:
    """
    Render an exception and its __cause__ chain for the terminal, e.g.:

        Error: Failed to get command from OpenAI Responses API: HTTP status 500 from ...
          Caused by: Internal Server Error
    """
    head = f"{context}: {exc}" if context else str(exc)
    lines = [f"Error: {head}"]
    seen = {id(exc)}
    cause = exc.__cause__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        lines.append(f"  Caused by: {cause}")
        cause = cause.__cause__
    return "\n".join(lines)
