"""
cli.py — `llmwrap` command-line entry point.

Usage:
    llmwrap [--model NAME] [--api-base URL] [--config PATH] [-v] <description...>

Example:
    $ export LLMWRAP_OPENAI_API_KEY=sk-...
    $ llmwrap convert input.mp4 to gif

    Proposed command:
    ffmpeg -i input.mp4 output.gif

    Run this command? [y/N]: y
    Executing: ffmpeg -i input.mp4 output.gif

A .env file in the current directory is loaded first, so the key can live
there instead of the shell environment. Real environment variables win.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .command_translator import CommandTranslator
from .config import API_BASE_ENV, DEFAULT_API_BASE, DEFAULT_MODEL, load_config
from .errors import LlmwrapError, UsageError
from .llm import get_llm_client
from .runner import confirm_run, run_command
from .utils import format_error, setup_logging

logger = logging.getLogger("llmwrap.cli")

FETCH_CONTEXT = "Failed to get command from OpenAI Responses API"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llmwrap",
        description="Describe a shell task in plain English and get a runnable command back",
    )
    parser.add_argument(
        "prompt",
        nargs="*",
        help='Natural language description of the shell task, e.g. "convert input.mp4 to gif"',
    )
    parser.add_argument(
        "--model",
        default=None,
        help=f"Model to use for the Responses API (default: {DEFAULT_MODEL})",
    )
    parser.add_argument(
        "--api-base",
        default=None,
        help=f"Base URL for the OpenAI API (env: {API_BASE_ENV}, default: {DEFAULT_API_BASE})",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file (default: $LLMWRAP_CONFIG or ~/.config/llmwrap/config.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log request/response details to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    description = " ".join(args.prompt)
    if not description.strip():
        raise UsageError(
            "Please provide a description, e.g. `llmwrap convert video.mp4 to gif`"
        )

    config = load_config(
        model=args.model,
        api_base=args.api_base,
        config_path=args.config,
    )
    logger.debug("Loaded %r", config)

    translator = CommandTranslator(get_llm_client(config), model=config.model)
    try:
        command = translator.translate(description)
    except LlmwrapError as e:
        print(format_error(e, FETCH_CONTEXT), file=sys.stderr)
        return 1

    print(f"\nProposed command:\n{command}\n")

    if not confirm_run():
        print("Aborted by user; command not executed.")
        return 0

    run_command(command, shell=config.shell)
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv(Path.cwd() / ".env", override=False)  # real env vars win
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return run(args)
    except LlmwrapError as e:
        print(format_error(e), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
