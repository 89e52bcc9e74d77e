"""
command_translator.py — Natural language → shell command translation.

The pipeline for one run:
  1. build_request()     wrap the description in the fixed two-message prompt
  2. ResponsesClient     POST it to the Responses API, get the raw body back
  3. decode_response()   parse the body as generic JSON (no schema binding)
  4. extract_text()      find the generated text among known response shapes
  5. sanitize_command()  reduce it to one trimmed line without backticks

The command is NOT validated beyond step 5. It is shown to the user, who
decides whether it runs (see runner.py).
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .errors import ExtractionError, ResponseDecodeError
from .llm import ResponsesClient
from .models import Message, ResponsesRequest

logger = logging.getLogger("llmwrap.command_translator")

SYSTEM_PROMPT = (
    "You translate natural-language requests into a single shell command. "
    "Respond with only the runnable command, no explanations, no code fences. "
    "Prefer safe quoting for filenames. If the request is impossible, reply with a brief reason."
)


def build_request(model: str, description: str) -> ResponsesRequest:
    """Assemble the [system, user] request for one description."""
    return ResponsesRequest(
        model=model,
        input=(
            Message.text("system", SYSTEM_PROMPT),
            Message.text("user", description),
        ),
    )


def decode_response(body_text: str) -> Any:
    try:
        return json.loads(body_text)
    except json.JSONDecodeError as e:
        raise ResponseDecodeError(
            f"Failed to decode responses body: {body_text}", body=body_text
        ) from e


def _first_content_text(message: Any) -> str | None:
    if not isinstance(message, dict):
        return None
    contents = message.get("content")
    if not isinstance(contents, list):
        return None
    for part in contents:
        if isinstance(part, dict) and isinstance(part.get("text"), str):
            return part["text"]
    return None


def extract_text(document: Any) -> str | None:
    """
    Locate the generated text in a decoded Responses API body.

    Shapes are tried in order and the first hit wins:
      1. {"output": [{"content": [{"text": ...}]}, ...]}
      2. {"output": {"content": [{"text": ...}]}}
      3. {"output_text": "..."}
      4. {"output_text": ["...", "..."]}   (joined with newlines, if non-empty)

    Returns None when no shape matches.
    """
    if not isinstance(document, dict):
        return None

    output = document.get("output")
    if isinstance(output, list):
        for message in output:
            text = _first_content_text(message)
            if text is not None:
                return text
    elif isinstance(output, dict):
        text = _first_content_text(output)
        if text is not None:
            return text

    output_text = document.get("output_text")
    if isinstance(output_text, str):
        return output_text
    if isinstance(output_text, list):
        joined = "\n".join(t for t in output_text if isinstance(t, str))
        if joined:
            return joined

    return None


def sanitize_command(raw: str) -> str:
    """
    Reduce model output to the single command line that will be run.

    Only the first line is kept. Surrounding whitespace and backticks are then
    trimmed until nothing changes, so sanitize_command(sanitize_command(x)) is
    always equal to sanitize_command(x).
    """
    line = raw.split("\n", 1)[0]
    while True:
        cleaned = line.strip().strip("`").strip()
        if cleaned == line:
            return cleaned
        line = cleaned


class CommandTranslator:
    """Turns a task description into a sanitized shell command via the LLM."""

    def __init__(self, llm: ResponsesClient, model: str):
        self.llm = llm
        self.model = model

    def translate(self, description: str) -> str:
        """
        Args:
            description: the user's plain-English task, e.g. "convert input.mp4 to gif"

        Returns:
            The sanitized command string.

        Raises:
            TransportError: the request could not be completed.
            ResponseDecodeError: the body is not JSON.
            ExtractionError: no known response shape carried any text.
        """
        request = build_request(self.model, description)
        body_text = self.llm.send(request)
        logger.debug("Response body: %s", body_text)

        document = decode_response(body_text)
        raw_text = extract_text(document)
        if raw_text is None:
            raise ExtractionError(
                f"No text output returned from model. Full body: {body_text}",
                body=body_text,
            )

        cmd = sanitize_command(raw_text)
        logger.debug("LLM generated command: %s", cmd)
        return cmd
