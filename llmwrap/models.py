"""
Request payload for the Responses API.

Built once per run by command_translator.build_request() and serialized by
to_dict() into the JSON body that llm.ResponsesClient posts.
"""

from __future__ import annotations

from dataclasses import dataclass, field

INPUT_TEXT = "input_text"


@dataclass(frozen=True)
class ContentPart:
    text: str
    type: str = INPUT_TEXT

    def to_dict(self) -> dict:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class Message:
    role: str                        # system | user
    content: tuple[ContentPart, ...] = field(default_factory=tuple)

    @classmethod
    def text(cls, role: str, text: str) -> "Message":
        return cls(role=role, content=(ContentPart(text=text),))

    def to_dict(self) -> dict:
        return {
            "role": self.role,
            "content": [part.to_dict() for part in self.content],
        }


@dataclass(frozen=True)
class ResponsesRequest:
    model: str
    input: tuple[Message, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "input": [m.to_dict() for m in self.input],
        }
