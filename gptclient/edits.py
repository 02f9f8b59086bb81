"""Edits request and response types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common import Usage


@dataclass
class EditsRequest:
    """A request to the edits endpoint; ``model`` is left out when None."""

    model: str | None = None
    input: str = ""
    instruction: str = ""
    n: int = 0
    temperature: float = 0.0
    top_p: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.model is not None:
            body["model"] = self.model
        optional = {
            "input": self.input,
            "instruction": self.instruction,
            "n": self.n,
            "temperature": self.temperature,
            "top_p": self.top_p,
        }
        body.update({key: value for key, value in optional.items() if value})
        return body


@dataclass
class EditsChoice:
    text: str = ""
    index: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EditsChoice:
        return cls(text=data.get("text") or "", index=data.get("index") or 0)


@dataclass
class EditsResponse:
    object: str = ""
    created: int = 0
    usage: Usage = field(default_factory=Usage)
    choices: list[EditsChoice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EditsResponse:
        return cls(
            object=data.get("object") or "",
            created=data.get("created") or 0,
            usage=Usage.from_dict(data.get("usage")),
            choices=[EditsChoice.from_dict(c) for c in data.get("choices") or []],
        )