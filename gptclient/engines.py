"""Engine listing types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Engine:
    id: str = ""
    object: str = ""
    owner: str = ""
    ready: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Engine:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            owner=data.get("owner") or "",
            ready=bool(data.get("ready")),
        )


@dataclass
class EnginesList:
    engines: list[Engine] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EnginesList:
        return cls(engines=[Engine.from_dict(item) for item in data.get("data") or []])