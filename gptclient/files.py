"""File upload and listing types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FileRequest:
    """An upload: ``file_path`` is the local file to send."""

    file_name: str = ""
    file_path: str = ""
    purpose: str = ""


@dataclass
class File:
    bytes: int = 0
    created_at: int = 0
    id: str = ""
    filename: str = ""
    object: str = ""
    owner: str = ""
    purpose: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> File:
        return cls(
            bytes=data.get("bytes") or 0,
            created_at=data.get("created_at") or 0,
            id=data.get("id") or "",
            filename=data.get("filename") or "",
            object=data.get("object") or "",
            owner=data.get("owner") or "",
            purpose=data.get("purpose") or "",
        )


@dataclass
class FilesList:
    files: list[File] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FilesList:
        return cls(files=[File.from_dict(item) for item in data.get("data") or []])