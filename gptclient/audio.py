"""Audio transcription and translation types and form encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Any

from .forms import FormBuilder

WHISPER_1 = "whisper-1"


class AudioResponseFormat(str, Enum):
    """Formats the audio endpoints can answer in; JSON is the default."""

    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


@dataclass
class AudioRequest:
    """An audio request.

    ``file_path`` names a file to open, or, when ``reader`` is given, the
    file name under which the reader's contents are sent.
    """

    model: str = ""
    file_path: str = ""
    reader: IO[bytes] | None = None
    prompt: str = ""
    temperature: float = 0.0
    language: str = ""
    format: AudioResponseFormat | str = ""

    def has_json_response(self) -> bool:
        """Whether the response body will be JSON."""
        return _text(self.format) in (
            "",
            AudioResponseFormat.JSON.value,
            AudioResponseFormat.VERBOSE_JSON.value,
        )


@dataclass
class AudioSegment:
    id: int = 0
    seek: int = 0
    start: float = 0.0
    end: float = 0.0
    text: str = ""
    tokens: list[int] = field(default_factory=list)
    temperature: float = 0.0
    avg_logprob: float = 0.0
    compression_ratio: float = 0.0
    no_speech_prob: float = 0.0
    transient: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AudioSegment:
        return cls(
            id=data.get("id") or 0,
            seek=data.get("seek") or 0,
            start=float(data.get("start") or 0.0),
            end=float(data.get("end") or 0.0),
            text=data.get("text") or "",
            tokens=list(data.get("tokens") or []),
            temperature=float(data.get("temperature") or 0.0),
            avg_logprob=float(data.get("avg_logprob") or 0.0),
            compression_ratio=float(data.get("compression_ratio") or 0.0),
            no_speech_prob=float(data.get("no_speech_prob") or 0.0),
            transient=bool(data.get("transient")),
        )


@dataclass
class AudioResponse:
    task: str = ""
    language: str = ""
    duration: float = 0.0
    segments: list[AudioSegment] = field(default_factory=list)
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AudioResponse:
        return cls(
            task=data.get("task") or "",
            language=data.get("language") or "",
            duration=float(data.get("duration") or 0.0),
            segments=[AudioSegment.from_dict(s) for s in data.get("segments") or []],
            text=data.get("text") or "",
        )


def create_file_field(request: AudioRequest, builder: FormBuilder) -> None:
    """Add the ``file`` field from the request's reader or its file path."""
    if request.reader is not None:
        builder.create_form_file_reader("file", request.reader, request.file_path)
        return
    with open(request.file_path, "rb") as handle:
        builder.create_form_file("file", handle)


def audio_multipart_form(request: AudioRequest, builder: FormBuilder) -> None:
    """Write the audio file and the request's settings into ``builder`` and close it."""
    create_file_field(request, builder)
    builder.write_field("model", request.model)
    if request.prompt:
        builder.write_field("prompt", request.prompt)
    if _text(request.format):
        builder.write_field("response_format", _text(request.format))
    if request.temperature != 0:
        builder.write_field("temperature", f"{request.temperature:.2f}")
    if request.language:
        builder.write_field("language", request.language)
    builder.close()