"""Chat completion request and response types."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .common import Usage

CHAT_COMPLETIONS_SUFFIX = "/chat/completions"


class ChatMessageRole(str, Enum):
    """Roles a chat message can have."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"


class FinishReason(str, Enum):
    """Known reasons a choice stopped generating."""

    STOP = "stop"
    LENGTH = "length"
    FUNCTION_CALL = "function_call"
    CONTENT_FILTER = "content_filter"
    NULL = "null"


def finish_reason_json(reason: str | None) -> str | None:
    """Value of a finish reason in a JSON body: None for "null" or empty."""
    if reason is None:
        return None
    text = reason.value if isinstance(reason, Enum) else str(reason)
    if text in ("", FinishReason.NULL.value):
        return None
    return text


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else value


@dataclass
class FunctionCall:
    """A call of a function; ``arguments`` is JSON text."""

    name: str = ""
    arguments: str = ""

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.name:
            body["name"] = self.name
        if self.arguments:
            body["arguments"] = self.arguments
        return body

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FunctionCall:
        return cls(name=data.get("name") or "", arguments=data.get("arguments") or "")


@dataclass
class ChatCompletionMessage:
    role: str
    content: str = ""
    name: str = ""
    function_call: FunctionCall | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"role": _text(self.role), "content": self.content}
        if self.name:
            body["name"] = self.name
        if self.function_call is not None:
            body["function_call"] = self.function_call.to_dict()
        return body

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatCompletionMessage:
        call = data.get("function_call")
        return cls(
            role=data.get("role") or "",
            content=data.get("content") or "",
            name=data.get("name") or "",
            function_call=FunctionCall.from_dict(call) if call is not None else None,
        )


@dataclass
class FunctionDefinition:
    """A function the model may call.

    ``parameters`` is a JSON-compatible schema object, or raw JSON as bytes.
    """

    name: str
    description: str = ""
    parameters: Any = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"name": self.name}
        if self.description:
            body["description"] = self.description
        params = self.parameters
        if isinstance(params, (bytes, bytearray)):
            params = json.loads(params)
        body["parameters"] = params
        return body


@dataclass
class ChatCompletionRequest:
    model: str = ""
    messages: list[ChatCompletionMessage] = field(default_factory=list)
    max_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    n: int = 0
    stream: bool = False
    stop: list[str] = field(default_factory=list)
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0
    logit_bias: dict[str, int] = field(default_factory=dict)
    user: str = ""
    functions: list[FunctionDefinition] = field(default_factory=list)
    function_call: Any = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
        }
        optional = {
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "n": self.n,
            "stream": self.stream,
            "stop": list(self.stop),
            "presence_penalty": self.presence_penalty,
            "frequency_penalty": self.frequency_penalty,
            "logit_bias": dict(self.logit_bias),
            "user": self.user,
            "functions": [function.to_dict() for function in self.functions],
        }
        body.update({key: value for key, value in optional.items() if value})
        if self.function_call is not None:
            call = self.function_call
            body["function_call"] = call.to_dict() if isinstance(call, FunctionCall) else call
        return body


@dataclass
class ChatCompletionChoice:
    index: int = 0
    message: ChatCompletionMessage = field(
        default_factory=lambda: ChatCompletionMessage(role="")
    )
    finish_reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "message": self.message.to_dict(),
            "finish_reason": finish_reason_json(self.finish_reason),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatCompletionChoice:
        return cls(
            index=data.get("index") or 0,
            message=ChatCompletionMessage.from_dict(data.get("message") or {}),
            finish_reason=data.get("finish_reason") or "",
        )


@dataclass
class ChatCompletionResponse:
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[ChatCompletionChoice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatCompletionResponse:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created=data.get("created") or 0,
            model=data.get("model") or "",
            choices=[ChatCompletionChoice.from_dict(c) for c in data.get("choices") or []],
            usage=Usage.from_dict(data.get("usage")),
        )