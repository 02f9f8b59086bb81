"""Exceptions raised by the API client."""

from __future__ import annotations

import json
from typing import Any


class OpenAIError(Exception):
    """Base class for every error raised by this package."""


class APIError(OpenAIError):
    """Error information returned by the API in an error response."""

    def __init__(
        self,
        message: str = "",
        code: Any = None,
        param: str | None = None,
        type: str = "",
        http_status_code: int = 0,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.param = param
        self.type = type
        self.http_status_code = http_status_code

    def __str__(self) -> str:
        if self.http_status_code > 0:
            return f"error, status code: {self.http_status_code}, message: {self.message}"
        return self.message

    def __repr__(self) -> str:
        return (
            f"APIError(message={self.message!r}, code={self.code!r}, "
            f"param={self.param!r}, type={self.type!r}, "
            f"http_status_code={self.http_status_code!r})"
        )

    @classmethod
    def from_dict(cls, data: Any) -> APIError:
        """Build an error from the decoded ``error`` object of a response.

        Raises ValueError when a field has a type the API never sends.
        """
        if not isinstance(data, dict):
            raise ValueError("API error must be a JSON object")
        if "message" not in data:
            raise ValueError("API error has no message")
        message = _parse_message(data["message"])

        error_type = ""
        if "type" in data:
            value = data["type"]
            if value is not None and not isinstance(value, str):
                raise ValueError(f"API error type must be a string, got {value!r}")
            error_type = value or ""

        param = None
        if "param" in data:
            param = data["param"]
            if param is not None and not isinstance(param, str):
                raise ValueError(f"API error param must be a string, got {param!r}")

        return cls(
            message=message,
            code=data.get("code"),
            param=param,
            type=error_type,
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> APIError:
        """Parse an error object from JSON text."""
        return cls.from_dict(json.loads(text))


def _parse_message(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        parts = []
        for item in value:
            if item is None:
                parts.append("")
            elif isinstance(item, str):
                parts.append(item)
            else:
                raise ValueError(f"API error message items must be strings, got {item!r}")
        return ", ".join(parts)
    raise ValueError(f"API error message must be a string or a list, got {value!r}")


class RequestError(OpenAIError):
    """A failed request whose body held no usable API error."""

    def __init__(self, http_status_code: int, cause: BaseException | None = None) -> None:
        super().__init__(http_status_code, cause)
        self.http_status_code = http_status_code
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        detail = "" if self.cause is None else str(self.cause)
        return f"error, status code: {self.http_status_code}, message: {detail}"


class _FixedMessageError(OpenAIError):
    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ChatCompletionInvalidModelError(_FixedMessageError):
    """The model cannot be used with the chat completion endpoint."""

    default_message = (
        "this model is not supported with this method, "
        "please use CreateCompletion client method instead"
    )


class ChatCompletionStreamNotSupportedError(_FixedMessageError):
    """Streaming was requested from the non-streaming chat call."""

    default_message = (
        "streaming is not supported with this method, "
        "please use CreateChatCompletionStream"
    )


class CompletionUnsupportedModelError(_FixedMessageError):
    """The model cannot be used with the completion endpoint."""

    default_message = (
        "this model is not supported with this method, "
        "please use CreateChatCompletion client method instead"
    )


class CompletionStreamNotSupportedError(_FixedMessageError):
    """Streaming was requested from the non-streaming completion call."""

    default_message = (
        "streaming is not supported with this method, "
        "please use CreateCompletionStream"
    )


class CompletionPromptTypeNotSupportedError(_FixedMessageError):
    """The completion prompt is neither a string nor a list of strings."""

    default_message = "the type of CompletionRequest.Prompt only supports string and []string"