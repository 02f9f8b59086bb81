"""Completion request and response types and model tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .chat import CHAT_COMPLETIONS_SUFFIX
from .common import Usage

COMPLETIONS_SUFFIX = "/completions"

GPT432K0613 = "gpt-4-32k-0613"
GPT432K0314 = "gpt-4-32k-0314"
GPT432K = "gpt-4-32k"
GPT40613 = "gpt-4-0613"
GPT40314 = "gpt-4-0314"
GPT4 = "gpt-4"
GPT3_DOT5_TURBO_0613 = "gpt-3.5-turbo-0613"
GPT3_DOT5_TURBO_0301 = "gpt-3.5-turbo-0301"
GPT3_DOT5_TURBO_16K = "gpt-3.5-turbo-16k"
GPT3_DOT5_TURBO_16K_0613 = "gpt-3.5-turbo-16k-0613"
GPT3_DOT5_TURBO = "gpt-3.5-turbo"
GPT3_DOT5_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
GPT3_TEXT_DAVINCI_003 = "text-davinci-003"
GPT3_TEXT_DAVINCI_002 = "text-davinci-002"
GPT3_TEXT_CURIE_001 = "text-curie-001"
GPT3_TEXT_BABBAGE_001 = "text-babbage-001"
GPT3_TEXT_ADA_001 = "text-ada-001"
GPT3_TEXT_DAVINCI_001 = "text-davinci-001"
GPT3_DAVINCI_INSTRUCT_BETA = "davinci-instruct-beta"
GPT3_DAVINCI = "davinci"
GPT3_DAVINCI_002 = "davinci-002"
GPT3_CURIE_INSTRUCT_BETA = "curie-instruct-beta"
GPT3_CURIE = "curie"
GPT3_CURIE_002 = "curie-002"
GPT3_ADA = "ada"
GPT3_ADA_002 = "ada-002"
GPT3_BABBAGE = "babbage"
GPT3_BABBAGE_002 = "babbage-002"

CODEX_CODE_DAVINCI_002 = "code-davinci-002"
CODEX_CODE_CUSHMAN_001 = "code-cushman-001"
CODEX_CODE_DAVINCI_001 = "code-davinci-001"

_DISABLED_MODELS_FOR_ENDPOINTS: dict[str, frozenset[str]] = {
    COMPLETIONS_SUFFIX: frozenset(
        {
            GPT3_DOT5_TURBO,
            GPT3_DOT5_TURBO_0301,
            GPT3_DOT5_TURBO_0613,
            GPT3_DOT5_TURBO_16K,
            GPT3_DOT5_TURBO_16K_0613,
            GPT4,
            GPT40314,
            GPT40613,
            GPT432K,
            GPT432K0314,
            GPT432K0613,
        }
    ),
    CHAT_COMPLETIONS_SUFFIX: frozenset(
        {
            CODEX_CODE_DAVINCI_002,
            CODEX_CODE_CUSHMAN_001,
            CODEX_CODE_DAVINCI_001,
            GPT3_TEXT_DAVINCI_003,
            GPT3_TEXT_DAVINCI_002,
            GPT3_TEXT_CURIE_001,
            GPT3_TEXT_BABBAGE_001,
            GPT3_TEXT_ADA_001,
            GPT3_TEXT_DAVINCI_001,
            GPT3_DAVINCI_INSTRUCT_BETA,
            GPT3_DAVINCI,
            GPT3_CURIE_INSTRUCT_BETA,
            GPT3_CURIE,
            GPT3_ADA,
            GPT3_BABBAGE,
        }
    ),
}


def endpoint_supports_model(endpoint: str, model: str) -> bool:
    """Whether ``model`` may be sent to ``endpoint``."""
    return model not in _DISABLED_MODELS_FOR_ENDPOINTS.get(endpoint, frozenset())


def is_valid_prompt(prompt: Any) -> bool:
    """Whether a completion prompt is a string or a list of strings."""
    if isinstance(prompt, str):
        return True
    if isinstance(prompt, (list, tuple)):
        return all(isinstance(item, str) for item in prompt)
    return False


@dataclass
class CompletionRequest:
    model: str = ""
    prompt: Any = None
    suffix: str = ""
    max_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    n: int = 0
    stream: bool = False
    logprobs: int = 0
    echo: bool = False
    stop: list[str] = field(default_factory=list)
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0
    best_of: int = 0
    logit_bias: dict[str, int] = field(default_factory=dict)
    user: str = ""

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"model": self.model}
        if self.prompt is not None:
            prompt = self.prompt
            body["prompt"] = list(prompt) if isinstance(prompt, tuple) else prompt
        optional = {
            "suffix": self.suffix,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "n": self.n,
            "stream": self.stream,
            "logprobs": self.logprobs,
            "echo": self.echo,
            "stop": list(self.stop),
            "presence_penalty": self.presence_penalty,
            "frequency_penalty": self.frequency_penalty,
            "best_of": self.best_of,
            "logit_bias": dict(self.logit_bias),
            "user": self.user,
        }
        body.update({key: value for key, value in optional.items() if value})
        return body


@dataclass
class LogprobResult:
    tokens: list[str] = field(default_factory=list)
    token_logprobs: list[float] = field(default_factory=list)
    top_logprobs: list[dict[str, float]] = field(default_factory=list)
    text_offset: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> LogprobResult:
        data = data or {}
        return cls(
            tokens=list(data.get("tokens") or []),
            token_logprobs=list(data.get("token_logprobs") or []),
            top_logprobs=[dict(item or {}) for item in data.get("top_logprobs") or []],
            text_offset=list(data.get("text_offset") or []),
        )


@dataclass
class CompletionChoice:
    text: str = ""
    index: int = 0
    finish_reason: str = ""
    logprobs: LogprobResult = field(default_factory=LogprobResult)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompletionChoice:
        return cls(
            text=data.get("text") or "",
            index=data.get("index") or 0,
            finish_reason=data.get("finish_reason") or "",
            logprobs=LogprobResult.from_dict(data.get("logprobs")),
        )


@dataclass
class CompletionResponse:
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[CompletionChoice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompletionResponse:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created=data.get("created") or 0,
            model=data.get("model") or "",
            choices=[CompletionChoice.from_dict(c) for c in data.get("choices") or []],
            usage=Usage.from_dict(data.get("usage")),
        )