"""Embedding models, requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .common import Usage


class EmbeddingModel(str, Enum):
    """Models that produce embeddings; UNKNOWN stands for an unrecognised name."""

    UNKNOWN = ""
    ADA_SIMILARITY = "text-similarity-ada-001"
    BABBAGE_SIMILARITY = "text-similarity-babbage-001"
    CURIE_SIMILARITY = "text-similarity-curie-001"
    DAVINCI_SIMILARITY = "text-similarity-davinci-001"
    ADA_SEARCH_DOCUMENT = "text-search-ada-doc-001"
    ADA_SEARCH_QUERY = "text-search-ada-query-001"
    BABBAGE_SEARCH_DOCUMENT = "text-search-babbage-doc-001"
    BABBAGE_SEARCH_QUERY = "text-search-babbage-query-001"
    CURIE_SEARCH_DOCUMENT = "text-search-curie-doc-001"
    CURIE_SEARCH_QUERY = "text-search-curie-query-001"
    DAVINCI_SEARCH_DOCUMENT = "text-search-davinci-doc-001"
    DAVINCI_SEARCH_QUERY = "text-search-davinci-query-001"
    ADA_CODE_SEARCH_CODE = "code-search-ada-code-001"
    ADA_CODE_SEARCH_TEXT = "code-search-ada-text-001"
    BABBAGE_CODE_SEARCH_CODE = "code-search-babbage-code-001"
    BABBAGE_CODE_SEARCH_TEXT = "code-search-babbage-text-001"
    ADA_EMBEDDING_V2 = "text-embedding-ada-002"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str | bytes) -> EmbeddingModel:
        """The model named ``text``, or UNKNOWN."""
        if isinstance(text, bytes):
            text = text.decode("utf-8", errors="replace")
        try:
            return cls(text)
        except ValueError:
            return cls.UNKNOWN


def _model_name(model: Any) -> str:
    return model.value if isinstance(model, Enum) else str(model)


@dataclass
class Embedding:
    object: str = ""
    embedding: list[float] = field(default_factory=list)
    index: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Embedding:
        return cls(
            object=data.get("object") or "",
            embedding=[float(x) for x in data.get("embedding") or []],
            index=data.get("index") or 0,
        )


@dataclass
class EmbeddingResponse:
    object: str = ""
    data: list[Embedding] = field(default_factory=list)
    model: EmbeddingModel = EmbeddingModel.UNKNOWN
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbeddingResponse:
        return cls(
            object=data.get("object") or "",
            data=[Embedding.from_dict(item) for item in data.get("data") or []],
            model=EmbeddingModel.parse(data.get("model") or ""),
            usage=Usage.from_dict(data.get("usage")),
        )


@dataclass
class EmbeddingRequest:
    """A generic embeddings request; ``input`` is sent as given."""

    input: Any = None
    model: EmbeddingModel = EmbeddingModel.UNKNOWN
    user: str = ""

    def convert(self) -> EmbeddingRequest:
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"input": self.input, "model": _model_name(self.model), "user": self.user}


@dataclass
class EmbeddingRequestStrings:
    """Embeddings request for a list of strings."""

    input: list[str] | None = None
    model: EmbeddingModel = EmbeddingModel.UNKNOWN
    user: str = ""

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=None if self.input is None else list(self.input),
            model=self.model,
            user=self.user,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.convert().to_dict()


@dataclass
class EmbeddingRequestTokens:
    """Embeddings request for texts already split into token ids."""

    input: list[list[int]] | None = None
    model: EmbeddingModel = EmbeddingModel.UNKNOWN
    user: str = ""

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=None if self.input is None else [list(tokens) for tokens in self.input],
            model=self.model,
            user=self.user,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.convert().to_dict()