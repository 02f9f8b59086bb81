"""HTTP client for the completion, chat, edits, embeddings, engines, files and audio endpoints."""

from __future__ import annotations

import json
from typing import Any, Callable, Protocol

import httpx

from .audio import AudioRequest, AudioResponse, audio_multipart_form
from .chat import CHAT_COMPLETIONS_SUFFIX, ChatCompletionRequest, ChatCompletionResponse
from .completion import (
    COMPLETIONS_SUFFIX,
    CompletionRequest,
    CompletionResponse,
    endpoint_supports_model,
    is_valid_prompt,
)
from .config import (
    AZURE_API_PREFIX,
    AZURE_DEPLOYMENTS_PREFIX,
    APIType,
    ClientConfig,
    default_config,
)
from .edits import EditsRequest, EditsResponse
from .embeddings import EmbeddingRequest, EmbeddingResponse
from .engines import Engine, EnginesList
from .errors import (
    APIError,
    ChatCompletionInvalidModelError,
    ChatCompletionStreamNotSupportedError,
    CompletionPromptTypeNotSupportedError,
    CompletionStreamNotSupportedError,
    CompletionUnsupportedModelError,
    OpenAIError,
    RequestError,
)
from .files import File, FileRequest, FilesList
from .forms import FormBuilder

_JSON_CONTENT_TYPE = "application/json; charset=utf-8"
_AZURE_HEADER_NAME = "api-key"


class _EmbeddingRequestLike(Protocol):
    def convert(self) -> EmbeddingRequest: ...


def error_from_response(status_code: int, body: bytes | str) -> OpenAIError:
    """The error describing a failed response with the given status and body."""
    try:
        data = json.loads(body)
    except ValueError as exc:
        return RequestError(status_code, exc)
    if not isinstance(data, dict):
        return RequestError(status_code, ValueError("error response is not a JSON object"))
    if data.get("error") is None:
        return RequestError(status_code, None)
    try:
        api_error = APIError.from_dict(data["error"])
    except ValueError:
        return RequestError(status_code, APIError())
    api_error.http_status_code = status_code
    return api_error


def _is_failure(status_code: int) -> bool:
    return status_code < 200 or status_code >= 400


class Client:
    """Client for the API described by a ClientConfig."""

    def __init__(
        self,
        config: ClientConfig,
        form_builder_factory: Callable[[], FormBuilder] = FormBuilder,
    ) -> None:
        self.config = config
        self._form_builder_factory = form_builder_factory
        self._owns_http = config.http_client is None
        self._http = config.http_client if config.http_client is not None else httpx.Client(timeout=None)

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP client if this client created it."""
        if self._owns_http:
            self._http.close()

    def _is_azure(self) -> bool:
        return self.config.api_type in (APIType.AZURE, APIType.AZURE_AD)

    def full_url(self, suffix: str, model: str | None = None) -> str:
        """Full URL of an endpoint; Azure URLs need the model to find the deployment."""
        config = self.config
        if self._is_azure():
            base_url = config.base_url.rstrip("/")
            if "/models" in suffix:
                return f"{base_url}/{AZURE_API_PREFIX}{suffix}?api-version={config.api_version}"
            deployment = "UNKNOWN" if model is None else config.azure_deployment_by_model(model)
            return (
                f"{base_url}/{AZURE_API_PREFIX}/{AZURE_DEPLOYMENTS_PREFIX}/"
                f"{deployment}{suffix}?api-version={config.api_version}"
            )
        return f"{config.base_url}{suffix}"

    def _headers(self, content_type: str | None, accept: bool) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": content_type or _JSON_CONTENT_TYPE}
        if accept:
            headers["Accept"] = _JSON_CONTENT_TYPE
        if self.config.api_type == APIType.AZURE:
            headers[_AZURE_HEADER_NAME] = self.config.auth_token
        else:
            headers["Authorization"] = f"Bearer {self.config.auth_token}"
        if self.config.org_id:
            headers["OpenAI-Organization"] = self.config.org_id
        return headers

    def _send(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        content_type: str | None = None,
        accept: bool = True,
    ) -> httpx.Response:
        if body is None:
            content = None
        elif isinstance(body, (bytes, bytearray)):
            content = bytes(body)
        else:
            content = json.dumps(body).encode("utf-8")
        response = self._http.request(
            method, url, content=content, headers=self._headers(content_type, accept)
        )
        if _is_failure(response.status_code):
            raise error_from_response(response.status_code, response.content)
        return response

    def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Create a completion for a chat conversation."""
        if request.stream:
            raise ChatCompletionStreamNotSupportedError()
        if not endpoint_supports_model(CHAT_COMPLETIONS_SUFFIX, request.model):
            raise ChatCompletionInvalidModelError()
        response = self._send(
            "POST",
            self.full_url(CHAT_COMPLETIONS_SUFFIX, request.model),
            body=request.to_dict(),
        )
        return ChatCompletionResponse.from_dict(response.json())

    def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        """Create a text completion."""
        if request.stream:
            raise CompletionStreamNotSupportedError()
        if not endpoint_supports_model(COMPLETIONS_SUFFIX, request.model):
            raise CompletionUnsupportedModelError()
        if not is_valid_prompt(request.prompt):
            raise CompletionPromptTypeNotSupportedError()
        response = self._send(
            "POST", self.full_url(COMPLETIONS_SUFFIX, request.model), body=request.to_dict()
        )
        return CompletionResponse.from_dict(response.json())

    def edits(self, request: EditsRequest) -> EditsResponse:
        """Call the (deprecated) edits endpoint."""
        response = self._send("POST", self.full_url("/edits", request.model), body=request.to_dict())
        return EditsResponse.from_dict(response.json())

    def create_embeddings(self, request: _EmbeddingRequestLike) -> EmbeddingResponse:
        """Create an embedding for every item of the request's input."""
        base = request.convert()
        model = base.model.value if hasattr(base.model, "value") else str(base.model)
        response = self._send("POST", self.full_url("/embeddings", model), body=base.to_dict())
        return EmbeddingResponse.from_dict(response.json())

    def list_engines(self) -> EnginesList:
        """List the available engines."""
        return EnginesList.from_dict(self._send("GET", self.full_url("/engines")).json())

    def get_engine(self, engine_id: str) -> Engine:
        """Retrieve one engine."""
        return Engine.from_dict(self._send("GET", self.full_url(f"/engines/{engine_id}")).json())

    def create_file(self, request: FileRequest) -> File:
        """Upload the local file at ``request.file_path``."""
        builder = self._form_builder_factory()
        builder.write_field("purpose", request.purpose)
        with open(request.file_path, "rb") as handle:
            builder.create_form_file("file", handle)
        builder.close()
        response = self._send(
            "POST",
            self.full_url("/files"),
            body=builder.getvalue(),
            content_type=builder.content_type(),
        )
        return File.from_dict(response.json())

    def delete_file(self, file_id: str) -> None:
        """Delete an uploaded file."""
        self._send("DELETE", self.full_url(f"/files/{file_id}"))

    def list_files(self) -> FilesList:
        """List the uploaded files."""
        return FilesList.from_dict(self._send("GET", self.full_url("/files")).json())

    def get_file(self, file_id: str) -> File:
        """Retrieve the description of one file."""
        return File.from_dict(self._send("GET", self.full_url(f"/files/{file_id}")).json())

    def get_file_content(self, file_id: str) -> bytes:
        """Download the contents of a file."""
        response = self._send("GET", self.full_url(f"/files/{file_id}/content"), accept=False)
        return response.content

    def _call_audio(self, request: AudioRequest, endpoint: str) -> AudioResponse:
        builder = self._form_builder_factory()
        audio_multipart_form(request, builder)
        response = self._send(
            "POST",
            self.full_url(f"/audio/{endpoint}", request.model),
            body=builder.getvalue(),
            content_type=builder.content_type(),
        )
        if request.has_json_response():
            return AudioResponse.from_dict(response.json())
        return AudioResponse(text=response.text)

    def create_transcription(self, request: AudioRequest) -> AudioResponse:
        """Transcribe an audio file."""
        return self._call_audio(request, "transcriptions")

    def create_translation(self, request: AudioRequest) -> AudioResponse:
        """Translate an audio file into English."""
        return self._call_audio(request, "translations")


def new_client(auth_token: str) -> Client:
    """A client for the standard API authenticated by ``auth_token``."""
    return Client(default_config(auth_token))


def new_org_client(auth_token: str, org: str) -> Client:
    """A client acting on behalf of the organisation ``org``."""
    config = default_config(auth_token)
    config.org_id = org
    return Client(config)