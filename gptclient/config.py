"""Client configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    import httpx

OPENAI_API_URL_V1 = "https://openai.api2d.net/v1"
DEFAULT_EMPTY_MESSAGES_LIMIT = 300

AZURE_API_PREFIX = "openai"
AZURE_DEPLOYMENTS_PREFIX = "deployments"
AZURE_AUTH_HEADER = "api-key"
DEFAULT_AZURE_API_VERSION = "2023-05-15"

_AZURE_MODEL_CHARS = re.compile(r"[.:]")


class APIType(str, Enum):
    """Which flavour of the API a client talks to."""

    OPEN_AI = "OPEN_AI"
    AZURE = "AZURE"
    AZURE_AD = "AZURE_AD"


def _azure_deployment_name(model: str) -> str:
    return _AZURE_MODEL_CHARS.sub("", model)


@dataclass(repr=False)
class ClientConfig:
    """Settings for a client.

    ``api_version`` is required for the Azure API types. When ``http_client``
    is None the client creates its own.
    """

    auth_token: str
    base_url: str = OPENAI_API_URL_V1
    org_id: str = ""
    api_type: APIType = APIType.OPEN_AI
    api_version: str = ""
    azure_model_mapper: Callable[[str], str] | None = None
    http_client: httpx.Client | None = None
    empty_messages_limit: int = DEFAULT_EMPTY_MESSAGES_LIMIT

    def __repr__(self) -> str:
        return "<OpenAI API ClientConfig>"

    __str__ = __repr__

    def azure_deployment_by_model(self, model: str) -> str:
        """Return the Azure deployment name serving ``model``."""
        if self.azure_model_mapper is not None:
            return self.azure_model_mapper(model)
        return model


def default_config(auth_token: str) -> ClientConfig:
    """Configuration for the standard API."""
    return ClientConfig(auth_token=auth_token)


def default_azure_config(api_key: str, base_url: str) -> ClientConfig:
    """Configuration for an Azure endpoint authenticated by API key."""
    return ClientConfig(
        auth_token=api_key,
        base_url=base_url,
        api_type=APIType.AZURE,
        api_version=DEFAULT_AZURE_API_VERSION,
        azure_model_mapper=_azure_deployment_name,
    )