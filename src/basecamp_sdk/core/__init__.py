"""Core request pipeline for basecamp-sdk (resource-agnostic)."""

from .builder import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    PreparedRequest,
    build_request,
    build_url,
)
from .client import BasecampClient, is_status_result
from .config import create_client_from_env, load_base_url, load_env_config
from .errors import BasecampClientError, BasecampParseError, BasecampTransportError
from .models import AccountConfig
from .normalizer import STATUS_MESSAGES, extract_validator, normalize
from .transport import HttpxTransport, RawResponse, Transport
from .validators import (
    InMemoryValidatorStore,
    JsonFileValidatorStore,
    ValidatorStore,
    create_hash,
)

__all__ = [
    # Client
    "BasecampClient",
    "AccountConfig",
    "is_status_result",
    # Exceptions
    "BasecampClientError",
    "BasecampTransportError",
    "BasecampParseError",
    # Pipeline stages
    "PreparedRequest",
    "build_request",
    "build_url",
    "RawResponse",
    "Transport",
    "HttpxTransport",
    "STATUS_MESSAGES",
    "normalize",
    "extract_validator",
    # Validator store
    "ValidatorStore",
    "InMemoryValidatorStore",
    "JsonFileValidatorStore",
    "create_hash",
    # Config helpers
    "create_client_from_env",
    "load_env_config",
    "load_base_url",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
]
