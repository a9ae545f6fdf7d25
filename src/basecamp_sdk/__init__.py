"""basecamp_sdk package exports."""

from . import api
from .core import (
    AccountConfig,
    BasecampClient,
    BasecampClientError,
    BasecampParseError,
    BasecampTransportError,
    HttpxTransport,
    InMemoryValidatorStore,
    JsonFileValidatorStore,
    RawResponse,
    Transport,
    ValidatorStore,
    create_client_from_env,
    create_hash,
    is_status_result,
)

__all__ = [
    # Client
    "BasecampClient",
    "AccountConfig",
    "create_client_from_env",
    "is_status_result",
    # Exceptions
    "BasecampClientError",
    "BasecampTransportError",
    "BasecampParseError",
    # Extension points
    "Transport",
    "HttpxTransport",
    "RawResponse",
    "ValidatorStore",
    "InMemoryValidatorStore",
    "JsonFileValidatorStore",
    "create_hash",
    # Resource modules
    "api",
]
