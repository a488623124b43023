import logging

from .classify import KNOWN_STATUS_CODES, classify
from .config_types import AdapterConfig
from .errors import NetResultError, ServerResponseError
from .response import (
    BadGateway,
    BadRequest,
    Conflict,
    Error,
    Forbidden,
    GatewayTimeout,
    InternalServerError,
    NetworkError,
    NetworkResponse,
    NotAuthorized,
    NotFound,
    NotImplementedHttpError,
    ServerError,
    ServiceUnavailable,
    Success,
    UnknownError,
    UnrecognizedHttpError,
    VersionNotSupported,
)
from .transport import adapt_async_call, adapt_call, from_exception, from_response

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "KNOWN_STATUS_CODES",
    "AdapterConfig",
    "BadGateway",
    "BadRequest",
    "Conflict",
    "Error",
    "Forbidden",
    "GatewayTimeout",
    "InternalServerError",
    "NetResultError",
    "NetworkError",
    "NetworkResponse",
    "NotAuthorized",
    "NotFound",
    "NotImplementedHttpError",
    "ServerError",
    "ServerResponseError",
    "ServiceUnavailable",
    "Success",
    "UnknownError",
    "UnrecognizedHttpError",
    "VersionNotSupported",
    "adapt_async_call",
    "adapt_call",
    "classify",
    "from_exception",
    "from_response",
]
