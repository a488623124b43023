from __future__ import annotations

from typing import TypeVar

import httpx

from .response import (
    BadGateway,
    BadRequest,
    Conflict,
    Forbidden,
    GatewayTimeout,
    InternalServerError,
    NotAuthorized,
    NotFound,
    NotImplementedHttpError,
    ServerError,
    ServiceUnavailable,
    UnrecognizedHttpError,
    VersionNotSupported,
)

U = TypeVar("U")

_VARIANTS_BY_CODE: dict[int, type[ServerError]] = {
    cls.code: cls
    for cls in (
        # 4xx
        BadRequest,
        NotAuthorized,
        Forbidden,
        NotFound,
        Conflict,
        # 5xx
        InternalServerError,
        NotImplementedHttpError,
        BadGateway,
        ServiceUnavailable,
        GatewayTimeout,
        VersionNotSupported,
    )
}

KNOWN_STATUS_CODES: frozenset[int] = frozenset(_VARIANTS_BY_CODE)


def classify(code: int, body: U | None = None, headers: httpx.Headers | None = None) -> ServerError[U]:
    """Map a status code to its ServerError variant.

    Any code without a named variant, success codes included, becomes an
    UnrecognizedHttpError carrying the code as given.
    """
    variant = _VARIANTS_BY_CODE.get(code)
    if variant is None:
        return UnrecognizedHttpError(code, body, headers)
    return variant(body, headers)
