from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

import httpx

from .classify import classify
from .config_types import DEFAULT_CONFIG, AdapterConfig
from .response import NetworkError, NetworkResponse, Success, UnknownError

log = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def from_response(
        response: httpx.Response,
        parse_body: Callable[[httpx.Response], T],
        parse_error: Callable[[httpx.Response], U | None] | None = None,
        *,
        config: AdapterConfig | None = None,
) -> NetworkResponse[T, U]:
    """Turn a received response into a result, using the caller's parsers for the body."""
    cfg = config or DEFAULT_CONFIG
    code = response.status_code
    headers = response.headers

    if code in cfg.success_codes:
        try:
            body = parse_body(response)
        except Exception as e:
            log.debug("failed to parse %s response body: %r", code, e)
            return UnknownError(e, code, headers)
        return Success(body, code=code, headers=headers)

    error_body = None
    if parse_error is not None:
        try:
            error_body = parse_error(response)
        except Exception as e:
            log.debug("failed to parse %s error body: %r", code, e)
            return UnknownError(e, code, headers)

    result = classify(code, error_body, headers)
    if cfg.log_bodies:
        log.debug("status %s -> %s: %r", code, type(result).__name__, error_body)
    else:
        log.debug("status %s -> %s", code, type(result).__name__)
    return result


def from_exception(exc: Exception) -> NetworkError | UnknownError:
    if isinstance(exc, (OSError, httpx.RequestError)):
        log.debug("transport failure: %r", exc)
        return NetworkError(exc)
    log.debug("unexpected failure: %r", exc)
    return UnknownError(exc)


def adapt_call(
        send: Callable[[], httpx.Response],
        parse_body: Callable[[httpx.Response], T],
        parse_error: Callable[[httpx.Response], U | None] | None = None,
        *,
        config: AdapterConfig | None = None,
) -> NetworkResponse[T, U]:
    """Run ``send`` and map whatever it produces onto a result."""
    try:
        r = send()
    except Exception as e:
        return from_exception(e)
    return from_response(r, parse_body, parse_error, config=config)


async def adapt_async_call(
        send: Callable[[], Awaitable[httpx.Response]],
        parse_body: Callable[[httpx.Response], T],
        parse_error: Callable[[httpx.Response], U | None] | None = None,
        *,
        config: AdapterConfig | None = None,
) -> NetworkResponse[T, U]:
    try:
        r = await send()
    except Exception as e:
        return from_exception(e)
    return from_response(r, parse_body, parse_error, config=config)
