from __future__ import annotations

import httpx
import pytest

from netresult import (
    KNOWN_STATUS_CODES,
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
    classify,
)

EXPECTED = {
    400: BadRequest,
    401: NotAuthorized,
    403: Forbidden,
    404: NotFound,
    409: Conflict,
    500: InternalServerError,
    501: NotImplementedHttpError,
    502: BadGateway,
    503: ServiceUnavailable,
    504: GatewayTimeout,
    505: VersionNotSupported,
}


def test_known_codes_table() -> None:
    assert KNOWN_STATUS_CODES == frozenset(EXPECTED)


@pytest.mark.parametrize("code", sorted(EXPECTED))
def test_known_code_maps_to_named_variant(code: int) -> None:
    body = {"detail": "nope"}
    headers = httpx.Headers({"X-Request-Id": "abc"})

    result = classify(code, body, headers)

    assert type(result) is EXPECTED[code]
    assert result.code == code
    assert result.body is body
    assert result.headers is headers


@pytest.mark.parametrize("code", [-1, 0, 200, 204, 302, 402, 418, 429, 599, 999])
def test_unknown_code_falls_back_to_unrecognized(code: int) -> None:
    result = classify(code, "payload", None)

    assert isinstance(result, UnrecognizedHttpError)
    assert result.code == code
    assert result.body == "payload"
    assert result.headers is None


def test_not_found_without_body() -> None:
    result = classify(404, None, None)

    assert isinstance(result, NotFound)
    assert result.code == 404
    assert result.body is None


def test_teapot() -> None:
    result = classify(418, "teapot", None)

    assert result == UnrecognizedHttpError(418, "teapot")


def test_internal_server_error_keeps_body_and_headers() -> None:
    headers = httpx.Headers([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])

    result = classify(500, {"msg": "boom"}, headers)

    assert isinstance(result, InternalServerError)
    assert result.code == 500
    assert result.body == {"msg": "boom"}
    assert result.headers is headers
    assert result.headers.get_list("set-cookie") == ["a=1", "b=2"]


def test_classify_is_deterministic() -> None:
    headers = httpx.Headers({"Retry-After": "3"})

    assert classify(503, ["x"], headers) == classify(503, ["x"], headers)
    assert classify(777, ["x"], headers) == classify(777, ["x"], headers)


def test_from_result_matches_classify() -> None:
    assert ServerError.from_result(409, "dup") == classify(409, "dup")
    assert ServerError.from_result(451) == UnrecognizedHttpError(451)
