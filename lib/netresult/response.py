"""Result variants for the outcome of a network call.

A call ends in exactly one of these shapes:

* :class:`Success` -- a 2xx response with a parsed body;
* a :class:`ServerError` -- a non-2xx response, one named class per common
  status code plus :class:`UnrecognizedHttpError` for everything else;
* :class:`NetworkError` -- no response at all (connectivity, I/O);
* :class:`UnknownError` -- anything else, e.g. the body could not be parsed.

Every variant is an immutable dataclass, so callers branch with ``match``::

    match result:
        case Success(body=user):
            ...
        case NotFound():
            ...
        case Error(cause=cause):
            ...
"""
from __future__ import annotations

from dataclasses import KW_ONLY, dataclass, fields
from typing import Any, ClassVar, Generic, TypeAlias, TypeVar, Union

import httpx

from .errors import ServerResponseError

T = TypeVar("T", covariant=True)
U = TypeVar("U", covariant=True)


class _Variant:
    # Headers that are None and empty headers are different states, but
    # httpx.Headers compares equal to None.
    _abstract = True

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls.__dict__.get("_abstract", False):
            raise TypeError(f"{cls.__name__} cannot be instantiated directly")
        return super().__new__(cls)

    def _key(self) -> tuple:
        key = []
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "headers":
                key.append(value is None)
            key.append(value)
        return tuple(key)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class Error(_Variant, Generic[U]):
    """Any failed call. ``cause`` is always available."""

    _abstract = True
    __match_args__ = ("cause",)

    cause: BaseException


@dataclass(frozen=True, eq=False)
class Success(_Variant, Generic[T]):
    """A request that resulted in a response with a 2xx status code that has a body."""

    body: T
    _: KW_ONLY
    code: int
    headers: httpx.Headers | None = None


class ServerError(Error[U]):
    """A request that resulted in a response with a non-2xx status code."""

    _abstract = True
    __match_args__ = ("code", "body", "headers")

    code: int
    body: U | None
    headers: httpx.Headers | None

    @property
    def cause(self) -> ServerResponseError:
        return ServerResponseError(self.code, self.body)

    @staticmethod
    def from_result(code: int, body: Any = None, headers: httpx.Headers | None = None) -> ServerError[Any]:
        from .classify import classify

        return classify(code, body, headers)


@dataclass(frozen=True, eq=False)
class _StatusError(ServerError[U]):
    _abstract = True

    body: U | None = None
    headers: httpx.Headers | None = None


# 4xx
@dataclass(frozen=True, eq=False)
class BadRequest(_StatusError[U]):
    code: ClassVar[int] = 400


@dataclass(frozen=True, eq=False)
class NotAuthorized(_StatusError[U]):
    code: ClassVar[int] = 401


@dataclass(frozen=True, eq=False)
class Forbidden(_StatusError[U]):
    code: ClassVar[int] = 403


@dataclass(frozen=True, eq=False)
class NotFound(_StatusError[U]):
    code: ClassVar[int] = 404


@dataclass(frozen=True, eq=False)
class Conflict(_StatusError[U]):
    code: ClassVar[int] = 409


# 5xx
@dataclass(frozen=True, eq=False)
class InternalServerError(_StatusError[U]):
    code: ClassVar[int] = 500


@dataclass(frozen=True, eq=False)
class NotImplementedHttpError(_StatusError[U]):
    code: ClassVar[int] = 501


@dataclass(frozen=True, eq=False)
class BadGateway(_StatusError[U]):
    code: ClassVar[int] = 502


@dataclass(frozen=True, eq=False)
class ServiceUnavailable(_StatusError[U]):
    code: ClassVar[int] = 503


@dataclass(frozen=True, eq=False)
class GatewayTimeout(_StatusError[U]):
    code: ClassVar[int] = 504


@dataclass(frozen=True, eq=False)
class VersionNotSupported(_StatusError[U]):
    code: ClassVar[int] = 505


@dataclass(frozen=True, eq=False)
class UnrecognizedHttpError(ServerError[U]):
    code: int
    body: U | None = None
    headers: httpx.Headers | None = None


@dataclass(frozen=True, eq=False)
class NetworkError(Error[Any]):
    """A request that didn't result in a response."""

    cause: OSError | httpx.RequestError


@dataclass(frozen=True, eq=False)
class UnknownError(Error[Any]):
    """A request that failed in a way that is neither an I/O nor a server error.

    Typically the body of an otherwise successful response could not be parsed.
    """

    cause: BaseException
    code: int | None = None
    headers: httpx.Headers | None = None


NetworkResponse: TypeAlias = Union[Success[T], ServerError[U], NetworkError, UnknownError]
