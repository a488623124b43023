from __future__ import annotations

from typing import Any


class NetResultError(Exception):
    """Base netresult error."""


class ServerResponseError(NetResultError, OSError):
    """Failure derived from a non-2xx response."""

    def __init__(self, code: int, body: Any = None):
        super().__init__(f"Network server error: {code} \n{body}")
        self.code = code
        self.body = body
