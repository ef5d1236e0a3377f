"""Exceptions raised by the Signicat client.

Transport failures are not wrapped: they surface as the httpx.RequestError
subclass raised by the caller's HTTP client.
"""

from __future__ import annotations


class SignicatError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(SignicatError):
    """Raised when the base URL or environment configuration is invalid."""


class RequestBuildError(SignicatError):
    """Raised when a request cannot be built (bad relative URL, unencodable body)."""


class HTTPStatusError(SignicatError):
    """Raised when the API answers with a status outside 200-299.

    The response body is not parsed into a structured API error. It is kept
    as text on the exception for diagnostics only.

    Attributes:
        status_code: HTTP status code of the response.
        method: HTTP method of the request.
        url: Request URL without query string.
        body: Raw response text (may be empty).
    """

    def __init__(self, status_code: int, method: str = "", url: str = "", body: str = "") -> None:
        super().__init__(f"received response with http code: {status_code}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body


class DecodeError(SignicatError):
    """Raised when a response body is not JSON of the expected shape.

    Attributes:
        target: Name of the model the body was decoded into.
    """

    def __init__(self, message: str, target: str = "") -> None:
        super().__init__(message)
        self.target = target
