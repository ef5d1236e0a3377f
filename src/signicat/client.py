"""HTTP plumbing for the Signicat API.

Builds requests against a configured base URL and executes them through an
httpx client owned by the caller. Authentication, TLS, connection pooling,
timeouts and retries are all the caller's transport's business: this module
never sets auth headers and never retries.

Two execution paths exist:
- do(): decode a JSON body into a pydantic model (or ignore the body).
- download(): stream the raw body into a writable sink.

The response is closed on every exit path of both.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Final, Protocol, TypeVar, overload

import httpx
from pydantic import BaseModel, ValidationError

from signicat.errors import ConfigurationError, DecodeError, HTTPStatusError, RequestBuildError
from signicat.signature import AsyncSignatureService, SignatureService

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL: Final[str] = "https://api.idfy.io/"
JSON_CONTENT_TYPE: Final[str] = "application/json"

ModelT = TypeVar("ModelT", bound=BaseModel)


class Sink(Protocol):
    """Anything raw response bytes can be written to (file, BytesIO, ...)."""

    def write(self, data: bytes, /) -> Any: ...


def parse_base_url(base_url: str | httpx.URL) -> httpx.URL:
    """Validate and parse an API base URL.

    Args:
        base_url: Absolute http(s) URL. Its path acts as a prefix for
            endpoint paths only when it ends with "/".

    Returns:
        Parsed URL.

    Raises:
        ConfigurationError: If the URL cannot be parsed or is not absolute http(s).
    """
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigurationError(f"Invalid base URL {base_url!r}: {exc}") from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"Base URL must be an absolute http(s) URL, got {base_url!r}")
    return url


def _safe_url(url: httpx.URL) -> str:
    """Render a URL for logs and errors: no userinfo, query or fragment."""
    port = f":{url.port}" if url.port else ""
    return f"{url.scheme}://{url.host}{port}{url.path}"


def _encode_body(body: Any) -> bytes:
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RequestBuildError(f"Cannot encode request body as JSON: {exc}") from exc


def _is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def _status_error(request: httpx.Request, response: httpx.Response) -> HTTPStatusError:
    url = _safe_url(request.url)
    logger.warning("Signicat API %s %s returned %d", request.method, url, response.status_code)
    return HTTPStatusError(
        response.status_code,
        method=request.method,
        url=url,
        body=response.text,
    )


def _decode(content: bytes, response_model: type[ModelT]) -> ModelT:
    """Decode a JSON body into response_model.

    A body that is empty (or whitespace only) means "no data" and yields the
    model's default instance.
    """
    try:
        if not content.strip():
            return response_model.model_validate({})
        return response_model.model_validate_json(content)
    except ValidationError as exc:
        logger.warning(
            "Cannot decode response into %s (%d errors)",
            response_model.__name__,
            exc.error_count(),
        )
        raise DecodeError(
            f"Cannot decode response into {response_model.__name__}: {exc}",
            target=response_model.__name__,
        ) from exc


class _BaseClient:
    """Request building shared by the sync and async clients.

    Requests are built by the transport itself so that its default headers,
    cookies and timeout apply to every call.
    """

    def __init__(
        self, base_url: str | httpx.URL, http_client: httpx.Client | httpx.AsyncClient
    ) -> None:
        self._base_url = parse_base_url(base_url)
        self._http_client = http_client

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def new_request(
        self,
        method: str,
        relative_url: str,
        body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Request:
        """Create an API request.

        Args:
            method: HTTP method.
            relative_url: Path resolved against the base URL with standard
                URL-merge semantics.
            body: Optional value sent as JSON. Pydantic models are serialized
                by alias with unset (None) fields left out.
            params: Optional query parameters.

        Returns:
            The prepared request. Content-Type is application/json when a
            body is given and absent otherwise.

        Raises:
            RequestBuildError: If the URL is malformed or the body is not JSON encodable.
        """
        try:
            url = self._base_url.join(relative_url)
            if params:
                url = url.copy_merge_params(dict(params))
        except (httpx.InvalidURL, TypeError) as exc:
            raise RequestBuildError(f"Invalid relative URL {relative_url!r}: {exc}") from exc

        if body is None:
            return self._http_client.build_request(method, url)

        return self._http_client.build_request(
            method,
            url,
            content=_encode_body(body),
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )


class Client(_BaseClient):
    """Synchronous Signicat API client.

    To call endpoints that require authentication, pass an httpx.Client that
    authenticates for you (an httpx.Auth flow such as OAuth2 client
    credentials, or a preset Authorization header).

    Usage:
        with httpx.Client(auth=my_oauth2_auth) as http:
            client = Client(http)
            status = client.signature.retrieve_document_status(document_id)

    Attributes:
        signature: Signature API endpoints, sharing this client.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_url: str | httpx.URL = DEFAULT_BASE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Transport used for every call. If omitted, a plain
                httpx.Client without timeout is created and owned by this client.
            base_url: API base URL.

        Raises:
            ConfigurationError: If base_url is malformed.
        """
        parse_base_url(base_url)
        self._owns_http_client = http_client is None
        self._http_client: httpx.Client = (
            http_client if http_client is not None else httpx.Client(timeout=None)
        )
        super().__init__(base_url, self._http_client)
        self.signature: SignatureService = SignatureService(self)

    def _send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        logger.debug("Sending %s %s", request.method, _safe_url(request.url))
        response = self._http_client.send(request, stream=stream)
        logger.debug("Received %d for %s", response.status_code, _safe_url(request.url))
        return response

    @overload
    def do(self, request: httpx.Request, response_model: None = None) -> None: ...

    @overload
    def do(self, request: httpx.Request, response_model: type[ModelT]) -> ModelT: ...

    def do(
        self, request: httpx.Request, response_model: type[ModelT] | None = None
    ) -> ModelT | None:
        """Send a request and decode the JSON response.

        Args:
            request: Request built by new_request().
            response_model: Model to decode the body into; None ignores the body.

        Returns:
            The decoded model (default instance for an empty body), or None
            if no response_model was given.

        Raises:
            HTTPStatusError: If the status code is outside 200-299.
            DecodeError: If the body does not match response_model.
            httpx.RequestError: If the transport fails.
        """
        response = self._send(request)
        try:
            if not _is_success(response.status_code):
                raise _status_error(request, response)
            if response_model is None:
                return None
            return _decode(response.content, response_model)
        finally:
            response.close()

    def download(self, request: httpx.Request, sink: Sink) -> int:
        """Send a request and stream the raw response body into sink.

        Nothing is written to sink when the status check fails.

        Returns:
            Number of bytes written.

        Raises:
            HTTPStatusError: If the status code is outside 200-299.
            httpx.RequestError: If the transport fails.
        """
        response = self._send(request, stream=True)
        try:
            if not _is_success(response.status_code):
                response.read()
                raise _status_error(request, response)
            written = 0
            for chunk in response.iter_bytes():
                sink.write(chunk)
                written += len(chunk)
            return written
        finally:
            response.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class AsyncClient(_BaseClient):
    """Asynchronous Signicat API client over httpx.AsyncClient.

    Same contract as Client; cancellation and timeouts come from the caller's
    event loop and transport.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        base_url: str | httpx.URL = DEFAULT_BASE_URL,
    ) -> None:
        parse_base_url(base_url)
        self._owns_http_client = http_client is None
        self._http_client: httpx.AsyncClient = (
            http_client if http_client is not None else httpx.AsyncClient(timeout=None)
        )
        super().__init__(base_url, self._http_client)
        self.signature: AsyncSignatureService = AsyncSignatureService(self)

    async def _send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        logger.debug("Sending %s %s", request.method, _safe_url(request.url))
        response = await self._http_client.send(request, stream=stream)
        logger.debug("Received %d for %s", response.status_code, _safe_url(request.url))
        return response

    @overload
    async def do(self, request: httpx.Request, response_model: None = None) -> None: ...

    @overload
    async def do(self, request: httpx.Request, response_model: type[ModelT]) -> ModelT: ...

    async def do(
        self, request: httpx.Request, response_model: type[ModelT] | None = None
    ) -> ModelT | None:
        """Send a request and decode the JSON response. See Client.do()."""
        response = await self._send(request)
        try:
            if not _is_success(response.status_code):
                raise _status_error(request, response)
            if response_model is None:
                return None
            return _decode(response.content, response_model)
        finally:
            await response.aclose()

    async def download(self, request: httpx.Request, sink: Sink) -> int:
        """Send a request and stream the raw response body into sink. See Client.download()."""
        response = await self._send(request, stream=True)
        try:
            if not _is_success(response.status_code):
                await response.aread()
                raise _status_error(request, response)
            written = 0
            async for chunk in response.aiter_bytes():
                sink.write(chunk)
                written += len(chunk)
            return written
        finally:
            await response.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> AsyncClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
