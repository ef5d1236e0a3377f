"""Signature API endpoints.

Each operation is a single request/response round trip. Callers poll
retrieve_document_status() until DocumentStatus.is_terminal themselves;
nothing here retries or waits.
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import TYPE_CHECKING, Final

from signicat.models.enums import FileFormat
from signicat.models.requests import CreateDocumentRequest
from signicat.models.responses import Document, Status

if TYPE_CHECKING:
    from signicat.client import AsyncClient, Client, Sink

logger = logging.getLogger(__name__)

DOCUMENTS_PATH: Final[str] = "signature/documents"


def document_path(document_id: str, *suffix: str) -> str:
    """Relative path of a document resource.

    The document ID is percent-encoded as a single path segment.

    Raises:
        ValueError: If document_id is empty or a dot segment.
    """
    if not document_id:
        raise ValueError("document_id is required")
    if document_id in (".", ".."):
        raise ValueError(f"document_id must not be a dot segment, got {document_id!r}")
    return "/".join([DOCUMENTS_PATH, urllib.parse.quote(document_id, safe=""), *suffix])


def file_query(file_format: FileFormat | str, original_file_name: bool) -> dict[str, str]:
    """Query parameters of the file retrieval endpoint.

    Raises:
        ValueError: If file_format is not a FileFormat value.
    """
    return {
        "fileFormat": FileFormat(file_format).value,
        "originalFileName": "true" if original_file_name else "false",
    }


class SignatureService:
    """Signature endpoints, bound to a shared Client.

    The service holds a reference to the client; it never owns or closes it.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def create_document(self, request: CreateDocumentRequest) -> Document:
        """Create a new document.

        The response carries the document ID used to retrieve it later, and a
        signing URL plus server-issued ID per signer.
        """
        http_request = self._client.new_request("POST", DOCUMENTS_PATH, request)
        document = self._client.do(http_request, Document)
        logger.info(
            "Created signature document %s with %d signers",
            document.document_id,
            len(document.signers),
        )
        return document

    def retrieve_document(self, document_id: str) -> Document:
        """Retrieve details of a single document."""
        http_request = self._client.new_request("GET", document_path(document_id))
        return self._client.do(http_request, Document)

    def retrieve_document_status(self, document_id: str) -> Status:
        """Retrieve only the status of a document (cheaper than the full document)."""
        http_request = self._client.new_request("GET", document_path(document_id, "status"))
        return self._client.do(http_request, Status)

    def retrieve_file(
        self,
        document_id: str,
        file_format: FileFormat | str,
        original_file_name: bool,
        sink: Sink,
    ) -> int:
        """Stream the document file into sink (e.g. a file opened in "wb" mode).

        Args:
            document_id: Server-issued document ID.
            file_format: Packaging of the file to retrieve.
            original_file_name: Whether the service should use the original file name.
            sink: Writable binary destination.

        Returns:
            Number of bytes written to sink.
        """
        http_request = self._client.new_request(
            "GET",
            document_path(document_id, "files"),
            params=file_query(file_format, original_file_name),
        )
        return self._client.download(http_request, sink)


class AsyncSignatureService:
    """Awaitable counterpart of SignatureService, bound to a shared AsyncClient."""

    def __init__(self, client: AsyncClient) -> None:
        self._client = client

    async def create_document(self, request: CreateDocumentRequest) -> Document:
        http_request = self._client.new_request("POST", DOCUMENTS_PATH, request)
        document = await self._client.do(http_request, Document)
        logger.info(
            "Created signature document %s with %d signers",
            document.document_id,
            len(document.signers),
        )
        return document

    async def retrieve_document(self, document_id: str) -> Document:
        http_request = self._client.new_request("GET", document_path(document_id))
        return await self._client.do(http_request, Document)

    async def retrieve_document_status(self, document_id: str) -> Status:
        http_request = self._client.new_request("GET", document_path(document_id, "status"))
        return await self._client.do(http_request, Status)

    async def retrieve_file(
        self,
        document_id: str,
        file_format: FileFormat | str,
        original_file_name: bool,
        sink: Sink,
    ) -> int:
        http_request = self._client.new_request(
            "GET",
            document_path(document_id, "files"),
            params=file_query(file_format, original_file_name),
        )
        return await self._client.download(http_request, sink)
