"""Signicat CLI - call the Signature API from the command line.

Usage:
    signicat create --input PATH
    signicat document DOCUMENT_ID
    signicat status DOCUMENT_ID
    signicat file DOCUMENT_ID --format pades [--original-file-name] --out PATH

Configuration comes from SIGNICAT_BASE_URL, SIGNICAT_ACCESS_TOKEN and
SIGNICAT_TIMEOUT_SECONDS (see signicat.config).

Exit codes:
    0: Success
    1: API, transport or decode error
    2: Usage, input or configuration error
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from signicat.client import Client
from signicat.config import ClientConfig, load_client_config
from signicat.errors import ConfigurationError, DecodeError, HTTPStatusError, RequestBuildError
from signicat.models import CreateDocumentRequest, FileFormat

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when CLI input cannot be used to build a request."""


def _output_json(data: dict[str, Any]) -> None:
    """Output JSON to stdout with deterministic ordering."""
    print(json.dumps(data, sort_keys=True, indent=2))


def _make_error_result(code: str, message: str, **details: Any) -> dict[str, Any]:
    return {"error": {"code": code, "message": message, **details}}


def _build_http_client(config: ClientConfig) -> httpx.Client:
    """Build the transport the CLI hands to Client, carrying the bearer token."""
    headers: dict[str, str] = {}
    if config.access_token:
        headers["Authorization"] = f"Bearer {config.access_token}"
    return httpx.Client(headers=headers, timeout=config.timeout_seconds)


def _load_create_request(input_path: str) -> CreateDocumentRequest:
    try:
        content = Path(input_path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputError(f"File not found: {input_path}") from e
    except OSError as e:
        raise InputError(f"Cannot read input: {e}") from e

    try:
        return CreateDocumentRequest.model_validate_json(content)
    except ValidationError as e:
        raise InputError(f"Invalid create document request: {e}") from e


def _with_client(operation: Callable[[Client], dict[str, Any]]) -> int:
    config = load_client_config()
    with _build_http_client(config) as http_client:
        client = Client(http_client, base_url=config.base_url)
        result = operation(client)
    _output_json(result)
    return 0


def cmd_create(args: argparse.Namespace) -> int:
    """Create a document from a CreateDocumentRequest JSON file."""
    request = _load_create_request(args.input)
    return _with_client(lambda client: client.signature.create_document(request).to_payload())


def cmd_document(args: argparse.Namespace) -> int:
    """Print the full document."""
    return _with_client(
        lambda client: client.signature.retrieve_document(args.document_id).to_payload()
    )


def cmd_status(args: argparse.Namespace) -> int:
    """Print the document status."""
    return _with_client(
        lambda client: client.signature.retrieve_document_status(args.document_id).to_payload()
    )


def cmd_file(args: argparse.Namespace) -> int:
    """Download the document file to --out. A partial file is removed on failure."""
    out_path = Path(args.out)

    def download(client: Client) -> dict[str, Any]:
        try:
            with out_path.open("wb") as sink:
                written = client.signature.retrieve_file(
                    args.document_id,
                    args.file_format,
                    args.original_file_name,
                    sink,
                )
        except Exception:
            out_path.unlink(missing_ok=True)
            raise
        return {"bytes_written": written, "path": str(out_path)}

    return _with_client(download)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="signicat",
        description="Signicat Signature API client",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for messages written to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    create_parser_ = subparsers.add_parser("create", help="Create a signature document")
    create_parser_.add_argument(
        "--input",
        required=True,
        metavar="PATH",
        help="Path to a CreateDocumentRequest JSON file",
    )
    create_parser_.set_defaults(handler=cmd_create)

    document_parser = subparsers.add_parser("document", help="Retrieve a document")
    document_parser.add_argument("document_id", help="Document ID")
    document_parser.set_defaults(handler=cmd_document)

    status_parser = subparsers.add_parser("status", help="Retrieve a document's status")
    status_parser.add_argument("document_id", help="Document ID")
    status_parser.set_defaults(handler=cmd_status)

    file_parser = subparsers.add_parser("file", help="Download a document file")
    file_parser.add_argument("document_id", help="Document ID")
    file_parser.add_argument(
        "--format",
        dest="file_format",
        default=FileFormat.PADES.value,
        choices=[f.value for f in FileFormat],
        help="File format to retrieve (default: pades)",
    )
    file_parser.add_argument(
        "--original-file-name",
        action="store_true",
        default=False,
        help="Ask the service to keep the original file name",
    )
    file_parser.add_argument(
        "--out",
        required=True,
        metavar="PATH",
        help="Where to write the file",
    )
    file_parser.set_defaults(handler=cmd_file)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point. See module docstring for exit codes."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return int(args.handler(args))
    except (ConfigurationError, InputError, RequestBuildError, ValueError) as e:
        _output_json(_make_error_result("INVALID_INPUT", str(e)))
        return 2
    except HTTPStatusError as e:
        _output_json(_make_error_result("HTTP_STATUS", str(e), status_code=e.status_code))
        return 1
    except DecodeError as e:
        _output_json(_make_error_result("DECODE_ERROR", str(e)))
        return 1
    except httpx.HTTPError as e:
        _output_json(_make_error_result("TRANSPORT_ERROR", f"{type(e).__name__}: {e}"))
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        _output_json(_make_error_result("INTERNAL_ERROR", str(e)))
        return 1


if __name__ == "__main__":
    sys.exit(main())
