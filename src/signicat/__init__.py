"""Signicat: typed client for the Signicat (Idfy) electronic signature API.

Usage:
    import httpx
    from signicat import Client

    with httpx.Client(auth=my_oauth2_auth) as http:
        client = Client(http)
        document = client.signature.create_document(request)
"""

from signicat.client import DEFAULT_BASE_URL, AsyncClient, Client
from signicat.errors import (
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    RequestBuildError,
    SignicatError,
)
from signicat.signature import AsyncSignatureService, SignatureService

__all__ = [
    "DEFAULT_BASE_URL",
    "AsyncClient",
    "AsyncSignatureService",
    "Client",
    "ConfigurationError",
    "DecodeError",
    "HTTPStatusError",
    "RequestBuildError",
    "SignatureService",
    "SignicatError",
]
