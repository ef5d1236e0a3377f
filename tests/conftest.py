"""Pytest configuration and fixtures for signicat tests.

Every HTTP exchange goes through httpx.MockTransport; no test touches the network.
"""

from __future__ import annotations

import pytest

from signicat.config import ENV_ACCESS_TOKEN, ENV_BASE_URL, ENV_TIMEOUT_SECONDS
from signicat.models import (
    ContactDetails,
    CreateDocumentRequest,
    DataToSign,
    Mechanism,
    RedirectMode,
    RedirectSettings,
    SignatureType,
    SignerRequest,
)


@pytest.fixture(autouse=True)
def clear_signicat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's SIGNICAT_* variables out of the tests."""
    for key in (ENV_BASE_URL, ENV_ACCESS_TOKEN, ENV_TIMEOUT_SECONDS):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def create_request() -> CreateDocumentRequest:
    """A minimal valid create document request with one signer."""
    return CreateDocumentRequest(
        title="Employment contract",
        external_id="contract-42",
        contact_details=ContactDetails(email="hr@example.com"),
        data_to_sign=DataToSign.from_bytes(b"%PDF-1.7 test", "contract.pdf"),
        signers=[
            SignerRequest(
                external_signer_id="employee-1",
                redirect_settings=RedirectSettings(redirect_mode=RedirectMode.DONOT_REDIRECT),
                signature_type=SignatureType(mechanism=Mechanism.PKI_SIGNATURE),
            )
        ],
    )

