"""Records returned by the Signature API.

Every field is optional: the service omits what it has not set yet, and a
zero-byte response body decodes to a default instance.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from signicat.models.base import SignicatModel
from signicat.models.enums import (
    DocumentStatus,
    FileFormat,
    Mechanism,
    PersonalInfoOrigin,
    SignatureMethod,
)
from signicat.models.requests import (
    ContactDetails,
    Notifications,
    RedirectSettings,
    SignatureType,
    SignerInfo,
)


class DocumentFile(SignicatModel):
    """The file of a document as reported back by the service.

    Unlike DataToSign the content may be left out of the response.
    """

    file_name: str | None = None
    title: str | None = None
    description: str | None = None
    base64_content: str | None = None
    convert_to_pdf: bool | None = None


class SocialSecurityNumber(SignicatModel):
    value: str | None = None
    country_code: str | None = None


class DocumentSignature(SignicatModel):
    """Proof captured when a signer completed signing."""

    signature_method: SignatureMethod | None = None
    full_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    signed_time: datetime | None = None
    date_of_birth: str | None = None
    signature_method_unique_id: str | None = None
    social_security_number: SocialSecurityNumber | None = None
    client_ip: str | None = None
    mechanism: Mechanism | None = None
    personal_info_origin: PersonalInfoOrigin | None = None


class Status(SignicatModel):
    """Status projection of a document.

    Attributes:
        document_status: Current lifecycle stage.
        completed_packages: File formats that are ready for retrieval.
    """

    document_status: DocumentStatus | None = None
    completed_packages: list[FileFormat] = Field(default_factory=list)


class SignerResponse(SignicatModel):
    """Server view of a signer.

    Attributes:
        id: Server-issued signer ID.
        url: URL the signer opens to sign.
        document_signature: Present once the signer has signed.
        order: Required signing sequence, when the document enforces one.
        sign_url_expires: When the signing URL stops working.
    """

    id: str | None = None
    url: str | None = None
    document_signature: DocumentSignature | None = None
    external_signer_id: str | None = None
    redirect_settings: RedirectSettings | None = None
    signature_type: SignatureType | None = None
    signer_info: SignerInfo | None = None
    notifications: Notifications | None = None
    order: int | None = None
    required: bool | None = None
    sign_url_expires: datetime | None = None
    get_social_security_number: bool | None = None

    @property
    def has_signed(self) -> bool:
        return self.document_signature is not None


class Document(SignicatModel):
    """A signing transaction: one file and its signers."""

    document_id: str | None = None
    signers: list[SignerResponse] = Field(default_factory=list)
    status: Status | None = None
    title: str | None = None
    description: str | None = None
    external_id: str | None = None
    data_to_sign: DocumentFile | None = None
    contact_details: ContactDetails | None = None

    def signer_for(self, external_signer_id: str) -> SignerResponse | None:
        """Return the signer created for a caller-defined signer ID, if any."""
        for signer in self.signers:
            if signer.external_signer_id == external_signer_id:
                return signer
        return None
