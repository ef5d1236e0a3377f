"""Request bodies for the Signature API.

Fields without a default are required by the API. Everything else is optional
and left out of the serialized body when unset.
"""

from __future__ import annotations

import base64
from typing import Any

from pydantic import Field

from signicat.models.base import SignicatRequest
from signicat.models.enums import (
    AuthMechanism,
    Language,
    Mechanism,
    NotificationSetup,
    RedirectMode,
)


class RedirectSettings(SignicatRequest):
    """Where the signer is sent after acting on the document."""

    redirect_mode: RedirectMode
    domain: str | None = None
    error: str | None = None
    cancel: str | None = None
    success: str | None = None


class SignatureType(SignicatRequest):
    mechanism: Mechanism


class Authentication(SignicatRequest):
    """Authentication the signer must pass before viewing the document."""

    mechanism: AuthMechanism
    social_security_number: str | None = None
    signature_method_unique_id: str | None = None


class Mobile(SignicatRequest):
    country_code: str | None = None
    number: str | None = None


class OrganizationInfo(SignicatRequest):
    org_no: str | None = None
    company_name: str | None = None
    country_code: str | None = None


class SignerInfo(SignicatRequest):
    """Personal details used to prefill and verify the signer."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    social_security_number: str | None = None
    mobile: Mobile | None = None
    organization_info: OrganizationInfo | None = None


class DataToSign(SignicatRequest):
    """The file to be signed, base64 encoded."""

    base64_content: str = Field(min_length=1)
    file_name: str = Field(min_length=1)
    title: str | None = None
    description: str | None = None
    convert_to_pdf: bool | None = None

    @classmethod
    def from_bytes(cls, content: bytes, file_name: str, **fields: Any) -> DataToSign:
        """Build from raw file content.

        Args:
            content: Raw file bytes.
            file_name: File name shown to signers, including extension.
            **fields: Any other DataToSign field (title, convert_to_pdf, ...).
        """
        return cls(
            base64_content=base64.b64encode(content).decode("ascii"),
            file_name=file_name,
            **fields,
        )


class ContactDetails(SignicatRequest):
    """Sender contact shown to signers."""

    email: str
    name: str | None = None
    phone: str | None = None
    url: str | None = None


class Email(SignicatRequest):
    language: Language
    subject: str | None = None
    text: str | None = None
    sender_name: str | None = None


class Sms(SignicatRequest):
    language: Language
    text: str | None = None
    sender: str | None = None


class SignRequest(SignicatRequest):
    include_original_file: bool | None = None
    email: list[Email] | None = None
    sms: list[Sms] | None = None


class Reminder(SignicatRequest):
    """Reminder schedule for signers who have not signed yet."""

    chron_schedule: str
    max_reminders: int | None = None
    email: list[Email] | None = None
    sms: list[Sms] | None = None


class SignatureReceipt(SignicatRequest):
    email: list[Email] | None = None
    sms: list[Sms] | None = None


class AdditionalRecipient(SignicatRequest):
    email: str
    language: Language | None = None
    custom_merge_fields: dict[str, str] | None = None


class FinalReceipt(SignicatRequest):
    additional_recipients: list[AdditionalRecipient] | None = None
    include_signed_file: bool | None = None
    email: list[Email] | None = None
    sms: list[Sms] | None = None


class CanceledReceipt(SignicatRequest):
    email: list[Email] | None = None
    sms: list[Sms] | None = None


class ExpiredReceipt(SignicatRequest):
    email: list[Email] | None = None
    sms: list[Sms] | None = None


class Notification(SignicatRequest):
    """Document level notification texts and schedules."""

    sign_request: SignRequest | None = None
    reminder: Reminder | None = None
    signature_receipt: SignatureReceipt | None = None
    final_receipt: FinalReceipt | None = None
    canceled_receipt: CanceledReceipt | None = None
    expired_receipt: ExpiredReceipt | None = None


class Setup(SignicatRequest):
    request: NotificationSetup | None = None
    reminder: NotificationSetup | None = None
    signature_receipt: NotificationSetup | None = None
    final_receipt: NotificationSetup | None = None
    canceled: NotificationSetup | None = None
    expired: NotificationSetup | None = None


class Notifications(SignicatRequest):
    """Per-signer override of which notifications are sent and how."""

    setup: Setup | None = None


class SignerRequest(SignicatRequest):
    """A party who must act on the document.

    Attributes:
        external_signer_id: Caller-defined correlation key for this signer.
        redirect_settings: Where the signer goes after signing.
        signature_type: Signing mechanism required from this signer.
        authentication: Optional authentication before the document is shown.
        signer_info: Optional personal data about the signer.
        notifications: Optional per-signer notification override.
    """

    external_signer_id: str
    redirect_settings: RedirectSettings
    signature_type: SignatureType
    authentication: Authentication | None = None
    signer_info: SignerInfo | None = None
    notifications: Notifications | None = None


class CreateDocumentRequest(SignicatRequest):
    """Body of POST signature/documents.

    Attributes:
        title: Document title shown to signers.
        signers: Signers in order; at least one is required.
        data_to_sign: The file to sign.
        contact_details: Sender contact shown to signers.
        external_id: Caller-chosen identifier of the document.
        description: Optional description shown to signers.
        notification: Optional notification policy for the document.
    """

    title: str
    signers: list[SignerRequest] = Field(min_length=1)
    data_to_sign: DataToSign
    contact_details: ContactDetails
    external_id: str
    description: str | None = None
    notification: Notification | None = None
