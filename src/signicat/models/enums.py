"""Closed sets of string constants used by the Signature API.

The wire value of each member is the literal string. Model fields typed with
these enums reject any other value during validation.
"""

from __future__ import annotations

from enum import StrEnum


class RedirectMode(StrEnum):
    """How the signer's browser is returned to the caller's site."""

    DONOT_REDIRECT = "donot_redirect"
    REDIRECT = "redirect"
    IFRAME_WITH_WEBMESSAGING = "iframe_with_webmessaging"
    IFRAME_WITH_REDIRECT = "iframe_with_redirect"
    IFRAME_WITH_REDIRECT_AND_WEBMESSAGING = "iframe_with_redirect_and_webmessaging"


class Mechanism(StrEnum):
    """Class of signature proof."""

    PKI_SIGNATURE = "pkisignature"
    IDENTIFICATION = "identification"
    HANDWRITTEN = "handwritten"
    HANDWRITTEN_WITH_IDENTIFICATION = "handwritten_with_identification"


class AuthMechanism(StrEnum):
    """Authentication required before a signer may open the document."""

    OFF = "off"
    EID = "eid"
    SMS_OTP = "smsOtp"
    EID_AND_SMS_OTP = "eidAndSmsOtp"


class NotificationSetup(StrEnum):
    """Channel used for a notification."""

    OFF = "off"
    SEND_SMS = "sendSms"
    SEND_EMAIL = "sendEmail"
    SEND_BOTH = "sendBoth"


class SignatureMethod(StrEnum):
    """Electronic ID used to sign."""

    NO_BANKID_MOBILE = "no_bankid_mobile"
    NO_BANKID_NETCENTRIC = "no_bankid_netcentric"
    NO_BUYPASS = "no_buypass"
    SE_BANKID = "se_bankid"
    DK_NEMID = "dk_nemid"
    FI_TUPAS = "fi_tupas"
    FI_MOBIILIVARMENNE = "fi_mobiilivarmenne"
    FI_EID = "fi_eid"
    SMS_OTP = "sms_otp"
    UNKNOWN = "unknown"


class PersonalInfoOrigin(StrEnum):
    """Where the signer's personal details on a signature came from."""

    UNKNOWN = "unknown"
    EID = "eid"
    USER_FORM_INPUT = "userFormInput"


class DocumentStatus(StrEnum):
    """Lifecycle stage of a document.

    unsigned -> partialsigned -> signed, or canceled / expired.
    """

    UNSIGNED = "unsigned"
    WAITING_FOR_ATTACHMENTS = "waiting_for_attachments"
    PARTIAL_SIGNED = "partialsigned"
    SIGNED = "signed"
    CANCELED = "canceled"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        """True once the document can no longer change status."""
        return self in _TERMINAL_STATUSES


_TERMINAL_STATUSES = frozenset(
    {DocumentStatus.SIGNED, DocumentStatus.CANCELED, DocumentStatus.EXPIRED}
)


class FileFormat(StrEnum):
    """Packaging of a retrievable document file."""

    UNSIGNED = "unsigned"
    NATIVE = "native"
    STANDARD_PACKAGING = "standard_packaging"
    PADES = "pades"
    XADES = "xades"


class Language(StrEnum):
    """Languages available for notification texts."""

    ENGLISH = "EN"
    NORWEGIAN = "NO"
    DANISH = "DA"
    SWEDISH = "SV"
    FINNISH = "FI"
