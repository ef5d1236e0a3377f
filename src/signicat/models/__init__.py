"""Signicat wire models: pydantic records and string enumerations."""

from signicat.models.base import SignicatModel, SignicatRequest
from signicat.models.enums import (
    AuthMechanism,
    DocumentStatus,
    FileFormat,
    Language,
    Mechanism,
    NotificationSetup,
    PersonalInfoOrigin,
    RedirectMode,
    SignatureMethod,
)
from signicat.models.requests import (
    AdditionalRecipient,
    Authentication,
    CanceledReceipt,
    ContactDetails,
    CreateDocumentRequest,
    DataToSign,
    Email,
    ExpiredReceipt,
    FinalReceipt,
    Mobile,
    Notification,
    Notifications,
    OrganizationInfo,
    RedirectSettings,
    Reminder,
    Setup,
    SignatureReceipt,
    SignatureType,
    SignerInfo,
    SignerRequest,
    SignRequest,
    Sms,
)
from signicat.models.responses import (
    Document,
    DocumentFile,
    DocumentSignature,
    SignerResponse,
    SocialSecurityNumber,
    Status,
)

__all__ = [
    "AdditionalRecipient",
    "AuthMechanism",
    "Authentication",
    "CanceledReceipt",
    "ContactDetails",
    "CreateDocumentRequest",
    "DataToSign",
    "Document",
    "DocumentFile",
    "DocumentSignature",
    "DocumentStatus",
    "Email",
    "ExpiredReceipt",
    "FileFormat",
    "FinalReceipt",
    "Language",
    "Mechanism",
    "Mobile",
    "Notification",
    "NotificationSetup",
    "Notifications",
    "OrganizationInfo",
    "PersonalInfoOrigin",
    "RedirectMode",
    "RedirectSettings",
    "Reminder",
    "SignRequest",
    "SignatureMethod",
    "SignatureReceipt",
    "SignatureType",
    "SignerInfo",
    "SignerRequest",
    "SignerResponse",
    "SignicatModel",
    "SignicatRequest",
    "Setup",
    "Sms",
    "SocialSecurityNumber",
    "Status",
]
