"""Tests for Signicat wire models.

Covers camelCase aliasing, omission of unset optional fields, enum validation
and response decoding.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from signicat.models import (
    AdditionalRecipient,
    AuthMechanism,
    Authentication,
    ContactDetails,
    CreateDocumentRequest,
    DataToSign,
    Document,
    DocumentStatus,
    Email,
    FileFormat,
    FinalReceipt,
    Language,
    Mechanism,
    Notification,
    Notifications,
    NotificationSetup,
    PersonalInfoOrigin,
    RedirectMode,
    RedirectSettings,
    Reminder,
    Setup,
    SignatureMethod,
    SignatureType,
    SignerInfo,
    SignerRequest,
    SignRequest,
    Status,
)

SAMPLE_DOCUMENT_JSON = """
{
  "documentId": "doc-123",
  "title": "Employment contract",
  "externalId": "contract-42",
  "status": {"documentStatus": "partialsigned", "completedPackages": ["native"]},
  "dataToSign": {"fileName": "contract.pdf", "title": "Contract"},
  "contactDetails": {"email": "hr@example.com"},
  "signers": [
    {
      "id": "signer-1",
      "url": "https://sign.example/1",
      "externalSignerId": "employee-1",
      "order": 1,
      "required": true,
      "signUrlExpires": "2026-01-07T10:00:00Z",
      "redirectSettings": {"redirectMode": "donot_redirect"},
      "signatureType": {"mechanism": "pkisignature"},
      "documentSignature": {
        "signatureMethod": "no_bankid_netcentric",
        "fullName": "Kari Nordmann",
        "signedTime": "2026-01-06T09:30:00Z",
        "socialSecurityNumber": {"value": "01017012345", "countryCode": "NO"},
        "mechanism": "pkisignature",
        "personalInfoOrigin": "eid"
      }
    },
    {"id": "signer-2", "externalSignerId": "manager-1", "order": 2}
  ],
  "someFutureField": {"ignored": true}
}
"""


class TestRequestSerialization:
    """Outgoing bodies use camelCase keys and leave unset fields out."""

    def test_create_request_payload_keys(self, create_request: CreateDocumentRequest) -> None:
        payload = create_request.to_payload()

        assert payload == {
            "title": "Employment contract",
            "externalId": "contract-42",
            "contactDetails": {"email": "hr@example.com"},
            "dataToSign": {
                "base64Content": "JVBERi0xLjcgdGVzdA==",
                "fileName": "contract.pdf",
            },
            "signers": [
                {
                    "externalSignerId": "employee-1",
                    "redirectSettings": {"redirectMode": "donot_redirect"},
                    "signatureType": {"mechanism": "pkisignature"},
                }
            ],
        }

    def test_optional_fields_are_omitted_not_null(
        self, create_request: CreateDocumentRequest
    ) -> None:
        payload = create_request.to_payload()

        assert "description" not in payload
        assert "notification" not in payload
        assert "authentication" not in payload["signers"][0]
        assert "convertToPdf" not in payload["dataToSign"]

    def test_false_boolean_is_sent_when_set(self) -> None:
        data = DataToSign(base64_content="aGk=", file_name="a.pdf", convert_to_pdf=False)
        assert data.to_payload()["convertToPdf"] is False

    def test_nested_notification_tree(self) -> None:
        notification = Notification(
            final_receipt=FinalReceipt(
                include_signed_file=True,
                email=[Email(language=Language.NORWEGIAN, subject="Signert")],
                additional_recipients=[
                    AdditionalRecipient(
                        email="archive@example.com",
                        custom_merge_fields={"caseNo": "17"},
                    )
                ],
            )
        )

        assert notification.to_payload() == {
            "finalReceipt": {
                "includeSignedFile": True,
                "email": [{"language": "NO", "subject": "Signert"}],
                "additionalRecipients": [
                    {"email": "archive@example.com", "customMergeFields": {"caseNo": "17"}}
                ],
            }
        }

    def test_signer_with_authentication_and_notifications(self) -> None:
        signer = SignerRequest(
            external_signer_id="s-1",
            redirect_settings=RedirectSettings(
                redirect_mode=RedirectMode.REDIRECT,
                success="https://example.com/ok",
            ),
            signature_type=SignatureType(mechanism=Mechanism.HANDWRITTEN),
            authentication=Authentication(mechanism=AuthMechanism.EID_AND_SMS_OTP),
            signer_info=SignerInfo(first_name="Kari", email="kari@example.com"),
            notifications=Notifications(setup=Setup(request=NotificationSetup.SEND_BOTH)),
        )

        payload = signer.to_payload()

        assert payload["redirectSettings"] == {
            "redirectMode": "redirect",
            "success": "https://example.com/ok",
        }
        assert payload["authentication"] == {"mechanism": "eidAndSmsOtp"}
        assert payload["signerInfo"] == {"firstName": "Kari", "email": "kari@example.com"}
        assert payload["notifications"] == {"setup": {"request": "sendBoth"}}

    def test_empty_values_are_omitted(self, create_request: CreateDocumentRequest) -> None:
        request = create_request.model_copy(
            update={
                "description": "",
                "notification": Notification(sign_request=SignRequest(email=[])),
            }
        )

        payload = request.to_payload()

        assert "description" not in payload
        assert "notification" not in payload
        assert "description" not in json.loads(request.to_json())

    def test_empty_merge_fields_are_omitted(self) -> None:
        recipient = AdditionalRecipient(email="a@example.com", custom_merge_fields={})
        assert recipient.to_payload() == {"email": "a@example.com"}

    def test_false_and_zero_are_not_empty(self) -> None:
        reminder = Reminder(chron_schedule="0 9 * * *", max_reminders=0)
        assert reminder.to_payload() == {"chronSchedule": "0 9 * * *", "maxReminders": 0}

    def test_to_json_matches_payload(self, create_request: CreateDocumentRequest) -> None:
        assert json.loads(create_request.to_json()) == create_request.to_payload()


class TestRequestValidation:
    def test_signers_must_not_be_empty(self, create_request: CreateDocumentRequest) -> None:
        with pytest.raises(ValidationError):
            CreateDocumentRequest(
                title="t",
                external_id="e",
                contact_details=ContactDetails(email="a@example.com"),
                data_to_sign=create_request.data_to_sign,
                signers=[],
            )

    def test_data_to_sign_requires_content_and_file_name(self) -> None:
        with pytest.raises(ValidationError):
            DataToSign(base64_content="", file_name="a.pdf")
        with pytest.raises(ValidationError):
            DataToSign(base64_content="aGk=", file_name="")

    def test_unknown_enum_value_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SignatureType(mechanism="thumbprint")  # type: ignore[arg-type]

    def test_enum_literal_is_accepted(self) -> None:
        signature_type = SignatureType(mechanism="identification")  # type: ignore[arg-type]
        assert signature_type.mechanism is Mechanism.IDENTIFICATION

    def test_model_construct_bypasses_validation(self) -> None:
        signature_type = SignatureType.model_construct(mechanism="future_mechanism")
        assert signature_type.mechanism == "future_mechanism"

    def test_models_are_frozen(self, create_request: CreateDocumentRequest) -> None:
        with pytest.raises(ValidationError):
            create_request.title = "changed"  # type: ignore[misc]

    def test_camel_case_input_is_accepted(self) -> None:
        contact = ContactDetails.model_validate({"email": "a@example.com", "name": "HR"})
        redirect = RedirectSettings.model_validate({"redirectMode": "iframe_with_redirect"})

        assert contact.name == "HR"
        assert redirect.redirect_mode is RedirectMode.IFRAME_WITH_REDIRECT

    def test_data_to_sign_from_bytes(self) -> None:
        data = DataToSign.from_bytes(b"hello", "hello.txt", convert_to_pdf=True)

        assert data.to_payload() == {
            "base64Content": "aGVsbG8=",
            "fileName": "hello.txt",
            "convertToPdf": True,
        }


class TestResponseDecoding:
    def test_document_decodes_nested_signers(self) -> None:
        document = Document.model_validate_json(SAMPLE_DOCUMENT_JSON)

        assert document.document_id == "doc-123"
        assert document.status is not None
        assert document.status.document_status is DocumentStatus.PARTIAL_SIGNED
        assert document.status.completed_packages == [FileFormat.NATIVE]
        assert document.data_to_sign is not None
        assert document.data_to_sign.base64_content is None
        assert [s.order for s in document.signers] == [1, 2]

        first = document.signers[0]
        assert first.sign_url_expires == datetime(2026, 1, 7, 10, 0, tzinfo=UTC)
        assert first.has_signed
        assert first.document_signature is not None
        signature = first.document_signature
        assert signature.signature_method is SignatureMethod.NO_BANKID_NETCENTRIC
        assert signature.personal_info_origin is PersonalInfoOrigin.EID
        assert signature.social_security_number is not None
        assert signature.social_security_number.country_code == "NO"
        assert not document.signers[1].has_signed

    def test_signer_for_looks_up_external_id(self) -> None:
        document = Document.model_validate_json(SAMPLE_DOCUMENT_JSON)

        signer = document.signer_for("manager-1")
        assert signer is not None
        assert signer.id == "signer-2"
        assert document.signer_for("nobody") is None

    def test_status_without_packages_has_empty_list(self) -> None:
        status = Status.model_validate_json('{"documentStatus":"signed"}')

        assert status.document_status is DocumentStatus.SIGNED
        assert status.completed_packages == []

    def test_unknown_status_value_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Status.model_validate_json('{"documentStatus":"archived"}')

    def test_empty_object_gives_defaults(self) -> None:
        document = Document.model_validate({})

        assert document.document_id is None
        assert document.signers == []
        assert document.status is None


class TestDocumentStatus:
    @pytest.mark.parametrize(
        "status",
        [DocumentStatus.SIGNED, DocumentStatus.CANCELED, DocumentStatus.EXPIRED],
    )
    def test_terminal_statuses(self, status: DocumentStatus) -> None:
        assert status.is_terminal

    @pytest.mark.parametrize(
        "status",
        [
            DocumentStatus.UNSIGNED,
            DocumentStatus.WAITING_FOR_ATTACHMENTS,
            DocumentStatus.PARTIAL_SIGNED,
        ],
    )
    def test_non_terminal_statuses(self, status: DocumentStatus) -> None:
        assert not status.is_terminal

    def test_wire_values_are_literal_strings(self) -> None:
        assert DocumentStatus.PARTIAL_SIGNED == "partialsigned"
        assert FileFormat.STANDARD_PACKAGING == "standard_packaging"
        assert AuthMechanism.SMS_OTP == "smsOtp"
        assert Language.SWEDISH == "SV"
