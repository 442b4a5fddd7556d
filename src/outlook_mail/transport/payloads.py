"""Request bodies for the Outlook v2.0 ``sendmail`` endpoint."""

from __future__ import annotations

import base64
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.config import FILE_ATTACHMENT_TYPE
from ..core.models import Attachment


class _ProviderModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Address(_ProviderModel):
    address: str = Field(alias="Address")


class Recipient(_ProviderModel):
    email_address: Address = Field(alias="EmailAddress")


class MessageBody(_ProviderModel):
    content_type: str = Field(default="HTML", alias="ContentType")
    content: str = Field(alias="Content")


class FileAttachmentPayload(_ProviderModel):
    odata_type: str = Field(alias="@odata.type")
    name: str = Field(alias="Name")
    content_bytes: str = Field(alias="ContentBytes")


class OutgoingMessage(_ProviderModel):
    subject: str = Field(alias="Subject")
    body: MessageBody = Field(alias="Body")
    to_recipients: list[Recipient] = Field(alias="ToRecipients")
    attachments: list[FileAttachmentPayload] | None = Field(
        default=None, alias="Attachments"
    )


class SendMailRequest(_ProviderModel):
    """Top-level document accepted by ``POST /api/v2.0/me/sendmail``."""

    message: OutgoingMessage = Field(alias="Message")

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready dictionary using the provider's field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


def encode_attachment(
    attachment: Attachment, default_type: str = FILE_ATTACHMENT_TYPE
) -> FileAttachmentPayload:
    """Base64-encode an attachment and tag it with its discriminator."""
    return FileAttachmentPayload(
        odata_type=attachment.odata_type or default_type,
        name=attachment.name,
        content_bytes=base64.b64encode(attachment.content).decode("ascii"),
    )


def build_send_mail_request(
    to: str,
    subject: str,
    body: str,
    attachments: Sequence[Attachment] | None = None,
    attachment_type: str = FILE_ATTACHMENT_TYPE,
) -> SendMailRequest:
    """Build a send-mail request for a single recipient.

    Args:
        to: Recipient address
        subject: Subject line
        body: HTML body content
        attachments: Files to attach in order; ``None`` omits the
            ``Attachments`` member entirely
        attachment_type: Discriminator for attachments that do not set one

    Returns:
        Request model ready for serialisation
    """
    encoded = None
    if attachments is not None:
        encoded = [
            encode_attachment(attachment, attachment_type)
            for attachment in attachments
        ]
    return SendMailRequest(
        message=OutgoingMessage(
            subject=subject,
            body=MessageBody(content=body),
            to_recipients=[Recipient(email_address=Address(address=to))],
            attachments=encoded,
        )
    )


__all__ = [
    "FileAttachmentPayload",
    "SendMailRequest",
    "build_send_mail_request",
    "encode_attachment",
]
