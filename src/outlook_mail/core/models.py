"""Core domain models used across the application."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field


@dataclass(frozen=True, slots=True)
class EmailRecord:
    """Caller-side record of an email being delivered through the adapter."""

    id: str | None = None
    sender: str | None = None
    to: str | None = None
    subject: str | None = None


@dataclass(frozen=True, slots=True)
class Attachment:
    """File attached to an outgoing message.

    Attributes:
        name: File name shown to the recipient
        content: Raw file bytes, base64-encoded only when serialised
        odata_type: Provider discriminator for the attachment kind; ``None``
            uses the client's configured attachment type
    """

    name: str
    content: bytes
    odata_type: str | None = None

    @classmethod
    def from_path(
        cls, path: Path | str, *, odata_type: str | None = None
    ) -> Attachment:
        """Read a local file into an attachment named after the file."""
        file_path = Path(path)
        return cls(
            name=file_path.name,
            content=file_path.read_bytes(),
            odata_type=odata_type,
        )


class ProviderErrorDetail(BaseModel):
    """Machine readable code and message reported by the mail API."""

    code: str = Field(default="", description="Provider error code")
    message: str = Field(default="", description="Human readable explanation")


class ProviderError(BaseModel):
    """Error envelope returned by the mail API on failed requests."""

    error: ProviderErrorDetail


__all__ = [
    "Attachment",
    "EmailRecord",
    "ProviderError",
    "ProviderErrorDetail",
]
