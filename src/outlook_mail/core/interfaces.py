"""Protocol interfaces for decoupling components."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import Attachment, EmailRecord


class MailProvider(Protocol):
    """Abstraction over a remote mail account able to send and search mail."""

    def send_email(
        self,
        sender: str,
        to: str,
        subject: str,
        body: str,
        record: EmailRecord | None = None,
    ) -> None:
        """Send an HTML message to a single recipient."""
        raise NotImplementedError

    def send_email_with_attachments(
        self,
        sender: str,
        to: str,
        subject: str,
        body: str,
        attachments: Sequence[Attachment],
        record: EmailRecord | None = None,
    ) -> None:
        """Send an HTML message carrying file attachments."""
        raise NotImplementedError

    def get_email(self, to: str, subject: str) -> None:
        """Search sent items for messages matching ``subject``."""
        raise NotImplementedError

    def close(self) -> None:
        """Release any network resources."""
        raise NotImplementedError


__all__ = ["MailProvider"]
