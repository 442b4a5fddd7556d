"""Outlook REST API client for sending mail and searching sent items."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from types import TracebackType
from urllib.parse import urljoin

import httpx
from pydantic import ValidationError

from ..core.config import OutlookSettings
from ..core.interfaces import MailProvider
from ..core.models import Attachment, EmailRecord, ProviderError
from .payloads import build_send_mail_request

LOGGER = logging.getLogger(__name__)

SEND_MAIL_PATH = "api/v2.0/me/sendmail"
SENT_ITEMS_PATH = "api/v2.0/me/MailFolders/sentitems/messages/"
SUCCESS_STATUSES = frozenset({200, 202})


class OutlookError(RuntimeError):
    """Base exception for Outlook API operations."""


class MissingAccessTokenError(OutlookError):
    """Raised before any I/O when no bearer token is configured."""


class EmailNotSentError(OutlookError):
    """Raised when the provider did not accept a message.

    Provider diagnostics are logged rather than carried on the exception.
    """


class MailSearchError(OutlookError):
    """Raised when the sent items search could not be issued."""


class OutlookClient(MailProvider):
    """Thin synchronous client for the Outlook v2.0 mail endpoints.

    One request per call, no retries. An injected ``httpx.Client`` is used
    as-is and left open on :meth:`close`; otherwise the client creates and
    owns one.

    Example:
        >>> settings = OutlookSettings(access_token="...")
        >>> with OutlookClient(settings) as client:
        ...     client.send_email("me@example.com", "you@example.com", "Hi", "<p>Hi</p>")
    """

    def __init__(
        self, settings: OutlookSettings, http_client: httpx.Client | None = None
    ) -> None:
        """Initialise the client with settings and an optional HTTP client."""
        self._settings = settings
        self._owns_http = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=settings.timeout_seconds)
        self._http = http_client

    def __enter__(self) -> OutlookClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def send_email(
        self,
        sender: str,
        to: str,
        subject: str,
        body: str,
        record: EmailRecord | None = None,
    ) -> None:
        """Send an HTML email to ``to``.

        The sender is implied by the authenticated account and is only used
        for logging.

        Raises:
            MissingAccessTokenError: If no access token is configured
            EmailNotSentError: If the request fails for any reason
        """
        self._send(sender, to, subject, body, None, record)

    def send_email_with_attachments(
        self,
        sender: str,
        to: str,
        subject: str,
        body: str,
        attachments: Sequence[Attachment],
        record: EmailRecord | None = None,
    ) -> None:
        """Send an HTML email with ``attachments`` encoded in order.

        Raises:
            MissingAccessTokenError: If no access token is configured
            EmailNotSentError: If the request fails for any reason
        """
        self._send(sender, to, subject, body, list(attachments), record)

    def get_email(self, to: str, subject: str) -> None:
        """Search the sent items folder for messages with ``subject``.

        The response is read and released but not interpreted.

        Raises:
            MissingAccessTokenError: If no access token is configured
            MailSearchError: If the request could not be completed
        """
        headers = self._headers()
        params = {
            "$select": "Sender,Subject",
            "$search": f'"subject:{subject}"',
        }
        LOGGER.info("Searching sent items for %s: %s", to, subject)
        try:
            response = self._http.get(
                self._endpoint(SENT_ITEMS_PATH),
                params=params,
                headers=headers,
                timeout=self._settings.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            LOGGER.error("Sent items search failed: %s", exc)
            raise MailSearchError("Sent items search failed") from exc

        if response.is_success:
            LOGGER.debug("Sent items search returned HTTP %d", response.status_code)
        else:
            LOGGER.warning(
                "Sent items search returned HTTP %d", response.status_code
            )

    def _send(
        self,
        sender: str,
        to: str,
        subject: str,
        body: str,
        attachments: list[Attachment] | None,
        record: EmailRecord | None,
    ) -> None:
        headers = self._headers()
        record_id = record.id if record else None

        LOGGER.info(
            "Sending email from %s to %s: %s (record=%s, attachments=%d)",
            sender,
            to,
            subject,
            record_id,
            len(attachments or ()),
        )

        try:
            request = build_send_mail_request(
                to,
                subject,
                body,
                attachments,
                attachment_type=self._settings.attachment_type,
            )
            content = json.dumps(request.to_payload())
        except (TypeError, ValueError) as exc:
            LOGGER.error("Unable to serialise email to %s: %s", to, exc)
            raise EmailNotSentError("Email could not be sent") from exc

        try:
            response = self._http.post(
                self._endpoint(SEND_MAIL_PATH),
                content=content,
                headers=headers,
                timeout=self._settings.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            LOGGER.error("Network error sending email to %s: %s", to, exc)
            raise EmailNotSentError("Email could not be sent") from exc

        if response.status_code in SUCCESS_STATUSES:
            LOGGER.info("Email sent successfully to %s: %s", to, subject)
            return

        _log_provider_error(response)
        raise EmailNotSentError("Email could not be sent")

    def _headers(self) -> dict[str, str]:
        token = self._settings.access_token
        if not token:
            raise MissingAccessTokenError("No access token supplied")
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def _endpoint(self, path: str) -> str:
        trimmed = self._settings.base_url.rstrip("/") + "/"
        return urljoin(trimmed, path)


def _log_provider_error(response: httpx.Response) -> None:
    """Log the provider error envelope carried by a failed response."""
    try:
        envelope = ProviderError.model_validate_json(response.content)
    except ValidationError:
        LOGGER.error(
            "Email send failed with HTTP %d and no error envelope",
            response.status_code,
        )
        return
    LOGGER.error(
        "Email send failed with HTTP %d: %s %s",
        response.status_code,
        envelope.error.code,
        envelope.error.message,
    )


__all__ = [
    "EmailNotSentError",
    "MailSearchError",
    "MissingAccessTokenError",
    "OutlookClient",
    "OutlookError",
]
