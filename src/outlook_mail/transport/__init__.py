"""Transport adapters for the Outlook mail API."""

from .outlook_client import (
    EmailNotSentError,
    MailSearchError,
    MissingAccessTokenError,
    OutlookClient,
    OutlookError,
)
from .payloads import SendMailRequest, build_send_mail_request

__all__ = [
    "EmailNotSentError",
    "MailSearchError",
    "MissingAccessTokenError",
    "OutlookClient",
    "OutlookError",
    "SendMailRequest",
    "build_send_mail_request",
]
