"""Tests for send-mail request construction."""

from __future__ import annotations

import base64

from outlook_mail.core.models import Attachment
from outlook_mail.transport.payloads import build_send_mail_request, encode_attachment


def test_body_content_type_is_always_html() -> None:
    payload = build_send_mail_request("a@test", "Subject", "plain words").to_payload()

    assert payload["Message"]["Body"] == {"ContentType": "HTML", "Content": "plain words"}


def test_attachments_key_omitted_without_attachments() -> None:
    payload = build_send_mail_request("a@test", "Subject", "<p/>").to_payload()

    assert "Attachments" not in payload["Message"]


def test_empty_attachment_list_is_sent_as_empty() -> None:
    payload = build_send_mail_request("a@test", "Subject", "<p/>", []).to_payload()

    assert payload["Message"]["Attachments"] == []


def test_encode_attachment_uses_standard_base64() -> None:
    encoded = encode_attachment(
        Attachment("img.png", b"\xfb\xff\xfe", odata_type="#Custom.Type")
    )

    assert encoded.content_bytes == base64.standard_b64encode(b"\xfb\xff\xfe").decode()
    assert encoded.model_dump(by_alias=True) == {
        "@odata.type": "#Custom.Type",
        "Name": "img.png",
        "ContentBytes": "+//+",
    }


def test_configured_attachment_type_applies_unless_overridden() -> None:
    payload = build_send_mail_request(
        "a@test",
        "Subject",
        "<p/>",
        [Attachment("a.txt", b"a"), Attachment("b.eml", b"b", odata_type="#Explicit")],
        attachment_type="#Microsoft.OutlookServices.ItemAttachment",
    ).to_payload()

    assert [entry["@odata.type"] for entry in payload["Message"]["Attachments"]] == [
        "#Microsoft.OutlookServices.ItemAttachment",
        "#Explicit",
    ]
