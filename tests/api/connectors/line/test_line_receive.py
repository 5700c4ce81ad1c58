import json

import pytest

from api.connectors.line.models import TextMessage
from api.connectors.line.signature import compute_line_signature
from api.connectors.line.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from tests.fakes.line_events import message_event, signed_body, text_event


def test_parse_webhook_request_ok() -> None:
    body, headers = signed_body([text_event("hello")], "secret")

    events, result = parse_webhook_request(body, headers, "secret")

    assert result.valid is True
    assert len(events) == 1
    assert events[0].type == "message"
    assert events[0].message == TextMessage(id="m-1", text="hello")


def test_parse_webhook_request_invalid_signature() -> None:
    body, _ = signed_body([text_event("hello")], "secret")

    with pytest.raises(InvalidSignatureError, match="signature"):
        parse_webhook_request(body, {"x-line-signature": "Zm9v"}, "secret")


def test_parse_webhook_request_invalid_json() -> None:
    body = b"{invalid}"
    headers = {"x-line-signature": compute_line_signature(body, "secret")}

    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_webhook_request(body, headers, "secret")


def test_parse_webhook_request_payload_not_object() -> None:
    body = json.dumps([1, 2]).encode("utf-8")
    headers = {"x-line-signature": compute_line_signature(body, "secret")}

    with pytest.raises(InvalidJsonError, match="payload_not_object"):
        parse_webhook_request(body, headers, "secret")


def test_parse_webhook_request_events_not_list() -> None:
    body = json.dumps({"events": "nope"}).encode("utf-8")
    headers = {"x-line-signature": compute_line_signature(body, "secret")}

    with pytest.raises(InvalidJsonError, match="events_not_list"):
        parse_webhook_request(body, headers, "secret")


def test_parse_webhook_request_null_coordinates_keep_batch() -> None:
    location = {"id": "l", "type": "location", "title": "t", "address": "a", "latitude": None, "longitude": None}
    body, headers = signed_body([message_event(location), text_event("hello")], "secret")

    events, _ = parse_webhook_request(body, headers, "secret")

    assert len(events) == 2
