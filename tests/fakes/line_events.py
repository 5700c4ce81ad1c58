"""Fábricas de payloads de webhook LINE para testes."""

from __future__ import annotations

import json
from typing import Any

from api.connectors.line.models import WebhookEvent, parse_event
from api.connectors.line.signature import compute_line_signature

DEFAULT_TIMESTAMP_MS = 1_700_000_000_000


def source(kind: str = "user", source_id: str = "U123") -> dict[str, Any]:
    key = {"user": "userId", "room": "roomId", "group": "groupId"}.get(kind, "userId")
    return {"type": kind, key: source_id}


def message_event(
    message: dict[str, Any],
    *,
    source_kind: str = "user",
    source_id: str = "U123",
    reply_token: str = "reply-token",
) -> dict[str, Any]:
    return {
        "type": "message",
        "replyToken": reply_token,
        "timestamp": DEFAULT_TIMESTAMP_MS,
        "source": source(source_kind, source_id),
        "message": message,
    }


def text_event(text: str, **kwargs: Any) -> dict[str, Any]:
    return message_event({"id": "m-1", "type": "text", "text": text}, **kwargs)


def postback_event(data: str, params: dict[str, str] | None = None, **kwargs: Any) -> dict[str, Any]:
    postback: dict[str, Any] = {"data": data}
    if params is not None:
        postback["params"] = params
    return {
        "type": "postback",
        "replyToken": kwargs.get("reply_token", "reply-token"),
        "timestamp": DEFAULT_TIMESTAMP_MS,
        "source": source(kwargs.get("source_kind", "user"), kwargs.get("source_id", "U123")),
        "postback": postback,
    }


def as_event(raw: dict[str, Any]) -> WebhookEvent:
    return parse_event(raw)


def signed_body(events: list[dict[str, Any]], secret: str) -> tuple[bytes, dict[str, str]]:
    """Corpo JSON do webhook com o header X-Line-Signature correspondente."""
    body = json.dumps({"destination": "Uxxxxxxxx", "events": events}).encode("utf-8")
    return body, {"x-line-signature": compute_line_signature(body, secret)}
