"""Modelos do payload de webhook do LINE.

Conversão estrutural do JSON para dataclasses imutáveis. Não aplica regra
de negócio: tipos desconhecidos são preservados (UnknownMessage / string
crua em `type`) para que o normalizer decida o que fazer.

Referência: https://developers.line.biz/en/reference/messaging-api/#webhook-event-objects
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class EventSource:
    """Origem do evento (source object)."""

    type: str
    user_id: str = ""
    group_id: str = ""
    room_id: str = ""


@dataclass(frozen=True)
class TextMessage:
    id: str
    text: str


@dataclass(frozen=True)
class ImageMessage:
    id: str


@dataclass(frozen=True)
class VideoMessage:
    id: str


@dataclass(frozen=True)
class AudioMessage:
    id: str


@dataclass(frozen=True)
class FileMessage:
    id: str
    file_name: str = ""
    file_size: int = 0


@dataclass(frozen=True)
class LocationMessage:
    id: str
    title: str
    address: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class StickerMessage:
    id: str
    package_id: str
    sticker_id: str


@dataclass(frozen=True)
class UnknownMessage:
    """Tipo de mensagem que o adapter não reconhece."""

    id: str
    type: str


WebhookMessage = (
    TextMessage
    | ImageMessage
    | VideoMessage
    | AudioMessage
    | FileMessage
    | LocationMessage
    | StickerMessage
    | UnknownMessage
)


@dataclass(frozen=True)
class PostbackParams:
    date: str | None = None
    time: str | None = None
    datetime: str | None = None


@dataclass(frozen=True)
class Postback:
    data: str
    params: PostbackParams | None = None


@dataclass(frozen=True)
class WebhookEvent:
    """Um evento do lote entregue pelo webhook."""

    type: str
    source: EventSource
    timestamp: datetime
    reply_token: str = ""
    message: WebhookMessage | None = None
    postback: Postback | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def parse_timestamp(value: Any) -> datetime:
    """Converte epoch em milissegundos para datetime UTC."""
    try:
        return datetime.fromtimestamp(int(value) / 1000, tz=UTC)
    except (TypeError, ValueError, OverflowError):
        return datetime.fromtimestamp(0, tz=UTC)


def parse_source(raw: Any) -> EventSource:
    block = _as_dict(raw)
    return EventSource(
        type=str(block.get("type", "")),
        user_id=str(block.get("userId", "")),
        group_id=str(block.get("groupId", "")),
        room_id=str(block.get("roomId", "")),
    )


def parse_message(raw: Any) -> WebhookMessage:
    """Converte o message object conforme `type`."""
    block = _as_dict(raw)
    message_id = str(block.get("id", ""))
    message_type = str(block.get("type", ""))

    if message_type == "text":
        return TextMessage(id=message_id, text=str(block.get("text", "")))
    if message_type == "image":
        return ImageMessage(id=message_id)
    if message_type == "video":
        return VideoMessage(id=message_id)
    if message_type == "audio":
        return AudioMessage(id=message_id)
    if message_type == "file":
        return FileMessage(
            id=message_id,
            file_name=str(block.get("fileName", "")),
            file_size=int(block.get("fileSize") or 0),
        )
    if message_type == "location":
        return LocationMessage(
            id=message_id,
            title=str(block.get("title", "")),
            address=str(block.get("address", "")),
            latitude=float(block.get("latitude") or 0.0),
            longitude=float(block.get("longitude") or 0.0),
        )
    if message_type == "sticker":
        return StickerMessage(
            id=message_id,
            package_id=str(block.get("packageId", "")),
            sticker_id=str(block.get("stickerId", "")),
        )
    return UnknownMessage(id=message_id, type=message_type)


def parse_postback(raw: Any) -> Postback:
    block = _as_dict(raw)
    params_block = block.get("params")
    params = None
    if isinstance(params_block, dict):
        params = PostbackParams(
            date=params_block.get("date"),
            time=params_block.get("time"),
            datetime=params_block.get("datetime"),
        )
    return Postback(data=str(block.get("data", "")), params=params)


def parse_event(raw: dict[str, Any]) -> WebhookEvent:
    """Converte um event object em WebhookEvent."""
    event_type = str(raw.get("type", ""))
    message = parse_message(raw.get("message")) if event_type == "message" else None
    postback = parse_postback(raw.get("postback")) if event_type == "postback" else None
    return WebhookEvent(
        type=event_type,
        source=parse_source(raw.get("source")),
        timestamp=parse_timestamp(raw.get("timestamp")),
        reply_token=str(raw.get("replyToken", "")),
        message=message,
        postback=postback,
        raw=raw,
    )


def parse_events(payload: dict[str, Any]) -> list[WebhookEvent]:
    """Extrai todos os eventos do payload. Itens que não são objeto são ignorados.

    Raises:
        ValueError: Se `events` não for uma lista.
    """
    raw_events = payload.get("events", [])
    if not isinstance(raw_events, list):
        raise ValueError("events_not_list")
    return [parse_event(item) for item in raw_events if isinstance(item, dict)]
