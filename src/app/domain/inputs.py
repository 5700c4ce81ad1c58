"""Inputs normalizados produzidos a partir dos eventos do LINE.

Cada variante é um dataclass imutável com os campos comuns em `LineInput`
e a tag `kind`. Todas satisfazem app.protocols.Input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from app.constants.line import EventSourceType, MessageType
from app.protocols.bot import AbortInput, HelpInput


class InputKind(StrEnum):
    """Variantes de input normalizado."""

    TEXT = "text"
    FILE = "file"
    LOCATION = "location"
    STICKER = "sticker"
    POSTBACK = "postback"


@dataclass(frozen=True, kw_only=True)
class LineInput:
    """Campos comuns a todo input vindo do LINE."""

    sender_key: str
    reply_token: str
    timestamp: datetime
    source_type: EventSourceType

    kind: InputKind = field(default=InputKind.TEXT, init=False)

    @property
    def message(self) -> str:
        return ""

    @property
    def sent_at(self) -> datetime:
        return self.timestamp

    @property
    def reply_to(self) -> str:
        return self.reply_token


@dataclass(frozen=True, kw_only=True)
class TextInput(LineInput):
    """Mensagem de texto."""

    id: str
    text: str

    kind: InputKind = field(default=InputKind.TEXT, init=False)

    @property
    def message(self) -> str:
        return self.text


@dataclass(frozen=True, kw_only=True)
class FileInput(LineInput):
    """Imagem, vídeo ou áudio. Não carrega texto."""

    id: str
    type: MessageType

    kind: InputKind = field(default=InputKind.FILE, init=False)


@dataclass(frozen=True)
class Location:
    """Localização enviada pelo usuário."""

    title: str
    address: str
    latitude: float
    longitude: float


@dataclass(frozen=True, kw_only=True)
class LocationInput(LineInput):
    """Mensagem de localização; o texto normalizado é o título."""

    id: str
    location: Location

    kind: InputKind = field(default=InputKind.LOCATION, init=False)

    @property
    def message(self) -> str:
        return self.location.title


@dataclass(frozen=True, kw_only=True)
class StickerInput(LineInput):
    """Sticker. Não carrega texto."""

    id: str
    package_id: str
    sticker_id: str

    kind: InputKind = field(default=InputKind.STICKER, init=False)


@dataclass(frozen=True)
class PostbackParams:
    """Parâmetros do datetime picker; só presentes quando o usuário escolhe data/hora."""

    date: str | None = None
    time: str | None = None
    datetime: str | None = None


@dataclass(frozen=True, kw_only=True)
class PostbackInput(LineInput):
    """Postback; o texto normalizado é o `data` bruto."""

    data: str
    params: PostbackParams | None = None

    kind: InputKind = field(default=InputKind.POSTBACK, init=False)

    @property
    def message(self) -> str:
        return self.data


def source_type_of(value: Any) -> EventSourceType | None:
    """Retorna o tipo de origem de um input LINE (inclusive embrulhado em Help/Abort)."""
    if isinstance(value, (HelpInput, AbortInput)):
        value = value.original
    if isinstance(value, LineInput):
        return value.source_type
    return None


def is_source_user(value: Any) -> bool:
    return source_type_of(value) == EventSourceType.USER


def is_source_room(value: Any) -> bool:
    return source_type_of(value) == EventSourceType.ROOM


def is_source_group(value: Any) -> bool:
    return source_type_of(value) == EventSourceType.GROUP
