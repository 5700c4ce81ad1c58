"""Constantes e enums da Messaging API do LINE."""

from __future__ import annotations

from enum import StrEnum

# Identificador do adapter para o framework de bots
BOT_TYPE = "line"


class EventType(StrEnum):
    """Tipos de evento entregues pelo webhook."""

    MESSAGE = "message"
    POSTBACK = "postback"
    FOLLOW = "follow"
    UNFOLLOW = "unfollow"
    JOIN = "join"
    LEAVE = "leave"
    MEMBER_JOINED = "memberJoined"
    MEMBER_LEFT = "memberLeft"
    BEACON = "beacon"
    ACCOUNT_LINK = "accountLink"
    THINGS = "things"
    UNSEND = "unsend"
    VIDEO_PLAY_COMPLETE = "videoPlayComplete"


class EventSourceType(StrEnum):
    """Origem do evento (usuário, sala ou grupo)."""

    USER = "user"
    ROOM = "room"
    GROUP = "group"


class MessageType(StrEnum):
    """Tipos de mensagem (inbound e outbound)."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"
    LOCATION = "location"
    STICKER = "sticker"
    IMAGEMAP = "imagemap"
    TEMPLATE = "template"
    FLEX = "flex"


# Limite da reply API por chamada
MAX_REPLY_MESSAGES = 5
