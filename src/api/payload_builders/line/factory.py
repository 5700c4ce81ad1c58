"""Conversão de sequências de mensagens para o payload da API."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from app.protocols.payload_builder import SendingMessageProtocol


def is_sending_message(value: Any) -> bool:
    """True se o valor é uma mensagem enviável (tem `build()`)."""
    return isinstance(value, SendingMessageProtocol)


def build_messages_payload(messages: Sequence[SendingMessageProtocol]) -> list[dict[str, Any]]:
    """Serializa as mensagens na ordem recebida.

    Raises:
        ValueError: Item que não é mensagem enviável ou builder inválido
    """
    payload: list[dict[str, Any]] = []
    for message in messages:
        if not is_sending_message(message):
            raise ValueError(f"Mensagem não suportada: {type(message).__name__}")
        payload.append(message.build())
    return payload
