"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SendingMessageProtocol(Protocol):
    """Mensagem que sabe se serializar no formato da Messaging API."""

    def build(self) -> dict[str, Any]: ...
