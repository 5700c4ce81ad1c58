"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .payload_builder import SendingMessageProtocol


class LineReplyClientProtocol(Protocol):
    """Contrato mínimo para o cliente da reply API do LINE."""

    async def reply_message(
        self,
        reply_token: str,
        messages: Sequence[SendingMessageProtocol],
    ) -> dict[str, Any]: ...
