"""Protocolos de normalização inbound."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from config.settings import LineSettings

    from .bot import EnqueueInput


class EventHandlerProtocol(Protocol):
    """Estratégia que recebe o lote de eventos já validado pelo webhook.

    Exatamente uma estratégia fica ativa por adapter; a default converte
    mensagens e postbacks em inputs e ignora os demais eventos.
    """

    async def __call__(
        self,
        settings: LineSettings,
        events: Sequence[object],
        enqueue_input: EnqueueInput,
    ) -> None: ...
