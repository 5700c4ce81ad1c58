"""Contrato com o framework de bots hospedeiro.

O framework é dono da fila de inputs, do despacho de comandos e do
armazenamento de contexto conversacional. Este módulo descreve apenas o
que o adapter produz (inputs, sinais de help/abort) e consome (outputs).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Input(Protocol):
    """Ação de usuário já normalizada."""

    @property
    def sender_key(self) -> str: ...

    @property
    def message(self) -> str: ...

    @property
    def sent_at(self) -> datetime: ...

    @property
    def reply_to(self) -> Any: ...


@dataclass(frozen=True)
class _SignalInput:
    """Base dos sinais: delega os acessores ao input original."""

    original: Input

    @property
    def sender_key(self) -> str:
        return self.original.sender_key

    @property
    def message(self) -> str:
        return self.original.message

    @property
    def sent_at(self) -> datetime:
        return self.original.sent_at

    @property
    def reply_to(self) -> Any:
        return self.original.reply_to


@dataclass(frozen=True)
class HelpInput(_SignalInput):
    """Pede ao framework que responda com a listagem de comandos."""


@dataclass(frozen=True)
class AbortInput(_SignalInput):
    """Pede ao framework que encerre o contexto multi-turno do usuário."""


@dataclass(frozen=True)
class Output:
    """Resposta roteada de volta ao adapter.

    Attributes:
        destination: Para o LINE, o reply token do evento original.
        content: Mensagem, lista de mensagens ou CommandHelps.
    """

    destination: Any
    content: Any


@dataclass(frozen=True)
class CommandHelp:
    """Descrição de um comando registrado."""

    identifier: str
    instruction: str


class CommandHelps(list[CommandHelp]):
    """Listagem de comandos, enviada como resposta ao HelpInput."""


ContextualFunc = Callable[[Input], Awaitable["CommandResponse"]]


@dataclass(frozen=True)
class UserContext:
    """Continuação de um comando multi-turno."""

    next_func: ContextualFunc


@dataclass(frozen=True)
class CommandResponse:
    """Valor devolvido pela lógica de comando ao framework."""

    content: Any
    user_context: UserContext | None = None


EnqueueInput = Callable[[Input], Awaitable[None]]
NotifyError = Callable[[Exception], None]


@runtime_checkable
class BotAdapterProtocol(Protocol):
    """Contrato mínimo de um adapter de plataforma."""

    @property
    def bot_type(self) -> str: ...

    async def run(self, enqueue_input: EnqueueInput, notify_error: NotifyError) -> None: ...

    async def send_message(self, output: Output, deadline: float | None = None) -> None: ...
