"""Adapter LINE para o framework de bots.

Entrada: servidor HTTP (FastAPI + uvicorn) no endpoint configurado; cada
lote de eventos validado passa pelo EventHandler ativo e os inputs vão para
o `enqueue_input` do framework.

Saída: `send_message` resolve o formato do Output e responde pela reply API
com prazo de REPLY_TIMEOUT_SECONDS, limitado também pelo `deadline` do
chamador. Falhas de envio são logadas; não há retry nem propagação.
"""

from __future__ import annotations

import asyncio
import logging
import socket
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import uvicorn

from api.connectors.line.http_base import HttpError
from api.connectors.line.http_client import create_line_http_client
from api.normalizers.line import default_event_handler
from api.payload_builders.line import TextMessage, is_sending_message
from api.routes import create_webhook_app
from app.constants.line import BOT_TYPE
from app.protocols.bot import CommandHelps
from config.settings import get_line_settings

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import FastAPI

    from api.connectors.line.models import WebhookEvent
    from app.protocols.bot import EnqueueInput, Input, NotifyError, Output
    from app.protocols.http_client import LineReplyClientProtocol
    from app.protocols.normalizer import EventHandlerProtocol
    from app.protocols.payload_builder import SendingMessageProtocol
    from config.settings import LineSettings

    EnqueueErrorHandler = Callable[[Exception, Input], None]

logger = logging.getLogger(__name__)

REPLY_TIMEOUT_SECONDS = 5.0


def _log_enqueue_error(exc: Exception, input_: Input) -> None:
    logger.error(
        "enqueue_input_failed",
        extra={
            "channel": "line",
            "input_type": type(input_).__name__,
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )


def resolve_messages(content: Any) -> list[SendingMessageProtocol] | None:
    """Converte o conteúdo de um Output na lista de mensagens a enviar.

    Formatos aceitos: uma mensagem, lista/tupla de mensagens ou CommandHelps
    (uma mensagem de texto por comando). Qualquer outro formato devolve None.
    """
    if isinstance(content, CommandHelps):
        return [TextMessage(command_help.instruction) for command_help in content]
    if is_sending_message(content):
        return [content]
    if isinstance(content, (list, tuple)) and all(is_sending_message(m) for m in content):
        return list(content)
    return None


def _bind_socket(host: str, port: int) -> socket.socket:
    """Abre o socket do listener; erro de bind sobe como OSError."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


class LineAdapter:
    """Adapter LINE: webhook inbound e reply outbound."""

    def __init__(
        self,
        settings: LineSettings,
        *,
        client: LineReplyClientProtocol | None = None,
        event_handler: EventHandlerProtocol | None = None,
        on_enqueue_error: EnqueueErrorHandler | None = None,
    ) -> None:
        """Monta o adapter.

        Args:
            settings: Settings imutáveis do canal
            client: Cliente da reply API; se None, construído a partir das settings
            event_handler: Substitui a conversão default de eventos
            on_enqueue_error: Recebe falhas do enqueue_input (default: log)

        Raises:
            LineClientError: Credenciais ou opções do cliente inválidas.
        """
        self._settings = settings
        self._event_handler = event_handler or default_event_handler
        self._on_enqueue_error = on_enqueue_error or _log_enqueue_error
        self._client = client if client is not None else create_line_http_client(settings)
        self._server: uvicorn.Server | None = None

    @property
    def bot_type(self) -> str:
        return BOT_TYPE

    @property
    def settings(self) -> LineSettings:
        return self._settings

    # ──────────────────────────────────────────────────────────────────────
    # Inbound
    # ──────────────────────────────────────────────────────────────────────

    def _guard_enqueue(self, enqueue_input: EnqueueInput) -> EnqueueInput:
        async def _enqueue(input_: Input) -> None:
            try:
                await enqueue_input(input_)
            except Exception as exc:
                self._on_enqueue_error(exc, input_)

        return _enqueue

    async def handle_events(
        self,
        events: Sequence[WebhookEvent],
        enqueue_input: EnqueueInput,
    ) -> None:
        """Passa o lote ao EventHandler ativo com enqueue protegido."""
        await self._event_handler(self._settings, events, self._guard_enqueue(enqueue_input))

    def create_app(self, enqueue_input: EnqueueInput) -> FastAPI:
        """Aplicação ASGI do webhook ligada a este adapter."""

        async def _on_events(events: list[WebhookEvent]) -> None:
            await self.handle_events(events, enqueue_input)

        return create_webhook_app(self._settings, _on_events)

    async def run(self, enqueue_input: EnqueueInput, notify_error: NotifyError) -> None:
        """Serve o webhook até o servidor encerrar.

        Falha de bind/listen é reportada uma única vez via `notify_error`.
        """
        try:
            await self._listen(enqueue_input)
        except OSError as exc:
            logger.error(
                "listener_failed",
                extra={
                    "channel": "line",
                    "address": self._settings.address,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            notify_error(exc)

    async def _listen(self, enqueue_input: EnqueueInput) -> None:
        tls = self._settings.tls
        config = uvicorn.Config(
            self.create_app(enqueue_input),
            host=self._settings.host,
            port=self._settings.port,
            ssl_certfile=tls.cert_file if tls else None,
            ssl_keyfile=tls.key_file if tls else None,
            log_config=None,
            access_log=False,
        )
        sock = _bind_socket(self._settings.host, self._settings.port)
        server = uvicorn.Server(config)
        self._server = server
        logger.info(
            "listener_started",
            extra={
                "channel": "line",
                "address": self._settings.address,
                "endpoint": self._settings.endpoint,
                "tls": tls is not None,
            },
        )
        try:
            await server.serve(sockets=[sock])
        finally:
            self._server = None
            sock.close()

    @property
    def started(self) -> bool:
        """True quando o servidor terminou o startup e aceita conexões."""
        return self._server is not None and self._server.started

    def stop(self) -> None:
        """Pede ao servidor em execução que encerre."""
        if self._server is not None:
            self._server.should_exit = True

    # ──────────────────────────────────────────────────────────────────────
    # Outbound
    # ──────────────────────────────────────────────────────────────────────

    async def send_message(self, output: Output, deadline: float | None = None) -> None:
        """Responde ao evento identificado por `output.destination` (reply token).

        Args:
            output: Output roteado pelo framework
            deadline: Prazo absoluto do chamador, em `loop.time()`
        """
        reply_token = output.destination
        if not isinstance(reply_token, str):
            logger.error(
                "reply_destination_invalid",
                extra={"channel": "line", "destination_type": type(reply_token).__name__},
            )
            return

        messages = resolve_messages(output.content)
        if messages is None:
            logger.warning(
                "unexpected_output",
                extra={"channel": "line", "content_type": type(output.content).__name__},
            )
            return

        await self.reply(reply_token, messages, deadline=deadline)

    async def reply(
        self,
        reply_token: str,
        messages: Sequence[SendingMessageProtocol],
        deadline: float | None = None,
    ) -> None:
        """Envia as mensagens dentro de REPLY_TIMEOUT_SECONDS (ou até `deadline`, se antes).

        Prazo já vencido: nada é enviado. Cancelar a task chamadora aborta o envio.
        """
        loop = asyncio.get_running_loop()
        now = loop.time()
        reply_deadline = now + REPLY_TIMEOUT_SECONDS
        if deadline is not None:
            if deadline <= now:
                logger.error(
                    "reply_deadline_exceeded",
                    extra={"channel": "line", "message_count": len(messages)},
                )
                return
            reply_deadline = min(reply_deadline, deadline)

        try:
            async with asyncio.timeout_at(reply_deadline):
                await self._client.reply_message(reply_token, messages)
        except TimeoutError:
            logger.error(
                "reply_failed",
                extra={"channel": "line", "error_type": "TimeoutError", "error": "reply_timeout"},
            )
        except (HttpError, ValueError) as exc:
            logger.error(
                "reply_failed",
                extra={
                    "channel": "line",
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                    "status_code": getattr(exc, "status_code", None),
                },
            )
        else:
            logger.debug(
                "reply_sent",
                extra={"channel": "line", "message_count": len(messages)},
            )


def create_line_adapter(
    settings: LineSettings | None = None,
    **kwargs: Any,
) -> LineAdapter:
    """Factory do adapter; sem settings, carrega do ambiente.

    Raises:
        LineClientError: Credenciais ou opções do cliente inválidas.
    """
    return LineAdapter(settings or get_line_settings(), **kwargs)
