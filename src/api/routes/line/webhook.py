"""Endpoint de webhook do LINE.

Endpoint:
- POST <endpoint> (default /callback): recebimento do lote de eventos

Fluxo:
1. Valida X-Line-Signature com o channel secret
2. Parseia o JSON no lote de WebhookEvent
3. Entrega o lote ao callback do adapter (normalização + enfileiramento)

Falha de assinatura/JSON é logada (com dump do request, se habilitado) e
respondida com 400; o servidor segue atendendo.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.line.signature import SIGNATURE_HEADER
from api.connectors.line.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from api.connectors.line.models import WebhookEvent
    from config.settings import LineSettings

logger = logging.getLogger(__name__)

OnEvents = Callable[[list["WebhookEvent"]], Awaitable[None]]

_REDACTED_HEADERS = frozenset({SIGNATURE_HEADER, "authorization"})


def dump_request(request: Request, raw_body: bytes) -> str:
    """Representação textual do request para diagnóstico (headers sensíveis mascarados)."""
    lines = [f"{request.method} {request.url.path} HTTP/{request.scope.get('http_version', '1.1')}"]
    for name, value in request.headers.items():
        shown = "***" if name.lower() in _REDACTED_HEADERS else value
        lines.append(f"{name}: {shown}")
    lines.append("")
    lines.append(raw_body.decode("utf-8", errors="replace"))
    return "\r\n".join(lines)


def _log_request_error(
    event: str,
    exc: WebhookRequestError,
    request: Request,
    raw_body: bytes,
    settings: LineSettings,
) -> None:
    extra: dict[str, Any] = {
        "channel": "line",
        "correlation_id": get_correlation_id(),
        "error": str(exc),
    }
    if settings.dump_request_on_error:
        extra["request_dump"] = dump_request(request, raw_body)
    logger.error(event, extra=extra)


def create_line_router(settings: LineSettings, on_events: OnEvents) -> APIRouter:
    """Cria o router com o endpoint configurado.

    Args:
        settings: Settings do adapter (secret, endpoint, dump em erro)
        on_events: Callback que recebe o lote validado

    Returns:
        APIRouter com POST em settings.endpoint.
    """
    router = APIRouter()

    @router.post(settings.endpoint, response_model=None)
    async def receive_webhook(request: Request) -> Response | dict[str, Any]:
        token = set_correlation_id(request.headers.get("x-correlation-id"))
        try:
            raw_body = await request.body()
            try:
                events, _signature = parse_webhook_request(
                    raw_body=raw_body,
                    headers=dict(request.headers),
                    channel_secret=settings.channel_secret,
                )
            except InvalidSignatureError as exc:
                _log_request_error("webhook_signature_invalid", exc, request, raw_body, settings)
                return Response(
                    content="Bad Request",
                    media_type="text/plain",
                    status_code=status.HTTP_400_BAD_REQUEST,
                )
            except InvalidJsonError as exc:
                _log_request_error("webhook_json_invalid", exc, request, raw_body, settings)
                return Response(
                    content="Bad Request",
                    media_type="text/plain",
                    status_code=status.HTTP_400_BAD_REQUEST,
                )

            logger.info(
                "webhook_received",
                extra={
                    "channel": "line",
                    "correlation_id": get_correlation_id(),
                    "event_count": len(events),
                    "payload_size": len(raw_body),
                },
            )

            try:
                await on_events(events)
            except Exception:
                logger.exception(
                    "webhook_processing_failed",
                    extra={"channel": "line", "correlation_id": get_correlation_id()},
                )
                return Response(
                    content="Internal Server Error",
                    media_type="text/plain",
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )

            return {"status": "received", "correlation_id": get_correlation_id()}
        finally:
            reset_correlation_id(token)

    return router
