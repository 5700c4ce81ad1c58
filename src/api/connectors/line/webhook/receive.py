"""Parse e validação inicial do webhook (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..models import WebhookEvent, parse_events
from ..signature import SignatureResult, verify_line_signature

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida do webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    channel_secret: str,
) -> tuple[list[WebhookEvent], SignatureResult]:
    """Valida assinatura e converte o corpo no lote de eventos.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        channel_secret: Channel secret do LINE

    Raises:
        InvalidSignatureError: Se a assinatura for inválida ou ausente
        InvalidJsonError: Se o JSON estiver inválido ou fora do formato

    Returns:
        (eventos, SignatureResult)
    """
    signature_result = verify_line_signature(raw_body, headers, channel_secret)
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    try:
        events = parse_events(payload)
    except (TypeError, ValueError) as exc:
        raise InvalidJsonError(str(exc) or "invalid_event") from exc

    return events, signature_result
