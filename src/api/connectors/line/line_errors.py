"""Erros e helpers de parsing para a Messaging API do LINE."""

from __future__ import annotations

from typing import Any

from .http_base import HttpError


class LineClientError(ValueError):
    """Cliente não pôde ser construído (credenciais ou opções inválidas)."""


class LineApiError(HttpError):
    """Resposta não-2xx da Messaging API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        details: list[dict[str, Any]] | None = None,
        request_id: str = "",
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.details = details or []
        self.request_id = request_id

    @property
    def is_expired_token(self) -> bool:
        """Reply token inválido/expirado (uso único, ~1 minuto de validade)."""
        return self.status_code == 400 and "reply token" in str(self).lower()


def parse_line_error(
    status_code: int,
    response_data: Any,
    request_id: str = "",
) -> LineApiError:
    """Monta LineApiError a partir do corpo de erro da API.

    Formato esperado: {"message": "...", "details": [{"message": "...", "property": "..."}]}
    """
    body = response_data if isinstance(response_data, dict) else {}
    message = str(body.get("message") or f"http_status_{status_code}")
    details = body.get("details")
    if not isinstance(details, list):
        details = []
    return LineApiError(
        message,
        status_code=status_code,
        details=[d for d in details if isinstance(d, dict)],
        request_id=request_id,
    )
