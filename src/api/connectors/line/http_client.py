"""Cliente HTTP da Messaging API do LINE.

Estende HttpClient com o que é específico do LINE:
- Bearer com channel access token
- Validação de credenciais e opções na construção (LineClientError)
- Limite de 1 a 5 mensagens por reply
- Erros da API (message/details) convertidos em LineApiError
- Logging estruturado sem tokens
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from api.payload_builders.line.factory import build_messages_payload
from app.constants.line import MAX_REPLY_MESSAGES
from config.settings import LineClientOptions

from .http_base import HttpClient, HttpClientConfig
from .line_errors import LineClientError, parse_line_error

if TYPE_CHECKING:
    import httpx

    from app.protocols.payload_builder import SendingMessageProtocol
    from config.settings import LineSettings

logger: logging.Logger = logging.getLogger(__name__)

REPLY_PATH = "/v2/bot/message/reply"


class LineHttpClient(HttpClient):
    """Cliente para a reply API."""

    def __init__(
        self,
        channel_secret: str,
        channel_token: str,
        options: LineClientOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Valida credenciais e opções.

        Raises:
            LineClientError: Secret/token ausentes ou opções inválidas.
        """
        if not channel_secret:
            raise LineClientError("missing channel secret")
        if not channel_token:
            raise LineClientError("missing channel access token")

        opts = options or LineClientOptions()
        if opts.request_timeout_seconds <= 0:
            raise LineClientError("request_timeout_seconds must be positive")
        if urlparse(opts.api_base_url).scheme not in ("http", "https"):
            raise LineClientError(f"invalid api_base_url: {opts.api_base_url!r}")

        super().__init__(
            HttpClientConfig(
                timeout_seconds=opts.request_timeout_seconds,
                default_headers=dict(opts.default_headers),
                verify_ssl=opts.verify_ssl,
                transport=transport,
            )
        )
        self._channel_token = channel_token
        self._base_url = opts.api_base_url.rstrip("/")

    @property
    def reply_endpoint(self) -> str:
        return f"{self._base_url}{REPLY_PATH}"

    async def reply_message(
        self,
        reply_token: str,
        messages: Sequence[SendingMessageProtocol],
    ) -> dict[str, Any]:
        """Envia as mensagens como resposta ao evento do reply token.

        Raises:
            ValueError: Reply token vazio ou quantidade de mensagens fora de 1..5
            LineApiError: API respondeu com status não-2xx
            HttpError: Timeout ou falha de conexão
        """
        if not reply_token:
            raise ValueError("reply_token não pode ser vazio")
        if not 0 < len(messages) <= MAX_REPLY_MESSAGES:
            raise ValueError(
                f"reply aceita de 1 a {MAX_REPLY_MESSAGES} mensagens, recebeu {len(messages)}"
            )

        payload = {
            "replyToken": reply_token,
            "messages": build_messages_payload(messages),
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._channel_token}",
        }
        response = await self.post(self.reply_endpoint, json=payload, headers=headers)
        return self._process_response(response)

    def _process_response(self, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json() if response.content else {}
        except json.JSONDecodeError:
            data = {}

        request_id = response.headers.get("x-line-request-id", "")
        if response.is_success:
            logger.debug(
                "line_reply_succeeded",
                extra={"status_code": response.status_code, "request_id": request_id},
            )
            return data if isinstance(data, dict) else {}

        error = parse_line_error(response.status_code, data, request_id)
        logger.warning(
            "line_api_error",
            extra={
                "endpoint": REPLY_PATH,
                "status_code": error.status_code,
                "request_id": request_id,
                "error_message": str(error),
            },
        )
        raise error


def create_line_http_client(settings: LineSettings) -> LineHttpClient:
    """Factory do cliente a partir das settings do adapter.

    Raises:
        LineClientError: Credenciais ou opções inválidas.
    """
    return LineHttpClient(
        channel_secret=settings.channel_secret,
        channel_token=settings.channel_token,
        options=settings.client,
    )
