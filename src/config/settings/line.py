"""Settings do canal LINE.

Imutáveis após a construção. Três fontes possíveis:
- variáveis de ambiente (`get_line_settings`, cacheado)
- mapping já carregado (`load_line_settings_from_mapping`)
- arquivo YAML/JSON (`load_line_settings_from_file`)
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

import yaml

if TYPE_CHECKING:
    from collections.abc import Mapping

LINE_API_BASE_URL: str = "https://api.line.me"

DEFAULT_HELP_COMMAND = ".help"
DEFAULT_ABORT_COMMAND = ".abort"
DEFAULT_PORT = 8080
DEFAULT_ENDPOINT = "/callback"


@dataclass(frozen=True)
class TLSSettings:
    """Certificado e chave para servir o webhook via HTTPS."""

    cert_file: str
    key_file: str


@dataclass(frozen=True)
class LineClientOptions:
    """Opções repassadas ao cliente HTTP da Messaging API.

    Attributes:
        api_base_url: URL base da API (sobrescrever em testes/proxy)
        request_timeout_seconds: Timeout do httpx por requisição
        verify_ssl: Valida certificado do servidor remoto
        default_headers: Headers extras enviados em toda requisição
    """

    api_base_url: str = LINE_API_BASE_URL
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True
    default_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Somente leitura e desacoplado do dict do chamador
        object.__setattr__(self, "default_headers", MappingProxyType(dict(self.default_headers)))


@dataclass(frozen=True)
class LineSettings:
    """Configurações do adapter LINE.

    Attributes:
        channel_token: Channel access token (Bearer da Messaging API)
        channel_secret: Channel secret (HMAC do X-Line-Signature)
        help_command: Texto que vira HelpInput; vazio desabilita
        abort_command: Texto que vira AbortInput; vazio desabilita
        port: Porta do servidor do webhook
        endpoint: Path do callback registrado no LINE Developers
        host: Interface de bind
        tls: Certificado/chave; None serve HTTP puro
        client: Opções do cliente da Messaging API
        dump_request_on_error: Inclui dump do request nos logs de falha
    """

    channel_token: str = ""
    channel_secret: str = ""
    help_command: str = DEFAULT_HELP_COMMAND
    abort_command: str = DEFAULT_ABORT_COMMAND
    port: int = DEFAULT_PORT
    endpoint: str = DEFAULT_ENDPOINT
    host: str = "0.0.0.0"
    tls: TLSSettings | None = None
    client: LineClientOptions = field(default_factory=LineClientOptions)
    dump_request_on_error: bool = True

    @property
    def address(self) -> str:
        """Endereço de bind no formato host:port."""
        return f"{self.host}:{self.port}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.channel_secret:
            errors.append("LINE_CHANNEL_SECRET não configurado")

        if not self.channel_token:
            errors.append("LINE_CHANNEL_TOKEN não configurado")

        if not 0 < self.port < 65536:
            errors.append("LINE_PORT deve estar entre 1 e 65535")

        if not self.endpoint.startswith("/"):
            errors.append("LINE_ENDPOINT deve começar com '/'")

        if self.tls is not None and not (self.tls.cert_file and self.tls.key_file):
            errors.append("LINE_TLS_CERT_FILE e LINE_TLS_KEY_FILE devem ser informados juntos")

        if self.client.request_timeout_seconds <= 0:
            errors.append("LINE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if urlparse(self.client.api_base_url).scheme not in ("http", "https"):
            errors.append("LINE_API_BASE_URL deve ser uma URL http(s)")

        return errors


def _parse_tls(raw: Any) -> TLSSettings | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("tls deve ser um objeto com cert_file e key_file")
    return TLSSettings(
        cert_file=str(raw.get("cert_file", "")),
        key_file=str(raw.get("key_file", "")),
    )


def _parse_client_options(raw: Any) -> LineClientOptions:
    if raw is None:
        return LineClientOptions()
    if not isinstance(raw, dict):
        raise ValueError("client deve ser um objeto")
    headers = raw.get("default_headers") or {}
    if not isinstance(headers, dict):
        raise ValueError("client.default_headers deve ser um objeto")
    return LineClientOptions(
        api_base_url=str(raw.get("api_base_url", LINE_API_BASE_URL)),
        request_timeout_seconds=float(raw.get("request_timeout_seconds", 30.0)),
        verify_ssl=bool(raw.get("verify_ssl", True)),
        default_headers={str(k): str(v) for k, v in headers.items()},
    )


def load_line_settings_from_mapping(data: dict[str, Any]) -> LineSettings:
    """Constrói LineSettings a partir de um dict (ex: YAML/JSON já carregado).

    Chaves ausentes assumem o default; chaves desconhecidas são ignoradas.

    Raises:
        ValueError: Se algum bloco tiver formato inválido.
    """
    if not isinstance(data, dict):
        raise ValueError("Configuração LINE deve ser um objeto")

    return LineSettings(
        channel_token=str(data.get("channel_token", "")),
        channel_secret=str(data.get("channel_secret", "")),
        help_command=str(data.get("help_command", DEFAULT_HELP_COMMAND)),
        abort_command=str(data.get("abort_command", DEFAULT_ABORT_COMMAND)),
        port=int(data.get("port", DEFAULT_PORT)),
        endpoint=str(data.get("endpoint", DEFAULT_ENDPOINT)),
        host=str(data.get("host", "0.0.0.0")),
        tls=_parse_tls(data.get("tls")),
        client=_parse_client_options(data.get("client")),
        dump_request_on_error=bool(data.get("dump_request_on_error", True)),
    )


def load_line_settings_from_file(path: str | Path) -> LineSettings:
    """Carrega LineSettings de arquivo YAML (.yaml/.yml) ou JSON.

    Raises:
        FileNotFoundError: Se o arquivo não existe
        ValueError: Se o conteúdo tiver schema inválido
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config não encontrada: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        if config_path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return load_line_settings_from_mapping(data or {})


def _load_from_env() -> LineSettings:
    """Carrega LineSettings a partir de variáveis de ambiente."""
    cert_file = os.getenv("LINE_TLS_CERT_FILE", "")
    key_file = os.getenv("LINE_TLS_KEY_FILE", "")
    tls = TLSSettings(cert_file=cert_file, key_file=key_file) if cert_file or key_file else None

    return LineSettings(
        channel_token=os.getenv("LINE_CHANNEL_TOKEN", ""),
        channel_secret=os.getenv("LINE_CHANNEL_SECRET", ""),
        help_command=os.getenv("LINE_HELP_COMMAND", DEFAULT_HELP_COMMAND),
        abort_command=os.getenv("LINE_ABORT_COMMAND", DEFAULT_ABORT_COMMAND),
        port=int(os.getenv("LINE_PORT", str(DEFAULT_PORT))),
        endpoint=os.getenv("LINE_ENDPOINT", DEFAULT_ENDPOINT),
        host=os.getenv("LINE_HOST", "0.0.0.0"),
        tls=tls,
        client=LineClientOptions(
            api_base_url=os.getenv("LINE_API_BASE_URL", LINE_API_BASE_URL),
            request_timeout_seconds=float(os.getenv("LINE_REQUEST_TIMEOUT_SECONDS", "30")),
            verify_ssl=os.getenv("LINE_VERIFY_SSL", "true").lower() != "false",
        ),
        dump_request_on_error=os.getenv("LINE_DUMP_REQUEST_ON_ERROR", "true").lower() != "false",
    )


@lru_cache(maxsize=1)
def get_line_settings() -> LineSettings:
    """Retorna instância cacheada de LineSettings carregada do ambiente."""
    return _load_from_env()
