"""Bootstrap do adapter — inicialização e validação de settings.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings(get_line_settings())
    adapter = create_line_adapter()
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging

if TYPE_CHECKING:
    from config.settings import LineSettings

# Nome do serviço para logs
SERVICE_NAME = "line_adapter"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no start."""
    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Logging em DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(settings: LineSettings) -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` apenas registra o alerta.

    Returns:
        Lista de erros encontrados (vazia = OK).

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito.
    """
    environment = os.getenv("ENVIRONMENT", "development").lower()
    errors = [f"line: {error}" for error in settings.validate()]

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
    return errors
