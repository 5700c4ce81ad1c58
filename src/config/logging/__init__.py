"""Logging estruturado (JSON) do adapter LINE.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="line_adapter")

    logger = get_logger(__name__)
    logger.info("reply_sent", extra={"message_count": 2})

Todo record carrega: asctime, level, logger, message, correlation_id, service.
Tokens de canal e reply tokens nunca vão para o log.
"""

from config.logging.config import DEFAULT_SERVICE_NAME, configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
