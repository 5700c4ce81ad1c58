"""Configuração do pytest para o adapter LINE."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.logging import CorrelationIdFilter  # noqa: E402
from config.settings import LineSettings  # noqa: E402


@pytest.fixture
def line_settings() -> LineSettings:
    """Settings com credenciais de teste e gatilhos default."""
    return LineSettings(channel_token="test-token", channel_secret="test-secret")


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """configure_logging substitui os handlers do root; restaura após cada teste."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if any(isinstance(f, CorrelationIdFilter) for f in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)
