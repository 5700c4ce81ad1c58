"""Builder para mensagens de texto."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.constants.line import MessageType

# Limite de caracteres da Messaging API para mensagens de texto
MAX_TEXT_LENGTH = 5000


@dataclass(frozen=True)
class TextMessage:
    """Mensagem de texto simples."""

    text: str

    def build(self) -> dict[str, Any]:
        """Constrói payload da mensagem.

        Raises:
            ValueError: Texto vazio ou acima do limite da API
        """
        if not self.text:
            raise ValueError("text é obrigatório para mensagem de texto")
        if len(self.text) > MAX_TEXT_LENGTH:
            raise ValueError(f"text excede {MAX_TEXT_LENGTH} caracteres")
        return {"type": MessageType.TEXT.value, "text": self.text}
