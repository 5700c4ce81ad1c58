"""Builders para mensagens de mídia (imagem, vídeo, áudio).

A Messaging API exige URLs HTTPS acessíveis publicamente.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.constants.line import MessageType


def _require_https(url: str, field_name: str) -> str:
    if not url:
        raise ValueError(f"{field_name} é obrigatório")
    if not url.startswith("https://"):
        raise ValueError(f"{field_name} deve ser uma URL HTTPS")
    return url


@dataclass(frozen=True)
class ImageMessage:
    original_content_url: str
    preview_image_url: str

    def build(self) -> dict[str, Any]:
        return {
            "type": MessageType.IMAGE.value,
            "originalContentUrl": _require_https(self.original_content_url, "original_content_url"),
            "previewImageUrl": _require_https(self.preview_image_url, "preview_image_url"),
        }


@dataclass(frozen=True)
class VideoMessage:
    original_content_url: str
    preview_image_url: str

    def build(self) -> dict[str, Any]:
        return {
            "type": MessageType.VIDEO.value,
            "originalContentUrl": _require_https(self.original_content_url, "original_content_url"),
            "previewImageUrl": _require_https(self.preview_image_url, "preview_image_url"),
        }


@dataclass(frozen=True)
class AudioMessage:
    """Áudio; `duration` em milissegundos."""

    original_content_url: str
    duration: int

    def build(self) -> dict[str, Any]:
        if self.duration <= 0:
            raise ValueError("duration deve ser > 0 (milissegundos)")
        return {
            "type": MessageType.AUDIO.value,
            "originalContentUrl": _require_https(self.original_content_url, "original_content_url"),
            "duration": self.duration,
        }
