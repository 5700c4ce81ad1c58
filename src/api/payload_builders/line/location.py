"""Builders para localização e sticker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.constants.line import MessageType


@dataclass(frozen=True)
class LocationMessage:
    title: str
    address: str
    latitude: float
    longitude: float

    def build(self) -> dict[str, Any]:
        """Constrói payload de localização.

        Raises:
            ValueError: Título/endereço ausentes ou coordenadas fora do intervalo
        """
        if not self.title or not self.address:
            raise ValueError("title e address são obrigatórios para location")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError("latitude fora do intervalo [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError("longitude fora do intervalo [-180, 180]")
        return {
            "type": MessageType.LOCATION.value,
            "title": self.title,
            "address": self.address,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class StickerMessage:
    package_id: str
    sticker_id: str

    def build(self) -> dict[str, Any]:
        if not self.package_id or not self.sticker_id:
            raise ValueError("package_id e sticker_id são obrigatórios para sticker")
        return {
            "type": MessageType.STICKER.value,
            "packageId": self.package_id,
            "stickerId": self.sticker_id,
        }
