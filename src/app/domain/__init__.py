"""Modelos de domínio: inputs normalizados do LINE."""

from .inputs import (
    FileInput,
    InputKind,
    LineInput,
    Location,
    LocationInput,
    PostbackInput,
    PostbackParams,
    StickerInput,
    TextInput,
    is_source_group,
    is_source_room,
    is_source_user,
    source_type_of,
)

__all__ = [
    "FileInput",
    "InputKind",
    "LineInput",
    "Location",
    "LocationInput",
    "PostbackInput",
    "PostbackParams",
    "StickerInput",
    "TextInput",
    "is_source_group",
    "is_source_room",
    "is_source_user",
    "source_type_of",
]
