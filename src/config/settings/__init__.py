"""Agregador de settings do adapter LINE."""

from __future__ import annotations

from config.settings.line import (
    DEFAULT_ABORT_COMMAND,
    DEFAULT_ENDPOINT,
    DEFAULT_HELP_COMMAND,
    DEFAULT_PORT,
    LINE_API_BASE_URL,
    LineClientOptions,
    LineSettings,
    TLSSettings,
    get_line_settings,
    load_line_settings_from_file,
    load_line_settings_from_mapping,
)

__all__ = [
    "DEFAULT_ABORT_COMMAND",
    "DEFAULT_ENDPOINT",
    "DEFAULT_HELP_COMMAND",
    "DEFAULT_PORT",
    "LINE_API_BASE_URL",
    "LineClientOptions",
    "LineSettings",
    "TLSSettings",
    "get_line_settings",
    "load_line_settings_from_file",
    "load_line_settings_from_mapping",
]
