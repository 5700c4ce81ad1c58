"""Agregador de rotas e fábrica da aplicação ASGI do webhook.

Uso:
    from api.routes import create_webhook_app

    app = create_webhook_app(settings, on_events)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, FastAPI

from api.routes.line.webhook import create_line_router

if TYPE_CHECKING:
    from api.routes.line.webhook import OnEvents
    from config.settings import LineSettings


def create_api_router(settings: LineSettings, on_events: OnEvents) -> APIRouter:
    """Cria router principal com o webhook LINE registrado."""
    api_router = APIRouter()
    api_router.include_router(create_line_router(settings, on_events), tags=["line"])
    return api_router


def create_webhook_app(settings: LineSettings, on_events: OnEvents) -> FastAPI:
    """Cria a aplicação FastAPI que atende o callback do LINE.

    Docs/OpenAPI ficam desabilitados: o único cliente é a plataforma LINE.
    """
    app = FastAPI(
        title="line-adapter",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(create_api_router(settings, on_events))
    return app
