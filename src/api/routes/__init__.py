"""Rotas HTTP da API — adapters de entrada por canal.

Responsabilidades:
- Definir o endpoint de webhook
- Validação inicial de request (assinatura, JSON)
- Delegação do lote de eventos para o adapter
- Respostas HTTP apropriadas

Estrutura por canal:
- routes/line/: webhook LINE

Agregação:
- router.py: monta o router principal e a aplicação FastAPI
"""

from __future__ import annotations

from api.routes.router import create_api_router, create_webhook_app

__all__ = ["create_api_router", "create_webhook_app"]
