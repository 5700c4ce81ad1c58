"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- line/: LINE Messaging API (webhook + reply API)

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
