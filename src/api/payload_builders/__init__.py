"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- line/: mensagens da Messaging API e helpers de CommandResponse

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
