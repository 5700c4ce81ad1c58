"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- line/: normalizer de eventos do webhook LINE

Cada canal tem seu próprio normalizer, mantendo SRP.
"""

from .line import default_event_handler, event_to_user_input, source_to_sender_key

__all__ = [
    "default_event_handler",
    "event_to_user_input",
    "source_to_sender_key",
]
