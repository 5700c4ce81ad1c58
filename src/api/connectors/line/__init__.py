"""Conector LINE - adapter de borda para a Messaging API.

Único ponto de IO do canal LINE:
- Webhook (assinatura X-Line-Signature e parsing do lote de eventos)
- Cliente HTTP da reply API
- Modelos e erros da API
"""

from .http_client import LineHttpClient, create_line_http_client
from .line_errors import LineApiError, LineClientError, parse_line_error
from .signature import SignatureResult, compute_line_signature, verify_line_signature

__all__ = [
    "LineApiError",
    "LineClientError",
    "LineHttpClient",
    "SignatureResult",
    "compute_line_signature",
    "create_line_http_client",
    "parse_line_error",
    "verify_line_signature",
]
