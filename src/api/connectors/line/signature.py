"""Validação do header X-Line-Signature.

O LINE assina o corpo bruto com HMAC-SHA256 usando o channel secret e
envia o digest em base64.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-line-signature"


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da validação de assinatura."""

    valid: bool
    error: str | None = None


def compute_line_signature(raw_body: bytes, channel_secret: str) -> str:
    """Calcula a assinatura esperada para o corpo."""
    digest = hmac.new(channel_secret.encode("utf-8"), raw_body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_line_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    channel_secret: str,
) -> SignatureResult:
    """Compara X-Line-Signature com o HMAC do corpo em tempo constante."""
    if not channel_secret:
        return SignatureResult(valid=False, error="missing_channel_secret")

    received = _get_header(headers, SIGNATURE_HEADER)
    if not received:
        return SignatureResult(valid=False, error="missing_signature")

    expected = compute_line_signature(raw_body, channel_secret)
    if not hmac.compare_digest(expected.encode("ascii"), received.encode("utf-8")):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)


def _get_header(headers: Mapping[str, str], name: str) -> str:
    for key, value in headers.items():
        if key.lower() == name:
            return value.strip()
    return ""
