from api.connectors.line.signature import compute_line_signature, verify_line_signature


def test_verify_line_signature_ok() -> None:
    body = b'{"events": []}'
    headers = {"X-Line-Signature": compute_line_signature(body, "secret")}

    result = verify_line_signature(body, headers, "secret")

    assert result.valid is True
    assert result.error is None


def test_verify_line_signature_tampered_body() -> None:
    headers = {"x-line-signature": compute_line_signature(b'{"events": []}', "secret")}

    result = verify_line_signature(b'{"events": [{}]}', headers, "secret")

    assert result.valid is False
    assert result.error == "signature_mismatch"


def test_verify_line_signature_missing_header() -> None:
    result = verify_line_signature(b"{}", {}, "secret")

    assert result.valid is False
    assert result.error == "missing_signature"


def test_verify_line_signature_missing_secret() -> None:
    body = b"{}"
    headers = {"x-line-signature": compute_line_signature(body, "secret")}

    result = verify_line_signature(body, headers, "")

    assert result.valid is False
    assert result.error == "missing_channel_secret"
