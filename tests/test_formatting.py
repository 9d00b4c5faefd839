from __future__ import annotations

import json

from jwt_tool import base64url
from jwt_tool.decoder import DecodedToken, decode_token
from jwt_tool.formatting import format_expiry, render_decoded_json, render_decoded_text


def test_format_expiry() -> None:
    valid = DecodedToken(payload={"exp": 1516239022}, expiry=1516239022000, is_expired=False)
    assert format_expiry(valid) == "2018-01-18 01:30:22 UTC (valid)"
    assert format_expiry(valid, "%Y") == "2018 (valid)"
    assert format_expiry(DecodedToken()) is None


def test_format_expiry_out_of_range() -> None:
    decoded = DecodedToken(payload={"exp": 10**20}, expiry=10**23, is_expired=False)
    assert format_expiry(decoded) == f"exp={10**20} (valid)"


def test_render_text_marks_undecodable_segments() -> None:
    text = render_decoded_text(decode_token("abc.def"))
    assert text.startswith("Warning: Invalid JWT structure")
    assert "Header: (could not decode)" in text
    assert "Payload: (could not decode)" in text


def test_render_json(reference_token) -> None:
    report = json.loads(render_decoded_json(decode_token(reference_token), signature_verified=True))
    assert report["header"] == {"alg": "HS256", "typ": "JWT"}
    assert report["expiry"] is None
    assert report["expiry_iso"] is None
    assert report["signature_verified"] is True


def test_render_json_is_strict_for_overflowing_exp() -> None:
    payload_segment = base64url.encode(b'{"exp":1e306,"big":1e400}')
    decoded = decode_token(f"eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.{payload_segment}.sig", now_ms=0)

    def _reject(name):
        raise ValueError(name)

    report = json.loads(render_decoded_json(decoded), parse_constant=_reject)
    assert report["expiry"] is None
    assert report["payload"] == {"exp": 1e306, "big": None}
    assert report["is_expired"] is False
