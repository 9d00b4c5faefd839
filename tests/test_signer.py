from __future__ import annotations

import hashlib
import hmac

from jwt_tool import signer

REFERENCE_SIGNING_INPUT = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
)


def test_sign_matches_stdlib_hmac_sha256() -> None:
    message = REFERENCE_SIGNING_INPUT.encode("utf-8")
    expected = hmac.new(b"secret", message, hashlib.sha256).digest()
    assert signer.sign(message, "secret") == expected
    assert len(expected) == 32


def test_sign_accepts_empty_secret() -> None:
    expected = hmac.new(b"", b"payload", hashlib.sha256).digest()
    assert signer.sign(b"payload", "") == expected


def test_sign_encodes_secret_as_utf8() -> None:
    expected = hmac.new("clé".encode("utf-8"), b"m", hashlib.sha256).digest()
    assert signer.sign(b"m", "clé") == expected


def test_verify() -> None:
    sig = signer.sign(b"message", "k")
    assert signer.verify(b"message", sig, "k")
    assert not signer.verify(b"message", sig, "other")
    assert not signer.verify(b"tampered", sig, "k")
