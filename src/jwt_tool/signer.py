"""HMAC-SHA256 signing for token signing input."""

from __future__ import annotations

from jwt.algorithms import HMACAlgorithm

__all__ = ["sign", "verify"]

_HS256 = HMACAlgorithm(HMACAlgorithm.SHA256)


def sign(message: bytes, secret: str) -> bytes:
    """Return the HMAC-SHA256 of *message* keyed by the UTF-8 bytes of *secret*.

    Any secret is accepted, including the empty string.
    """
    return _HS256.sign(message, secret.encode("utf-8"))


def verify(message: bytes, signature: bytes, secret: str) -> bool:
    """Check *signature* against *message* in constant time."""
    return _HS256.verify(message, secret.encode("utf-8"), signature)
