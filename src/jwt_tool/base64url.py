"""
Unpadded, URL-safe base64 as used by compact token segments.
"""

from __future__ import annotations

import base64
import binascii

__all__ = ["DecodeError", "encode", "decode"]


class DecodeError(Exception):
    """Raised when text is not valid base64url."""


def _add_base64_padding(data: str) -> str:
    """Add padding characters for base64url decoding."""
    padding = len(data) % 4
    if padding:
        data += "=" * (4 - padding)
    return data


def encode(data: bytes) -> str:
    """Encode *data* as base64url without ``=`` padding."""
    b64 = base64.b64encode(data).decode("ascii")
    return b64.rstrip("=").replace("+", "-").replace("/", "_")


def decode(text: str) -> bytes:
    """Decode base64url *text*, padded or not.

    Raises:
        DecodeError: If the text is not valid base64 once the standard
            alphabet and padding are restored.
    """
    b64 = _add_base64_padding(text.rstrip("=")).replace("-", "+").replace("_", "/")
    try:
        return base64.b64decode(b64, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Invalid base64url data: {exc}") from exc
