"""
Core JWT decoding logic.

Decodes a compact token without signature verification and returns the
header, payload, raw signature and expiry status as one immutable value.
Decoding is lenient: header and payload are decoded independently so a
partially typed or damaged token still yields whatever can be recovered.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from datetime import datetime, timezone

from . import base64url, signer
from .segments import try_decode_segment

__all__ = [
    "DecodedToken",
    "StructureError",
    "STRUCTURE_ERROR",
    "HEADER_ERROR",
    "PAYLOAD_ERROR",
    "decode_token",
    "split_token",
    "verify_signature",
]

logger = logging.getLogger(__name__)

STRUCTURE_ERROR = "Invalid JWT structure"
HEADER_ERROR = "Invalid Header encoding"
PAYLOAD_ERROR = "Invalid Payload encoding"


class StructureError(Exception):
    """Raised when token text does not have exactly three segments."""


@dataclass(frozen=True)
class DecodedToken:
    """Decoded parts of a token plus structural and expiry status."""

    header: dict | None = None
    payload: dict | None = None
    signature: str | None = None
    is_structurally_valid: bool = True
    error_message: str | None = None
    expiry: float | None = None  # milliseconds since the Unix epoch
    is_expired: bool = False
    header_error: str | None = None
    payload_error: str | None = None

    @property
    def expiry_datetime(self) -> datetime | None:
        """Expiry as an aware UTC datetime, or None."""
        if self.expiry is None:
            return None
        try:
            return datetime.fromtimestamp(self.expiry / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None


def split_token(token: str) -> list[str]:
    """Split *token* into its three segments.

    Raises:
        StructureError: If the text does not contain exactly two ``.`` separators.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise StructureError(
            f"expected 3 parts (header.payload.signature), got {len(parts)}"
        )
    return parts


def _expiry_ms(payload: dict | None) -> float | None:
    """Return ``exp`` in milliseconds when it is a finite number."""
    if payload is None:
        return None
    exp = payload.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return None
    if isinstance(exp, float) and not math.isfinite(exp):
        return None
    return exp * 1000


def decode_token(token: str, now_ms: float | None = None) -> DecodedToken:
    """
    Decode token text into a :class:`DecodedToken`.

    Never raises: structural and per-segment failures are reported through
    ``is_structurally_valid`` and ``error_message``. Empty or whitespace-only
    text yields an empty, valid result.

    *now_ms* is the current time in milliseconds (defaults to the wall clock)
    and only affects ``is_expired``.
    """
    token = token.strip()
    if not token:
        return DecodedToken()

    error_message: str | None = None
    try:
        parts = split_token(token)
    except StructureError as exc:
        logger.debug("Token structure rejected: %s", exc)
        parts = token.split(".")
        error_message = STRUCTURE_ERROR

    header_result = try_decode_segment(parts[0])
    payload_result = try_decode_segment(parts[1]) if len(parts) > 1 else None

    if error_message is None and not header_result.ok:
        error_message = HEADER_ERROR
    if error_message is None and (payload_result is None or not payload_result.ok):
        error_message = PAYLOAD_ERROR

    payload = payload_result.value if payload_result is not None else None
    payload_error = None
    if payload_result is not None and payload_result.error is not None:
        payload_error = str(payload_result.error)

    expiry = _expiry_ms(payload)
    is_expired = False
    if expiry is not None:
        if now_ms is None:
            now_ms = time.time() * 1000
        is_expired = now_ms >= expiry

    return DecodedToken(
        header=header_result.value,
        payload=payload,
        signature=parts[2] if len(parts) > 2 else None,
        is_structurally_valid=error_message is None,
        error_message=error_message,
        expiry=expiry,
        is_expired=is_expired,
        header_error=str(header_result.error) if header_result.error is not None else None,
        payload_error=payload_error,
    )


def verify_signature(token: str, secret: str) -> bool:
    """Check the HS256 signature of *token* against *secret*.

    Returns False for any token that is not three segments or whose
    signature segment is not valid base64url.
    """
    try:
        header_segment, payload_segment, signature_segment = split_token(token.strip())
        signature = base64url.decode(signature_segment)
    except (StructureError, base64url.DecodeError) as exc:
        logger.debug("Signature check skipped: %s", exc)
        return False
    signing_input = f"{header_segment}.{payload_segment}".encode("utf-8")
    return signer.verify(signing_input, signature, secret)
