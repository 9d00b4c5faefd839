"""
Segment codec: JSON object <-> base64url text.

Header and payload segments are UTF-8 JSON objects; the JSON is written
compactly and keeps the caller's key order so a given object always maps
to the same segment.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from . import base64url

__all__ = [
    "SegmentDecodeError",
    "SegmentResult",
    "encode_segment",
    "decode_segment",
    "try_decode_segment",
    "parse_claims",
]

logger = logging.getLogger(__name__)


class SegmentDecodeError(Exception):
    """Raised when a segment is not base64url-encoded UTF-8 JSON object text.

    ``cause`` names the failing stage: ``"base64"``, ``"utf-8"``, ``"json"``
    or ``"type"`` (valid JSON, but not an object).
    """

    def __init__(self, message: str, cause: str) -> None:
        super().__init__(message)
        self.cause = cause


@dataclass(frozen=True)
class SegmentResult:
    """Outcome of decoding one segment: a value or an error, never both."""

    value: dict | None = None
    error: SegmentDecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_claims(text: str) -> dict:
    """Parse *text* as a strict JSON object.

    ``NaN``/``Infinity`` literals are refused, as is any top-level value
    that is not an object.

    Raises:
        SegmentDecodeError: With cause ``"json"`` or ``"type"``.
    """
    try:
        obj = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise SegmentDecodeError(f"Invalid JSON: {exc}", cause="json") from exc
    if not isinstance(obj, dict):
        raise SegmentDecodeError(
            f"Expected a JSON object, got {type(obj).__name__}", cause="type"
        )
    return obj


def encode_segment(obj: dict) -> str:
    """Serialize *obj* to compact UTF-8 JSON and base64url-encode it."""
    text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates can only be carried as \u escapes
        data = json.dumps(obj, separators=(",", ":")).encode("ascii")
    return base64url.encode(data)


def decode_segment(text: str) -> dict:
    """Decode a base64url segment back into a JSON object.

    Raises:
        SegmentDecodeError: If any stage (base64, UTF-8, JSON) fails.
    """
    try:
        raw = base64url.decode(text)
    except base64url.DecodeError as exc:
        raise SegmentDecodeError(str(exc), cause="base64") from exc

    try:
        decoded = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SegmentDecodeError(f"Invalid UTF-8: {exc}", cause="utf-8") from exc

    return parse_claims(decoded)


def try_decode_segment(text: str) -> SegmentResult:
    """Decode *text*, capturing a failure instead of raising it."""
    try:
        return SegmentResult(value=decode_segment(text))
    except SegmentDecodeError as exc:
        logger.debug("Segment of length %d failed to decode (%s)", len(text), exc.cause)
        return SegmentResult(error=exc)
