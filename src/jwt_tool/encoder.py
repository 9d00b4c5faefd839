"""
Token encoding: header/payload JSON text plus a secret -> signed HS256 token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from . import base64url, signer
from .segments import SegmentDecodeError, encode_segment, parse_claims

__all__ = [
    "DEFAULT_HEADER_TEXT",
    "DEFAULT_PAYLOAD_TEXT",
    "DEFAULT_SECRET",
    "INVALID_JSON_ERROR",
    "EncodedToken",
    "EncodingRequest",
    "InvalidJsonError",
    "build_token",
    "encode_request",
    "encode_token",
]

logger = logging.getLogger(__name__)

DEFAULT_HEADER_TEXT = '{\n  "alg": "HS256",\n  "typ": "JWT"\n}'
DEFAULT_PAYLOAD_TEXT = (
    '{\n  "sub": "1234567890",\n  "name": "John Doe",\n  "iat": 1516239022\n}'
)
DEFAULT_SECRET = "secret"

INVALID_JSON_ERROR = "Invalid JSON in Header or Payload"


class InvalidJsonError(Exception):
    """Raised when header or payload text is not a JSON object."""


@dataclass(frozen=True)
class EncodingRequest:
    header_text: str
    payload_text: str
    secret_text: str


@dataclass(frozen=True)
class EncodedToken:
    """Encoder output: a token, or the reason none could be built."""

    token: str | None = None
    json_error: str | None = None


def _parse(header_text: str, payload_text: str) -> tuple[dict, dict]:
    try:
        return parse_claims(header_text), parse_claims(payload_text)
    except SegmentDecodeError as exc:
        raise InvalidJsonError(INVALID_JSON_ERROR) from exc


def build_token(header: dict, payload: dict, secret: str) -> str:
    """Assemble and sign a token from already-parsed claim sets."""
    encoded_header = encode_segment(header)
    encoded_payload = encode_segment(payload)
    signing_input = f"{encoded_header}.{encoded_payload}"
    signature = signer.sign(signing_input.encode("utf-8"), secret)
    return f"{signing_input}.{base64url.encode(signature)}"


def encode_token(header_text: str, payload_text: str, secret_text: str) -> EncodedToken:
    """Encode raw header/payload text into a signed token.

    Never raises. If either text is not a JSON object the whole result is
    void: ``token`` is None and ``json_error`` explains why.
    """
    try:
        header, payload = _parse(header_text, payload_text)
    except InvalidJsonError as exc:
        logger.debug("Encoding rejected: %s (%s)", exc, exc.__cause__)
        return EncodedToken(json_error=str(exc))

    token = build_token(header, payload, secret_text)
    logger.debug("Encoded token with %d header and %d payload claims", len(header), len(payload))
    return EncodedToken(token=token)


def encode_request(request: EncodingRequest) -> EncodedToken:
    return encode_token(request.header_text, request.payload_text, request.secret_text)
