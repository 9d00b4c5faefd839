"""
Text and JSON rendering of decoded tokens for the CLI.
"""

from __future__ import annotations

import json
import math

from .decoder import DecodedToken

__all__ = ["format_expiry", "render_decoded_text", "render_decoded_json"]


def format_expiry(decoded: DecodedToken, timestamp_format: str = "%Y-%m-%d %H:%M:%S %Z") -> str | None:
    """Describe the expiry, e.g. ``2018-01-18 01:30:22 UTC (expired)``."""
    if decoded.expiry is None:
        return None
    status = "expired" if decoded.is_expired else "valid"
    when = decoded.expiry_datetime
    # Out-of-range timestamps cannot be shown as a date
    shown = when.strftime(timestamp_format) if when is not None else f"exp={decoded.payload['exp']}"
    return f"{shown} ({status})"


def _json_section(label: str, data: dict | None, indent: int) -> list[str]:
    if data is None:
        return [f"\n{label}: (could not decode)"]
    return [f"\n{label}:", json.dumps(data, indent=indent, ensure_ascii=False)]


def render_decoded_text(
    decoded: DecodedToken,
    indent: int = 4,
    timestamp_format: str = "%Y-%m-%d %H:%M:%S %Z",
) -> str:
    """Render the decoded token parts as labelled sections."""
    lines: list[str] = []
    if decoded.error_message:
        lines.append(f"Warning: {decoded.error_message}")
        for label, detail in (("header", decoded.header_error), ("payload", decoded.payload_error)):
            if detail:
                lines.append(f"  {label}: {detail}")

    lines.extend(_json_section("Header", decoded.header, indent))
    lines.extend(_json_section("Payload", decoded.payload, indent))
    lines.append(f"\nSignature (base64url encoded):\n{decoded.signature or ''}")

    expiry = format_expiry(decoded, timestamp_format)
    if expiry:
        lines.append(f"\nExpires: {expiry}")
    return "\n".join(lines)


def _finite(value):
    """Replace non-finite floats with None; strict JSON has no Infinity."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value


def render_decoded_json(
    decoded: DecodedToken,
    indent: int = 2,
    signature_verified: bool | None = None,
) -> str:
    """Render the full decode result as a JSON document.

    ``signature_verified`` is included only when a signature check was run.
    """
    when = decoded.expiry_datetime
    report = {
        "header": decoded.header,
        "payload": decoded.payload,
        "signature": decoded.signature,
        "is_structurally_valid": decoded.is_structurally_valid,
        "error_message": decoded.error_message,
        "header_error": decoded.header_error,
        "payload_error": decoded.payload_error,
        "expiry": decoded.expiry,
        "expiry_iso": when.isoformat() if when is not None else None,
        "is_expired": decoded.is_expired,
    }
    if signature_verified is not None:
        report["signature_verified"] = signature_verified
    return json.dumps(_finite(report), indent=indent, ensure_ascii=False, allow_nan=False)
