"""JWT Tool — inspect and produce HS256-signed compact tokens."""

__version__ = "1.0.0"

__all__ = [
    "base64url",
    "cli",
    "config",
    "decoder",
    "encoder",
    "formatting",
    "logging_setup",
    "segments",
    "signer",
]
