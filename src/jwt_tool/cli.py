"""
CLI entry point for the JWT Tool.

Subcommands:
    decode  — inspect a token (interactive prompt, argument, or stdin)
    encode  — build an HS256-signed token from header/payload JSON
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .config import DEFAULT_CONFIG_PATH, ENV_SECRET, AppConfig, ConfigError, load_config
from .decoder import decode_token, verify_signature
from .encoder import DEFAULT_SECRET, encode_token
from .formatting import render_decoded_json, render_decoded_text
from .logging_setup import setup_logging

__all__ = ["main"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jwt-tool",
        description="Decode, inspect and sign HS256 JWT tokens.",
        epilog="Examples:\n"
               "  %(prog)s decode                          # interactive prompt\n"
               "  %(prog)s decode <token>                  # pass token as argument\n"
               "  echo '<token>' | %(prog)s decode --stdin # read from stdin\n"
               "  %(prog)s encode --payload @claims.json --secret s3cret\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH,
                        help=f"Path to YAML config file (default: {DEFAULT_CONFIG_PATH})")
    parser.add_argument("--verbose", "-v", action="store_true", default=False,
                        help="Enable verbose (debug) logging")

    sub = parser.add_subparsers(dest="command", required=True)

    dec = sub.add_parser("decode", help="Decode a token without verifying it")
    dec.add_argument(
        "token",
        nargs="?",
        default=None,
        help="JWT token string (optional — prompts interactively if omitted)",
    )
    dec.add_argument("--stdin", action="store_true", default=False,
                     help="Read token from stdin (for piping)")
    dec.add_argument("--json", action="store_true", default=False,
                     help="Print the full decode result as JSON")
    dec.add_argument("--secret", default=None,
                     help="Also check the HS256 signature with this secret")

    enc = sub.add_parser("encode", help="Build and sign an HS256 token")
    enc.add_argument("--header", default=None,
                     help="Header JSON text, or @FILE to read it from a file")
    enc.add_argument("--payload", default=None,
                     help="Payload JSON text, or @FILE to read it from a file")
    enc.add_argument("--secret", default=None,
                     help=f"Signing secret (default: ${ENV_SECRET}, else '{DEFAULT_SECRET}')")

    return parser.parse_args(argv)


def _read_text_arg(value: str | None, default: str) -> str:
    """Resolve a TEXT|@FILE argument."""
    if value is None:
        return default
    if value.startswith("@"):
        with open(value[1:], encoding="utf-8") as fh:
            return fh.read()
    return value


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

def _run_decode(args: argparse.Namespace, cfg: AppConfig) -> int:
    if args.stdin:
        token = sys.stdin.read().strip()
        if not token:
            print("Error: No token received on stdin.")
            return 1
    elif args.token:
        token = args.token
    else:
        # Interactive mode
        print("JWT Token Decoder")
        print("=================")
        try:
            token = input("Please enter your JWT token: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return 130

    decoded = decode_token(token)
    logger.debug("Decoded token: valid=%s expired=%s", decoded.is_structurally_valid, decoded.is_expired)

    verified = verify_signature(token, args.secret) if args.secret is not None else None

    if args.json:
        print(render_decoded_json(decoded, signature_verified=verified))
    else:
        print(render_decoded_text(decoded, cfg.output.indent, cfg.output.timestamp_format))
        if verified is not None:
            print(f"\nSignature: {'verified' if verified else 'INVALID'}")

    if verified is False:
        return 1
    return 0 if decoded.is_structurally_valid else 1


def _run_encode(args: argparse.Namespace, cfg: AppConfig) -> int:
    try:
        header_text = _read_text_arg(args.header, cfg.encoder.header_text)
        payload_text = _read_text_arg(args.payload, cfg.encoder.payload_text)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}")
        return 1

    secret = args.secret
    if secret is None:
        secret = os.environ.get(ENV_SECRET, DEFAULT_SECRET)
        logger.debug("Secret taken from %s", "env" if ENV_SECRET in os.environ else "default")

    result = encode_token(header_text, payload_text, secret)
    if result.token is None:
        print(f"Error: {result.json_error}")
        return 1

    print(result.token)
    return 0


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    setup_logging(verbose=args.verbose, log_dir=cfg.log_dir)

    if args.command == "decode":
        code = _run_decode(args, cfg)
    else:
        code = _run_encode(args, cfg)

    if code:
        sys.exit(code)
