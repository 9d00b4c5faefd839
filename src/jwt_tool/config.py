"""
Configuration loading, validation, and typed models.

Supports:
  - Optional YAML config file (built-in defaults when the default file is absent)
  - Environment variable for the encoding secret (JWT_TOOL_SECRET)

Secrets are never read from the config file.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .encoder import DEFAULT_HEADER_TEXT, DEFAULT_PAYLOAD_TEXT

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "PROJECT_ROOT",
    "ENV_SECRET",
    "ConfigError",
    "EncoderConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
]

logger = logging.getLogger(__name__)

# Project root directory (two levels up from this file)
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "config.yaml")

ENV_SECRET = "JWT_TOOL_SECRET"


# ---------------------------------------------------------------------------
# Typed configuration models
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""


@dataclass(frozen=True)
class EncoderConfig:
    header_text: str = DEFAULT_HEADER_TEXT
    payload_text: str = DEFAULT_PAYLOAD_TEXT


@dataclass(frozen=True)
class OutputConfig:
    indent: int = 4
    timestamp_format: str = "%Y-%m-%d %H:%M:%S %Z"


@dataclass(frozen=True)
class AppConfig:
    encoder: EncoderConfig = field(default_factory=EncoderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_dir: str | None = None


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _section(raw: dict, name: str) -> dict:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return value


def _claims_text(section: dict, key: str, default: str) -> str:
    """Turn a YAML mapping into the JSON text the encoder expects."""
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, dict):
        raise ConfigError(f"encoder.{key} must be a mapping")
    try:
        return json.dumps(value, indent=2, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"encoder.{key} is not JSON-serializable: {exc}") from exc


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load and validate the YAML configuration file.

    A missing file at the default location yields the built-in defaults;
    any other missing path is an error.

    Raises:
        ConfigError: If the file is missing, unreadable, or has invalid values.
    """
    path = Path(config_path)
    if not path.exists():
        if os.path.abspath(config_path) == DEFAULT_CONFIG_PATH:
            logger.debug("No config at %s, using defaults", config_path)
            return AppConfig()
        raise ConfigError(
            f"Config file not found: {config_path}\n"
            "Copy config/config.yaml.example to config/config.yaml and adjust it."
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid config file format: expected YAML mapping, got {type(raw).__name__}")

    if "secret" in raw or "secret" in _section(raw, "encoder"):
        raise ConfigError(f"Secrets do not belong in the config file. Use --secret or the {ENV_SECRET} env var.")

    # --- Encoder defaults ---
    enc_section = _section(raw, "encoder")
    encoder = EncoderConfig(
        header_text=_claims_text(enc_section, "header", DEFAULT_HEADER_TEXT),
        payload_text=_claims_text(enc_section, "payload", DEFAULT_PAYLOAD_TEXT),
    )

    # --- Output ---
    out_section = _section(raw, "output")
    indent = out_section.get("indent", 4)
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ConfigError(f"output.indent must be a non-negative integer, got {indent!r}")
    ts_format = out_section.get("timestamp_format") or OutputConfig.timestamp_format
    if not isinstance(ts_format, str):
        raise ConfigError("output.timestamp_format must be a string")

    # --- Logging ---
    log_dir = _section(raw, "logging").get("log_dir")
    if log_dir is not None and not isinstance(log_dir, str):
        raise ConfigError("logging.log_dir must be a string or null")
    if log_dir and not os.path.isabs(log_dir):
        log_dir = os.path.join(PROJECT_ROOT, log_dir)

    config = AppConfig(
        encoder=encoder,
        output=OutputConfig(indent=indent, timestamp_format=ts_format),
        log_dir=log_dir or None,
    )
    logger.debug("Config loaded from %s", config_path)
    return config
