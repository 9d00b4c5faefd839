from __future__ import annotations

import json
import os

import pytest

from jwt_tool.config import DEFAULT_CONFIG_PATH, PROJECT_ROOT, AppConfig, ConfigError, load_config
from jwt_tool.encoder import DEFAULT_HEADER_TEXT


def _write(tmp_path, text: str) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_missing_default_config_uses_defaults() -> None:
    if os.path.exists(DEFAULT_CONFIG_PATH):
        pytest.skip("a local config/config.yaml is present")
    assert load_config(DEFAULT_CONFIG_PATH) == AppConfig()


def test_missing_explicit_config_is_an_error(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(str(tmp_path / "nope.yaml"))


def test_empty_file_uses_defaults(tmp_path) -> None:
    cfg = load_config(_write(tmp_path, ""))
    assert cfg.encoder.header_text == DEFAULT_HEADER_TEXT
    assert cfg.output.indent == 4
    assert cfg.log_dir is None


def test_full_config(tmp_path) -> None:
    cfg = load_config(_write(tmp_path, """
encoder:
  header: {alg: HS256, typ: JWT, kid: k1}
  payload:
    sub: "42"
output:
  indent: 2
  timestamp_format: "%d/%m/%Y"
logging:
  log_dir: logs
"""))
    assert json.loads(cfg.encoder.header_text) == {"alg": "HS256", "typ": "JWT", "kid": "k1"}
    assert json.loads(cfg.encoder.payload_text) == {"sub": "42"}
    assert cfg.output.indent == 2
    assert cfg.output.timestamp_format == "%d/%m/%Y"
    assert cfg.log_dir == os.path.join(PROJECT_ROOT, "logs")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "output:\n  indent: -1\n",
        "output:\n  indent: two\n",
        "output: [1]\n",
        "encoder:\n  payload: [1, 2]\n",
        "logging:\n  log_dir: 5\n",
        "secret: hunter2\n",
        "encoder:\n  secret: hunter2\n",
        "encoder: {header: [\n",
        "encoder:\n  payload:\n    iat: 2020-01-01\n",
        "encoder:\n  header:\n    x: .nan\n",
    ],
)
def test_invalid_config(tmp_path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text))
