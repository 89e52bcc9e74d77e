"""
config.py — Configuration loading from CLI flags, environment and config.yaml.

The API key is a secret and only ever comes from the environment (a .env file
in the working directory is loaded into os.environ by cli.main() before this
runs). Non-secret defaults such as the model name can live in an optional
YAML file so they don't have to be repeated on every invocation.

Resolution order for each value:
    model     : --model  > config.yaml "model"    > DEFAULT_MODEL
    api_base  : --api-base > $LLMWRAP_OPENAI_BASE_URL > config.yaml "api_base" > DEFAULT_API_BASE
    api_key   : $<api_key_env>  (api_key_env defaults to LLMWRAP_OPENAI_API_KEY)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError

DEFAULT_MODEL = "gpt-5.1-codex-max"
DEFAULT_API_BASE = "https://api.openai.com/v1"
DEFAULT_API_KEY_ENV = "LLMWRAP_OPENAI_API_KEY"
DEFAULT_SHELL = "sh"

API_BASE_ENV = "LLMWRAP_OPENAI_BASE_URL"
CONFIG_PATH_ENV = "LLMWRAP_CONFIG"


@dataclass(frozen=True)
class Config:
    api_key: str = field(default="", repr=False)
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    api_key_env: str = DEFAULT_API_KEY_ENV
    shell: str = DEFAULT_SHELL
    config_path: str = ""            # file the non-secret values came from ("" = none)


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    override = env.get(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "llmwrap" / "config.yaml"


def read_config_file(path: Path, required: bool) -> dict[str, Any]:
    """Parse a YAML config file into a dict.

    A missing file is only an error when the user named it explicitly.
    """
    if not path.exists():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return {}

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read config file {path}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Config file {path} must contain a mapping, got {type(raw).__name__}"
        )
    return raw


def load_config(
    model: str | None = None,
    api_base: str | None = None,
    config_path: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Resolve the run configuration once at startup.

    Args:
        model: value of --model, if given
        api_base: value of --api-base, if given
        config_path: value of --config, if given (makes the file required)
        environ: environment mapping; defaults to os.environ

    Raises:
        ConfigError: the API key is missing or the config file is unusable.
    """
    env = os.environ if environ is None else environ

    explicit = bool(config_path)
    if explicit:
        path = Path(config_path).expanduser()
    else:
        path = default_config_path(env)
        explicit = bool(env.get(CONFIG_PATH_ENV, "").strip())
    raw = read_config_file(path, required=explicit)

    resolved_model = (
        model
        or str(raw.get("model") or "").strip()
        or DEFAULT_MODEL
    )
    resolved_base = (
        api_base
        or env.get(API_BASE_ENV, "").strip()
        or str(raw.get("api_base") or "").strip()
        or DEFAULT_API_BASE
    )
    key_env = str(raw.get("api_key_env") or "").strip() or DEFAULT_API_KEY_ENV
    shell = str(raw.get("shell") or "").strip() or DEFAULT_SHELL

    api_key = env.get(key_env, "").strip()
    if not api_key:
        raise ConfigError(
            f"Set {key_env} in your environment before running this tool"
        )

    return Config(
        api_key=api_key,
        model=resolved_model,
        api_base=resolved_base.rstrip("/"),
        api_key_env=key_env,
        shell=shell,
        config_path=str(path) if raw else "",
    )
