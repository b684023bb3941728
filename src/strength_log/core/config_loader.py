"""
YAML → typed settings loader.

Loads runtime settings (remote endpoint, cache location, request timeout)
and merges them in this order (later overrides earlier):

1. Built-in defaults
2. User file at ~/.strength-log/config.yaml
3. Environment variables STRENGTH_LOG_REMOTE_URL, STRENGTH_LOG_CACHE_DIR,
   STRENGTH_LOG_TIMEOUT

Usage:
    from strength_log.core.config_loader import load_settings
    settings = load_settings()
    settings.remote_url   # None → work offline against the local cache

If the user file cannot be parsed a warning is emitted and the file is
ignored.
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .config import DEFAULT_TIMEOUT_SECONDS

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML mapping; warn and return {} if it cannot be read."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"strength-log: ignoring {path} ({exc})", stacklevel=2)
        return {}
    return data if isinstance(data, dict) else {}


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)
        else:
            result[k] = v
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    remote_url: str | None
    cache_dir: Path
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def get_home_dir() -> Path:
    """Return ~/.strength-log (not created)."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    return home / ".strength-log"


def get_user_config_path() -> Path | None:
    """Return ~/.strength-log/config.yaml if it exists, else None."""
    p = get_home_dir() / "config.yaml"
    return p if p.exists() else None


def _defaults() -> dict[str, Any]:
    return {
        "remote_url": None,
        "cache_dir": str(get_home_dir() / "cache"),
        "timeout": DEFAULT_TIMEOUT_SECONDS,
    }


def _from_environment() -> dict[str, Any]:
    env: dict[str, Any] = {}
    if os.environ.get("STRENGTH_LOG_REMOTE_URL"):
        env["remote_url"] = os.environ["STRENGTH_LOG_REMOTE_URL"]
    if os.environ.get("STRENGTH_LOG_CACHE_DIR"):
        env["cache_dir"] = os.environ["STRENGTH_LOG_CACHE_DIR"]
    if os.environ.get("STRENGTH_LOG_TIMEOUT"):
        env["timeout"] = os.environ["STRENGTH_LOG_TIMEOUT"]
    return env


def load_settings(config_path: Path | None = None) -> Settings:
    """
    Load and merge settings from defaults, YAML and environment.

    Args:
        config_path: Explicit YAML file to use instead of ~/.strength-log/config.yaml

    Returns:
        Settings with every field resolved
    """
    raw = _defaults()

    user = config_path if config_path is not None else get_user_config_path()
    if user is not None:
        raw = deep_merge(raw, load_yaml_file(user))

    raw = deep_merge(raw, _from_environment())

    try:
        timeout = float(raw.get("timeout") or DEFAULT_TIMEOUT_SECONDS)
    except (TypeError, ValueError):
        warnings.warn(
            f"strength-log: invalid timeout {raw.get('timeout')!r}; "
            f"using {DEFAULT_TIMEOUT_SECONDS}s",
            stacklevel=2,
        )
        timeout = DEFAULT_TIMEOUT_SECONDS

    remote_url = raw.get("remote_url") or None
    return Settings(
        remote_url=str(remote_url) if remote_url else None,
        cache_dir=Path(str(raw["cache_dir"])).expanduser(),
        timeout=timeout,
    )
