"""
Configuration for the PANGAEA data client.

Settings are layered: package defaults (``config/defaults.yaml``), an optional
user YAML file, then environment variables.  The cache directory is resolved
once here and passed explicitly to every component.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import platformdirs
import yaml

logger = logging.getLogger(__name__)

APP_NAME = "pangaea_data"
DEFAULTS_PATH = Path(__file__).resolve().parent / "config" / "defaults.yaml"

ENV_CACHE_DIR = "PANGAEA_DATA_CACHE_DIR"
ENV_TIMEOUT = "PANGAEA_DATA_TIMEOUT"


def default_cache_dir() -> Path:
    """Platform-appropriate user cache directory for downloaded datasets."""
    return Path(platformdirs.user_cache_dir(APP_NAME))


@dataclass(frozen=True)
class PangaeaSettings:
    """Runtime settings threaded into the resolver, fetcher and cache store."""

    cache_dir: Path = field(default_factory=default_cache_dir)
    base_url: str = "https://doi.pangaea.de/"
    doi_prefix: str = "10.1594"
    timeout: float = 60
    user_agent: str = f"{APP_NAME}/1.0"

    def with_cache_dir(self, cache_dir: Union[str, Path]) -> "PangaeaSettings":
        return replace(self, cache_dir=Path(cache_dir).expanduser())


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read a YAML settings file, returning an empty mapping if it does not exist.
    """
    if config_path is None:
        config_path = DEFAULTS_PATH
    config_path = Path(config_path)
    if not config_path.exists():
        logger.debug("Configuration file %s not found; returning empty config", config_path)
        return {}
    return yaml.safe_load(config_path.read_text()) or {}


def load_settings(config_path: Optional[Path] = None) -> PangaeaSettings:
    """
    Build :class:`PangaeaSettings` from defaults, ``config_path`` and the environment.
    """
    values: Dict[str, Any] = {}
    values.update({k: v for k, v in load_config().items() if v is not None})
    if config_path is not None:
        values.update({k: v for k, v in load_config(config_path).items() if v is not None})

    env_cache_dir = os.getenv(ENV_CACHE_DIR)
    if env_cache_dir:
        values["cache_dir"] = env_cache_dir
    env_timeout = os.getenv(ENV_TIMEOUT)
    if env_timeout:
        values["timeout"] = float(env_timeout)

    known = set(PangaeaSettings.__dataclass_fields__)
    unknown = sorted(set(values) - known)
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
    values = {k: v for k, v in values.items() if k in known}

    if "cache_dir" in values:
        values["cache_dir"] = Path(values["cache_dir"]).expanduser()

    settings = PangaeaSettings(**values)
    logger.debug("Loaded settings", extra={"cache_dir": str(settings.cache_dir)})
    return settings
