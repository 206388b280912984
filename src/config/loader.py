"""YAML configuration loader with environment variable overrides.

Configuration is layered (later layers win):

  1. config/config.yaml  -- static defaults checked into the repo
                           (app name/version, upstream endpoint paths)
  2. .env / environment  -- deployment overrides read through ``Settings``

``_deep_merge`` merges nested dicts key by key:
    base      = {"upstream": {"endpoints": {"artists": "artists"}}}
    overrides = {"upstream": {"base_url": "http://mirror/api"}}
    result    = {"upstream": {"endpoints": {...}, "base_url": "http://mirror/api"}}
"""

from pathlib import Path

import yaml

from src.config.settings import Settings


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge the env-based Settings on top.

    Args:
        path: Path to the YAML configuration file.  A missing file yields
            an empty base layer.
        settings: Settings to merge; a fresh ``Settings()`` when omitted.

    Returns:
        Fully resolved configuration dictionary.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    settings = settings or Settings()
    env_overrides = {
        "app": {
            "host": settings.app_host,
            "port": settings.app_port,
            "env": settings.app_env,
        },
        "upstream": {
            "base_url": settings.upstream_base_url,
            "timeout": settings.upstream_timeout,
        },
        "logging": {
            "level": settings.log_level,
        },
    }

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
