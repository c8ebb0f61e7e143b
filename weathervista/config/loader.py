"""YAML config loader."""

from pathlib import Path

import yaml

from weathervista.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults.
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    if not path.exists():
        return AppConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**raw)
