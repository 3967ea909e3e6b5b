"""YAML config loader."""

from pathlib import Path

import yaml

from headache.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    Without a path, or with an empty file, the built-in defaults are used.
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**raw)


def with_overrides(config: AppConfig, **sections: dict) -> AppConfig:
    """Return a copy of the config with some section fields replaced.

    E.g. ``with_overrides(config, logging={"file": "app.log"})``.
    """
    update = {
        name: getattr(config, name).model_copy(update=values)
        for name, values in sections.items()
        if values
    }
    return config.model_copy(update=update)
