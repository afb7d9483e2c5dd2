"""Gateway: YAML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from pyvoxtral.l1_entities.config import AppConfig
from pyvoxtral.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

# engine settings that name files or directories; '~' and $VARS are expanded
_PATH_KEYS = ('library_path', 'model_dir')


class YamlConfigLoader:
    """Reads an explicit YAML file, or the first user config found, then applies overrides."""

    def load(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> AppConfig:
        return AppConfig.model_validate(self.load_raw(config_path, overrides))

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged data as a plain dict, before Pydantic validation."""
        data = _read_yaml(Path(config_path)) if config_path is not None else _read_first_default()
        if overrides:
            deep_merge(data, overrides)
        _expand_engine_paths(data)
        return data


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f'Config file not found: {path}')
    return yaml.safe_load(path.read_text(encoding='utf-8')) or {}


def _read_first_default() -> dict:
    for default_path in DEFAULT_CONFIG_PATHS:
        if default_path.exists():
            return _read_yaml(default_path)
    return {}


def _expand_engine_paths(data: dict) -> None:
    engine = data.get('engine')
    if not isinstance(engine, dict):
        return
    for key in _PATH_KEYS:
        value = engine.get(key)
        if isinstance(value, str) and value:
            engine[key] = os.path.expandvars(os.path.expanduser(value))


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
