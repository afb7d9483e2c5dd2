"""Built-in configuration defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from pyvoxtral.l1_entities.config import AppConfig
from pyvoxtral.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'engine': {
        'library_path': '',
        'model_dir': None,
    },
    'conversion': {
        'ffmpeg': 'ffmpeg',
        'timeout': None,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
