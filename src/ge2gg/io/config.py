"""Configuration file handling — load ge2gg.yaml."""

import os

import yaml

from ge2gg.pacts.errors import ConfigError
from ge2gg.core.constants import (
    DEFAULT_HTTPROUTE_API_VERSION, DEFAULT_OPTION_API_VERSION,
)

DEFAULTS = {
    "httproute_api_version": DEFAULT_HTTPROUTE_API_VERSION,
    "option_api_version": DEFAULT_OPTION_API_VERSION,
    "default_namespace": "default",
    "selector_label_order": "declared",
}

SELECTOR_LABEL_ORDERS = ("declared", "sorted")


def validate_config(cfg: dict) -> list[str]:
    """Check config values. Returns warnings; raises ConfigError on bad values."""
    if cfg["selector_label_order"] not in SELECTOR_LABEL_ORDERS:
        raise ConfigError(
            f"selector_label_order must be one of {', '.join(SELECTOR_LABEL_ORDERS)}, "
            f"got '{cfg['selector_label_order']}'")
    for key in ("httproute_api_version", "option_api_version", "default_namespace"):
        if not isinstance(cfg[key], str) or not cfg[key]:
            raise ConfigError(f"{key} must be a non-empty string")
    return [f"unknown config key '{k}' — ignored" for k in cfg if k not in DEFAULTS]


def load_config(path: str | None) -> dict:
    """Load ge2gg.yaml or return the default config."""
    cfg = {}
    if path and os.path.exists(path):
        try:
            with open(path, encoding="utf-8") as f:
                cfg = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
        if not isinstance(cfg, dict):
            raise ConfigError(f"{path}: expected a mapping at top level")
    elif path:
        raise ConfigError(f"config file not found: {path}")
    for key, value in DEFAULTS.items():
        cfg.setdefault(key, value)
    return cfg
