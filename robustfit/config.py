"""
Configuration management for robustfit
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULT_CONFIG = {
    "ransac": {
        "target_probability": 0.99,
        "max_trials": 1000,
        "min_sample_fraction": 0.8,
        "inlier_tolerance": 1e-9
    },
    "logging": {
        "level": "INFO",
        "log_file": None
    }
}


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def merge_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return a copy of DEFAULT_CONFIG with overrides merged in."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if overrides:
        _deep_merge(config, copy.deepcopy(overrides))
    return config


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML configuration file on top of the defaults

    Args:
        config_path: Path to a YAML file

    Returns:
        Merged configuration dictionary
    """
    with open(config_path, 'r') as f:
        overrides = yaml.safe_load(f) or {}

    if not isinstance(overrides, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    return merge_config(overrides)
