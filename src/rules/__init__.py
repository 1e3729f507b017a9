"""Scan configuration for lencheck."""

from rules.config import ConfigError, LenCheckConfig, load_config

__all__ = [
    "ConfigError",
    "LenCheckConfig",
    "load_config",
]
