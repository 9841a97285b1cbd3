"""Configuration file support: schemas, loading and domain adapters."""

from .adapter import (
    config_to_policy,
    config_to_rate_table,
    config_to_shade,
    merge_rates,
)
from .loader import ConfigError, load_config, load_config_from_dict
from .schemas import ShadeSailConfiguration

__all__ = [
    "ConfigError",
    "ShadeSailConfiguration",
    "config_to_policy",
    "config_to_rate_table",
    "config_to_shade",
    "load_config",
    "load_config_from_dict",
    "merge_rates",
]
