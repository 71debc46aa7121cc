# boilr/config/__init__.py
"""Configuration system for boilr."""

from .loader import config_exists, get_config_path, read_config, write_config
from .schema import ApiKeys, BoilrConfig, Provider
from .wizard import load_or_create_config, run_first_run_wizard

__all__ = [
    "BoilrConfig",
    "ApiKeys",
    "Provider",
    "get_config_path",
    "config_exists",
    "read_config",
    "write_config",
    "run_first_run_wizard",
    "load_or_create_config",
]
