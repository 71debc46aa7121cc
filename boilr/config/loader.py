# boilr/config/loader.py
"""
Configuration file read/write.

The file lives at ~/.boilr/config.yaml unless BOILR_CONFIG points elsewhere.
"""

import logging
import os
import tempfile
from pathlib import Path

import yaml
from pydantic import ValidationError

from boilr.errors import ConfigInvalidError, ConfigMissingError

from .schema import BoilrConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BOILR_CONFIG"


def get_config_path() -> Path:
    """Path to the config file (BOILR_CONFIG override, else ~/.boilr/config.yaml)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".boilr" / "config.yaml"


def config_exists(path: Path | None = None) -> bool:
    """Check whether a config file is present."""
    config_path = path or get_config_path()
    return config_path.is_file()


def read_config(path: Path | None = None) -> BoilrConfig:
    """
    Load and validate the config file.

    Raises:
        ConfigMissingError: If the file does not exist
        ConfigInvalidError: If it does not parse or lacks llmProvider/apiKeys
    """
    config_path = path or get_config_path()

    if not config_path.is_file():
        raise ConfigMissingError(f"Config file not found at {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigInvalidError(f"Invalid config file structure in {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigInvalidError(f"Invalid config file structure in {config_path}")

    # An empty apiKeys mapping is valid; the credential check reports it later.
    missing = [key for key in ("llmProvider", "apiKeys") if config_data.get(key) is None]
    if not config_data.get("llmProvider") and "llmProvider" not in missing:
        missing.append("llmProvider")
    if missing:
        raise ConfigInvalidError(
            f"Invalid config file structure in {config_path}: missing {', '.join(missing)}"
        )

    try:
        config = BoilrConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigInvalidError(f"Invalid config file structure in {config_path}: {e}") from e

    logger.info(f"Loaded config from {config_path} (provider={config.llm_provider.value})")
    return config


def write_config(config: BoilrConfig, path: Path | None = None) -> Path:
    """
    Persist config as YAML, creating the parent directory if needed.

    Writes to a temp file in the same directory and renames it into place
    so a reader never sees a half-written file.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        dir=config_path.parent, prefix=".config-", suffix=".yaml.tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                config.to_yaml_dict(), f, default_flow_style=False, sort_keys=False
            )
        if os.name == "posix":
            os.chmod(tmp_name, 0o600)
        os.replace(tmp_name, config_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info(f"Wrote config to {config_path}")
    return config_path
