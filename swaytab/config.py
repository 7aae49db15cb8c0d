"""
Configuration persistence for swaytab.

The persisted configuration lives in ~/.config/swaytab/config.json (or under
$XDG_CONFIG_HOME). It is created with defaults on first run and written back on
every run, then command-line overrides are merged on top.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .errors import ConfigLoadError, ConfigStoreError
from .models import TabConfig

logger = logging.getLogger(__name__)

APP_NAME = "swaytab"
CONFIG_FILE_NAME = "config.json"


def config_path(app_name: str = APP_NAME) -> Path:
    """
    Get the configuration file path for an application.

    Args:
        app_name: Application name used as the config directory

    Returns:
        Path to the JSON configuration file
    """
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / app_name / CONFIG_FILE_NAME


def load_config(path: Optional[Path] = None) -> TabConfig:
    """
    Load persisted configuration.

    Args:
        path: Optional custom path (defaults to config_path())

    Returns:
        Loaded TabConfig, or defaults if the file does not exist

    Raises:
        ConfigLoadError: If the file cannot be read or fails validation
    """
    config_file = path or config_path()

    if not config_file.exists():
        logger.info(f"Configuration file not found, using defaults: {config_file}")
        return TabConfig()

    try:
        with open(config_file, "r") as f:
            data = json.load(f)
        config = TabConfig(**data)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(str(config_file), f"invalid JSON: {e}") from e
    except ValidationError as e:
        raise ConfigLoadError(str(config_file), f"invalid configuration: {e}") from e
    except (OSError, TypeError) as e:
        raise ConfigLoadError(str(config_file), str(e)) from e

    logger.debug(f"Loaded configuration from {config_file}: {config}")
    return config


def store_config(config: TabConfig, path: Optional[Path] = None) -> None:
    """
    Write configuration atomically.

    Args:
        config: Configuration to persist
        path: Optional custom path (defaults to config_path())

    Raises:
        ConfigStoreError: If the file cannot be written
    """
    config_file = path or config_path()
    data = config.model_dump(mode="json")

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=config_file.parent, prefix=f".{config_file.name}.")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
                f.write("\n")
            os.replace(tmp_name, config_file)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise ConfigStoreError(str(config_file), str(e)) from e

    logger.debug(f"Stored configuration to {config_file}")


def resolve_config(
    filter_command: Optional[str] = None,
    filter_args: Optional[Sequence[str]] = None,
    path: Optional[Path] = None,
) -> TabConfig:
    """
    Build the effective configuration for this run.

    Loads the persisted configuration, stores it back (creating the file with
    defaults on first run) and merges command-line overrides on top.

    Args:
        filter_command: --filter-command value, if given
        filter_args: --args values; an empty sequence counts as not given
        path: Optional custom config path

    Returns:
        Effective TabConfig

    Raises:
        ConfigLoadError: If loading fails or no filter command is configured
        ConfigStoreError: If writing the config back fails
    """
    config_file = path or config_path()
    disk_config = load_config(config_file)
    store_config(disk_config, config_file)

    try:
        args_config = TabConfig(
            filter_command=filter_command,
            filter_command_args=list(filter_args) if filter_args else None,
        )
    except ValidationError as e:
        raise ConfigLoadError("command line", str(e)) from e

    config = disk_config.merge(args_config)
    if config.filter_command is None:
        raise ConfigLoadError(str(config_file), "no filter command in configuration")

    return config
