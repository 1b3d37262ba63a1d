"""
Application configuration: database location and output document paths.

Loaded once at process start and handed explicitly to every component
that needs a path.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"
CONFIG_ENV_VAR = "COSMOS_CONFIG"

# Searched in order when no explicit path is given
DEFAULT_SEARCH_PATHS = [
    Path("cosmos") / CONFIG_FILE,
    Path(CONFIG_FILE),
]


class ConfigError(Exception):
    """Raised when the configuration cannot be located, parsed or validated."""


class DatabaseConfig(BaseModel):
    """Location of the SQLite database file."""
    path: str


class OutputConfig(BaseModel):
    """Destinations of the generated XML documents."""
    crew_path: str = "crew.xml"
    starship_path: str = "starships.xml"


class CosmosConfig(BaseModel):
    """Top-level configuration document."""
    database: DatabaseConfig
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def database_path(self) -> Path:
        return Path(self.database.path)

    @property
    def crew_path(self) -> Path:
        return Path(self.output.crew_path)

    @property
    def starship_path(self) -> Path:
        return Path(self.output.starship_path)


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Decide which configuration file to read.

    Order: explicit path, $COSMOS_CONFIG (a .env file is honoured), then
    cosmos/config.json and config.json relative to the working directory.
    When nothing exists the last candidate is returned so the caller
    reports a meaningful path.
    """
    if path is not None:
        return Path(path)

    load_dotenv()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    for candidate in DEFAULT_SEARCH_PATHS:
        if candidate.exists():
            return candidate
    return DEFAULT_SEARCH_PATHS[-1]


def _read_raw(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        if config_path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration root must be an object: {config_path.resolve()}"
        )
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> CosmosConfig:
    """
    Load and validate the configuration file.

    Args:
        path: Explicit configuration path. See resolve_config_path for the
            lookup used when omitted.

    Returns:
        Validated CosmosConfig

    Raises:
        ConfigError: If the file is missing, unreadable, malformed or does
            not match the expected schema
    """
    config_path = resolve_config_path(path)
    absolute = config_path.resolve()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {absolute}")

    try:
        data = _read_raw(config_path)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file: {absolute}") from e
    except (json.JSONDecodeError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Malformed configuration file {absolute}: {e}") from e

    try:
        config = CosmosConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {absolute}: {e}") from e

    logger.info("Configuration loaded from %s", absolute)
    return config
