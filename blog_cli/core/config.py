"""
Configuration Management.

Two sources of configuration:

Config file (YAML):
    ~/blog-cli.yaml - host and port of the blog server, nothing else.
    Read on every start, written back only by the ``set`` command.

Runtime settings (environment, BLOG_CLI_ prefix):
    BLOG_CLI_CONFIG      - alternative config file path
    BLOG_CLI_LOG_LEVEL   - DEBUG, INFO, WARNING, ERROR, CRITICAL
    BLOG_CLI_LOG_FORMAT  - console or json
    BLOG_CLI_LOG_FILE    - optional JSONL log file

Command-line options take precedence over the environment.
"""

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from blog_cli.core.config_schema import ServerConfig
from blog_cli.core.exceptions import ConfigurationError

CONFIG_FILENAME = "blog-cli.yaml"


class CliSettings(BaseSettings):
    """Settings for the tool itself, read from BLOG_CLI_* environment variables."""

    config: Path | None = None
    log_level: str = "WARNING"
    log_format: str = "console"
    log_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="BLOG_CLI_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> CliSettings:
    """Get cached runtime settings."""
    return CliSettings()


def default_config_path() -> Path:
    """
    Return the config file location in the user's home directory.

    Raises:
        ConfigurationError: If the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigurationError(f"Error getting home directory: {e}") from e
    return home / CONFIG_FILENAME


def resolve_config_path(override: Path | None = None) -> Path:
    """Explicit path wins, then BLOG_CLI_CONFIG, then the home directory default."""
    if override is not None:
        return override.expanduser()
    env_path = get_settings().config
    if env_path is not None:
        return env_path.expanduser()
    return default_config_path()


def load_config(path: Path) -> ServerConfig:
    """
    Load and validate the config file.

    Args:
        path: Location of the YAML config file.

    Returns:
        Validated ServerConfig.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not YAML,
            or does not contain exactly a string host and an integer port.
    """
    try:
        with open(path, "rb") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"Error loading config: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error loading config: {path} is not valid YAML:\n{e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Error loading config: {path} must be a mapping with 'host' and 'port' keys"
        )

    try:
        return ServerConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}:\n{e}") from e


def save_config(path: Path, config: ServerConfig) -> None:
    """
    Overwrite the config file with the given values.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    data = yaml.safe_dump(config.model_dump(), sort_keys=False)
    try:
        path.write_text(data, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Error saving config: {e}") from e
