"""Configuration loading for the Imposter game."""

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from .engine.errors import ConfigurationError
from .engine.roles import MAX_PLAYERS, MIN_PLAYERS

DEFAULT_CONFIG_PATH = "config/game.yaml"


class GameSettings(BaseModel):
    """Defaults offered on the setup screen."""
    player_count: int = Field(default=MIN_PLAYERS, ge=MIN_PLAYERS, le=MAX_PLAYERS)
    default_category: Optional[str] = None
    seed: Optional[int] = None  # Fixed seed for repeatable deals


class DatasetSettings(BaseModel):
    """Where the word list lives."""
    path: str = "config/words.csv"
    delimiter: str = Field(default=",", min_length=1, max_length=1)


class LoggingSettings(BaseModel):
    """Markdown game logs. No logs are written when dir is unset."""
    dir: Optional[str] = None


class GameConfig(BaseModel):
    """Configuration for the game."""
    game: GameSettings = Field(default_factory=GameSettings)
    dataset: DatasetSettings = Field(default_factory=DatasetSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def resolve_config_path(argv: list[str]) -> str:
    """Pick the config file: first CLI argument, then IMPOSTER_CONFIG, then the default."""
    if len(argv) > 1:
        return argv[1]
    return os.getenv("IMPOSTER_CONFIG", DEFAULT_CONFIG_PATH)


def load_config(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> GameConfig:
    """Load game configuration from a YAML file.

    IMPOSTER_LOG_DIR, when set, overrides logging.dir.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Config file {config_path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    try:
        config = GameConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config in {config_path}:\n{e}") from e

    log_dir = os.getenv("IMPOSTER_LOG_DIR")
    if log_dir:
        config.logging.dir = log_dir

    return config
