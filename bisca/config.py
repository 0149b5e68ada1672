"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from bisca.logging import GameLogConfig


class GameConfig(BaseModel):
    """Match configuration."""

    players: list[str] = Field(default_factory=lambda: ["Filipe", "Maja"])
    seed: int | None = None  # None = nondeterministic


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig(output_path="logs")


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
