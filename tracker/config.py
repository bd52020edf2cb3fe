"""Configuration management for the workout tracker."""

import os
import logging
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv


# load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class PathConfig:
    """File path configuration."""

    base_dir: Path
    data_dir: Path
    output_dir: Path

    @property
    def default_workout_file(self) -> Path:
        return self.data_dir / "workouts.csv"

    @classmethod
    def default(cls) -> "PathConfig":
        """
        Create default path configuration.

        TRACKER_DATA_DIR and TRACKER_OUTPUT_DIR override the
        directories next to the package.
        """
        base = Path(__file__).parent.parent
        data_dir = os.getenv("TRACKER_DATA_DIR")
        output_dir = os.getenv("TRACKER_OUTPUT_DIR")
        return cls(
            base_dir=base,
            data_dir=Path(data_dir) if data_dir else base / "data",
            output_dir=Path(output_dir) if output_dir else base / "output",
        )


@dataclass(frozen=True)
class AppConfig:
    """Application-wide configuration."""

    paths: PathConfig
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Load full application configuration.

        Raises:
            ValueError: If TRACKER_LOG_LEVEL is not a logging level name.
        """
        log_level = os.getenv("TRACKER_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Invalid TRACKER_LOG_LEVEL: {log_level}")

        return cls(paths=PathConfig.default(), log_level=log_level)
