"""
Workout file loader.

Reads workout records from local TSV/CSV files, one workout per row.
"""

import csv
import logging
from pathlib import Path
from datetime import timedelta
from typing import List, Optional, Iterator

from .models import ActivityType, Training, create_training


logger = logging.getLogger(__name__)


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration cell.

    A plain number is minutes, "H:MM" is hours and minutes and
    "H:MM:SS" adds seconds.

    Raises:
        ValueError: If the value cannot be parsed.
    """
    text = (value or "").strip()
    if not text:
        raise ValueError("Empty duration")

    parts = text.split(":")
    try:
        if len(parts) == 1:
            return timedelta(minutes=float(text))
        if len(parts) == 2:
            hours, minutes = parts
            return timedelta(hours=int(hours), minutes=int(minutes))
        if len(parts) == 3:
            hours, minutes, seconds = parts
            return timedelta(
                hours=int(hours), minutes=int(minutes), seconds=int(seconds)
            )
    except OverflowError:
        raise ValueError(f"Duration out of range: {value}")

    raise ValueError(f"Could not parse duration: {value}")


class WorkoutFileParser:
    """
    Parser for workout records in TSV/CSV files.

    Each row holds one workout: activity type, action count, duration,
    body weight and the activity-specific columns.
    """

    # expected column names (case-insensitive matching)
    TYPE_COLUMN = "type"
    ACTIONS_COLUMN = "actions"
    DURATION_COLUMN = "duration"
    WEIGHT_COLUMN = "weight"
    HEIGHT_COLUMN = "height"
    POOL_LENGTH_COLUMN = "pool length"
    POOL_COUNT_COLUMN = "pool count"

    REQUIRED_COLUMNS = (TYPE_COLUMN, ACTIONS_COLUMN, DURATION_COLUMN, WEIGHT_COLUMN)

    def __init__(self, filepath: Path):
        """
        Initialize parser with file path.

        Parameters:
            filepath: Path to TSV or CSV file.
        """
        self._filepath = filepath
        self._delimiter = "\t" if filepath.suffix == ".tsv" else ","

    def _get_column_index(self, headers: List[str], name: str) -> Optional[int]:
        """Find column index by name (case-insensitive)."""
        name_lower = name.lower()
        for i, header in enumerate(headers):
            if header.strip().lower() == name_lower:
                return i
        return None

    def _get_cell(self, row: List[str], idx: Optional[int]) -> str:
        if idx is None or idx >= len(row):
            return ""
        return row[idx].strip()

    def _parse_optional_float(self, value: str) -> float:
        """Parse string to float, treating empty cells as zero."""
        return float(value) if value else 0.0

    def _parse_optional_int(self, value: str) -> int:
        return int(value) if value else 0

    def parse(self) -> Iterator[Training]:
        """
        Parse workout file and yield workout records.

        Yields:
            Training: Parsed workout.

        Raises:
            FileNotFoundError: If file does not exist.
            ValueError: If a required column is missing.
        """
        if not self._filepath.exists():
            raise FileNotFoundError(f"Workout file not found: {self._filepath}")

        with open(self._filepath, newline="", encoding="utf-8-sig") as f:
            reader = csv.reader(f, delimiter=self._delimiter)
            headers = next(reader, [])

            columns = {
                name: self._get_column_index(headers, name)
                for name in (
                    self.TYPE_COLUMN,
                    self.ACTIONS_COLUMN,
                    self.DURATION_COLUMN,
                    self.WEIGHT_COLUMN,
                    self.HEIGHT_COLUMN,
                    self.POOL_LENGTH_COLUMN,
                    self.POOL_COUNT_COLUMN,
                )
            }

            missing = [name for name in self.REQUIRED_COLUMNS if columns[name] is None]
            if missing:
                raise ValueError(
                    f"Missing columns in workout file: {', '.join(missing)}"
                )

            for row_num, row in enumerate(reader, start=2):
                if not any(cell.strip() for cell in row):
                    continue

                try:
                    training = create_training(
                        ActivityType.from_string(
                            self._get_cell(row, columns[self.TYPE_COLUMN])
                        ),
                        action=int(self._get_cell(row, columns[self.ACTIONS_COLUMN])),
                        duration=parse_duration(
                            self._get_cell(row, columns[self.DURATION_COLUMN])
                        ),
                        weight=float(self._get_cell(row, columns[self.WEIGHT_COLUMN])),
                        height=self._parse_optional_float(
                            self._get_cell(row, columns[self.HEIGHT_COLUMN])
                        ),
                        length_pool=self._parse_optional_int(
                            self._get_cell(row, columns[self.POOL_LENGTH_COLUMN])
                        ),
                        count_pool=self._parse_optional_int(
                            self._get_cell(row, columns[self.POOL_COUNT_COLUMN])
                        ),
                    )
                except ValueError as e:
                    logger.warning(f"Skipping row {row_num}: {e}")
                    continue

                yield training


def load_trainings_from_file(filepath: Path) -> List[Training]:
    """
    Load all workouts from a TSV/CSV file.

    Parameters:
        filepath: Path to workout data file.

    Returns:
        List of parsed workout records.
    """
    parser = WorkoutFileParser(filepath)
    trainings = list(parser.parse())
    logger.info(f"Loaded {len(trainings)} workouts from {filepath}")
    return trainings
