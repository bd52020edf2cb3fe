"""Data models and formulas for workout calculations."""

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar, Optional
from enum import Enum


M_IN_KM = 1000  # metres in a kilometre
MIN_IN_HOUR = 60
LEN_STEP = 0.65  # metres per step

# running
CALORIES_MEAN_SPEED_MULTIPLIER = 18
CALORIES_MEAN_SPEED_SHIFT = 1.79

# walking
CALORIES_WEIGHT_MULTIPLIER = 0.035
CALORIES_SPEED_HEIGHT_MULTIPLIER = 0.029
KMH_IN_MSEC = 0.278

# swimming
SWIMMING_LEN_STEP = 1.38  # metres per stroke
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2


class ActivityType(Enum):
    """Enumeration of supported activity types."""

    RUNNING = "running"
    WALKING = "walking"
    SWIMMING = "swimming"

    @property
    def label(self) -> str:
        """Human-readable name used in reports."""
        return self.value.capitalize()

    @classmethod
    def from_string(cls, value: str) -> "ActivityType":
        """Convert a free-form activity name to internal type."""
        mapping = {
            "run": cls.RUNNING,
            "running": cls.RUNNING,
            "jog": cls.RUNNING,
            "walk": cls.WALKING,
            "walking": cls.WALKING,
            "hike": cls.WALKING,
            "swim": cls.SWIMMING,
            "swimming": cls.SWIMMING,
            "pool": cls.SWIMMING,
        }
        key = (value or "").lower().strip()
        if key not in mapping:
            raise ValueError(f"Unknown activity type: {value!r}")
        return mapping[key]


def _format_minutes(minutes: float) -> str:
    """Shortest exact form of a minute count, without a trailing '.0'."""
    text = repr(float(minutes))
    if text.endswith(".0"):
        return text[:-2]
    return text


@dataclass(frozen=True)
class InfoMessage:
    """Summary of a finished workout."""

    training_type: str
    duration: timedelta
    distance: float
    speed: float
    calories: float

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60

    def to_dict(self) -> dict:
        """JSON-ready representation, duration in minutes."""
        return {
            "training_type": self.training_type,
            "duration_minutes": round(self.duration_minutes, 2),
            "distance_km": round(self.distance, 2),
            "speed_kmh": round(self.speed, 2),
            "calories": round(self.calories, 2),
        }

    def __str__(self) -> str:
        return (
            f"Training type: {self.training_type}\n"
            f"Duration: {_format_minutes(self.duration_minutes)} min\n"
            f"Distance: {self.distance:.2f} km\n"
            f"Avg speed: {self.speed:.2f} km/h\n"
            f"Calories burned: {self.calories:.2f}\n"
        )


@dataclass(frozen=True)
class Training:
    """
    Common workout record.

    action is the number of steps (or strokes for swimming) and
    len_step the distance in metres covered by one of them.
    """

    action: int
    duration: timedelta
    weight: float
    len_step: float = LEN_STEP

    activity_type: ClassVar[Optional[ActivityType]] = None

    def __post_init__(self) -> None:
        self._check_non_negative(
            action=self.action, weight=self.weight, len_step=self.len_step
        )
        if self.duration < timedelta(0):
            raise ValueError(f"duration must not be negative, got {self.duration}")

    @staticmethod
    def _check_non_negative(**values: float) -> None:
        for name, value in values.items():
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

    @property
    def training_type(self) -> str:
        if self.activity_type is None:
            return "Training"
        return self.activity_type.label

    @property
    def hours(self) -> float:
        """Duration converted to hours."""
        return self.duration.total_seconds() / 3600

    @property
    def minutes(self) -> float:
        return self.hours * MIN_IN_HOUR

    @property
    def distance(self) -> float:
        """Distance covered in kilometres."""
        return self.action * self.len_step / M_IN_KM

    @property
    def mean_speed(self) -> float:
        """Average speed in km/h, zero for an empty duration."""
        if self.hours == 0:
            return 0.0
        return self.distance / self.hours

    @property
    def calories(self) -> float:
        """Calories burned; each activity type supplies its own formula."""
        return 0.0

    def training_info(self) -> InfoMessage:
        """Collect workout results into an InfoMessage."""
        return InfoMessage(
            training_type=self.training_type,
            duration=self.duration,
            distance=self.distance,
            speed=self.mean_speed,
            calories=self.calories,
        )


@dataclass(frozen=True)
class Running(Training):
    """Running workout."""

    activity_type: ClassVar[Optional[ActivityType]] = ActivityType.RUNNING

    @property
    def calories(self) -> float:
        speed_factor = (
            CALORIES_MEAN_SPEED_MULTIPLIER * self.mean_speed
            + CALORIES_MEAN_SPEED_SHIFT
        )
        return speed_factor * self.weight / M_IN_KM * self.minutes


@dataclass(frozen=True)
class Walking(Training):
    """Walking workout. Height is given in metres."""

    height: float = 0.0

    activity_type: ClassVar[Optional[ActivityType]] = ActivityType.WALKING

    def __post_init__(self) -> None:
        super().__post_init__()
        self._check_non_negative(height=self.height)

    @property
    def calories(self) -> float:
        if self.height == 0:
            return 0.0

        speed_msec_sq = (self.mean_speed * KMH_IN_MSEC) ** 2
        return (
            CALORIES_WEIGHT_MULTIPLIER * self.weight
            + (speed_msec_sq / self.height)
            * CALORIES_SPEED_HEIGHT_MULTIPLIER
            * self.weight
        ) * self.minutes


@dataclass(frozen=True)
class Swimming(Training):
    """Swimming workout, counted in strokes and pool laps."""

    len_step: float = SWIMMING_LEN_STEP
    length_pool: int = 0
    count_pool: int = 0

    activity_type: ClassVar[Optional[ActivityType]] = ActivityType.SWIMMING

    def __post_init__(self) -> None:
        super().__post_init__()
        self._check_non_negative(
            length_pool=self.length_pool, count_pool=self.count_pool
        )

    @property
    def mean_speed(self) -> float:
        """Average speed from pool laps rather than strokes."""
        if self.hours == 0:
            return 0.0
        return self.length_pool * self.count_pool / M_IN_KM / self.hours

    @property
    def calories(self) -> float:
        return (
            (self.mean_speed + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
            * SWIMMING_CALORIES_WEIGHT_MULTIPLIER
            * self.weight
            * self.hours
        )


def create_training(
    activity_type: ActivityType,
    action: int,
    duration: timedelta,
    weight: float,
    height: float = 0.0,
    length_pool: int = 0,
    count_pool: int = 0,
) -> Training:
    """
    Build the workout record matching an activity type.

    Parameters irrelevant to the activity are ignored.
    """
    if activity_type == ActivityType.RUNNING:
        return Running(action=action, duration=duration, weight=weight)
    if activity_type == ActivityType.WALKING:
        return Walking(action=action, duration=duration, weight=weight, height=height)
    if activity_type == ActivityType.SWIMMING:
        return Swimming(
            action=action,
            duration=duration,
            weight=weight,
            length_pool=length_pool,
            count_pool=count_pool,
        )
    raise ValueError(f"Unsupported activity type: {activity_type}")
