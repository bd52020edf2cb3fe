"""
Workout calculator.

Provides the single-workout report and functions for aggregating
statistics across several workouts.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Dict, Optional
from collections import defaultdict

from .models import Training


logger = logging.getLogger(__name__)


@dataclass
class WorkoutStats:
    """Aggregated workout statistics."""

    total_workouts: int
    total_distance_km: float
    total_duration_hours: float
    total_calories: float
    avg_speed_kmh: float
    workout_distribution: Dict[str, int]
    longest_workout: Optional[dict] = None
    most_calories_workout: Optional[dict] = None


def read_data(training: Training) -> str:
    """Return the text report for a single workout."""
    calories = training.calories
    info = replace(training.training_info(), calories=calories)
    logger.debug(f"{info.training_type}: {calories:.2f} kcal")
    return str(info)


def _workout_summary(training: Training) -> dict:
    """Short description of a workout for highlights."""
    return training.training_info().to_dict()


def calculate_workout_stats(trainings: List[Training]) -> WorkoutStats:
    """Calculate aggregate statistics over a list of workouts."""
    if not trainings:
        return WorkoutStats(
            total_workouts=0,
            total_distance_km=0.0,
            total_duration_hours=0.0,
            total_calories=0.0,
            avg_speed_kmh=0.0,
            workout_distribution={},
        )

    total_distance = sum(t.distance for t in trainings)
    total_hours = sum(t.hours for t in trainings)
    total_calories = sum(t.calories for t in trainings)
    avg_speed = total_distance / total_hours if total_hours else 0.0

    distribution: Dict[str, int] = defaultdict(int)
    for training in trainings:
        distribution[training.training_type] += 1

    longest = max(trainings, key=lambda t: t.distance)
    most_calories = max(trainings, key=lambda t: t.calories)

    return WorkoutStats(
        total_workouts=len(trainings),
        total_distance_km=round(total_distance, 2),
        total_duration_hours=round(total_hours, 2),
        total_calories=round(total_calories, 2),
        avg_speed_kmh=round(avg_speed, 2),
        workout_distribution=dict(distribution),
        longest_workout=_workout_summary(longest),
        most_calories_workout=_workout_summary(most_calories),
    )


def calculate_totals_by_type(trainings: List[Training]) -> Dict[str, Dict]:
    """Calculate distance, duration and calories per activity type."""
    totals: Dict[str, Dict[str, float]] = defaultdict(
        lambda: {"distance_km": 0.0, "duration_hours": 0.0, "calories": 0.0}
    )

    for training in trainings:
        entry = totals[training.training_type]
        entry["distance_km"] += training.distance
        entry["duration_hours"] += training.hours
        entry["calories"] += training.calories

    return {
        label: {key: round(value, 2) for key, value in entry.items()}
        for label, entry in totals.items()
    }
