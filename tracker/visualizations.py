"""
Workout data visualization.

Provides functions for creating matplotlib charts from workout records.
"""

import logging
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from .models import ActivityType, Training
from .calculator import calculate_totals_by_type


logger = logging.getLogger(__name__)

# plot styling
plt.style.use("seaborn-v0_8-whitegrid")
COLORS = {
    "primary": "#2563eb",
    "secondary": "#64748b",
    "accent": "#f59e0b",
    "success": "#10b981",
}
TYPE_COLORS = {
    ActivityType.RUNNING.label: COLORS["primary"],
    ActivityType.WALKING.label: COLORS["success"],
    ActivityType.SWIMMING.label: COLORS["accent"],
}


def _finish(output_path: Optional[Path], show: bool) -> None:
    """Save and/or display the current figure."""
    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150, bbox_inches="tight")
        logger.info(f"Saved plot to {output_path}")

    if show:
        plt.show()
    else:
        plt.close()


def plot_calories_per_workout(
    trainings: List[Training],
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Plot calories burned in each workout.

    Parameters:
        trainings: List of workout records.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    if not trainings:
        logger.warning("No workouts to plot")
        return

    fig, ax = plt.subplots(figsize=(12, 6))

    x = np.arange(len(trainings))
    calories = [t.calories for t in trainings]
    colors = [TYPE_COLORS.get(t.training_type, COLORS["secondary"]) for t in trainings]

    ax.bar(x, calories, color=colors, alpha=0.8)
    ax.axhline(
        np.mean(calories),
        color=COLORS["secondary"],
        linestyle="--",
        linewidth=1.5,
        label=f"Average: {np.mean(calories):.0f} kcal",
    )

    ax.set_xlabel("Workout", fontsize=11)
    ax.set_ylabel("kcal", fontsize=11)
    ax.set_title("Calories per Workout", fontsize=14, fontweight="bold")
    ax.set_xticks(x)
    ax.set_xticklabels(
        [f"{i + 1}. {t.training_type}" for i, t in enumerate(trainings)],
        rotation=45,
        ha="right",
    )
    ax.legend()
    ax.grid(True, alpha=0.3, axis="y")

    _finish(output_path, show)


def plot_distance_vs_speed(
    trainings: List[Training],
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Scatter plot of distance against average speed, one colour per type.

    Parameters:
        trainings: List of workout records.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    if not trainings:
        logger.warning("No workouts to plot")
        return

    fig, ax = plt.subplots(figsize=(10, 6))

    for label, color in TYPE_COLORS.items():
        group = [t for t in trainings if t.training_type == label]
        if not group:
            continue
        ax.scatter(
            [t.distance for t in group],
            [t.mean_speed for t in group],
            color=color,
            alpha=0.7,
            s=60,
            label=label,
        )

    ax.set_xlabel("Distance (km)", fontsize=11)
    ax.set_ylabel("Average speed (km/h)", fontsize=11)
    ax.set_title("Distance vs Speed", fontsize=14, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)

    _finish(output_path, show)


def plot_calories_by_type(
    trainings: List[Training],
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Plot total calories burned per activity type.

    Parameters:
        trainings: List of workout records.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    totals = calculate_totals_by_type(trainings)

    if not totals:
        logger.warning("No workouts to plot")
        return

    fig, ax = plt.subplots(figsize=(8, 6))

    labels = list(totals.keys())
    calories = np.array([totals[label]["calories"] for label in labels])
    share = calories / calories.sum() * 100 if calories.sum() else calories

    bars = ax.bar(
        labels,
        calories,
        color=[TYPE_COLORS.get(label, COLORS["secondary"]) for label in labels],
        alpha=0.8,
    )
    for bar, pct in zip(bars, share):
        ax.annotate(
            f"{pct:.0f}%",
            (bar.get_x() + bar.get_width() / 2, bar.get_height()),
            ha="center",
            va="bottom",
            fontsize=10,
        )

    ax.set_ylabel("kcal", fontsize=11)
    ax.set_title("Calories by Activity", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.3, axis="y")

    _finish(output_path, show)
