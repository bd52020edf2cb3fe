"""
Main entry point for the workout tracker.

Provides CLI interface for calculating single workouts, reporting on
workout files, exporting reports and generating charts.
"""

import sys
import logging
import argparse
from pathlib import Path
from datetime import timedelta
from typing import List, Optional

from .config import AppConfig
from .models import (
    ActivityType,
    Training,
    Running,
    Walking,
    Swimming,
    create_training,
)
from .calculator import read_data, calculate_workout_stats, calculate_totals_by_type
from .loader import load_trainings_from_file
from .exporter import ReportExporter
from .visualizations import (
    plot_calories_per_workout,
    plot_distance_vs_speed,
    plot_calories_by_type,
)


logger = logging.getLogger(__name__)


def sample_trainings() -> List[Training]:
    """Sample workouts shown by the demo command."""
    return [
        Swimming(
            action=2000,
            duration=timedelta(minutes=90),
            weight=85,
            length_pool=50,
            count_pool=5,
        ),
        Walking(
            action=20000,
            duration=timedelta(hours=3, minutes=45),
            weight=85,
            height=185,
        ),
        Running(action=5000, duration=timedelta(minutes=30), weight=85),
    ]


def load_trainings(config: AppConfig, filepath: Optional[str]) -> List[Training]:
    """
    Load workouts from the given file or the configured default.

    Parameters:
        config: Application configuration.
        filepath: Path to a CSV/TSV workout file.

    Returns:
        List of workout records.
    """
    path = Path(filepath) if filepath else config.paths.default_workout_file
    return load_trainings_from_file(path)


def print_summary(trainings: List[Training]) -> None:
    """
    Print summary over all workouts.

    Parameters:
        trainings: List of workout records.
    """
    stats = calculate_workout_stats(trainings)

    print("\n" + "=" * 60)
    print("WORKOUT SUMMARY")
    print("=" * 60)
    print(f"   Total workouts: {stats.total_workouts}")
    print(f"   Total distance: {stats.total_distance_km:.2f} km")
    print(f"   Total time: {stats.total_duration_hours:.2f} hours")
    print(f"   Avg speed: {stats.avg_speed_kmh:.2f} km/h")
    print(f"   Calories burned: {stats.total_calories:.2f}")

    totals = calculate_totals_by_type(trainings)
    if totals:
        print("\n   By activity:")
        for label, count in stats.workout_distribution.items():
            print(
                f"     {label}: {count} workouts, "
                f"{totals[label]['distance_km']:.2f} km, "
                f"{totals[label]['calories']:.2f} kcal"
            )

    if stats.longest_workout:
        print(f"\n   Longest: {stats.longest_workout['training_type']}")
        print(f"            {stats.longest_workout['distance_km']} km")

    if stats.most_calories_workout:
        print(f"\n   Most calories: {stats.most_calories_workout['training_type']}")
        print(f"            {stats.most_calories_workout['calories']} kcal")

    print("\n" + "=" * 60)


def cmd_demo(args: argparse.Namespace, config: AppConfig) -> None:
    """Print reports for the sample workouts."""
    for training in sample_trainings():
        print(read_data(training))


def cmd_calc(args: argparse.Namespace, config: AppConfig) -> None:
    """Calculate a single workout from command-line values."""
    training = create_training(
        ActivityType.from_string(args.activity),
        action=args.actions,
        duration=timedelta(minutes=args.minutes),
        weight=args.weight,
        height=args.height,
        length_pool=args.pool_length,
        count_pool=args.pool_count,
    )
    print(read_data(training))


def cmd_report(args: argparse.Namespace, config: AppConfig) -> None:
    """Print a report for each workout in a file plus totals."""
    trainings = load_trainings(config, args.file)
    for training in trainings:
        print(read_data(training))
    print_summary(trainings)


def cmd_export(args: argparse.Namespace, config: AppConfig) -> None:
    """Export reports and summary to JSON."""
    trainings = load_trainings(config, args.file)

    output_dir = Path(args.output) if args.output else config.paths.output_dir
    logger.info(f"Exporting to {output_dir}")
    ReportExporter(output_dir).export_all(trainings)


def cmd_visualize(args: argparse.Namespace, config: AppConfig) -> None:
    """Generate charts."""
    trainings = load_trainings(config, args.file)

    output_dir = config.paths.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    show = not args.no_show

    logger.info("Generating workout visualizations...")
    plot_calories_per_workout(trainings, output_dir / "calories.png", show)
    plot_distance_vs_speed(trainings, output_dir / "distance_speed.png", show)
    plot_calories_by_type(trainings, output_dir / "calories_by_type.png", show)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Workout distance, speed and calorie calculator"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # demo command
    subparsers.add_parser("demo", help="Show reports for sample workouts")

    # calc command
    calc_parser = subparsers.add_parser("calc", help="Calculate a single workout")
    calc_parser.add_argument(
        "activity",
        choices=[t.value for t in ActivityType],
        help="Activity type",
    )
    calc_parser.add_argument(
        "--actions", type=int, required=True, help="Steps or strokes"
    )
    calc_parser.add_argument(
        "--minutes", type=float, required=True, help="Workout duration in minutes"
    )
    calc_parser.add_argument(
        "--weight", type=float, required=True, help="Body weight in kg"
    )
    calc_parser.add_argument(
        "--height", type=float, default=0.0, help="Height in m (walking)"
    )
    calc_parser.add_argument(
        "--pool-length", type=int, default=0, help="Pool length in m (swimming)"
    )
    calc_parser.add_argument(
        "--pool-count", type=int, default=0, help="Pool laps (swimming)"
    )

    # report command
    report_parser = subparsers.add_parser("report", help="Report on a workout file")
    report_parser.add_argument("file", nargs="?", help="CSV/TSV workout file")

    # export command
    export_parser = subparsers.add_parser("export", help="Export reports to JSON")
    export_parser.add_argument("file", nargs="?", help="CSV/TSV workout file")
    export_parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Custom output directory (default: configured output dir)",
    )

    # visualize command
    viz_parser = subparsers.add_parser("visualize", help="Generate charts")
    viz_parser.add_argument("file", nargs="?", help="CSV/TSV workout file")
    viz_parser.add_argument(
        "--no-show", action="store_true", help="Save plots without displaying"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    config = AppConfig.load()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    commands = {
        "demo": cmd_demo,
        "calc": cmd_calc,
        "report": cmd_report,
        "export": cmd_export,
        "visualize": cmd_visualize,
    }

    try:
        commands[args.command](args, config)
    except (ValueError, OverflowError, FileNotFoundError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
