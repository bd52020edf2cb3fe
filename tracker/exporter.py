"""
JSON report exporter.

Writes workout reports and aggregate statistics to JSON files.
"""

import json
import logging
from pathlib import Path
from typing import List, Any
from dataclasses import asdict
from datetime import timedelta

from .models import Training
from .calculator import calculate_workout_stats, calculate_totals_by_type


logger = logging.getLogger(__name__)


class ReportEncoder(json.JSONEncoder):
    """JSON encoder that writes timedelta objects as minutes."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, timedelta):
            return round(obj.total_seconds() / 60, 2)
        return super().default(obj)


class ReportExporter:
    """Exports workout reports to JSON files."""

    def __init__(self, output_dir: Path):
        self._output_dir = output_dir

    def _write_json(self, filename: str, data: Any) -> Path:
        """Write data to JSON file."""
        self._output_dir.mkdir(parents=True, exist_ok=True)
        filepath = self._output_dir / filename
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, cls=ReportEncoder)
        logger.info(f"Exported {filename}")
        return filepath

    def export_reports(self, trainings: List[Training]) -> Path:
        """Export one report per workout."""
        data = [asdict(t.training_info()) for t in trainings]
        return self._write_json("reports.json", data)

    def export_summary(self, trainings: List[Training]) -> Path:
        """Export aggregate statistics and per-type totals."""
        data = asdict(calculate_workout_stats(trainings))
        data["by_type"] = calculate_totals_by_type(trainings)
        return self._write_json("summary.json", data)

    def export_all(self, trainings: List[Training]) -> None:
        """Export reports and summary."""
        self.export_reports(trainings)
        self.export_summary(trainings)
        logger.info(f"Export complete. Data written to {self._output_dir}")
