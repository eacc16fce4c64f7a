"""
Report generators for pacing projections.

Formats a PacingReport for console and JSON output.
"""

import json
from pathlib import Path

from blocklens.features.pacing.service import PacingReport, ProjectionResult
from blocklens.shared.constants import UnitPreference, get_race_distance
from blocklens.shared.formatters import (
    format_duration,
    format_fade,
    format_pace_with_unit,
    format_segment_label,
    format_temperature,
)
from blocklens.shared.units import adjustment_for_unit


class ReportGenerator:
    """Generate reports in various formats."""

    def generate_console(self, report: PacingReport) -> str:
        """Generate ASCII report for console output."""
        inputs = report.inputs
        unit = inputs.unit_preference
        unit_label = "km" if unit == UnitPreference.KM else "mi"
        p = report.projection
        summary = report.summary()

        goal_label = get_race_distance(inputs.goal_race).label
        recent_label = get_race_distance(inputs.recent_race).label

        lines = [
            "",
            "=" * 60,
            f"             PACING PROJECTION ({goal_label})",
            "=" * 60,
            "",
            f"Recent race:      {recent_label} in {inputs.recent_time}",
            f"Goal time:        {inputs.goal_time} ({summary['goal_pace']})",
            f"Sustainable pace: {summary['sustainable_pace']}",
            f"Start pace:       {summary['start_pace']} ({self._format_adjustment(p, unit)})",
            "",
            f"Projected finish: {summary['projected_finish']} ({summary['time_delta']} vs goal)",
        ]

        if report.weather:
            w = report.weather
            lines.append(
                f"Weather:          +{format_duration(w.time_added)} "
                f"({format_temperature(w.temperature_f, unit)}, {w.humidity.value} humidity) "
                f"-> {format_duration(w.adjusted_finish_time)}"
            )

        lines.extend([
            "",
            f"Fade risk:        {p.risk.level.value.replace('-', ' ')}",
            f"                  {p.risk.message}",
        ])

        if report.comparisons:
            c = report.comparisons
            offset = adjustment_for_unit(c.offset, unit)
            lines.extend([
                "",
                "-" * 60,
                "                    SCENARIOS",
                "-" * 60,
                "",
                f"{'Scenario':<24} | {'Finish':>8} | Risk",
                f"{'-' * 24}-|-{'-' * 8}-|-{'-' * 10}",
                self._scenario_row(f"Aggressive (-{offset}s/{unit_label})", c.aggressive),
                self._scenario_row("Current", p),
                self._scenario_row(f"Conservative (+{offset}s/{unit_label})", c.conservative),
            ])

        distance_header = "km" if unit == UnitPreference.KM else "Mile"
        lines.extend([
            "",
            "-" * 60,
            "                     SPLITS",
            "-" * 60,
            "",
            f"{distance_header:<11} | {'Pace':>9} | {'Split':>7} | {'Total':>8} | Fade",
            f"{'-' * 11}-|-{'-' * 9}-|-{'-' * 7}-|-{'-' * 8}-|-{'-' * 5}",
        ])

        for s in p.segments:
            lines.append(
                f"{format_segment_label(s.mile, s.distance_miles, unit):<11} | "
                f"{format_pace_with_unit(s.pace, unit):>9} | "
                f"{format_duration(s.segment_time):>7} | "
                f"{format_duration(s.cumulative_time):>8} | "
                f"{format_fade(s.fade_penalty)}"
            )

        lines.append("")
        return "\n".join(lines)

    def generate_json(self, report: PacingReport) -> str:
        """Serialize the report as JSON."""
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)

    def save_json(self, report: PacingReport, path: Path) -> None:
        """Save JSON report to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.generate_json(report), encoding="utf-8")

    def _scenario_row(self, label: str, projection: ProjectionResult) -> str:
        finish = format_duration(projection.projected_finish_time)
        level = projection.risk.level.value.replace("-", " ")
        return f"{label:<24} | {finish:>8} | {level}"

    def _format_adjustment(self, projection: ProjectionResult, unit: UnitPreference) -> str:
        if projection.pacing_adjustment == 0:
            return "even"
        amount = adjustment_for_unit(projection.pacing_adjustment, unit)
        unit_label = "km" if unit == UnitPreference.KM else "mi"
        direction = "faster" if projection.pacing_adjustment < 0 else "slower"
        return f"{amount}s/{unit_label} {direction}"
