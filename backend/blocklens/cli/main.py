"""
CLI interface for pacing projections.

Usage:
    blocklens project --goal-race marathon --goal-time 3:30:00 \\
        --recent-race half --recent-time 1:40:00 --adjustment -10 --compare
    blocklens project --inputs saved_inputs.json --unit km
    blocklens validate 3:30:00
"""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from blocklens.config import settings
from blocklens.features.pacing import PacingInputs, PacingService, TimeValidationError
from blocklens.shared.constants import HumidityLevel, RaceKey, UnitPreference
from blocklens.shared.time_codec import TimeParsed, parse_time
from .report import ReportGenerator


RACE_CHOICES = [r.value for r in RaceKey]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Race pacing projections for BlockLens."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


@cli.command()
@click.option(
    "--inputs", "inputs_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Saved input record (JSON); options below override it"
)
@click.option("--goal-race", default=None, type=click.Choice(RACE_CHOICES), help="Race being planned")
@click.option("--goal-time", default=None, help="Goal time (M:SS or H:MM:SS)")
@click.option("--recent-race", default=None, type=click.Choice(RACE_CHOICES), help="Recent race")
@click.option("--recent-time", default=None, help="Recent race time (M:SS or H:MM:SS)")
@click.option(
    "--adjustment",
    default=None,
    type=float,
    help="Start pace offset in sec/mile (negative = faster than sustainable)"
)
@click.option("--compare/--no-compare", default=None, help="Show aggressive/conservative scenarios")
@click.option(
    "--unit",
    default=None,
    type=click.Choice([u.value for u in UnitPreference]),
    help="Display unit"
)
@click.option("--temperature", default=None, type=float, help="Race temperature in °F (enables weather)")
@click.option(
    "--humidity",
    default=None,
    type=click.Choice([h.value for h in HumidityLevel]),
    help="Humidity level for weather adjustment"
)
@click.option(
    "--output",
    default="console",
    type=click.Choice(["console", "json"]),
    help="Output format"
)
@click.option(
    "--output-file",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write JSON report to this file"
)
def project(
    inputs_path, goal_race, goal_time, recent_race, recent_time,
    adjustment, compare, unit, temperature, humidity, output, output_file
):
    """
    Project a race from a recent performance.

    Derives sustainable pace with Riegel's formula, applies the fade model
    for aggressive starts and prints the mile-by-mile splits.
    """
    raw = inputs_path.read_text(encoding="utf-8") if inputs_path else None
    base = PacingInputs.from_saved(raw)

    overrides = {
        "goal_race": goal_race,
        "goal_time": goal_time,
        "recent_race": recent_race,
        "recent_time": recent_time,
        "pacing_adjustment": adjustment,
        "compare_mode": compare,
        "unit_preference": unit,
        "temperature": temperature,
        "humidity": humidity,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if temperature is not None:
        overrides["weather_enabled"] = True

    try:
        inputs = PacingInputs.model_validate({**base.model_dump(), **overrides})
    except ValidationError as e:
        fields = ", ".join(sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]}))
        raise click.UsageError(f"Invalid value for: {fields}")

    service = PacingService(compare_offset=settings.compare_offset_sec_per_mile)
    try:
        report = service.build_report(inputs)
    except TimeValidationError as e:
        raise click.BadParameter(e.message, param_hint=f"--{e.field.replace('_', '-')}")
    except ValueError as e:
        raise click.ClickException(str(e))

    generator = ReportGenerator()

    if output == "json":
        click.echo(generator.generate_json(report))
    else:
        click.echo(generator.generate_console(report))

    if output_file:
        generator.save_json(report, output_file)
        click.echo(f"JSON saved: {output_file}")


@cli.command()
@click.argument("time_text")
def validate(time_text):
    """Check a time string and print its length in seconds."""
    result = parse_time(time_text)
    if isinstance(result, TimeParsed):
        click.echo(f"{time_text} = {result.seconds} seconds")
        return
    click.echo(f"Invalid time: {result.error}", err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
