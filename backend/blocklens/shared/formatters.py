"""
Formatting utilities for display.

Used by both the API and the CLI report.
"""

from typing import Union

from .constants import UnitPreference
from .units import miles_to_km, pace_to_km, fahrenheit_to_celsius


def _split_clock(total_seconds: float) -> tuple:
    # Round first so 59.6s carries into the next minute
    total = int(round(total_seconds))
    return total // 3600, (total % 3600) // 60, total % 60


def format_duration(total_seconds: float) -> str:
    """
    Format a duration as 'H:MM:SS' (1 hour and over) or 'M:SS'.

    Args:
        total_seconds: Elapsed time in seconds

    Returns:
        Formatted string (e.g., '3:30:00' or '21:05')
    """
    if total_seconds < 0:
        return "—"

    hours, minutes, seconds = _split_clock(total_seconds)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_pace(seconds_per_unit: float) -> str:
    """
    Format pace as 'M:SS' (no unit suffix).

    Args:
        seconds_per_unit: Pace in seconds per mile or km

    Returns:
        Formatted string (e.g., '8:00')
    """
    if seconds_per_unit < 0:
        return "—"

    total = int(round(seconds_per_unit))
    return f"{total // 60}:{total % 60:02d}"


def format_time_delta(delta_seconds: float) -> str:
    """
    Format a signed difference vs goal.

    Returns:
        '+4:10' when slower than goal, '-1:02' when faster, '0:00' when even
    """
    if round(delta_seconds) == 0:
        return "0:00"
    sign = "+" if delta_seconds > 0 else "-"
    return f"{sign}{format_duration(abs(delta_seconds))}"


def format_pace_with_unit(
    seconds_per_mile: float,
    unit: Union[UnitPreference, str] = UnitPreference.MILES
) -> str:
    """
    Format pace with unit label.

    Args:
        seconds_per_mile: Pace in sec/mile (internal unit)
        unit: Display unit

    Returns:
        Formatted string (e.g., '8:00/mi' or '4:58/km')
    """
    if UnitPreference(unit) == UnitPreference.KM:
        return f"{format_pace(pace_to_km(seconds_per_mile))}/km"
    return f"{format_pace(seconds_per_mile)}/mi"


def format_distance(
    miles: float,
    unit: Union[UnitPreference, str] = UnitPreference.MILES
) -> str:
    """
    Format distance in the selected unit to one decimal place.

    Args:
        miles: Distance in miles (internal unit)
        unit: Display unit

    Returns:
        Formatted string (e.g., '26.2' or '42.2')
    """
    if UnitPreference(unit) == UnitPreference.KM:
        return f"{miles_to_km(miles):.1f}"
    return f"{miles:.1f}"


def format_temperature(
    temp_f: float,
    unit: Union[UnitPreference, str] = UnitPreference.MILES
) -> str:
    """Format temperature: Celsius for km preference, Fahrenheit otherwise."""
    if UnitPreference(unit) == UnitPreference.KM:
        return f"{fahrenheit_to_celsius(temp_f)}°C"
    return f"{round(temp_f)}°F"


def format_segment_label(
    mile: int,
    distance_miles: float,
    unit: Union[UnitPreference, str] = UnitPreference.MILES
) -> str:
    """
    Label for a schedule row.

    Miles: '5' for a full mile, '26–26.2' for a partial one.
    Km: always a range, e.g. '8.0–9.7'.
    """
    start = mile - 1
    end = start + distance_miles
    if UnitPreference(unit) == UnitPreference.KM:
        return f"{miles_to_km(start):.1f}–{miles_to_km(end):.1f}"
    if distance_miles < 1:
        return f"{start}–{end:.1f}"
    return str(mile)


def format_fade(fade_penalty: float) -> str:
    """Fade column: '+12s' when there is a penalty, '—' otherwise."""
    if fade_penalty > 0:
        return f"+{fade_penalty:.0f}s"
    return "—"
