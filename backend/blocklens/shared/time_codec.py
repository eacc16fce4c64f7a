"""
Time string parsing and validation.

Accepts race times typed by a user as M:SS or H:MM:SS.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union


TIME_FORMAT_PATTERN = re.compile(r"^[\d:]+$", re.ASCII)

ERROR_EMPTY = "Enter a time"
ERROR_FORMAT = "Use format M:SS or H:MM:SS"
ERROR_NUMBER = "Invalid number in time"
ERROR_SECONDS_RANGE = "Seconds must be 0-59"
ERROR_MINUTES_RANGE = "Minutes must be 0-59"
ERROR_ZERO = "Time must be greater than 0"


@dataclass(frozen=True)
class TimeParsed:
    """Successfully parsed time."""
    seconds: int

    @property
    def valid(self) -> bool:
        return True


@dataclass(frozen=True)
class TimeInvalid:
    """Rejected time with a user-facing reason."""
    error: str

    @property
    def valid(self) -> bool:
        return False


ValidationResult = Union[TimeParsed, TimeInvalid]


def parse_time(text: Optional[str]) -> ValidationResult:
    """
    Validate and parse a time string.

    Args:
        text: "M:SS" or "H:MM:SS" (e.g. "21:30", "3:30:00")

    Returns:
        TimeParsed with total seconds, or TimeInvalid with the reason
    """
    if not text or not isinstance(text, str):
        return TimeInvalid(ERROR_EMPTY)

    trimmed = text.strip()
    if not trimmed:
        return TimeInvalid(ERROR_EMPTY)

    if not TIME_FORMAT_PATTERN.match(trimmed):
        return TimeInvalid(ERROR_FORMAT)

    parts = trimmed.split(":")
    if len(parts) not in (2, 3):
        return TimeInvalid(ERROR_FORMAT)

    # "5:" or "::" leave empty fields behind
    if any(not part.isdigit() for part in parts):
        return TimeInvalid(ERROR_NUMBER)

    nums = [int(part) for part in parts]

    if len(nums) == 2:
        hours = 0
        minutes, seconds = nums
    else:
        hours, minutes, seconds = nums
        if minutes >= 60:
            return TimeInvalid(ERROR_MINUTES_RANGE)

    if seconds >= 60:
        return TimeInvalid(ERROR_SECONDS_RANGE)

    total = hours * 3600 + minutes * 60 + seconds
    if total == 0:
        return TimeInvalid(ERROR_ZERO)

    return TimeParsed(total)


def time_to_seconds(text: Optional[str]) -> int:
    """
    Best-effort conversion of a time string to seconds.

    Returns 0 for invalid input. 0 is never a real race time, so callers
    must treat it as "nothing to compute". Use parse_time() when the
    reason for rejection matters.
    """
    result = parse_time(text)
    if isinstance(result, TimeParsed):
        return result.seconds
    return 0
