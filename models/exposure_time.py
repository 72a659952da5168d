"""
Exposure Time Model

Represents a shutter duration and formats exposure times the way the camera
displays them: fractions for fast speeds, seconds-and-tenths up to 30s and
minutes/hours in BULB mode.
"""

import math
from dataclasses import dataclass
from enum import Enum

FIELD_WIDTH = 7

# Upper bounds (inclusive) of the timed shutter range
FRACTION_LIMIT = 0.25
SECONDS_LIMIT = 30.0

# BULB limits
MINUTES_LIMIT = 60
MAX_BULB_HOURS = 99

# Shown when a BULB exposure would run past the camera's 99h timer
UNREPRESENTABLE_MARKER = 'x'


class ExposureBand(Enum):
    """Enumeration of display notations, selected by duration magnitude."""
    FRACTION = "fraction"
    SECONDS = "seconds"
    BULB_MINUTES = "bulb_minutes"
    BULB_HOURS = "bulb_hours"
    BULB_UNREPRESENTABLE = "bulb_unrepresentable"


def _round_half_up(value: float) -> int:
    # Positive inputs only; 6.5 -> 7 rather than banker's 6
    return int(math.floor(value + 0.5))


def _split_bulb(duration: float):
    """Split a BULB duration into (total_minutes, seconds) from whole seconds rounded up."""
    total_seconds = math.ceil(duration)
    return total_seconds // 60, total_seconds % 60


def classify_duration(duration: float) -> ExposureBand:
    """
    Determine which notation band a duration falls into.

    Every boundary belongs to the lower band: exactly 0.25s is a fraction,
    exactly 30s uses seconds notation, exactly 60 minutes stays in minutes.

    Args:
        duration: Exposure duration in seconds (> 0)

    Returns:
        The ExposureBand used to format the duration

    Example:
        >>> classify_duration(0.25)
        <ExposureBand.FRACTION: 'fraction'>
        >>> classify_duration(30.1)
        <ExposureBand.BULB_MINUTES: 'bulb_minutes'>
    """
    if duration <= FRACTION_LIMIT:
        return ExposureBand.FRACTION
    if duration <= SECONDS_LIMIT:
        return ExposureBand.SECONDS

    total_minutes, _ = _split_bulb(duration)
    if total_minutes <= MINUTES_LIMIT:
        return ExposureBand.BULB_MINUTES
    if total_minutes // 60 > MAX_BULB_HOURS:
        return ExposureBand.BULB_UNREPRESENTABLE
    return ExposureBand.BULB_HOURS


def format_duration(duration: float) -> str:
    """
    Format an exposure duration as a 7 character camera-style string.

    Notation by band:
        FRACTION              ``      4``   1/4s, only the denominator is printed
        SECONDS               ``    3"2``   3.2s
        BULB_MINUTES          `` 5' 30"``   5 minutes 30 seconds
        BULB_HOURS            `` 1h 01'``   1 hour 1 minute, seconds dropped
        BULB_UNREPRESENTABLE  ``      x``   longer than 99 hours

    Args:
        duration: Exposure duration in seconds (> 0)

    Returns:
        Formatted duration

    Example:
        >>> format_duration(1 / 125)
        '    125'
        >>> format_duration(30.0)
        '   30"0'
        >>> format_duration(3661)
        " 1h 01'"
    """
    band = classify_duration(duration)

    if band is ExposureBand.FRACTION:
        return f"{_round_half_up(1.0 / duration):{FIELD_WIDTH}}"

    if band is ExposureBand.SECONDS:
        whole = math.floor(duration)
        tenths = _round_half_up((duration - whole) * 10)
        if tenths == 10:
            whole += 1
            tenths = 0
        return f"{whole:5}\"{tenths}"

    total_minutes, seconds = _split_bulb(duration)

    if band is ExposureBand.BULB_MINUTES:
        return f"{total_minutes:2}' {seconds:02}\""

    if band is ExposureBand.BULB_UNREPRESENTABLE:
        return f"{UNREPRESENTABLE_MARKER:>{FIELD_WIDTH}}"

    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:2}h {minutes:02}'"


@dataclass(frozen=True)
class ExposureTime:
    """
    Represents a shutter speed offered by the camera.

    Attributes:
        seconds: Shutter duration in seconds (always > 0)

    Example:
        >>> shutter = ExposureTime.from_fraction(125)
        >>> shutter.format()
        '    125'
        >>> shutter.format_with_stops(10)  # behind an ND1000
        '    8"2'
    """

    seconds: float

    @classmethod
    def from_fraction(cls, denominator: int) -> 'ExposureTime':
        """Create a fast shutter speed, e.g. ``from_fraction(4000)`` for 1/4000s."""
        return cls(seconds=1.0 / denominator)

    @classmethod
    def from_whole_and_tenths(cls, whole: int, tenths: int) -> 'ExposureTime':
        """Create a slow shutter speed, e.g. ``from_whole_and_tenths(3, 2)`` for 3"2."""
        return cls(seconds=whole + tenths / 10.0)

    def apply_stops(self, stops: int) -> float:
        """
        Compute the exposure time needed behind ``stops`` stops of ND filtering.

        Each stop halves the light reaching the sensor, so the duration doubles
        per stop. The shutter itself is left unchanged.

        Args:
            stops: Non-negative number of stops of attenuation

        Returns:
            Adjusted duration in seconds
        """
        return self.seconds * 2 ** stops

    def format(self) -> str:
        """Format the shutter's own duration."""
        return format_duration(self.seconds)

    def format_with_stops(self, stops: int) -> str:
        """Format the duration after applying ``stops`` stops of attenuation."""
        return format_duration(self.apply_stops(stops))

    def __repr__(self) -> str:
        """String representation of ExposureTime."""
        return f"ExposureTime(seconds={self.seconds!r})"
