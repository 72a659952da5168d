"""
Shutter Speed Catalog

Shutter speeds offered by the Canon 90D, ordered fastest to slowest.
"""

import logging
from typing import Sequence, Tuple

from models import ExposureTime

logger = logging.getLogger(__name__)

# Minimum needed for the CSV table's mid-table header
MIN_SHUTTER_COUNT = 2

# Fastest speeds, left out by default
EXTREME_SHUTTER_SPEEDS: Tuple[ExposureTime, ...] = (
    ExposureTime.from_fraction(8000),
    ExposureTime.from_fraction(6400),
    ExposureTime.from_fraction(5000),
)

SHUTTER_SPEEDS: Tuple[ExposureTime, ...] = (
    # Fractions, e.g. 4000 = 1/4000s
    ExposureTime.from_fraction(4000),
    ExposureTime.from_fraction(3200),
    ExposureTime.from_fraction(2500),
    ExposureTime.from_fraction(2000),
    ExposureTime.from_fraction(1600),
    ExposureTime.from_fraction(1250),
    ExposureTime.from_fraction(1000),
    ExposureTime.from_fraction(800),
    ExposureTime.from_fraction(640),
    ExposureTime.from_fraction(500),
    ExposureTime.from_fraction(400),
    ExposureTime.from_fraction(320),
    ExposureTime.from_fraction(250),
    ExposureTime.from_fraction(200),
    ExposureTime.from_fraction(160),
    ExposureTime.from_fraction(125),
    ExposureTime.from_fraction(100),
    ExposureTime.from_fraction(80),
    ExposureTime.from_fraction(60),
    ExposureTime.from_fraction(50),
    ExposureTime.from_fraction(40),
    ExposureTime.from_fraction(30),
    ExposureTime.from_fraction(25),
    ExposureTime.from_fraction(20),
    ExposureTime.from_fraction(15),
    ExposureTime.from_fraction(13),
    ExposureTime.from_fraction(10),
    ExposureTime.from_fraction(8),
    ExposureTime.from_fraction(6),
    ExposureTime.from_fraction(5),
    ExposureTime.from_fraction(4),

    # Seconds and tenths, e.g. (3, 2) = 3"2 = 3.2s
    ExposureTime.from_whole_and_tenths(0, 3),
    ExposureTime.from_whole_and_tenths(0, 4),
    ExposureTime.from_whole_and_tenths(0, 5),
    ExposureTime.from_whole_and_tenths(0, 6),
    ExposureTime.from_whole_and_tenths(0, 8),
    ExposureTime.from_whole_and_tenths(1, 0),
    ExposureTime.from_whole_and_tenths(1, 3),
    ExposureTime.from_whole_and_tenths(1, 6),
    ExposureTime.from_whole_and_tenths(2, 0),
    ExposureTime.from_whole_and_tenths(2, 5),
    ExposureTime.from_whole_and_tenths(3, 2),
    ExposureTime.from_whole_and_tenths(4, 0),
    ExposureTime.from_whole_and_tenths(5, 0),
    ExposureTime.from_whole_and_tenths(6, 0),
    ExposureTime.from_whole_and_tenths(8, 0),
    ExposureTime.from_whole_and_tenths(10, 0),
    ExposureTime.from_whole_and_tenths(13, 0),
    ExposureTime.from_whole_and_tenths(15, 0),
    ExposureTime.from_whole_and_tenths(20, 0),
    ExposureTime.from_whole_and_tenths(25, 0),
    ExposureTime.from_whole_and_tenths(30, 0),
)


def validate_shutter_speeds(shutters: Sequence[ExposureTime]) -> None:
    """
    Check that a shutter list can be rendered.

    Requires at least two speeds, all positive and strictly increasing.

    Raises:
        ValueError: If the list is malformed
    """
    if len(shutters) < MIN_SHUTTER_COUNT:
        raise ValueError(
            f"At least {MIN_SHUTTER_COUNT} shutter speeds are required, got {len(shutters)}"
        )

    for i, shutter in enumerate(shutters):
        if shutter.seconds <= 0:
            raise ValueError(f"Shutter speed #{i} is not positive: {shutter.seconds}")
        if i > 0 and shutter.seconds <= shutters[i - 1].seconds:
            raise ValueError(
                f"Shutter speeds must be ordered fastest to slowest: "
                f"#{i} ({shutter.seconds}s) follows {shutters[i - 1].seconds}s"
            )


def shutter_speeds(include_extreme: bool = False) -> Tuple[ExposureTime, ...]:
    """
    Get the validated list of shutter speeds.

    Args:
        include_extreme: Prepend 1/8000, 1/6400 and 1/5000

    Returns:
        Shutter speeds ordered fastest to slowest
    """
    shutters = SHUTTER_SPEEDS
    if include_extreme:
        shutters = EXTREME_SHUTTER_SPEEDS + shutters

    validate_shutter_speeds(shutters)
    logger.debug(f"Using {len(shutters)} shutter speeds")
    return shutters
