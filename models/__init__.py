"""
Domain models for the ND exposure tables.

This package contains the value objects describing filter attenuation and
shutter durations.
"""

from .stop_value import StopValue
from .exposure_time import (
    ExposureTime,
    ExposureBand,
    classify_duration,
    format_duration,
)

__all__ = [
    'StopValue',
    'ExposureTime',
    'ExposureBand',
    'classify_duration',
    'format_duration',
]
