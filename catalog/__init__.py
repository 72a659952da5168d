"""
Catalog package: curated filters and shutter speeds.
"""

from .filters import (
    CURATED_FILTERS,
    HAND_PICKED_TRIPLES,
    FilterRegistry,
    default_registry,
)
from .shutters import (
    SHUTTER_SPEEDS,
    EXTREME_SHUTTER_SPEEDS,
    shutter_speeds,
    validate_shutter_speeds,
)

__all__ = [
    'CURATED_FILTERS',
    'HAND_PICKED_TRIPLES',
    'FilterRegistry',
    'default_registry',
    'SHUTTER_SPEEDS',
    'EXTREME_SHUTTER_SPEEDS',
    'shutter_speeds',
    'validate_shutter_speeds',
]
