"""
Combination Builder

Generates the filter stacks shown as table columns and orders them by strength.
"""

import logging
from itertools import combinations
from typing import List, Sequence, Tuple

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from models import StopValue
from catalog import FilterRegistry, HAND_PICKED_TRIPLES

logger = logging.getLogger(__name__)


class CombinationBuilder:
    """
    Builds the ordered list of filter combinations.

    By default every single filter, every pair and the hand-picked triples are
    listed. The exhaustive options add every triple (replacing the hand-picked
    ones) and the stack of all filters together.

    Attributes:
        triples: Labels of the hand-picked three-filter stacks
        include_all_triples: List every triple instead of the hand-picked ones
        include_full_stack: Also list all filters stacked together

    Example:
        >>> builder = CombinationBuilder()
        >>> combined = builder.build(default_registry())
        >>> len(combined)
        12
        >>> combined[0].label, combined[-1].label
        ('4', '1k 64 4')
    """

    def __init__(self, triples: Sequence[Tuple[str, ...]] = HAND_PICKED_TRIPLES,
                 include_all_triples: bool = False,
                 include_full_stack: bool = False):
        """
        Initialize combination builder.

        Args:
            triples: Hand-picked stacks, as filter labels in display order
            include_all_triples: Generate every triple instead of the hand-picked ones
            include_full_stack: Add the stack of every filter
        """
        self.triples = tuple(tuple(triple) for triple in triples)
        self.include_all_triples = include_all_triples
        self.include_full_stack = include_full_stack

    @classmethod
    def from_config(cls, config_path: str = 'config.yaml') -> 'CombinationBuilder':
        """Create CombinationBuilder from configuration file."""
        import yaml

        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

        combination_config = config.get('combinations') or {}
        return cls(
            include_all_triples=bool(combination_config.get('include_all_triples', False)),
            include_full_stack=bool(combination_config.get('include_full_stack', False)),
        )

    def generate_combinations(self, registry: FilterRegistry) -> List[StopValue]:
        """
        Generate filter combinations in conceptual order.

        Singles come first in registry order, then pairs ``filters[i] + filters[j]``
        for ``i < j``, then the triples and finally the full stack if enabled.

        Args:
            registry: Base filters

        Returns:
            Unsorted list of combinations

        Raises:
            ValueError: If a hand-picked triple names a filter missing from the registry
        """
        filters = list(registry)
        combined: List[StopValue] = list(filters)

        for first, second in combinations(filters, 2):
            combined.append(first + second)

        if self.include_all_triples:
            for first, second, third in combinations(filters, 3):
                combined.append(first + second + third)
        else:
            registry.validate_stacks(self.triples)
            for triple in self.triples:
                combined.append(registry.stack(triple))

        if self.include_full_stack and len(filters) > 1:
            combined.append(registry.stack(registry.labels))

        return combined

    @staticmethod
    def sort_combinations(combined: Sequence[StopValue]) -> Tuple[StopValue, ...]:
        """Sort combinations by stops ascending; ties keep their original order."""
        return tuple(sorted(combined, key=lambda nd_filter: nd_filter.stops))

    def build(self, registry: FilterRegistry) -> Tuple[StopValue, ...]:
        """
        Generate and sort the combinations for a registry.

        Args:
            registry: Base filters

        Returns:
            Combinations ordered by stops ascending
        """
        combined = self.sort_combinations(self.generate_combinations(registry))
        logger.info(f"Built {len(combined)} filter combinations from {len(registry)} filters")
        logger.debug(
            "Combinations: " + ", ".join(f"{c.label} ({c.stops})" for c in combined)
        )
        return combined
