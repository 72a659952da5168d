"""
Filter Catalog

The curated set of ND filters and the registry used to look them up by label.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple

from models import StopValue

logger = logging.getLogger(__name__)


# My personal selection of ND filters, strongest first
CURATED_FILTERS: Tuple[StopValue, ...] = (
    StopValue(10, "1k"),  # ND1000
    StopValue(6, "64"),   # ND64
    StopValue(3, "8"),    # ND8
    StopValue(2, "4"),    # ND4
)

# Three-filter stacks worth listing (ND1000 + ND64 + ND4, ND1000 + ND8 + ND4)
HAND_PICKED_TRIPLES: Tuple[Tuple[str, str, str], ...] = (
    ("1k", "64", "4"),
    ("1k", "8", "4"),
)


class FilterRegistry:
    """
    Ordered, read-only registry of ND filters keyed by label.

    Keeps the curated order (used for single and pair combinations) while
    letting hand-picked stacks refer to filters by name instead of position.

    Attributes:
        filters: Filters in curated order
        by_label: Read-only mapping from label to filter

    Example:
        >>> registry = FilterRegistry(CURATED_FILTERS)
        >>> registry.get("64").stops
        6
        >>> registry.labels
        ('1k', '64', '8', '4')
    """

    def __init__(self, filters: Iterable[StopValue]):
        """
        Initialize registry.

        Args:
            filters: Base filters in display order

        Raises:
            ValueError: If the list is empty, a label repeats or a filter has negative stops
        """
        self.filters: Tuple[StopValue, ...] = tuple(filters)

        if not self.filters:
            raise ValueError("At least one filter is required")

        index = {}
        for nd_filter in self.filters:
            if nd_filter.stops < 0:
                raise ValueError(f"Filter '{nd_filter.label}' has negative stops: {nd_filter.stops}")
            if nd_filter.label in index:
                raise ValueError(f"Duplicate filter label: {nd_filter.label}")
            index[nd_filter.label] = nd_filter

        self.by_label: Mapping[str, StopValue] = MappingProxyType(index)
        logger.debug(f"Registered {len(self.filters)} filters: {', '.join(self.labels)}")

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(nd_filter.label for nd_filter in self.filters)

    def get(self, label: str) -> StopValue:
        """
        Look up a filter by label.

        Raises:
            ValueError: If no filter has this label
        """
        try:
            return self.by_label[label]
        except KeyError:
            raise ValueError(
                f"Unknown filter label '{label}' (available: {', '.join(self.labels)})"
            ) from None

    def stack(self, labels: Iterable[str]) -> StopValue:
        """
        Combine filters by label, joining labels in the given order.

        Args:
            labels: Labels of the filters to stack

        Returns:
            Combined StopValue

        Example:
            >>> registry.stack(("1k", "8", "4"))
            StopValue(stops=15, label='1k 8 4')
        """
        filters = [self.get(label) for label in labels]
        if not filters:
            raise ValueError("Cannot stack an empty list of filters")

        stacked = filters[0]
        for nd_filter in filters[1:]:
            stacked = stacked + nd_filter
        return stacked

    def validate_stacks(self, stacks: Iterable[Tuple[str, ...]]) -> None:
        """
        Check that every label used by the given stacks is registered.

        Raises:
            ValueError: If a stack references an unknown filter
        """
        for stack in stacks:
            missing = [label for label in stack if label not in self.by_label]
            if missing:
                raise ValueError(
                    f"Filter stack {' + '.join(stack)} references unknown filters: {', '.join(missing)}"
                )

    def __iter__(self) -> Iterator[StopValue]:
        return iter(self.filters)

    def __len__(self) -> int:
        return len(self.filters)

    def __getitem__(self, index: int) -> StopValue:
        return self.filters[index]

    def __repr__(self) -> str:
        return f"FilterRegistry(labels={list(self.labels)})"


def default_registry() -> FilterRegistry:
    """Create the registry of curated filters."""
    return FilterRegistry(CURATED_FILTERS)
