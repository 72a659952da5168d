"""
Stop Value Model

Represents the light attenuation of an ND filter (or a stack of filters)
measured in exposure stops.
"""

from dataclasses import dataclass

LABEL_WIDTH = 7


@dataclass(frozen=True)
class StopValue:
    """
    Represents an ND filter's attenuation in stops with a display label.

    Values are immutable. Stacking two filters produces a new StopValue whose
    stops are summed and whose labels are joined in argument order, so
    ``nd1000 + nd4`` is labelled ``"1k 4"`` while ``nd4 + nd1000`` is ``"4 1k"``.

    Ordering compares stops only. Sorting relies on Python's stable sort, so
    filters with the same number of stops keep their insertion order.

    Attributes:
        stops: Number of exposure stops of attenuation
        label: Display name (e.g., "1k" for ND1000)

    Example:
        >>> nd1000 = StopValue(10, "1k")
        >>> nd4 = StopValue(2, "4")
        >>> stacked = nd1000 + nd4
        >>> stacked.stops, stacked.label
        (12, '1k 4')
        >>> stacked.format_label()
        '   1k 4'
    """

    stops: int
    label: str

    def combine(self, other: 'StopValue') -> 'StopValue':
        """
        Stack another filter behind this one.

        Args:
            other: Filter placed after this one in the label

        Returns:
            New StopValue with summed stops and space-joined labels
        """
        return StopValue(
            stops=self.stops + other.stops,
            label=f"{self.label} {other.label}"
        )

    def __add__(self, other: 'StopValue') -> 'StopValue':
        if not isinstance(other, StopValue):
            return NotImplemented
        return self.combine(other)

    def __lt__(self, other: 'StopValue') -> bool:
        if not isinstance(other, StopValue):
            return NotImplemented
        return self.stops < other.stops

    def __le__(self, other: 'StopValue') -> bool:
        if not isinstance(other, StopValue):
            return NotImplemented
        return self.stops <= other.stops

    def __gt__(self, other: 'StopValue') -> bool:
        if not isinstance(other, StopValue):
            return NotImplemented
        return self.stops > other.stops

    def __ge__(self, other: 'StopValue') -> bool:
        if not isinstance(other, StopValue):
            return NotImplemented
        return self.stops >= other.stops

    def format_label(self) -> str:
        """Right-justify the label in a 7 character column (never truncated)."""
        return f"{self.label:>{LABEL_WIDTH}}"

    def __repr__(self) -> str:
        """String representation of StopValue."""
        return f"StopValue(stops={self.stops}, label='{self.label}')"
