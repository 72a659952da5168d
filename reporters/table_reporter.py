"""
Table Reporter

Renders exposure times for every shutter speed and filter combination as a
Markdown table and as a CSV table.
"""

import logging
import sys
import os
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from models import ExposureTime, StopValue

logger = logging.getLogger(__name__)

MARKDOWN = 'markdown'
CSV = 'csv'
SUPPORTED_FORMATS = (MARKDOWN, CSV)

NO_FILTER_LABEL = "no ND"
CSV_SEPARATOR = ",  "


class TableReporter:
    """
    Generates exposure tables in Markdown and CSV layouts.

    Every cell holds the exposure time for one shutter speed (row) behind one
    filter combination (column). The first column shows the shutter speed
    without any filter.

    Attributes:
        formats: Table layouts to render, in output order

    Example:
        >>> reporter = TableReporter()
        >>> print(reporter.render_markdown_table(shutter_speeds(), combined))
        | no ND   |       4 |       8 | ...
    """

    def __init__(self, formats: Optional[Iterable[str]] = None):
        """
        Initialize table reporter.

        Args:
            formats: Layouts to render ('markdown', 'csv'); defaults to both

        Raises:
            ValueError: If a format is not supported
        """
        self.formats: Tuple[str, ...] = tuple(formats) if formats is not None else SUPPORTED_FORMATS

        unknown = [fmt for fmt in self.formats if fmt not in SUPPORTED_FORMATS]
        if unknown:
            raise ValueError(
                f"Unsupported table format: {', '.join(unknown)} "
                f"(supported: {', '.join(SUPPORTED_FORMATS)})"
            )

    @classmethod
    def from_config(cls, config_path: str = 'config.yaml') -> 'TableReporter':
        """Create TableReporter from configuration file."""
        import yaml

        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

        formats = (config.get('reporting') or {}).get('formats')
        return cls(formats=formats)

    def render_markdown_table(self, shutters: Sequence[ExposureTime],
                              combinations: Sequence[StopValue]) -> str:
        """
        Format the exposure table as Markdown.

        Args:
            shutters: Shutter speeds, one row each
            combinations: Filter combinations, one column each

        Returns:
            Markdown table text
        """
        lines = []

        # Header
        lines.append(f"| {NO_FILTER_LABEL:7} | " + "".join(
            f"{combination.format_label()} | " for combination in combinations
        ))
        lines.append("| ------- | " + "------- | " * len(combinations))

        for shutter in shutters:
            lines.append(self._format_row(shutter, combinations, prefix="| ", separator=" | ", suffix=" | "))

        return "\n".join(lines)

    def render_csv_table(self, shutters: Sequence[ExposureTime],
                         combinations: Sequence[StopValue]) -> str:
        """
        Format the exposure table as CSV.

        The header is printed before the first row and again before the middle
        row, so a printed page still has column labels halfway down. Each header
        is preceded by an empty line.

        Args:
            shutters: Shutter speeds, one row each (at least two)
            combinations: Filter combinations, one column each

        Returns:
            CSV table text
        """
        middle = len(shutters) // 2
        header = f"{NO_FILTER_LABEL:>7}" + "".join(
            f"{CSV_SEPARATOR}{combination.format_label()}" for combination in combinations
        )

        lines = []
        for i, shutter in enumerate(shutters):
            if i in (0, middle):
                lines.append("")
                lines.append(header)

            lines.append(self._format_row(shutter, combinations, separator=CSV_SEPARATOR))

        return "\n".join(lines)

    @staticmethod
    def _format_row(shutter: ExposureTime, combinations: Sequence[StopValue],
                    prefix: str = "", separator: str = CSV_SEPARATOR, suffix: str = "") -> str:
        cells = [shutter.format()]
        cells.extend(shutter.format_with_stops(combination.stops) for combination in combinations)
        return prefix + separator.join(cells) + suffix

    def render(self, shutters: Sequence[ExposureTime],
               combinations: Sequence[StopValue]) -> List[str]:
        """
        Render every configured layout.

        Returns:
            Rendered tables in the order of ``self.formats``
        """
        renderers = {
            MARKDOWN: self.render_markdown_table,
            CSV: self.render_csv_table,
        }

        tables = []
        for fmt in self.formats:
            tables.append(renderers[fmt](shutters, combinations))
            logger.info(f"Rendered {fmt} table: {len(shutters)} rows x {len(combinations) + 1} columns")
        return tables

    def write(self, shutters: Sequence[ExposureTime], combinations: Sequence[StopValue],
              stream: Optional[TextIO] = None) -> None:
        """
        Write the rendered tables to a text stream.

        Args:
            shutters: Shutter speeds, one row each
            combinations: Filter combinations, one column each
            stream: Destination (defaults to standard output)
        """
        if stream is None:
            stream = sys.stdout

        for table in self.render(shutters, combinations):
            stream.write(table)
            stream.write("\n")
