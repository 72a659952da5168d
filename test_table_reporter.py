"""
Table Rendering Testing for ND Exposure Tables
Tests: Markdown layout, CSV layout and header repetition, output selection
"""

import io

import pytest

from models import ExposureTime, StopValue
from catalog import default_registry, shutter_speeds
from analyzers import CombinationBuilder
from reporters import TableReporter

SHUTTERS = (
    ExposureTime.from_fraction(125),
    ExposureTime.from_whole_and_tenths(30, 0),
)
COMBINATIONS = (
    StopValue(2, "4"),
    StopValue(10, "1k"),
)


def _csv_header_rows(csv_text):
    """Return the data-row index in front of which each header appears."""
    header_rows = []
    data_rows = 0
    for line in csv_text.split("\n"):
        if not line:
            continue
        if line.startswith("  no ND"):
            header_rows.append(data_rows)
        else:
            data_rows += 1
    return header_rows


def test_markdown_table_layout():
    """Test the exact Markdown output for a small table"""
    table = TableReporter().render_markdown_table(SHUTTERS, COMBINATIONS)

    assert table.split("\n") == [
        "| no ND   |       4 |      1k | ",
        "| ------- | ------- | ------- | ",
        "|     125 |      31 |     8\"2 | ",
        "|    30\"0 |  2' 00\" |  8h 32' | ",
    ]


def test_csv_table_layout():
    """Test the exact CSV output for a small table"""
    table = TableReporter().render_csv_table(SHUTTERS, COMBINATIONS)

    header = "  no ND" + ",  " + "      4" + ",  " + "     1k"
    assert table.split("\n") == [
        "",
        header,
        "    125" + ",  " + "     31" + ",  " + "    8\"2",
        "",
        header,
        "   30\"0" + ",  " + " 2' 00\"" + ",  " + " 8h 32'",
    ]


def test_csv_header_repeats_at_middle_of_full_table():
    """Test header placement for the 52 curated shutter speeds"""
    combined = CombinationBuilder().build(default_registry())
    table = TableReporter().render_csv_table(shutter_speeds(), combined)

    assert _csv_header_rows(table) == [0, 26]


def test_csv_header_repeats_once_for_odd_shutter_count():
    """Test header placement when the extreme speeds make the list odd"""
    combined = CombinationBuilder().build(default_registry())
    table = TableReporter().render_csv_table(shutter_speeds(include_extreme=True), combined)

    assert _csv_header_rows(table) == [0, 27]


def test_full_markdown_table_shape():
    """Test rows, columns and a sentinel cell of the real table"""
    shutters = shutter_speeds()
    combined = CombinationBuilder().build(default_registry())
    lines = TableReporter().render_markdown_table(shutters, combined).split("\n")

    assert len(lines) == 2 + 52
    for line in lines:
        assert line.count("|") == len(combined) + 2

    # 30s behind ND1000 + ND64 + ND4 (18 stops) exceeds the 99h BULB limit
    last_row_cells = [cell.strip() for cell in lines[-1].strip("| ").split(" | ")]
    assert last_row_cells[0] == '30"0'
    assert last_row_cells[-1] == "x"


def test_csv_cells_match_markdown_cells():
    """Test that both layouts carry the same values"""
    shutters = shutter_speeds()
    combined = CombinationBuilder().build(default_registry())
    reporter = TableReporter()

    markdown_rows = reporter.render_markdown_table(shutters, combined).split("\n")[2:]
    csv_rows = [
        line for line in reporter.render_csv_table(shutters, combined).split("\n")
        if line and not line.startswith("  no ND")
    ]

    assert len(markdown_rows) == len(csv_rows)
    for markdown_row, csv_row in zip(markdown_rows, csv_rows):
        markdown_cells = markdown_row[2:-3].split(" | ")
        csv_cells = csv_row.split(",  ")
        assert markdown_cells == csv_cells


def test_render_selected_formats():
    """Test format selection and order"""
    assert len(TableReporter().render(SHUTTERS, COMBINATIONS)) == 2

    tables = TableReporter(formats=['csv']).render(SHUTTERS, COMBINATIONS)
    assert len(tables) == 1
    assert tables[0].startswith("\n  no ND")

    with pytest.raises(ValueError, match="Unsupported table format: html"):
        TableReporter(formats=['html'])


def test_write_to_stream():
    """Test writing Markdown then CSV to a text stream"""
    reporter = TableReporter()
    stream = io.StringIO()

    reporter.write(SHUTTERS, COMBINATIONS, stream)

    expected = (
        reporter.render_markdown_table(SHUTTERS, COMBINATIONS) + "\n"
        + reporter.render_csv_table(SHUTTERS, COMBINATIONS) + "\n"
    )
    assert stream.getvalue() == expected


def test_from_config(tmp_path):
    """Test reading the output formats from YAML"""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("reporting:\n  formats:\n    - csv\n")

    assert TableReporter.from_config(str(config_path)).formats == ('csv',)

    config_path.write_text("reporting: {}\n")
    assert TableReporter.from_config(str(config_path)).formats == ('markdown', 'csv')
