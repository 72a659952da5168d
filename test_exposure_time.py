"""
Exposure Time Testing for ND Exposure Tables
Tests: stop application, notation bands, band boundaries, rounding
"""

import dataclasses

import pytest

from models import ExposureBand, ExposureTime, classify_duration, format_duration


def test_construction_forms():
    """Test fraction and seconds/tenths constructors"""
    assert ExposureTime.from_fraction(4).seconds == 0.25
    assert ExposureTime.from_fraction(125).seconds == 1.0 / 125
    assert ExposureTime.from_whole_and_tenths(3, 2).seconds == 3.2
    assert ExposureTime.from_whole_and_tenths(0, 3).seconds == 0.3
    assert ExposureTime.from_whole_and_tenths(30, 0).seconds == 30.0


def test_exposure_time_is_immutable():
    """Test that applying stops never changes the shutter"""
    shutter = ExposureTime.from_whole_and_tenths(1, 0)

    assert shutter.apply_stops(10) == 1024.0
    assert shutter.seconds == 1.0

    with pytest.raises(dataclasses.FrozenInstanceError):
        shutter.seconds = 2.0


def test_apply_stops_doubles_per_stop():
    """Test that every stop doubles the exposure time"""
    shutter = ExposureTime.from_whole_and_tenths(3, 2)

    assert shutter.apply_stops(0) == 3.2
    assert shutter.apply_stops(1) == 6.4
    assert shutter.apply_stops(3) == 3.2 * 8

    durations = [shutter.apply_stops(n) for n in range(20)]
    assert durations == sorted(durations)
    for n, duration in enumerate(durations):
        assert duration == shutter.seconds * 2 ** n


@pytest.mark.parametrize("duration, expected", [
    (0.25, "      4"),
    (0.2, "      5"),
    (0.26, '    0"3'),
    (30.0, '   30"0'),
    (30.1, " 0' 31\""),
    (3661, " 1h 01'"),
])
def test_documented_boundary_cases(duration, expected):
    """Test the literal formatting of each band boundary"""
    assert format_duration(duration) == expected


def test_fraction_notation():
    """Test that fast speeds print only the denominator"""
    assert format_duration(1 / 125) == "    125"
    assert ExposureTime.from_fraction(4000).format() == "   4000"
    assert ExposureTime.from_fraction(13).format() == "     13"


def test_seconds_notation():
    """Test seconds-and-tenths notation between 1/4s and 30s"""
    assert format_duration(0.3) == '    0"3'
    assert format_duration(3.2) == '    3"2'
    assert format_duration(1.0) == '    1"0'
    assert format_duration(25.0) == '   25"0'


def test_tenths_round_half_up():
    """Test that a tenths value of exactly .x5 rounds up"""
    assert format_duration(1.25) == '    1"3'


def test_tenths_carry_into_seconds():
    """Test that tenths rounding to 10 carries into the whole seconds"""
    assert format_duration(1.96) == '    2"0'
    assert format_duration(29.97) == '   30"0'


def test_bulb_minutes_notation():
    """Test BULB notation up to and including 60 minutes"""
    assert format_duration(59.5) == " 1' 00\""
    assert format_duration(330) == " 5' 30\""
    assert format_duration(3600) == "60' 00\""
    assert format_duration(3601) == "60' 01\""


def test_bulb_hours_notation():
    """Test BULB notation beyond an hour, which drops the seconds"""
    assert format_duration(3660) == " 1h 01'"
    assert format_duration(30720) == " 8h 32'"
    assert format_duration(99 * 3600 + 39 * 60 + 59) == "99h 39'"


def test_unrepresentable_sentinel():
    """Test that exposures beyond 99 hours print the sentinel"""
    assert format_duration(100 * 3600) == "      x"
    assert ExposureTime.from_whole_and_tenths(30, 0).format_with_stops(18) == "      x"


def test_nd1000_on_common_speed():
    """Test a real-world case: 1/125s behind an ND1000 (10 stops)"""
    shutter = ExposureTime.from_fraction(125)
    assert shutter.format_with_stops(0) == shutter.format()
    assert shutter.format_with_stops(10) == '    8"2'


def test_every_formatted_cell_is_seven_characters():
    """Test that table cells keep their width across all bands"""
    shutter = ExposureTime.from_fraction(4000)
    for stops in range(40):
        assert len(shutter.format_with_stops(stops)) == 7


def test_classify_duration_bands():
    """Test band selection, with every boundary in the lower band"""
    assert classify_duration(0.25) is ExposureBand.FRACTION
    assert classify_duration(0.2500001) is ExposureBand.SECONDS
    assert classify_duration(30.0) is ExposureBand.SECONDS
    assert classify_duration(30.0001) is ExposureBand.BULB_MINUTES
    assert classify_duration(3600) is ExposureBand.BULB_MINUTES
    assert classify_duration(3660) is ExposureBand.BULB_HOURS
    assert classify_duration(6000 * 60 - 1) is ExposureBand.BULB_HOURS
    assert classify_duration(6000 * 60) is ExposureBand.BULB_UNREPRESENTABLE
