"""Tests for parsing submitted point data."""

import pytest

from py_vmap.core.exceptions import InvalidInput
from py_vmap.core.parsing import parse_coordinate, parse_points
from py_vmap.core.points import RawPoint


class TestParsePoints:
    """Test CSV parsing into raw points."""

    def test_unit_square(self):
        points = parse_points("x,y\n0,0\n10,0\n0,10\n10,10")
        assert points == [RawPoint("0", "0"), RawPoint("10", "0"),
                          RawPoint("0", "10"), RawPoint("10", "10")]

    def test_coordinates_stay_strings(self):
        points = parse_points("x,y\n1.5,-2")
        assert points[0].x == "1.5"
        assert points[0].y == "-2"

    def test_whitespace_and_extra_columns(self):
        points = parse_points(" x , y ,label\n 1, 2,a\n3,4,b\n")
        assert points == [RawPoint("1", "2"), RawPoint("3", "4")]

    def test_extra_trailing_field_ignored(self):
        points = parse_points("x,y\n1,2,3\n4,5,6")
        assert points == [RawPoint("1", "2"), RawPoint("4", "5")]

    def test_missing_column(self):
        with pytest.raises(InvalidInput, match="y"):
            parse_points("x,z\n1,2")

    def test_non_numeric_coordinate(self):
        with pytest.raises(InvalidInput, match="Row 2"):
            parse_points("x,y\n1,2\nabc,4")

    def test_blank_coordinate(self):
        with pytest.raises(InvalidInput):
            parse_points("x,y\n1,\n")

    def test_header_only(self):
        with pytest.raises(InvalidInput):
            parse_points("x,y\n")

    @pytest.mark.parametrize("text", ["", "   \n", None])
    def test_empty_text(self, text):
        with pytest.raises(InvalidInput):
            parse_points(text)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            parse_points("")


class TestParseCoordinate:
    """Test single coordinate conversion."""

    def test_integer(self):
        assert parse_coordinate("42") == 42
        assert isinstance(parse_coordinate("42"), int)

    def test_decimal(self):
        assert parse_coordinate(" 2.5 ") == 2.5

    @pytest.mark.parametrize("value", ["", "ten", "nan", "inf", "1_000", "1e400"])
    def test_rejected(self, value):
        with pytest.raises(InvalidInput):
            parse_coordinate(value)

    def test_digit_separator_rejected(self):
        with pytest.raises(InvalidInput):
            parse_points("x,y\n1_000,2")

    def test_integer_beyond_float_range(self):
        with pytest.raises(InvalidInput, match="out of range"):
            parse_coordinate("1" + "0" * 400)

    def test_large_integer_accepted(self):
        assert parse_coordinate("10000000000000000000") == 10 ** 19
