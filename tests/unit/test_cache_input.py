"""
Unit tests for the cabinet resolver input parser.

Tests cover:
- Valid three-part input
- Bounds on cabinet count, cabinet size, K and keys
- Non-numeric and truncated input
"""

import pytest

from challenges.core.exceptions import ValidationError
from challenges.parsing import parse_cache_input
from challenges.schemas.cache import MAX_ITEM_KEY, MAX_ACCESS_COUNT

from tests.conftest import cache_input_lines


class TestParseValidInput:
    """Tests for well-formed input."""

    def test_parses_sizes_and_accesses(self):
        request = parse_cache_input(cache_input_lines([2, 2, 4], [1, 2, 3, 4, 5, 6, 2]))

        assert request.cabinet_sizes == [2, 2, 4]
        assert request.accesses == [1, 2, 3, 4, 5, 6, 2]

    def test_lines_without_newlines(self):
        request = parse_cache_input(["3 1", "2", "7", "8"])

        assert request.cabinet_sizes == [3, 1]
        assert request.accesses == [7, 8]

    def test_windows_line_endings(self):
        request = parse_cache_input(["3 1\r\n", "1\r\n", "7\r\n"])

        assert request.cabinet_sizes == [3, 1]
        assert request.accesses == [7]

    def test_trailing_space_after_sizes(self):
        request = parse_cache_input(["2 2 \n", "1\n", "5\n"])

        assert request.cabinet_sizes == [2, 2]

    def test_extra_lines_after_k_keys_are_ignored(self):
        lines = cache_input_lines([4], [1, 2]) + ["garbage\n"]

        request = parse_cache_input(lines)

        assert request.accesses == [1, 2]

    def test_largest_allowed_values(self):
        sizes = [1023] * 63
        request = parse_cache_input(cache_input_lines(sizes, [MAX_ITEM_KEY - 1]))

        assert len(request.cabinet_sizes) == 63
        assert request.accesses == [MAX_ITEM_KEY - 1]

    def test_to_layout_and_access_log(self):
        request = parse_cache_input(cache_input_lines([2, 3], [1, 2]))

        assert request.to_layout().total_capacity == 5
        assert list(request.to_access_log()) == [2, 1]


class TestParseCabinetErrors:
    """Tests for invalid cabinet lines."""

    def test_too_many_cabinets(self):
        """
        GIVEN 64 cabinet sizes
        WHEN I parse the input
        THEN a ValidationError is raised
        """
        with pytest.raises(ValidationError) as exc_info:
            parse_cache_input(cache_input_lines([1] * 64, [1]))

        assert "cabinets" in exc_info.value.message

    def test_zero_cabinet_size(self):
        with pytest.raises(ValidationError):
            parse_cache_input(cache_input_lines([2, 0], [1]))

    def test_cabinet_size_at_upper_bound(self):
        with pytest.raises(ValidationError):
            parse_cache_input(cache_input_lines([1024], [1]))

    def test_negative_cabinet_size(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["-2\n", "1\n", "1\n"])

    def test_non_numeric_cabinet_size(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["2 x 4\n", "1\n", "1\n"])

    def test_double_space_between_sizes(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["2  4\n", "1\n", "1\n"])

    def test_empty_cabinet_line(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["\n", "1\n", "1\n"])

    def test_empty_input(self):
        with pytest.raises(ValidationError):
            parse_cache_input([])


class TestParseAccessErrors:
    """Tests for invalid K and key lines."""

    def test_k_zero(self):
        """
        GIVEN K = 0
        WHEN I parse the input
        THEN a ValidationError is raised
        """
        with pytest.raises(ValidationError):
            parse_cache_input(["2 2\n", "0\n"])

    def test_k_at_upper_bound(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["2 2\n", f"{MAX_ACCESS_COUNT}\n", "1\n"])

    def test_k_not_numeric(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["2 2\n", "three\n", "1\n"])

    def test_missing_k_line(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["2 2\n"])

    def test_fewer_keys_than_k(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_cache_input(cache_input_lines([2], [1, 2], access_count=3))

        assert "end of input" in exc_info.value.message

    def test_non_numeric_key(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["2\n", "2\n", "1\n", "abc\n"])

    def test_key_with_surrounding_whitespace(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["2\n", "1\n", " 5\n"])

    def test_key_zero(self):
        with pytest.raises(ValidationError):
            parse_cache_input(cache_input_lines([2], [1, 0]))

    def test_key_at_upper_bound(self):
        with pytest.raises(ValidationError):
            parse_cache_input(cache_input_lines([2], [MAX_ITEM_KEY]))

    def test_key_with_underscore(self):
        with pytest.raises(ValidationError):
            parse_cache_input(["2\n", "1\n", "1_000\n"])
