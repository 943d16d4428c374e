#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_numbering.py
"""Unit tests for ordered list numbering helpers."""

import pytest

from html_to_text.numbering import number_to_letter_sequence, number_to_roman


@pytest.mark.unit
class TestLetterSequence:

    @pytest.mark.parametrize(
        "number,expected",
        [(1, "a"), (26, "z"), (27, "aa"), (28, "ab"), (702, "zz"), (703, "aaa")],
    )
    def test_lowercase(self, number, expected):
        assert number_to_letter_sequence(number) == expected

    def test_uppercase(self):
        assert number_to_letter_sequence(28, "A") == "AB"

    def test_rejects_zero(self):
        with pytest.raises(ValueError):
            number_to_letter_sequence(0)


@pytest.mark.unit
class TestRoman:

    @pytest.mark.parametrize(
        "number,expected",
        [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (40, "XL"), (1994, "MCMXCIV"), (3999, "MMMCMXCIX")],
    )
    def test_values(self, number, expected):
        assert number_to_roman(number) == expected

    @pytest.mark.parametrize("number", [0, -3, 4000])
    def test_out_of_range(self, number):
        with pytest.raises(ValueError):
            number_to_roman(number)
