"""
Tests for the field validators
"""

import pytest

from onedoc_core.parser import validator


class TestNames:

    @pytest.mark.parametrize("text", ["John", "John Tan", "Panadol", "X2"])
    def test_one_or_two_words(self, text):
        assert validator.is_name(text)

    @pytest.mark.parametrize("text", ["", "John Michael Tan", "Jean-Luc", "O'Brien"])
    def test_rejects_other_shapes(self, text):
        assert not validator.is_name(text)


def test_gender_is_single_letter_m_or_f():
    assert validator.is_gender("M")
    assert validator.is_gender("f")
    assert not validator.is_gender("X")
    assert not validator.is_gender("MF")
    assert not validator.is_gender("Male")


def test_date_checks_digit_shape_only():
    assert validator.is_date("01-02-1990")
    # No calendar check
    assert validator.is_date("99-99-2020")
    assert not validator.is_date("1-2-1990")
    assert not validator.is_date("1990-02-01")
    assert not validator.is_date("01/02/1990")


def test_time_is_hh_mm():
    assert validator.is_time("09:30")
    assert not validator.is_time("9:30")
    assert not validator.is_time("0930")


def test_dosage_is_amount_then_unit():
    assert validator.is_dosage("10 mg")
    assert validator.is_dosage("10mg")
    assert not validator.is_dosage("mg 10")
    assert not validator.is_dosage("lots")
    assert not validator.is_dosage("10 mg twice")


def test_free_text_needs_at_least_one_word():
    assert validator.is_free_text("twice a day")
    assert validator.is_free_text("Fever")
    assert not validator.is_free_text("")
    assert not validator.is_free_text("post-op")


def test_identifier():
    assert validator.is_identifier("P001")
    assert not validator.is_identifier("P 001")
    assert not validator.is_identifier("P-001")


class TestParseIndex:

    def test_parses_digits(self):
        assert validator.parse_index("3") == 3
        assert validator.parse_index(" 12 ") == 12
        assert validator.parse_index("0") == 0

    @pytest.mark.parametrize("text", ["", "-1", "abc", "1.5"])
    def test_rejects_non_indices(self, text):
        with pytest.raises(ValueError):
            validator.parse_index(text)
