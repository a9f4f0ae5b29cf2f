"""Parsing of formatted and compound time strings."""

from decimal import Decimal

import pytest

from valitime import TimeUnit, format_time, parse_time
from valitime._errors import ParseError, ValidationError
from valitime._parser import parse_terms
from valitime.units import Quantity


class TestParseTerms:
    def test_single_term(self):
        assert parse_terms("1.25 h") == [Quantity(Decimal("1.25"), TimeUnit.HOURS)]

    def test_compound_without_spaces(self):
        assert parse_terms("2h30min15s") == [
            Quantity(Decimal(2), TimeUnit.HOURS),
            Quantity(Decimal(30), TimeUnit.MINUTES),
            Quantity(Decimal(15), TimeUnit.SECONDS),
        ]

    def test_milliseconds_not_minutes(self):
        assert parse_terms("30ms") == [Quantity(Decimal(30), TimeUnit.MILLISECONDS)]

    def test_decimal_comma(self):
        assert parse_terms("1,5 min", decimal_symbol=",") == [Quantity(Decimal("1.5"), TimeUnit.MINUTES)]

    def test_wrong_decimal_symbol(self):
        with pytest.raises(ParseError) as exc_info:
            parse_terms("1,5 min", decimal_symbol=".")
        assert "','" in exc_info.value.internal()


class TestParseTime:
    def test_hours_to_seconds(self):
        assert parse_time("1.25 h") == 4500

    def test_compound_in_minutes(self):
        assert parse_time("1h 30min", TimeUnit.MINUTES) == 90

    def test_compound_no_spaces(self):
        assert parse_time("2h30min15s") == 9015

    def test_milliseconds(self):
        assert parse_time("250ms") == Decimal("0.25")

    def test_rounding(self):
        assert parse_time("1 min", TimeUnit.HOURS, decimal_places=3) == Decimal("0.017")

    def test_german_locale(self):
        assert parse_time("1,5 h", locale="de_DE") == 5400

    def test_converter_locale(self, german_converter):
        assert german_converter.parse_time("2,5 min") == 150

    def test_english_locale_rejects_comma(self):
        with pytest.raises(ParseError):
            parse_time("1,5 h", locale="en_US")

    def test_inverse_of_format_time(self):
        text = format_time(Decimal("1.235"), TimeUnit.MINUTES, 2, locale="de_DE")
        assert text == "1,24 min"
        assert parse_time(text, TimeUnit.MINUTES, locale="de_DE") == Decimal("1.24")

    @pytest.mark.parametrize("text", ["", "   ", "5", "h", "5 days", "1.5.2 h", "-1 s", "1 h extra"])
    def test_malformed(self, text):
        with pytest.raises(ParseError, match="invalid time string") as exc_info:
            parse_time(text)
        assert exc_info.value.text == text

    def test_lark_error_is_wrapped(self):
        with pytest.raises(ParseError) as exc_info:
            parse_time("5 days")
        assert exc_info.value.wrapped is not None

    def test_non_string(self):
        with pytest.raises(ParseError):
            parse_time(5)

    def test_negative_decimal_places(self):
        with pytest.raises(ValidationError):
            parse_time("1 s", decimal_places=-1)
