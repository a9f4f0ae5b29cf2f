"""Coercion and validation helper tests."""

from decimal import ROUND_HALF_EVEN, Decimal

import pytest
from babel import Locale

from valitime._errors import UnsupportedUnitError, ValidationError
from valitime._utils import (
    coerce_unit,
    resolve_locale,
    to_decimal,
    to_non_negative_decimal,
    validate_decimal_places,
    validate_rounding,
)
from valitime.units import TimeUnit


class TestToDecimal:
    def test_int(self):
        assert to_decimal(3) == Decimal(3)

    def test_float_shortest_repr(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_string(self):
        assert to_decimal("1.50") == Decimal("1.50")

    def test_decimal_passthrough(self):
        value = Decimal("2.25")
        assert to_decimal(value) == value

    def test_negative_allowed(self):
        assert to_decimal(-1) == -1

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            to_decimal(True)

    def test_bad_string(self):
        with pytest.raises(ValidationError) as exc_info:
            to_decimal("1h", "seconds")
        assert exc_info.value.argument == "seconds"
        assert exc_info.value.wrapped is not None


class TestToNonNegativeDecimal:
    def test_zero(self):
        assert to_non_negative_decimal(0) == 0

    def test_negative(self):
        with pytest.raises(ValidationError, match="negative"):
            to_non_negative_decimal(Decimal("-0.001"))


class TestValidateDecimalPlaces:
    def test_none(self):
        validate_decimal_places(None)

    def test_zero(self):
        validate_decimal_places(0)

    def test_negative(self):
        with pytest.raises(ValidationError):
            validate_decimal_places(-1)

    def test_bool(self):
        with pytest.raises(ValidationError):
            validate_decimal_places(True)


class TestValidateRounding:
    def test_known_mode(self):
        assert validate_rounding(ROUND_HALF_EVEN) == ROUND_HALF_EVEN

    def test_unknown_mode(self):
        with pytest.raises(ValidationError):
            validate_rounding("ToEven")


class TestCoerceUnit:
    def test_member(self):
        assert coerce_unit(TimeUnit.HOURS) is TimeUnit.HOURS

    def test_suffix(self):
        assert coerce_unit("ms") is TimeUnit.MILLISECONDS

    def test_member_name_is_not_a_suffix(self):
        with pytest.raises(UnsupportedUnitError):
            coerce_unit("HOURS")


class TestResolveLocale:
    def test_identifier(self):
        assert resolve_locale("de_DE") == Locale("de", "DE")

    def test_locale_passthrough(self):
        locale = Locale("fr")
        assert resolve_locale(locale) is locale

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("LC_NUMERIC", "fr_FR.UTF-8")
        assert resolve_locale(None) == Locale("fr", "FR")

    def test_posix_environment(self):
        assert str(resolve_locale(None)) == "en_US_POSIX"

    def test_unknown(self):
        with pytest.raises(ValidationError):
            resolve_locale("zz_ZZ")
