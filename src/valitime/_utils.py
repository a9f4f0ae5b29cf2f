"""Argument coercion and validation helpers."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from babel import Locale, UnknownLocaleError, default_locale

from valitime._constants import FALLBACK_LOCALE, ROUNDING_MODES
from valitime._errors import (
    ERR_MSG_INVALID_NUMBER,
    ERR_MSG_INVALID_ROUNDING,
    ERR_MSG_NEGATIVE_DECIMAL_PLACES,
    ERR_MSG_NEGATIVE_TIME,
    ERR_MSG_UNKNOWN_LOCALE,
    ERR_MSG_UNSUPPORTED_UNIT,
    UnsupportedUnitError,
    ValidationError,
)
from valitime.units import TimeUnit

Number = Decimal | int | float | str
"""Anything accepted where a time magnitude is expected."""


def to_decimal(value: Any, argument: str = "time") -> Decimal:
    """Coerce a numeric argument to a finite Decimal.

    Floats go through their shortest repr so 0.1 stays 0.1.
    """
    if isinstance(value, bool) or not isinstance(value, Decimal | int | float | str):
        raise ValidationError(
            ERR_MSG_INVALID_NUMBER,
            f"{argument} has unsupported type {type(value).__name__}",
            argument=argument,
            value=value,
        )
    try:
        result = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    except InvalidOperation as e:
        raise ValidationError(
            ERR_MSG_INVALID_NUMBER,
            f"{argument}={value!r} is not a decimal literal",
            wrapped=e,
            argument=argument,
            value=value,
        ) from e
    if not result.is_finite():
        raise ValidationError(
            ERR_MSG_INVALID_NUMBER,
            f"{argument}={value!r} is not finite",
            argument=argument,
            value=value,
        )
    return result


def to_non_negative_decimal(value: Any, argument: str = "time") -> Decimal:
    result = to_decimal(value, argument)
    if result < 0:
        raise ValidationError(
            ERR_MSG_NEGATIVE_TIME,
            f"{argument}={value!r} is negative",
            argument=argument,
            value=value,
        )
    return result


def validate_decimal_places(decimal_places: int | None) -> None:
    """Reject negative or non-integer decimal places; None means no rounding."""
    if decimal_places is None:
        return
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
        raise ValidationError(
            "decimal places must be an integer",
            f"decimal_places has unsupported type {type(decimal_places).__name__}",
            argument="decimal_places",
            value=decimal_places,
        )
    if decimal_places < 0:
        raise ValidationError(
            ERR_MSG_NEGATIVE_DECIMAL_PLACES,
            f"decimal_places={decimal_places} is negative",
            argument="decimal_places",
            value=decimal_places,
        )


def validate_rounding(rounding: str) -> str:
    if rounding not in ROUNDING_MODES:
        raise ValidationError(
            ERR_MSG_INVALID_ROUNDING,
            f"rounding={rounding!r} is not a decimal rounding mode",
            argument="rounding",
            value=rounding,
        )
    return rounding


def coerce_unit(unit: Any, argument: str = "unit") -> TimeUnit:
    """Return ``unit`` as a TimeUnit, accepting its suffix string."""
    if isinstance(unit, TimeUnit):
        return unit
    try:
        return TimeUnit(unit)
    except ValueError as e:
        raise UnsupportedUnitError(
            ERR_MSG_UNSUPPORTED_UNIT,
            f"{argument}={unit!r} is not one of {[u.value for u in TimeUnit]}",
            wrapped=e,
            unit=unit,
        ) from e


def resolve_locale(locale: Locale | str | None) -> Locale:
    """Resolve a locale argument, falling back to the environment's LC_NUMERIC."""
    if isinstance(locale, Locale):
        return locale
    identifier = locale or default_locale("LC_NUMERIC") or FALLBACK_LOCALE
    try:
        return Locale.parse(identifier, sep="-" if "-" in identifier else "_")
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise ValidationError(
            ERR_MSG_UNKNOWN_LOCALE,
            f"locale {identifier!r} could not be resolved",
            wrapped=e,
            argument="locale",
            value=locale,
        ) from e
