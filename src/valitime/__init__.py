"""valitime - Exact conversion and formatting of millisecond/second/minute/hour values."""

from __future__ import annotations

try:
    from valitime._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from typing import TYPE_CHECKING

from valitime._converter import TimeConverter
from valitime._errors import (
    ParseError,
    UnsupportedUnitError,
    ValidationError,
    ValiTimeError,
)
from valitime.units import Quantity, TimeUnit

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import timedelta
    from decimal import Decimal

    from babel import Locale

    from valitime._utils import Number

__all__ = [
    "breakdown",
    "convert",
    "format_time",
    "get_best_unit",
    "parse_time",
    "sum_times",
    "to_duration",
    "default_converter",
    "Quantity",
    "TimeConverter",
    "TimeUnit",
    "ParseError",
    "UnsupportedUnitError",
    "ValidationError",
    "ValiTimeError",
]

default_converter = TimeConverter()


def convert(
    time: Number,
    from_unit: TimeUnit | str,
    to_unit: TimeUnit | str,
    decimal_places: int | None = None,
    rounding: str | None = None,
) -> Decimal:
    """Convert a time value from one unit to another.

    Args:
        time: Non-negative time value (Decimal, int, float or decimal string).
        from_unit: Unit of ``time``.
        to_unit: Unit of the result.
        decimal_places: Fraction digits to round to. Defaults to no rounding.
        rounding: A ``decimal`` rounding mode. Defaults to ROUND_HALF_EVEN.

    Returns:
        The converted time as a Decimal.

    Raises:
        ValidationError: If time or decimal_places is negative.
        UnsupportedUnitError: If a unit is not a TimeUnit or its suffix.
    """
    return default_converter.convert(time, from_unit, to_unit, decimal_places, rounding)


def sum_times(
    result_unit: TimeUnit | str,
    items: Sequence[tuple[Number, TimeUnit | str] | Quantity],
    decimal_places: int | None = None,
    rounding: str | None = None,
) -> Decimal:
    """Add times in mixed units, rounding only the total.

    Raises:
        ValidationError: If items is empty or invalid, or decimal_places is negative.
        UnsupportedUnitError: If a unit is not a TimeUnit or its suffix.
    """
    return default_converter.sum_times(result_unit, items, decimal_places, rounding)


def format_time(
    time: Number,
    unit: TimeUnit | str,
    decimal_places: int = 2,
    locale: Locale | str | None = None,
    rounding: str | None = None,
) -> str:
    """Format a time as ``"<number> <suffix>"`` in the given or current locale."""
    return default_converter.format_time(time, unit, decimal_places, locale, rounding)


def get_best_unit(seconds: Number) -> Quantity:
    """Express ``seconds`` in the largest unit where it is at least one."""
    return default_converter.get_best_unit(seconds)


def to_duration(time: Number, unit: TimeUnit | str) -> timedelta:
    return default_converter.to_duration(time, unit)


def breakdown(seconds: Number) -> dict[TimeUnit, Decimal]:
    """Split seconds into whole hours, minutes, seconds and fractional milliseconds."""
    return default_converter.breakdown(seconds)


def parse_time(
    text: str,
    unit: TimeUnit | str = TimeUnit.SECONDS,
    decimal_places: int | None = None,
    locale: Locale | str | None = None,
    rounding: str | None = None,
) -> Decimal:
    """Parse ``"1.25 h"`` or ``"1h 30min"`` into a total in ``unit``."""
    return default_converter.parse_time(text, unit, decimal_places, locale, rounding)
