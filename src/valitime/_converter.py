"""Core TimeConverter class - exact decimal conversion between time units."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import timedelta
from decimal import Context, Decimal, InvalidOperation, localcontext
from typing import Any

from babel import Locale
from babel.numbers import format_decimal, get_decimal_symbol

from valitime._constants import (
    DEFAULT_DECIMAL_PRECISION,
    DEFAULT_FORMAT_DECIMAL_PLACES,
    DEFAULT_ROUNDING,
    MILLISECONDS_IN_SECOND,
    SECONDS_IN_HOUR,
    SECONDS_IN_MINUTE,
)
from valitime._errors import (
    ERR_MSG_DURATION_OVERFLOW,
    ERR_MSG_EMPTY_TIMES,
    ERR_MSG_INVALID_PRECISION,
    ERR_MSG_INVALID_TIME_ITEM,
    ERR_MSG_PRECISION_EXCEEDED,
    ValidationError,
)
from valitime._parser import parse_terms
from valitime._utils import (
    Number,
    coerce_unit,
    resolve_locale,
    to_decimal,
    to_non_negative_decimal,
    validate_decimal_places,
    validate_rounding,
)
from valitime.units import SECONDS_PER_UNIT, Quantity, TimeUnit


def _format_pattern(decimal_places: int) -> str:
    """Babel number pattern with fixed fraction digits and no grouping."""
    if decimal_places == 0:
        return "0"
    return "0." + "0" * decimal_places


class TimeConverter:
    """Stateless conversion, summing, formatting and decomposition of times.

    All intermediate arithmetic runs at full precision in a private
    decimal context; rounding is applied once, at the final step, and only
    when decimal places are requested.
    """

    def __init__(
        self,
        *,
        precision: int = DEFAULT_DECIMAL_PRECISION,
        rounding: str = DEFAULT_ROUNDING,
        decimal_places: int = DEFAULT_FORMAT_DECIMAL_PLACES,
        locale: Locale | str | None = None,
    ) -> None:
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
            raise ValidationError(
                ERR_MSG_INVALID_PRECISION,
                f"precision={precision!r}",
                argument="precision",
                value=precision,
            )
        validate_decimal_places(decimal_places)
        self._rounding = validate_rounding(rounding)
        self._context = Context(prec=precision, rounding=self._rounding)
        self._decimal_places = (
            DEFAULT_FORMAT_DECIMAL_PLACES if decimal_places is None else decimal_places
        )
        # None: read the environment locale on every call
        self._locale = resolve_locale(locale) if locale is not None else None

    @property
    def precision(self) -> int:
        return self._context.prec

    @property
    def rounding(self) -> str:
        return self._rounding

    def _to_seconds(self, time: Decimal, unit: TimeUnit) -> Decimal:
        if unit is TimeUnit.MILLISECONDS:
            return self._context.divide(time, MILLISECONDS_IN_SECOND)
        return self._context.multiply(time, SECONDS_PER_UNIT[unit])

    def _from_seconds(self, seconds: Decimal, unit: TimeUnit) -> Decimal:
        if unit is TimeUnit.MILLISECONDS:
            return self._context.multiply(seconds, MILLISECONDS_IN_SECOND)
        return self._context.divide(seconds, SECONDS_PER_UNIT[unit])

    def _widened_context(self, digits: int) -> Context:
        """Copy of the arithmetic context holding at least ``digits`` digits."""
        ctx = self._context.copy()
        ctx.prec = max(ctx.prec, digits)
        return ctx

    def _round(
        self,
        value: Decimal,
        decimal_places: int | None,
        rounding: str | None,
        context: Context | None = None,
    ) -> Decimal:
        if decimal_places is None:
            return value
        mode = self._rounding if rounding is None else validate_rounding(rounding)
        ctx = self._context if context is None else context
        try:
            return value.quantize(
                Decimal(1).scaleb(-decimal_places), rounding=mode, context=ctx
            )
        except InvalidOperation as e:
            raise ValidationError(
                ERR_MSG_PRECISION_EXCEEDED,
                f"{value} rounded to {decimal_places} places needs more than "
                f"{ctx.prec} digits",
                wrapped=e,
                argument="decimal_places",
                value=decimal_places,
            ) from e

    def convert(
        self,
        time: Number,
        from_unit: TimeUnit | str,
        to_unit: TimeUnit | str,
        decimal_places: int | None = None,
        rounding: str | None = None,
    ) -> Decimal:
        """Convert a time value from one unit to another.

        Args:
            time: Non-negative time value.
            from_unit: Unit of ``time``.
            to_unit: Unit of the result.
            decimal_places: Fraction digits to round the result to. If None,
                the full-precision result is returned.
            rounding: A ``decimal`` rounding mode. Defaults to the converter's
                rounding (ROUND_HALF_EVEN unless configured).

        Returns:
            The converted time.

        Raises:
            ValidationError: If time or decimal_places is negative.
            UnsupportedUnitError: If either unit is not a TimeUnit.
        """
        value = to_non_negative_decimal(time)
        validate_decimal_places(decimal_places)
        source = coerce_unit(from_unit, "from_unit")
        target = coerce_unit(to_unit, "to_unit")

        seconds = self._to_seconds(value, source)
        return self._round(self._from_seconds(seconds, target), decimal_places, rounding)

    def sum_times(
        self,
        result_unit: TimeUnit | str,
        items: Sequence[tuple[Number, TimeUnit | str] | Quantity],
        decimal_places: int | None = None,
        rounding: str | None = None,
    ) -> Decimal:
        """Add times given in mixed units and express the total in ``result_unit``.

        Each item is normalized to seconds without rounding; the rounding, if
        any, is applied once to the total.

        Raises:
            ValidationError: If items is empty, an item is negative or not a
                (time, unit) pair, or decimal_places is negative.
            UnsupportedUnitError: If any unit is not a TimeUnit.
        """
        if not items:
            raise ValidationError(
                ERR_MSG_EMPTY_TIMES,
                "sum_times called with no items",
                argument="items",
                value=items,
            )
        validate_decimal_places(decimal_places)

        total = Decimal(0)
        for index, item in enumerate(items):
            time, unit = _unpack_item(item, index)
            total = self._context.add(
                total, self.convert(time, unit, TimeUnit.SECONDS)
            )
        return self.convert(total, TimeUnit.SECONDS, result_unit, decimal_places, rounding)

    def format_time(
        self,
        time: Number,
        unit: TimeUnit | str,
        decimal_places: int | None = None,
        locale: Locale | str | None = None,
        rounding: str | None = None,
    ) -> str:
        """Format a time value as ``"<number> <suffix>"``, e.g. ``"1.25 h"``.

        The number has exactly ``decimal_places`` fraction digits and uses
        the locale's decimal symbol, without grouping. Negative values are
        formatted as given.
        """
        value = to_decimal(time)
        suffix = coerce_unit(unit).suffix
        places = self._decimal_places if decimal_places is None else decimal_places
        validate_decimal_places(places)
        # Display is not bounded by the arithmetic precision.
        display = self._widened_context(max(value.adjusted() + 1, 1) + places)
        rounded = self._round(value, places, rounding, display)
        with localcontext(display):
            number = format_decimal(
                rounded,
                format=_format_pattern(places),
                locale=self.locale_for(locale),
            )
        return f"{number} {suffix}"

    def get_best_unit(self, seconds: Number) -> Quantity:
        """Pick the largest unit in which ``seconds`` is at least one.

        Boundary values go to the larger unit, so 3600 is ``1 h``.
        Sub-second values are expressed in milliseconds.
        """
        value = to_non_negative_decimal(seconds, "seconds")
        for unit in (TimeUnit.HOURS, TimeUnit.MINUTES, TimeUnit.SECONDS):
            if value >= SECONDS_PER_UNIT[unit]:
                return Quantity(self._from_seconds(value, unit), unit)
        return Quantity(
            self._from_seconds(value, TimeUnit.MILLISECONDS), TimeUnit.MILLISECONDS
        )

    def to_duration(self, time: Number, unit: TimeUnit | str) -> timedelta:
        """Convert to a timedelta (double precision, microsecond resolution)."""
        value = to_non_negative_decimal(time)
        seconds = self.convert(value, unit, TimeUnit.SECONDS)
        try:
            return timedelta(seconds=float(seconds))
        except OverflowError as e:
            raise ValidationError(
                ERR_MSG_DURATION_OVERFLOW,
                f"{seconds} seconds exceeds timedelta range",
                wrapped=e,
                argument="time",
                value=time,
            ) from e

    def breakdown(self, seconds: Number) -> dict[TimeUnit, Decimal]:
        """Split seconds into whole hours, minutes and seconds plus milliseconds.

        Milliseconds keep any residual precision and are not floored.
        """
        remaining = to_non_negative_decimal(seconds, "seconds")
        # Wide enough that every step below is exact.
        _, digits, exponent = remaining.as_tuple()
        ctx = self._widened_context(len(digits) + max(exponent, 0) + 3)

        hours, remaining = ctx.divmod(remaining, SECONDS_IN_HOUR)
        minutes, remaining = ctx.divmod(remaining, SECONDS_IN_MINUTE)
        whole_seconds, fraction = ctx.divmod(remaining, Decimal(1))

        return {
            TimeUnit.HOURS: hours,
            TimeUnit.MINUTES: minutes,
            TimeUnit.SECONDS: whole_seconds,
            TimeUnit.MILLISECONDS: ctx.multiply(fraction, MILLISECONDS_IN_SECOND),
        }

    def parse_time(
        self,
        text: str,
        unit: TimeUnit | str = TimeUnit.SECONDS,
        decimal_places: int | None = None,
        locale: Locale | str | None = None,
        rounding: str | None = None,
    ) -> Decimal:
        """Parse a string like ``"1.25 h"`` or ``"1h 30min"`` and return its total in ``unit``.

        The decimal symbol must match the locale, so ``"1,5 h"`` parses
        under ``de_DE`` but not under ``en_US``.

        Raises:
            ParseError: If the text is not one or more ``<number><unit>`` terms.
            ValidationError: If decimal_places is negative.
        """
        symbol = get_decimal_symbol(self.locale_for(locale))
        terms = parse_terms(text, symbol)
        return self.sum_times(unit, terms, decimal_places, rounding)

    def locale_for(self, locale: Locale | str | None = None) -> Locale:
        """Resolve the locale used for formatting and parsing."""
        if locale is None and self._locale is not None:
            return self._locale
        return resolve_locale(locale)


def _unpack_item(item: Any, index: int) -> tuple[Any, Any]:
    if isinstance(item, Quantity):
        return item.magnitude, item.unit
    if isinstance(item, Iterable) and not isinstance(item, str | bytes):
        pair = tuple(item)
        if len(pair) == 2:
            return pair[0], pair[1]
    raise ValidationError(
        ERR_MSG_INVALID_TIME_ITEM,
        f"items[{index}]={item!r} is not a (time, unit) pair",
        argument="items",
        value=item,
    )
