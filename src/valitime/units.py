"""Time unit and quantity types."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from valitime._constants import (
    MILLISECONDS_IN_SECOND,
    SECONDS_IN_HOUR,
    SECONDS_IN_MINUTE,
)

if TYPE_CHECKING:
    from datetime import timedelta


class TimeUnit(enum.StrEnum):
    """Supported units, declared from smallest to largest.

    The value of each member is its display suffix.
    """

    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "h"

    @property
    def suffix(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Position by magnitude, 0 for milliseconds."""
        return UNITS_BY_SIZE.index(self)

    # Compare by magnitude, not by suffix text.
    @override
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.rank < other.rank

    @override
    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.rank <= other.rank

    @override
    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.rank > other.rank

    @override
    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.rank >= other.rank


# Unit -> number of seconds in one of that unit
SECONDS_PER_UNIT: dict[TimeUnit, Decimal] = {
    TimeUnit.MILLISECONDS: 1 / MILLISECONDS_IN_SECOND,
    TimeUnit.SECONDS: Decimal(1),
    TimeUnit.MINUTES: SECONDS_IN_MINUTE,
    TimeUnit.HOURS: SECONDS_IN_HOUR,
}

UNITS_BY_SIZE: tuple[TimeUnit, ...] = tuple(TimeUnit)


@dataclass(frozen=True)
class Quantity:
    """A magnitude tagged with its time unit."""

    magnitude: Decimal
    unit: TimeUnit

    def __iter__(self) -> Iterator[Any]:
        yield self.magnitude
        yield self.unit

    @override
    def __str__(self) -> str:
        return f"{self.magnitude} {self.unit.suffix}"

    def to(
        self,
        unit: TimeUnit | str,
        decimal_places: int | None = None,
        rounding: str | None = None,
    ) -> Quantity:
        """Return this quantity expressed in ``unit``."""
        from valitime import default_converter

        magnitude = default_converter.convert(
            self.magnitude, self.unit, unit, decimal_places, rounding
        )
        return Quantity(magnitude, TimeUnit(unit))

    def to_duration(self) -> timedelta:
        from valitime import default_converter

        return default_converter.to_duration(self.magnitude, self.unit)
