"""Conversion factors and configuration defaults for time-unit conversion."""

from decimal import (
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
)

MILLISECONDS_IN_SECOND = Decimal(1000)
SECONDS_IN_MINUTE = Decimal(60)
SECONDS_IN_HOUR = Decimal(3600)

DEFAULT_DECIMAL_PRECISION = 28
"""Significant digits of the private arithmetic context (matches a 96-bit decimal)."""

DEFAULT_ROUNDING = ROUND_HALF_EVEN
"""Banker's rounding, applied only when decimal places are requested."""

DEFAULT_FORMAT_DECIMAL_PLACES = 2
"""Fraction digits shown by format_time when none are given."""

FALLBACK_LOCALE = "en_US_POSIX"
"""Used when neither the caller nor the environment names a locale."""

ROUNDING_MODES = frozenset({
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
})
