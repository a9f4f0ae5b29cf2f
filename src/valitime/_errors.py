"""Exception hierarchy for time-unit conversion."""

from __future__ import annotations

from typing import Any


class ValiTimeError(Exception):
    """Base exception for time conversion and formatting errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ValidationError(ValiTimeError, ValueError):
    """Raised when an argument fails validation before any computation."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        argument: str = "",
        value: Any = None,
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.argument = argument
        self.value = value


class UnsupportedUnitError(ValiTimeError, NotImplementedError):
    """Raised when a value outside the TimeUnit set reaches a unit lookup."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        unit: Any = None,
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.unit = unit


class ParseError(ValiTimeError, ValueError):
    """Raised when a time string cannot be parsed."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        text: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.text = text


# Sanitized user-facing error message constants
ERR_MSG_NEGATIVE_TIME = "time cannot be negative"
ERR_MSG_NEGATIVE_DECIMAL_PLACES = "decimal places cannot be negative"
ERR_MSG_EMPTY_TIMES = "at least one time value must be provided"
ERR_MSG_INVALID_TIME_ITEM = "time items must be (time, unit) pairs"
ERR_MSG_INVALID_NUMBER = "time must be a finite decimal number"
ERR_MSG_INVALID_ROUNDING = "unsupported rounding mode"
ERR_MSG_INVALID_PRECISION = "precision must be a positive integer"
ERR_MSG_PRECISION_EXCEEDED = "result exceeds decimal precision"
ERR_MSG_DURATION_OVERFLOW = "time is too large for a duration"
ERR_MSG_UNKNOWN_LOCALE = "unknown locale"
ERR_MSG_UNSUPPORTED_UNIT = "time unit not supported"
ERR_MSG_INVALID_TIME_STRING = "invalid time string"
