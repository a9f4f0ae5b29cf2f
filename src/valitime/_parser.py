"""Lark grammar for time strings such as ``"1.25 h"`` or ``"1h 30min"``."""

from __future__ import annotations

from decimal import Decimal

from lark import Lark, Token
from lark.exceptions import UnexpectedInput

from valitime._errors import ERR_MSG_INVALID_TIME_STRING, ParseError
from valitime.units import Quantity, TimeUnit

TIME_GRAMMAR = r"""
start: term+
term: NUMBER _unit
_unit: MS | MIN | SEC | HOUR

MS: "ms"
MIN: "min"
SEC: "s"
HOUR: "h"
NUMBER: /\d+(?:[.,]\d+)?/

%import common.WS
%ignore WS
"""

_parser = Lark(TIME_GRAMMAR, parser="lalr")


def _to_number(token: Token, decimal_symbol: str, text: str) -> Decimal:
    raw = str(token)
    for separator in ".,":
        if separator in raw and separator != decimal_symbol:
            raise ParseError(
                ERR_MSG_INVALID_TIME_STRING,
                f"{raw!r} at column {token.column} uses {separator!r}, "
                f"expected decimal symbol {decimal_symbol!r}",
                text=text,
            )
    return Decimal(raw.replace(decimal_symbol, "."))


def parse_terms(text: str, decimal_symbol: str = ".") -> list[Quantity]:
    """Parse ``text`` into its (number, unit) terms, in order.

    Raises:
        ParseError: If the text is not one or more ``<number><unit>`` terms.
    """
    if not isinstance(text, str):
        raise ParseError(
            ERR_MSG_INVALID_TIME_STRING,
            f"expected str, got {type(text).__name__}",
            text=repr(text),
        )
    try:
        tree = _parser.parse(text)
    except UnexpectedInput as e:
        raise ParseError(
            ERR_MSG_INVALID_TIME_STRING,
            f"cannot parse {text!r}: {e}",
            wrapped=e,
            text=text,
        ) from e

    terms = []
    for term in tree.children:
        number, unit = term.children
        terms.append(Quantity(_to_number(number, decimal_symbol, text), TimeUnit(str(unit))))
    return terms
