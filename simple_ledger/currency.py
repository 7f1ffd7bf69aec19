"""
Amount Handling Module

Conversion and formatting helpers for monetary amounts. Amounts are
always Decimal; floats are only accepted as input and are converted
through their string form, never used for arithmetic.

Balance arithmetic runs under exact_context(), whose precision is
large enough that additions, subtractions and quantizations are never
rounded.
"""

from decimal import (
    Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext,
    MAX_PREC, MAX_EMAX, MIN_EMIN
)
from typing import Any
import re


_CURRENCY = r'(?:[A-Za-z]{3}|[$€£¥])'
_AMOUNT_PATTERN = re.compile(
    rf'^\s*{_CURRENCY}?\s*(?P<number>[+-]?[\d.,]+)\s*{_CURRENCY}?\s*$'
)

# Accepted number layouts once the currency marker is stripped
_PLAIN_NUMBER = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$')
_GROUPED_NUMBER = re.compile(r'^[+-]?\d{1,3}(?:,\d{3})+(?:\.\d+)?$')
_COMMA_DECIMAL = re.compile(r'^[+-]?\d+,\d{1,2}$')


def exact_context():
    """Decimal context in which +, - and quantize are exact"""
    ctx = getcontext().copy()
    ctx.prec = MAX_PREC
    ctx.Emax = MAX_EMAX
    ctx.Emin = MIN_EMIN
    return localcontext(ctx)


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal, handling common formats

    A single currency symbol or three-letter code may lead or trail the
    number. Thousands separators must be well formed ("1,234,567.89"),
    and a lone comma with one or two digits after it is a decimal
    separator ("12,50"). Anything else, exponents and inner spaces
    included, is rejected rather than guessed at.

    Args:
        value: String representation of number ("1,234.56", "$ 10", "12,50")

    Returns:
        Decimal value

    Raises:
        ValueError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    match = _AMOUNT_PATTERN.match(value)
    if not match:
        raise ValueError(f"Cannot convert '{value}' to Decimal")
    number = match.group('number')

    if _PLAIN_NUMBER.match(number):
        clean_value = number
    elif _GROUPED_NUMBER.match(number):
        clean_value = number.replace(',', '')
    elif _COMMA_DECIMAL.match(number):
        clean_value = number.replace(',', '.')
    else:
        raise ValueError(f"Cannot convert '{value}' to Decimal")

    try:
        return Decimal(clean_value)
    except InvalidOperation as exc:
        raise ValueError(f"Cannot convert '{value}' to Decimal") from exc


def to_decimal(value: Any) -> Decimal:
    """
    Coerce an amount to Decimal

    Accepts Decimal, int, float and str. Floats go through str() so
    that 0.1 becomes Decimal('0.1') rather than its binary expansion.

    Raises:
        ValueError: For None, booleans, unsupported types and
            non-finite values (NaN, Infinity)
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Not an amount: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        return decimal_from_string(value)
    else:
        raise ValueError(f"Unsupported amount type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return result


def format_amount(value: Decimal, places: int = 2) -> str:
    """Format a Decimal for display, e.g. Decimal('1234.5') -> '1,234.50'"""
    with exact_context():
        quantum = Decimal(1).scaleb(-places)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
        return f"{rounded:,.{places}f}"
