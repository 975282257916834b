"""
Canonical RDC amount formatting.

RDC standard:
    - thousands separator: one space
    - decimal separator:   comma
    - always `decimals` fraction digits (2 by default)

    4/500/00  →  4 500,00
    1,200.50  →  1 200,50 FC   (show_currency=True)
"""

from __future__ import annotations

import re
from decimal import Decimal
from functools import lru_cache
from typing import Any

from .models import FormattingOptions
from .parsing import RawAmount, parse_amount, split_amount


def group_thousands(integer_digits: str) -> str:
    """Insert a space every three digits, counted from the right.

    >>> group_thousands("1234567")
    '1 234 567'
    """
    groups: list[str] = []
    end = len(integer_digits)
    while end > 0:
        groups.append(integer_digits[max(0, end - 3):end])
        end -= 3
    return " ".join(reversed(groups))


def format_amount(
    amount: RawAmount, options: FormattingOptions | None = None, **overrides: Any
) -> str:
    """Format any amount in the canonical RDC layout.

    Args:
        amount: Text in any separator convention, or a number.
        options: Formatting options; keyword overrides are applied on top
            (e.g. ``format_amount(x, show_currency=True)``).

    Returns:
        The canonical string, e.g. "4 500,00". Unreadable input gives "0,00".
    """
    if options is None:
        options = FormattingOptions(**overrides)
    elif overrides:
        options = FormattingOptions(**{**options.model_dump(), **overrides})

    parsed = split_amount(parse_amount(amount), options.decimals)

    result = group_thousands(parsed.integer_digits)
    if options.decimals:
        result = f"{result},{parsed.fraction:0{options.decimals}d}"

    if parsed.is_negative:
        result = f"-{result}"
    elif options.show_sign and not parsed.is_zero:
        result = f"+{result}"

    if options.show_currency:
        result = f"{result} {options.currency_symbol}"

    return result


def correct_amount(amount: RawAmount) -> str:
    """Repair a badly formatted amount from an import or a copy/paste."""
    return format_amount(amount)


# ─── Canonical Check ─────────────────────────────────────────────────


@lru_cache(maxsize=32)
def _canonical_pattern(decimals: int, currency_symbol: str) -> re.Pattern[str]:
    fraction = rf",\d{{{decimals}}}" if decimals else ""
    # The lead group has no leading zero: "001,00" is not what format_amount writes
    return re.compile(
        rf"^-?(0|[1-9]\d{{0,2}})( \d{{3}})*{fraction}( {re.escape(currency_symbol)})?$"
    )


def is_canonical(amount: str, decimals: int = 2, currency_symbol: str = "FC") -> bool:
    """Check that a string is already in the canonical layout. No repair.

    "-0,00" passes the layout check, but format_amount never writes it:
    zero is positive, so it formats back as "0,00".
    """
    return bool(_canonical_pattern(decimals, currency_symbol).match(amount.strip()))


def parse_canonical(amount: str) -> Decimal:
    """Read a canonical string ("4 500,00 FC") back into a Decimal.

    format_amount(parse_canonical(s)) gives back `s` for every canonical
    string except negative zero: "-0,00" comes back as "0,00".
    """
    return parse_amount(amount)
