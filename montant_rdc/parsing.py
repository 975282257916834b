"""
Read monetary amounts typed in any convention.

Operators paste amounts from spreadsheets, bank statements and the legacy
cash system, so the same value shows up as:
    "4 500,00"   "4.500,00"   "4,500.00"   "4500"   "4/500/00"

Resolution order:
  1. Sanitize   — keep only digits and , . / -
  2. Slash      — legacy "4/500/00": the last two digits are always cents
  3. Separator  — pick the decimal mark (comma, dot, or none) from the tail
  4. Normalize  — the LAST decimal mark splits integer/fraction, every other
                  comma or dot is grouping

All arithmetic is done with Decimal. Binary floats never touch the digits.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from .exceptions import AmbiguousSeparatorError, UnparsableAmountError
from .models import DecimalSeparator, ParsedAmount, Sign

logger = logging.getLogger(__name__)

RawAmount = str | int | float | Decimal

# ─── Patterns ────────────────────────────────────────────────────────

_DISALLOWED = re.compile(r"[^0-9,./\-]")
_TRAILING_COMMA_DECIMALS = re.compile(r",(\d{1,2})$")
_TRAILING_DOT_DECIMALS = re.compile(r"\.(\d{1,2})$")
_TRAILING_DOT_THOUSANDS = re.compile(r"\.(\d{3})$")
# A single separator followed by exactly three digits: "1.234", "10,000"
_AMBIGUOUS = re.compile(r"^\d{1,3}[.,]\d{3}$")


# ─── Sanitizer ───────────────────────────────────────────────────────


def clean_amount(raw: RawAmount) -> str:
    """Drop everything but digits, comma, dot, slash and minus.

    >>> clean_amount("FC 4 500,00")
    '4500,00'
    """
    if not isinstance(raw, str):
        raw = str(raw)
    return _DISALLOWED.sub("", raw)


# ─── Slash Format ────────────────────────────────────────────────────


def is_slash_format(cleaned: str) -> bool:
    return "/" in cleaned


def parse_slash_format(cleaned: str) -> Decimal:
    """Decode the legacy "4/500/00" entry style.

    The slashes are unit separators, not thousands marks: whatever the group
    sizes, the final two digits are the cents.

    Raises:
        UnparsableAmountError: If no digit is left once slashes are removed.
    """
    digits = re.sub(r"\D", "", cleaned)
    if not digits:
        raise UnparsableAmountError(
            f"No digits in slash-formatted amount: {cleaned!r}",
            {"cleaned": cleaned},
        )
    if len(digits) >= 2:
        return Decimal(f"{digits[:-2] or '0'}.{digits[-2:]}")
    return Decimal(digits)


# ─── Decimal Separator Resolution ───────────────────────────────────


def detect_decimal_separator(cleaned: str) -> DecimalSeparator:
    """Decide which character, if any, is the decimal mark.

    Only a separator followed by one or two trailing digits counts as
    decimal. A trailing ".DDD" is a thousands grouping: monetary amounts
    never carry three decimal digits in this domain.
    """
    comma_match = _TRAILING_COMMA_DECIMALS.search(cleaned)
    dot_match = _TRAILING_DOT_DECIMALS.search(cleaned)

    if comma_match and dot_match:
        # The right-most separator is the decimal one
        return (
            DecimalSeparator.COMMA
            if cleaned.rfind(",") > cleaned.rfind(".")
            else DecimalSeparator.DOT
        )
    if comma_match:
        return DecimalSeparator.COMMA
    if dot_match:
        return DecimalSeparator.DOT
    if _TRAILING_DOT_THOUSANDS.search(cleaned):
        # "10.000": grouping, not three decimals
        return DecimalSeparator.NONE
    return DecimalSeparator.NONE


def is_ambiguous_separator(cleaned: str) -> bool:
    """True for "1.234" / "1,234": read as 1234, but could mean 1.234."""
    return bool(_AMBIGUOUS.match(cleaned.lstrip("-")))


# ─── Parsers ─────────────────────────────────────────────────────────


def _from_number(raw: int | float | Decimal) -> Decimal:
    if isinstance(raw, Decimal):
        if not raw.is_finite():
            raise UnparsableAmountError(f"Non-finite amount: {raw!r}", {"raw": str(raw)})
        return raw
    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            raise UnparsableAmountError(f"Non-finite amount: {raw!r}", {"raw": repr(raw)})
        # repr() gives the shortest text that round-trips: 1500.75, not 1500.7499…
        return Decimal(repr(raw))
    return Decimal(raw)


def _normalize(cleaned: str, separator: DecimalSeparator) -> Decimal:
    """Turn separator-free digits around the chosen decimal mark into a Decimal."""
    if separator is DecimalSeparator.NONE:
        integer_digits, fraction_digits = re.sub(r"[,.]", "", cleaned), ""
    else:
        mark = "," if separator is DecimalSeparator.COMMA else "."
        head, _, fraction_digits = cleaned.rpartition(mark)
        integer_digits = re.sub(r"[,.]", "", head)

    if not integer_digits and not fraction_digits:
        raise UnparsableAmountError(
            f"No digits in amount: {cleaned!r}", {"cleaned": cleaned}
        )
    try:
        return Decimal(f"{integer_digits or '0'}.{fraction_digits or '0'}")
    except InvalidOperation as exc:
        raise UnparsableAmountError(
            f"Could not read amount: {cleaned!r}", {"cleaned": cleaned}
        ) from exc


def parse_amount_strict(raw: RawAmount, *, reject_ambiguous: bool = False) -> Decimal:
    """Parse an amount, raising instead of guessing zero.

    Args:
        raw: Text in any separator convention, or a number.
        reject_ambiguous: Also refuse "1.234"-style input instead of reading
            it as a thousands grouping.

    Returns:
        The signed amount as a Decimal.

    Raises:
        UnparsableAmountError: If the input holds no readable amount.
        AmbiguousSeparatorError: If reject_ambiguous is set and the input
            has a lone separator followed by three digits.
    """
    if not isinstance(raw, str):
        return _from_number(raw)

    cleaned = clean_amount(raw)
    negative = cleaned.startswith("-")
    cleaned = cleaned.replace("-", "")

    if not cleaned:
        raise UnparsableAmountError(f"No amount in input: {raw!r}", {"raw": raw})

    if is_slash_format(cleaned):
        value = parse_slash_format(cleaned)
    else:
        if reject_ambiguous and is_ambiguous_separator(cleaned):
            raise AmbiguousSeparatorError(
                f"Cannot tell whether {raw!r} uses a thousands or a decimal separator",
                {"raw": raw, "cleaned": cleaned},
            )
        value = _normalize(cleaned, detect_decimal_separator(cleaned))

    return value.copy_negate() if negative else value


def parse_amount(raw: RawAmount) -> Decimal:
    """Parse an amount, falling back to zero on unreadable input.

    >>> parse_amount("1.200,50")
    Decimal('1200.50')
    >>> parse_amount("n/a")
    Decimal('0')
    """
    try:
        return parse_amount_strict(raw)
    except UnparsableAmountError as exc:
        logger.debug("Unparsable amount %r read as zero: %s", raw, exc)
        return Decimal(0)


# ─── Splitting ───────────────────────────────────────────────────────


def split_amount(value: Decimal | int, decimals: int = 2) -> ParsedAmount:
    """Round half-up to `decimals` places and split into sign/integer/fraction."""
    quantum = Decimal(1).scaleb(-decimals)
    magnitude = Decimal(value).copy_abs()
    with localcontext() as ctx:
        # quantize() refuses results wider than the context precision
        ctx.prec = max(ctx.prec, magnitude.adjusted() + decimals + 2)
        magnitude = magnitude.quantize(quantum, rounding=ROUND_HALF_UP)
        whole = magnitude.to_integral_value(rounding=ROUND_DOWN)
        fraction = int((magnitude - whole).scaleb(decimals))

    negative = value < 0 and magnitude != 0
    return ParsedAmount(
        sign=Sign.NEGATIVE if negative else Sign.POSITIVE,
        integer_part=int(whole),
        # str(int) refuses more than 4300 digits; Decimal formatting has no limit
        integer_digits=format(whole, "f"),
        fraction=fraction,
        decimals=decimals,
    )
