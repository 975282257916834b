"""
Tests for amount parsing: sanitizer, slash format, separator resolution.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from montant_rdc.exceptions import AmbiguousSeparatorError, UnparsableAmountError
from montant_rdc.models import DecimalSeparator, Sign
from montant_rdc.parsing import (
    clean_amount,
    detect_decimal_separator,
    is_ambiguous_separator,
    is_slash_format,
    parse_amount,
    parse_amount_strict,
    parse_slash_format,
    split_amount,
)


# ═══════════════════════════════════════════════════════════════════════
# SANITIZER
# ═══════════════════════════════════════════════════════════════════════


class TestCleanAmount:
    def test_strips_currency_and_spaces(self):
        assert clean_amount("FC 4 500,00") == "4500,00"

    def test_keeps_minus_and_separators(self):
        assert clean_amount("-1 500.75 $") == "-1500.75"

    def test_keeps_slashes(self):
        assert clean_amount("4/500/00") == "4/500/00"

    def test_number_input_becomes_text(self):
        assert clean_amount(4500) == "4500"

    def test_fully_stripped_is_empty(self):
        assert clean_amount("montant inconnu") == ""


# ═══════════════════════════════════════════════════════════════════════
# SLASH FORMAT
# ═══════════════════════════════════════════════════════════════════════


class TestSlashFormat:
    def test_detects_slash(self):
        assert is_slash_format("4/500/00") is True
        assert is_slash_format("4500,00") is False

    def test_last_two_digits_are_cents(self):
        assert parse_slash_format("4/500/00") == Decimal("4500.00")

    def test_group_sizes_do_not_matter(self):
        assert parse_slash_format("45/0/075") == Decimal("4500.75")

    def test_large_number(self):
        assert parse_slash_format("100/000/00") == Decimal("100000.00")

    def test_two_digits_are_all_cents(self):
        assert parse_slash_format("/50") == Decimal("0.50")

    def test_single_digit_is_integer(self):
        assert parse_slash_format("7/") == Decimal(7)

    def test_no_digits_raises(self):
        with pytest.raises(UnparsableAmountError):
            parse_slash_format("//")


# ═══════════════════════════════════════════════════════════════════════
# DECIMAL SEPARATOR
# ═══════════════════════════════════════════════════════════════════════


class TestDecimalSeparator:
    @pytest.mark.parametrize(
        ("cleaned", "expected"),
        [
            ("1.200,50", DecimalSeparator.COMMA),  # European
            ("1,200.50", DecimalSeparator.DOT),  # American
            ("89,5", DecimalSeparator.COMMA),
            ("1.250.75", DecimalSeparator.DOT),
            ("10.000", DecimalSeparator.NONE),  # Dot + 3 digits = thousands
            ("10,000", DecimalSeparator.NONE),
            ("1234567", DecimalSeparator.NONE),
            ("12.345,6", DecimalSeparator.COMMA),
        ],
    )
    def test_detection(self, cleaned, expected):
        assert detect_decimal_separator(cleaned) is expected

    def test_lone_three_digit_group_is_ambiguous(self):
        assert is_ambiguous_separator("1.234") is True
        assert is_ambiguous_separator("10,000") is True

    def test_two_groups_are_not_ambiguous(self):
        assert is_ambiguous_separator("1.234.567") is False

    def test_two_decimals_are_not_ambiguous(self):
        assert is_ambiguous_separator("1.25") is False


# ═══════════════════════════════════════════════════════════════════════
# LENIENT PARSER
# ═══════════════════════════════════════════════════════════════════════


class TestParseAmount:
    def test_european(self):
        assert parse_amount("12.345,60") == Decimal("12345.60")

    def test_american(self):
        assert parse_amount("1,200.50") == Decimal("1200.50")

    def test_repeated_dots_last_one_is_decimal(self):
        assert parse_amount("1.250.75") == Decimal("1250.75")

    def test_negative_text(self):
        assert parse_amount("-1500.75") == Decimal("-1500.75")

    def test_spaces_already_grouped(self):
        assert parse_amount("750 000") == Decimal(750000)

    def test_single_decimal_digit(self):
        assert parse_amount("2 000,0") == Decimal(2000)

    def test_int_passes_through(self):
        assert parse_amount(4500) == Decimal(4500)

    def test_float_uses_shortest_repr(self):
        assert parse_amount(1500.75) == Decimal("1500.75")

    def test_decimal_passes_through(self):
        assert parse_amount(Decimal("12.34")) == Decimal("12.34")

    @pytest.mark.parametrize("raw", ["", "n/a", "abc", "-", ",", float("nan"), float("inf")])
    def test_unreadable_is_zero(self, raw):
        assert parse_amount(raw) == 0


# ═══════════════════════════════════════════════════════════════════════
# STRICT PARSER
# ═══════════════════════════════════════════════════════════════════════


class TestParseAmountStrict:
    def test_reads_like_lenient_parser(self):
        assert parse_amount_strict("4/500/00") == Decimal("4500.00")

    def test_unparsable_raises_with_code(self):
        with pytest.raises(UnparsableAmountError) as exc_info:
            parse_amount_strict("montant")
        assert exc_info.value.code == "UNPARSABLE_AMOUNT"
        assert exc_info.value.details["raw"] == "montant"

    def test_nan_raises(self):
        with pytest.raises(UnparsableAmountError):
            parse_amount_strict(Decimal("NaN"))

    def test_ambiguous_accepted_by_default(self):
        assert parse_amount_strict("1.234") == Decimal(1234)

    def test_ambiguous_rejected_on_request(self):
        with pytest.raises(AmbiguousSeparatorError) as exc_info:
            parse_amount_strict("1.234", reject_ambiguous=True)
        assert exc_info.value.code == "AMBIGUOUS_SEPARATOR"

    def test_unambiguous_passes_when_rejecting(self):
        assert parse_amount_strict("1.234,00", reject_ambiguous=True) == Decimal("1234.00")


# ═══════════════════════════════════════════════════════════════════════
# SPLITTING
# ═══════════════════════════════════════════════════════════════════════


class TestSplitAmount:
    def test_positive(self):
        parsed = split_amount(Decimal("1500.75"))
        assert parsed.sign is Sign.POSITIVE
        assert (parsed.integer_part, parsed.fraction) == (1500, 75)

    def test_rounds_half_up(self):
        parsed = split_amount(Decimal("1500.755"))
        assert parsed.fraction == 76

    def test_rounding_carries_into_integer(self):
        parsed = split_amount(Decimal("0.999"))
        assert (parsed.integer_part, parsed.fraction) == (1, 0)

    def test_negative_zero_is_positive(self):
        parsed = split_amount(Decimal("-0.001"))
        assert parsed.sign is Sign.POSITIVE
        assert parsed.is_zero

    def test_negative(self):
        parsed = split_amount(Decimal("-12.30"))
        assert parsed.is_negative
        assert parsed.to_decimal() == Decimal("-12.30")

    def test_no_decimals(self):
        parsed = split_amount(Decimal("2.5"), decimals=0)
        assert (parsed.integer_part, parsed.fraction) == (3, 0)

    def test_three_decimals(self):
        parsed = split_amount(Decimal("1.5"), decimals=3)
        assert parsed.fraction == 500

    def test_very_large_value(self):
        parsed = split_amount(Decimal("1" * 40))
        assert parsed.integer_part == int("1" * 40)

    def test_integer_digits_text(self):
        parsed = split_amount(Decimal("1500.755"))
        assert parsed.integer_digits == "1500"

    def test_integer_digits_beyond_int_str_limit(self):
        parsed = split_amount(Decimal("9" * 5000 + ".5"))
        assert parsed.integer_digits == "9" * 5000
        assert parsed.fraction == 50
