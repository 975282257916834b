"""
Tests for French amounts in letters, and for reading them back.

French numerals are irregular (vigesimal 70–99, plural "vingts"/"cents",
invariable "mille"), so every rule gets its own case.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from montant_rdc.french_words import integer_to_words, words_for_hundreds, words_for_tens
from montant_rdc.narration import legal_statement, narrate_amount
from montant_rdc.word_to_number import words_to_number


# ═══════════════════════════════════════════════════════════════════════
# TENS (0–99)
# ═══════════════════════════════════════════════════════════════════════


class TestWordsForTens:
    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (0, ""),
            (1, "un"),
            (11, "onze"),
            (16, "seize"),
            (17, "dix-sept"),
            (20, "vingt"),
            (21, "vingt-et-un"),
            (22, "vingt-deux"),
            (31, "trente-et-un"),
            (61, "soixante-et-un"),
            (70, "soixante-dix"),
            (71, "soixante-et-onze"),
            (72, "soixante-douze"),
            (79, "soixante-dix-neuf"),
            (80, "quatre-vingts"),
            (81, "quatre-vingt-un"),
            (85, "quatre-vingt-cinq"),
            (90, "quatre-vingt-dix"),
            (91, "quatre-vingt-onze"),
            (99, "quatre-vingt-dix-neuf"),
        ],
    )
    def test_words(self, n, expected):
        assert words_for_tens(n) == expected

    @pytest.mark.parametrize("n", [-1, 100])
    def test_out_of_range(self, n):
        with pytest.raises(ValueError, match="0-99"):
            words_for_tens(n)


# ═══════════════════════════════════════════════════════════════════════
# HUNDREDS (0–999)
# ═══════════════════════════════════════════════════════════════════════


class TestWordsForHundreds:
    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (0, ""),
            (45, "quarante-cinq"),
            (100, "cent"),
            (101, "cent un"),
            (180, "cent quatre-vingts"),
            (200, "deux cents"),
            (201, "deux cent un"),
            (321, "trois cent vingt-et-un"),
            (900, "neuf cents"),
            (999, "neuf cent quatre-vingt-dix-neuf"),
        ],
    )
    def test_words(self, n, expected):
        assert words_for_hundreds(n) == expected

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="0-999"):
            words_for_hundreds(1000)


# ═══════════════════════════════════════════════════════════════════════
# WHOLE INTEGERS
# ═══════════════════════════════════════════════════════════════════════


class TestIntegerToWords:
    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (0, "zéro"),
            (1000, "mille"),
            (1001, "mille un"),
            (2000, "deux mille"),
            (21_000, "vingt-et-un mille"),
            (80_000, "quatre-vingts mille"),
            (1_000_000, "un million"),
            (2_000_000, "deux millions"),
            (1_250_000, "un million deux cent cinquante mille"),
            (1_000_000_000, "un milliard"),
            (3_000_000_000, "trois milliards"),
            (1_000_000_000_000, "mille milliards"),
            (1_000_000_001_000_000_000, "un milliard un milliards"),
            (2_000_000_000_000_000_005, "deux milliards milliards cinq"),
            (-5, "moins cinq"),
        ],
    )
    def test_words(self, n, expected):
        assert integer_to_words(n) == expected


# ═══════════════════════════════════════════════════════════════════════
# NARRATOR
# ═══════════════════════════════════════════════════════════════════════


class TestNarrateAmount:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (0, "Zéro francs congolais"),
            (21, "Vingt-et-un francs congolais"),
            (80, "Quatre-vingts francs congolais"),
            (91, "Quatre-vingt-onze francs congolais"),
            (100, "Cent francs congolais"),
            (200, "Deux cents francs congolais"),
            (1000, "Mille francs congolais"),
            (1_000_000, "Un million francs congolais"),
            (-5, "Moins cinq francs congolais"),
        ],
    )
    def test_fixtures(self, amount, expected):
        assert narrate_amount(amount) == expected

    def test_centimes_from_fraction(self):
        assert narrate_amount(Decimal("4500.50")) == (
            "Quatre mille cinq cents francs congolais et cinquante centimes"
        )

    def test_only_centimes(self):
        assert narrate_amount(Decimal("0.5")) == "Zéro francs congolais et cinquante centimes"

    def test_text_input(self):
        assert narrate_amount("1.250,80") == (
            "Mille deux cent cinquante francs congolais et quatre-vingts centimes"
        )

    def test_explicit_centimes(self):
        assert narrate_amount(200, cents=5) == "Deux cents francs congolais et cinq centimes"

    def test_explicit_centimes_out_of_range(self):
        with pytest.raises(ValueError, match="0-99"):
            narrate_amount(200, cents=100)

    def test_other_currency_name(self):
        assert narrate_amount(21, "dollars américains") == "Vingt-et-un dollars américains"

    def test_largest_supported_amount(self):
        assert narrate_amount(999_999_999) == (
            "Neuf cent quatre-vingt-dix-neuf millions "
            "neuf cent quatre-vingt-dix-neuf mille "
            "neuf cent quatre-vingt-dix-neuf francs congolais"
        )

    def test_unreadable_text_is_zero(self):
        assert narrate_amount("n/a") == "Zéro francs congolais"

    @pytest.mark.parametrize("n", range(-999_999_999, 999_999_999, 37_037_037))
    def test_defined_across_range(self, n):
        sentence = narrate_amount(n)
        assert sentence.endswith(" francs congolais")
        assert sentence[0].isupper()

    def test_very_long_digit_run(self):
        sentence = narrate_amount("1" * 9500)
        assert isinstance(sentence, str)
        assert sentence.startswith("Onze mille cent onze milliards")
        assert sentence.endswith("cent onze francs congolais")

    def test_legal_statement(self):
        assert legal_statement(1000) == "Nous disons : Mille francs congolais"


# ═══════════════════════════════════════════════════════════════════════
# WORDS TO NUMBER
# ═══════════════════════════════════════════════════════════════════════


class TestWordsToNumber:
    def test_with_centimes(self):
        assert words_to_number(
            "Quatre-vingt-onze francs congolais et cinquante centimes"
        ) == Decimal("91.50")

    def test_million(self):
        assert words_to_number("Un million deux cent cinquante mille") == Decimal(1_250_000)

    def test_legal_statement_prefix_ignored(self):
        assert words_to_number("Nous disons : Mille francs congolais") == Decimal(1000)

    def test_negative(self):
        assert words_to_number("Moins cinq francs congolais") == Decimal(-5)

    def test_vigesimal_ninety(self):
        assert words_to_number("Quatre-vingt-dix-sept") == Decimal(97)

    def test_vigesimal_seventy(self):
        assert words_to_number("soixante-et-onze") == Decimal(71)

    def test_plural_cents(self):
        assert words_to_number("Deux cents francs congolais et cinq centimes") == Decimal("200.05")

    def test_zero(self):
        assert words_to_number("Zéro francs congolais") == Decimal(0)

    @pytest.mark.parametrize(
        "n", [1, 17, 71, 80, 91, 180, 200, 1001, 21_000, 80_000, 999_999_999, 1_000_000_000]
    )
    def test_reads_back_narration(self, n):
        assert words_to_number(narrate_amount(n)) == Decimal(n)

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="Empty"):
            words_to_number("   ")

    def test_nonsense_raises(self):
        with pytest.raises(ValueError, match="Unrecognized"):
            words_to_number("banane")

    def test_currency_only_raises(self):
        with pytest.raises(ValueError, match="No number words"):
            words_to_number("francs congolais")

    def test_too_many_centimes_raises(self):
        with pytest.raises(ValueError, match="Centimes"):
            words_to_number("Dix francs et cent centimes")
