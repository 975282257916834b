"""
Amounts in letters for legal documents.

    4500     → "Quatre mille cinq cents francs congolais"
    91.50    → "Quatre-vingt-onze francs congolais et cinquante centimes"
    -5       → "Moins cinq francs congolais"

Narration is total: any input, readable or not, gives a sentence.
"""

from __future__ import annotations

from .french_words import integer_to_words, words_for_tens
from .parsing import RawAmount, parse_amount, split_amount

DEFAULT_CURRENCY_NAME = "francs congolais"


def narrate_amount(
    amount: RawAmount,
    currency_name: str = DEFAULT_CURRENCY_NAME,
    *,
    cents: int | None = None,
) -> str:
    """Write an amount out in French words.

    Args:
        amount: A number, or text in any separator convention.
        currency_name: Appended after the integer part.
        cents: Explicit centimes (0–99). When omitted they come from the
            fractional part of `amount`, rounded half-up.

    Returns:
        e.g. "Deux cents francs congolais et cinq centimes".
    """
    if cents is not None and not 0 <= cents <= 99:
        raise ValueError(f"Centimes must be 0-99, got {cents}")

    parsed = split_amount(parse_amount(amount), 2)
    if cents is None:
        cents = parsed.fraction

    if parsed.integer_part == 0 and cents == 0:
        return f"Zéro {currency_name}"

    words = integer_to_words(parsed.integer_part)
    if parsed.is_negative:
        words = f"moins {words}"

    sentence = f"{words[0].upper()}{words[1:]} {currency_name}"
    if cents:
        sentence += f" et {words_for_tens(cents)} centimes"
    return sentence


def legal_statement(
    amount: RawAmount, currency_name: str = DEFAULT_CURRENCY_NAME
) -> str:
    """The "Nous disons" line printed under totals on official reports."""
    return f"Nous disons : {narrate_amount(amount, currency_name)}"
