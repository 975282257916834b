"""
Read a French amount in letters back into a number.

THIS IS A CRITICAL FINANCIAL COMPONENT: it is the cross-check between the
figure on a voucher and the amount written out under it. We keep it in-house
so that every rule is auditable next to the narrator it mirrors.

Supported patterns:
    "Quatre mille cinq cents francs congolais"              → 4500
    "Quatre-vingt-onze francs congolais et cinquante centimes" → 91.50
    "Un million deux cent cinquante mille"                  → 1250000
    "Nous disons : Mille francs congolais"                  → 1000
"""

from __future__ import annotations

import re
from decimal import Decimal

# ─── Word Lookup Tables ──────────────────────────────────────────────

_UNITS: dict[str, int] = {
    "zéro": 0,
    "zero": 0,
    "un": 1,
    "une": 1,
    "deux": 2,
    "trois": 3,
    "quatre": 4,
    "cinq": 5,
    "six": 6,
    "sept": 7,
    "huit": 8,
    "neuf": 9,
    "dix": 10,
    "onze": 11,
    "douze": 12,
    "treize": 13,
    "quatorze": 14,
    "quinze": 15,
    "seize": 16,
}

_TENS: dict[str, int] = {
    "vingt": 20,
    "trente": 30,
    "quarante": 40,
    "cinquante": 50,
    "soixante": 60,
}

_SCALES: dict[str, int] = {
    "mille": 1_000,
    "million": 1_000_000,
    "milliard": 1_000_000_000,
}

_CURRENCY: set[str] = {
    "franc",
    "francs",
    "congolais",
    "fc",
    "cdf",
    "dollar",
    "dollars",
    "américain",
    "américains",
    "usd",
}

_CENTIMES: set[str] = {"centime", "centimes"}

# Words to strip from the input (not part of the number itself)
_IGNORE: set[str] = {"et", "nous", "disons", "de", "seulement"}


def _singular(word: str) -> str:
    """'cents' → 'cent', 'vingts' → 'vingt', 'millions' → 'million'."""
    if word.endswith("s") and word[:-1] in {"cent", "vingt", "million", "milliard"}:
        return word[:-1]
    return word


# ─── Word Classifier ─────────────────────────────────────────────────


def _classify_and_apply(
    word: str, current: int, result: int, source: str
) -> tuple[int, int]:
    """Classify a single number word and update the running accumulators.

    Returns:
        (new_current, new_result) after processing the word.

    Raises:
        ValueError: If the word is not a recognised number token.
    """
    if word in _UNITS:
        return current + _UNITS[word], result
    if word == "vingt" and current % 100 == 4:
        # "quatre vingt": four twenties
        return current - 4 + 80, result
    if word in _TENS:
        return current + _TENS[word], result
    if word == "cent":
        effective = current if current else 1
        return effective * 100, result
    if word in _SCALES:
        effective = current if current else 1
        return 0, result + effective * _SCALES[word]
    raise ValueError(f"Unrecognized number word: {word!r} in {source!r}")


# ─── Main Converter ─────────────────────────────────────────────────


def words_to_number(text: str) -> Decimal:
    """Convert a French amount in letters to a Decimal value.

    Args:
        text: e.g. "Deux cents francs congolais et cinq centimes"

    Returns:
        Decimal("200.05")

    Raises:
        ValueError: If the text is empty, contains unrecognized words, or
            names more than 99 centimes.

    Algorithm:
        Two accumulators, as for any scale-based numeral system:
        - `result`: completed scale groups (after "mille", "million", …)
        - `current`: the number being built in the current group

        The currency name closes the integer part; what follows it, up to
        "centimes", is the centimes count.
    """
    if not text or not text.strip():
        raise ValueError("Empty text cannot be converted to a number")

    normalized = text.strip().lower()
    words = re.sub(r"[-:()\[\].,]", " ", normalized).split()
    words = [_singular(w) for w in words if w not in _IGNORE]

    negative = bool(words) and words[0] == "moins"
    if negative:
        words = words[1:]

    if not words:
        raise ValueError(f"No number words found in: {text!r}")

    integer_part: int | None = None
    cents = 0
    seen_number = False
    result = 0
    current = 0

    for word in words:
        if word in _CURRENCY:
            if integer_part is None and seen_number:
                integer_part, result, current = result + current, 0, 0
            continue
        if word in _CENTIMES:
            cents, result, current = result + current, 0, 0
            continue
        current, result = _classify_and_apply(word, current, result, normalized)
        seen_number = True

    if integer_part is None:
        integer_part = result + current
    elif result or current:
        # "Cent francs et cinquante": trailing number without "centimes"
        cents = result + current

    if not seen_number:
        raise ValueError(f"No number words found in: {text!r}")
    if cents > 99:
        raise ValueError(f"Centimes must be 0-99, got {cents} in {text!r}")

    value = Decimal(integer_part) + Decimal(cents) / 100
    return -value if negative else value
