"""
French number words for 0–999 and whole integers.

Rules implemented (French as written on Congolese financial documents):
    21, 31 … 61     → "vingt-et-un" … "soixante-et-un"
    70–79           → "soixante" + 10–19  ("soixante-et-onze", "soixante-douze")
    80              → "quatre-vingts"     (plural s only when nothing follows)
    81–89           → "quatre-vingt-un" …
    90–99           → "quatre-vingt" + 10–19 ("quatre-vingt-onze")
    200, 300 …      → "deux cents"        (plural s only when nothing follows)
    1 000           → "mille"             (never "un mille", never "milles")
    1 000 000       → "un million"

The vigesimal 70s/90s are an explicit table branch, not arithmetic.
"""

from __future__ import annotations

# ─── Word Lookup Tables ──────────────────────────────────────────────

_UNITS: tuple[str, ...] = (
    "",
    "un",
    "deux",
    "trois",
    "quatre",
    "cinq",
    "six",
    "sept",
    "huit",
    "neuf",
    "dix",
    "onze",
    "douze",
    "treize",
    "quatorze",
    "quinze",
    "seize",
    "dix-sept",
    "dix-huit",
    "dix-neuf",
)

# 70s reuse "soixante", 90s reuse "quatre-vingt": both continue with 10–19
_TENS: tuple[str, ...] = (
    "",
    "",
    "vingt",
    "trente",
    "quarante",
    "cinquante",
    "soixante",
    "soixante",
    "quatre-vingt",
    "quatre-vingt",
)

_MILLIARD = 1_000_000_000


# ─── Chunk Lexicalizer ───────────────────────────────────────────────


def words_for_tens(n: int) -> str:
    """Words for 0–99. Zero gives an empty string; the caller decides."""
    if not 0 <= n <= 99:
        raise ValueError(f"Expected 0-99, got {n}")
    if n < 20:
        return _UNITS[n]

    tens, unit = divmod(n, 10)

    if tens == 7:
        joiner = "-et-" if unit == 1 else "-"
        return f"{_TENS[tens]}{joiner}{_UNITS[10 + unit]}"
    if tens == 9:
        return f"{_TENS[tens]}-{_UNITS[10 + unit]}"
    if tens == 8 and unit == 0:
        return "quatre-vingts"
    if unit == 0:
        return _TENS[tens]
    if unit == 1 and tens != 8:
        return f"{_TENS[tens]}-et-un"
    return f"{_TENS[tens]}-{_UNITS[unit]}"


def words_for_hundreds(n: int) -> str:
    """Words for 0–999. Zero gives an empty string; the caller decides."""
    if not 0 <= n <= 999:
        raise ValueError(f"Expected 0-999, got {n}")
    if n < 100:
        return words_for_tens(n)

    hundreds, rest = divmod(n, 100)
    head = "cent" if hundreds == 1 else f"{_UNITS[hundreds]} cent"

    if rest:
        return f"{head} {words_for_tens(rest)}"
    return head if hundreds == 1 else f"{head}s"


# ─── Whole Integers ──────────────────────────────────────────────────


def _words_below_milliard(n: int) -> str:
    """Words for 1–999 999 999."""
    parts: list[str] = []
    millions, n = divmod(n, 1_000_000)
    if millions == 1:
        parts.append("un million")
    elif millions:
        parts.append(f"{words_for_hundreds(millions)} millions")

    thousands, units = divmod(n, 1000)
    if thousands == 1:
        parts.append("mille")
    elif thousands:
        parts.append(f"{words_for_hundreds(thousands)} mille")

    if units:
        parts.append(words_for_hundreds(units))

    return " ".join(parts)


def integer_to_words(n: int) -> str:
    """Lower-case French words for any integer.

    Counts of milliards above 999 are themselves narrated, so 10**12 is
    "mille milliards" and 10**18 is "un milliard milliards".

    >>> integer_to_words(1_250_000)
    'un million deux cent cinquante mille'
    """
    if n < 0:
        return f"moins {integer_to_words(-n)}"
    if n == 0:
        return "zéro"

    # Base-10**9 groups, most significant first
    groups: list[int] = []
    while n:
        n, group = divmod(n, _MILLIARD)
        groups.append(group)
    groups.reverse()

    parts: list[str] = []
    last = len(groups) - 1
    for index, group in enumerate(groups):
        if group:
            parts.append(_words_below_milliard(group))
        if index < last:
            parts.append("milliard" if index == 0 and group == 1 else "milliards")

    return " ".join(parts)
