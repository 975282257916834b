"""Month names and accounting periods for report headers."""

from __future__ import annotations

from datetime import date

from .models import PeriodInfo

MONTHS_IN_WORDS: dict[int, str] = {
    1: "JANVIER",
    2: "FEVRIER",
    3: "MARS",
    4: "AVRIL",
    5: "MAI",
    6: "JUIN",
    7: "JUILLET",
    8: "AOUT",
    9: "SEPTEMBRE",
    10: "OCTOBRE",
    11: "NOVEMBRE",
    12: "DECEMBRE",
}


def month_in_words(month: int) -> str:
    """Upper-case French month name, or "" outside 1–12."""
    return MONTHS_IN_WORDS.get(month, "")


def period_info(value: date | str) -> PeriodInfo:
    """Period fields stored alongside every transaction.

    Args:
        value: A date, or an ISO string ("2024-03-15" or a full timestamp).

    Raises:
        ValueError: If the string is not an ISO date.
    """
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return PeriodInfo(
        mois=value.month,
        annee=value.year,
        mois_lettre=month_in_words(value.month),
        mois_annee=f"{value.month:02d}/{value.year}",
    )
