"""Voucher numbering: BE-2024-001 for receipts, BS-2024-001 for disbursements."""

from __future__ import annotations

from datetime import date

from .models import VoucherKind


def generate_voucher_number(
    kind: VoucherKind | str, number: int, year: int | None = None
) -> str:
    """Build the printed voucher number.

    Args:
        kind: RECETTE (bon d'entrée, "BE") or DEPENSE (bon de sortie, "BS").
        number: Sequential number within the year, zero-padded to 3 digits.
        year: Defaults to the current year.

    Raises:
        ValueError: If `number` is not positive or `kind` is unknown.
    """
    if number < 1:
        raise ValueError(f"Voucher number must be positive, got {number}")
    kind = VoucherKind(kind)
    year = year if year is not None else date.today().year
    return f"{kind.prefix}-{year}-{number:03d}"
