"""
Deterministic voucher checks.

Each validator function:
  - Takes an EnrichedVoucher
  - Returns a list of ValidationFinding objects (empty = all clear)
  - Is independently testable

The validate_all() function runs every check and aggregates findings.
"""

from __future__ import annotations

from .exceptions import AmbiguousSeparatorError, UnparsableAmountError
from .formatting import format_amount
from .models import EnrichedVoucher, Severity, ValidationFinding, VoucherKind
from .parsing import parse_amount_strict


# ─── Orchestrator ────────────────────────────────────────────────────


def validate_all(voucher: EnrichedVoucher) -> list[ValidationFinding]:
    """Run ALL validators and collect findings."""
    findings: list[ValidationFinding] = []
    findings.extend(validate_amount_input(voucher))
    findings.extend(validate_amount_positive(voucher))
    findings.extend(validate_amount_words(voucher))
    findings.extend(validate_balance(voucher))
    return findings


# ─── Individual Validators ───────────────────────────────────────────


def validate_amount_input(voucher: EnrichedVoucher) -> list[ValidationFinding]:
    """Flag typed amounts the lenient parser had to guess about.

    "n/a" silently becomes 0 and "1.234" silently becomes 1 234 when a
    screen formats them; on a voucher we say so.
    """
    if voucher.montant_raw is None:
        return []

    try:
        parse_amount_strict(voucher.montant_raw, reject_ambiguous=True)
    except AmbiguousSeparatorError as exc:
        return [
            ValidationFinding(
                severity=Severity.WARNING,
                code=exc.code,
                field="montant",
                message=(
                    f"Amount '{voucher.montant_raw}' was read as "
                    f"{voucher.montant_formatted}, but the separator could also "
                    f"be a decimal mark. Confirm the amount."
                ),
                details={**exc.details, "read_as": voucher.montant_formatted},
            )
        ]
    except UnparsableAmountError as exc:
        return [
            ValidationFinding(
                severity=Severity.ERROR,
                code=exc.code,
                field="montant",
                message=f"Amount '{voucher.montant_raw}' contains no readable figure.",
                details=exc.details,
            )
        ]
    return []


def validate_amount_positive(voucher: EnrichedVoucher) -> list[ValidationFinding]:
    """A voucher moves money: zero or negative amounts are typing errors.

    The direction is carried by the voucher kind, never by the sign.
    """
    if voucher.montant > 0:
        return []
    return [
        ValidationFinding(
            severity=Severity.ERROR,
            code="AMOUNT_NOT_POSITIVE",
            field="montant",
            message=(
                f"Voucher amount is {voucher.montant_formatted}. A "
                f"{voucher.kind.value} voucher must carry a positive amount."
            ),
            details={"montant": str(voucher.montant)},
        )
    ]


def validate_amount_words(voucher: EnrichedVoucher) -> list[ValidationFinding]:
    """Cross-check the figure against the amount written in letters.

    Printed vouchers carry both as a built-in integrity check. If they
    disagree, we flag it; we do NOT silently pick one.
    """
    if not voucher.montant_lettre:
        return [
            ValidationFinding(
                severity=Severity.INFO,
                code="AMOUNT_WORDS_MISSING",
                field="montant_lettre",
                message=(
                    "No amount in letters was entered; the computed narration "
                    "will be printed."
                ),
                details={"computed": voucher.montant_lettre_computed},
            )
        ]

    if voucher.amount_from_words is None:
        return [
            ValidationFinding(
                severity=Severity.WARNING,
                code="AMOUNT_WORDS_UNPARSEABLE",
                field="montant_lettre",
                message=f"Could not read amount in letters: '{voucher.montant_lettre}'",
                details={
                    "raw_words": voucher.montant_lettre,
                    "computed": voucher.montant_lettre_computed,
                },
            )
        ]

    expected = voucher.montant
    if voucher.amount_from_words != expected:
        discrepancy = abs(expected - voucher.amount_from_words)
        return [
            ValidationFinding(
                severity=Severity.ERROR,
                code="AMOUNT_MISMATCH",
                field="montant",
                message=(
                    f"DISCREPANCY: figure ({voucher.montant_formatted}) does not "
                    f"match the amount in letters \"{voucher.montant_lettre}\" "
                    f"(= {format_amount(voucher.amount_from_words)}). "
                    f"Difference: {format_amount(discrepancy)}. "
                    f"Expected: \"{voucher.montant_lettre_computed}\"."
                ),
                details={
                    "montant": str(expected),
                    "montant_lettre": voucher.montant_lettre,
                    "amount_from_words": str(voucher.amount_from_words),
                    "discrepancy": str(discrepancy),
                },
            )
        ]

    return []


def validate_balance(voucher: EnrichedVoucher) -> list[ValidationFinding]:
    """The closing balance must follow from the opening balance and the amount."""
    if voucher.solde_avant is None or voucher.solde_apres is None:
        return []

    if voucher.kind is VoucherKind.RECETTE:
        expected = voucher.solde_avant + voucher.montant
    else:
        expected = voucher.solde_avant - voucher.montant

    if expected == voucher.solde_apres:
        return []

    return [
        ValidationFinding(
            severity=Severity.ERROR,
            code="BALANCE_MISMATCH",
            field="solde_apres",
            message=(
                f"Balance after ({format_amount(voucher.solde_apres)}) should be "
                f"{format_amount(expected)} for a {voucher.kind.value} of "
                f"{format_amount(voucher.montant)} on a balance of "
                f"{format_amount(voucher.solde_avant)}."
            ),
            details={
                "solde_avant": str(voucher.solde_avant),
                "solde_apres": str(voucher.solde_apres),
                "expected": str(expected),
            },
        )
    ]
