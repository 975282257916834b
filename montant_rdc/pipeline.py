"""
Voucher pipeline: everything a cash voucher needs before it is printed.

Flow:
  ┌──────────────┐
  │ Typed voucher│
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  Enrichment  │   ← Parse amounts, narrate, period, voucher number
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  Validators  │   ← Pure code checks
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │    Report    │   ← Typed findings + pass/fail + "Nous disons" line
  └──────────────┘
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from .formatting import format_amount
from .models import EnrichedVoucher, Severity, Voucher, VoucherReport
from .narration import DEFAULT_CURRENCY_NAME, legal_statement, narrate_amount
from .parsing import parse_amount
from .periods import period_info
from .validators import validate_all
from .vouchers import generate_voucher_number
from .word_to_number import words_to_number

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


class VoucherPipeline:
    """Enrich and validate cash vouchers.

    Usage:
        pipeline = VoucherPipeline()
        report = pipeline.run(voucher)
        if not report.is_valid:
            for finding in report.findings:
                print(finding)
    """

    def __init__(
        self,
        currency_symbol: str = "FC",
        currency_name: str = DEFAULT_CURRENCY_NAME,
    ):
        self.currency_symbol = currency_symbol
        self.currency_name = currency_name

    def run(self, voucher: Voucher) -> VoucherReport:
        """Execute the full pipeline on a typed voucher."""
        logger.info("Enriching voucher %s n°%d", voucher.kind.value, voucher.numero_bon)
        enriched = self._enrich(voucher)

        logger.info("Validating voucher %s", enriched.voucher_number)
        findings = validate_all(enriched)
        has_errors = any(f.severity == Severity.ERROR for f in findings)
        if has_errors:
            logger.info(
                "Voucher %s rejected: %s",
                enriched.voucher_number,
                ", ".join(f.code for f in findings if f.severity == Severity.ERROR),
            )

        return VoucherReport(
            voucher_number=enriched.voucher_number,
            is_valid=not has_errors,
            findings=findings,
            voucher=enriched,
            legal_statement=legal_statement(enriched.montant, self.currency_name),
        )

    # ─── Enrichment ──────────────────────────────────────────────────

    def _enrich(self, voucher: Voucher) -> EnrichedVoucher:
        """Parse amounts, narrate, derive period and voucher number."""
        montant = self._to_cents(voucher.montant)

        # ── Convert written amount (before validators run) ───────────
        amount_from_words: Decimal | None = None
        if voucher.montant_lettre:
            try:
                amount_from_words = words_to_number(voucher.montant_lettre)
            except ValueError:
                pass  # Validator will report AMOUNT_WORDS_UNPARSEABLE

        return EnrichedVoucher(
            kind=voucher.kind,
            numero_bon=voucher.numero_bon,
            voucher_number=generate_voucher_number(
                voucher.kind, voucher.numero_bon, voucher.date_transaction.year
            ),
            date_transaction=voucher.date_transaction,
            period=period_info(voucher.date_transaction),
            montant_raw=voucher.montant if isinstance(voucher.montant, str) else None,
            montant=montant,
            montant_formatted=format_amount(
                montant, show_currency=True, currency_symbol=self.currency_symbol
            ),
            montant_lettre=voucher.montant_lettre,
            montant_lettre_computed=narrate_amount(montant, self.currency_name),
            amount_from_words=amount_from_words,
            solde_avant=self._to_cents(voucher.solde_avant),
            solde_apres=self._to_cents(voucher.solde_apres),
        )

    @staticmethod
    def _to_cents(raw: str | Decimal | None) -> Decimal | None:
        if raw is None:
            return None
        return parse_amount(raw).quantize(_CENT, rounding=ROUND_HALF_UP)
