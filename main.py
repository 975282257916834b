#!/usr/bin/env python3
"""
Montant RDC — Entry Point
=========================

Formats and narrates a set of typical amounts, then runs the voucher
pipeline on a sample disbursement voucher.

Usage:
    python main.py                      # Demo tables + sample voucher
    python main.py "4/500/00" 1250.75   # Also format and narrate these
"""

from __future__ import annotations

import logging
import sys
from datetime import date

from dotenv import load_dotenv

from montant_rdc.config import get_settings
from montant_rdc.formatting import format_amount, is_canonical
from montant_rdc.models import Severity, Voucher, VoucherKind
from montant_rdc.narration import narrate_amount
from montant_rdc.pipeline import VoucherPipeline

load_dotenv()


# ─── Demo Data ──────────────────────────────────────────────────────

DEMO_AMOUNTS = [
    "4/500/00",
    "1.250.75",
    "1234567",
    "89,5",
    "10.000",
    4500,
    "1,200.50",
    "12.345,60",
    "750 000",
    "-1500.75",
]

DEMO_NARRATIONS = [0, 21, 71, 80, 91, 100, 200, 1000, 1_000_000, 4500.50, -5]

# Typed on the cash screen: the amount in letters was copied from another voucher
SAMPLE_VOUCHER = Voucher(
    kind=VoucherKind.DEPENSE,
    numero_bon=42,
    date_transaction=date(2024, 3, 15),
    montant="1.250.000,00",
    montant_lettre="Un million deux cent mille francs congolais",
    solde_avant="5 000 000,00",
    solde_apres="3 750 000,00",
)


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_amount_table(amounts, currency_symbol: str) -> None:
    """Print raw input → canonical layout."""
    print(f"{_BOLD}{_CYAN}  FORMAT{_RESET}")
    for raw in amounts:
        formatted = format_amount(raw, show_currency=True, currency_symbol=currency_symbol)
        mark = f"{_GREEN}ok{_RESET}" if is_canonical(formatted, 2, currency_symbol) else f"{_RED}??{_RESET}"
        print(f"  {raw!r:>16} {_DIM}→{_RESET} {formatted:<20} {mark}")


def _print_narration_table(amounts, currency_name: str) -> None:
    """Print amount → amount in letters."""
    print(f"\n{_BOLD}{_CYAN}  NARRATION{_RESET}")
    for amount in amounts:
        print(f"  {amount!r:>16} {_DIM}→{_RESET} {narrate_amount(amount, currency_name)}")


def _print_findings_group(findings, color: str, label: str) -> None:
    """Print a categorized group of findings (errors or warnings)."""
    if not findings:
        return
    print(f"\n  {color}{_BOLD}{label} ({len(findings)}){_RESET}")
    for f in findings:
        print(f"    {color}[{f.code}]{_RESET}")
        print(f"    {f.message}")
        for k, v in f.details.items():
            print(f"      {_DIM}{k}: {v}{_RESET}")
        print()


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(report) -> int:
    """Pretty-print the voucher report with ANSI color codes.

    Returns:
        0 if the voucher passed, 1 if rejected.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  VOUCHER REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  Voucher:     {report.voucher_number}")

    voucher = report.voucher
    if voucher:
        print(f"  Period:      {voucher.period.mois_lettre} {voucher.period.annee}")
        print(f"  Amount:      {voucher.montant_raw} {_DIM}→{_RESET} {_BOLD}{voucher.montant_formatted}{_RESET}")
        print(f"  In letters:  {voucher.montant_lettre or '-'}")
        print(f"  Computed:    {voucher.montant_lettre_computed}")
    print(f"  {report.legal_statement}")
    print(f"{'─' * _WIDTH}")

    errors = [f for f in report.findings if f.severity == Severity.ERROR]
    warnings = [f for f in report.findings if f.severity == Severity.WARNING]

    _print_findings_group(errors, _RED, "ERRORS")
    _print_findings_group(warnings, _YELLOW, "WARNINGS")

    print(f"{'=' * _WIDTH}")
    if report.is_valid:
        print(f"  {_GREEN}{_BOLD}VOUCHER PASSED ALL CHECKS{_RESET}")
    else:
        print(f"  {_RED}{_BOLD}VOUCHER REJECTED  --  {len(errors)} error(s) found{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 0 if report.is_valid else 1


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Print the demo tables, then validate the sample voucher."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    extra = sys.argv[1:]
    print()
    _print_amount_table(DEMO_AMOUNTS + extra, settings.currency_symbol)
    _print_narration_table(DEMO_NARRATIONS + extra, settings.currency_name)

    pipeline = VoucherPipeline(settings.currency_symbol, settings.currency_name)
    report = pipeline.run(SAMPLE_VOUCHER)
    sys.exit(print_report(report))


if __name__ == "__main__":
    main()
