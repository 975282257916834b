"""
Pydantic models for amounts and vouchers.

Every value here is created, transformed and discarded within one call.
Options are frozen: a caller cannot mutate the defaults another caller sees.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Amount Enums ───────────────────────────────────────────────────


class Sign(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class DecimalSeparator(str, Enum):
    """Which character, if any, marks the decimals in cleaned input."""

    COMMA = "comma"
    DOT = "dot"
    NONE = "none"


# ─── Amount Models ──────────────────────────────────────────────────


class ParsedAmount(BaseModel):
    """An amount split into sign, integer part and fixed-width fraction.

    `fraction` holds `decimals` digits worth of sub-units (cents when
    decimals=2). `integer_digits` is the integer part as text, for amounts
    too long for str(int). A zero magnitude is always POSITIVE.
    """

    model_config = ConfigDict(frozen=True)

    sign: Sign = Sign.POSITIVE
    integer_part: int = Field(default=0, ge=0)
    integer_digits: str = Field(default="0", pattern=r"^\d+$")
    fraction: int = Field(default=0, ge=0)
    decimals: int = Field(default=2, ge=0, le=6)

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return self.integer_part == 0 and self.fraction == 0

    def to_decimal(self) -> Decimal:
        value = Decimal(self.integer_part) + Decimal(self.fraction).scaleb(-self.decimals)
        return value.copy_negate() if self.is_negative else value


class FormattingOptions(BaseModel):
    """Per-call formatting options for canonical amounts."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    show_currency: bool = False
    currency_symbol: str = "FC"
    show_sign: bool = False
    decimals: int = Field(default=2, ge=0, le=6)


# ─── Validation Findings ────────────────────────────────────────────


class Severity(str, Enum):
    """Severity of a validation finding."""

    ERROR = "ERROR"  # Voucher must not be printed
    WARNING = "WARNING"  # Needs a second look by the accountant
    INFO = "INFO"


class ValidationFinding(BaseModel):
    """A single validation finding with severity, machine-readable code, and details."""

    severity: Severity
    code: str  # Machine-readable, e.g. "AMOUNT_MISMATCH"
    field: str
    message: str
    details: dict = Field(default_factory=dict)


# ─── Periods ────────────────────────────────────────────────────────


class PeriodInfo(BaseModel):
    """Accounting period derived from a transaction date."""

    mois: int = Field(ge=1, le=12)
    annee: int
    mois_lettre: str  # "MARS"
    mois_annee: str  # "03/2024"


# ─── Vouchers ───────────────────────────────────────────────────────


class VoucherKind(str, Enum):
    """Receipt vouchers add to the cash balance, disbursement vouchers subtract."""

    RECETTE = "recette"
    DEPENSE = "depense"

    @property
    def prefix(self) -> str:
        return "BE" if self is VoucherKind.RECETTE else "BS"


class Voucher(BaseModel):
    """A cash voucher as typed by an operator.

    Amounts are kept raw: they may carry any separator convention and are
    only interpreted during enrichment.
    """

    kind: VoucherKind
    numero_bon: int = Field(ge=1)
    date_transaction: date
    montant: str | Decimal
    montant_lettre: Optional[str] = None
    solde_avant: Optional[str | Decimal] = None
    solde_apres: Optional[str | Decimal] = None


class EnrichedVoucher(BaseModel):
    """Voucher after enrichment: amounts parsed, narrated and formatted."""

    kind: VoucherKind
    numero_bon: int
    voucher_number: str  # "BE-2024-001"
    date_transaction: date
    period: PeriodInfo
    montant_raw: Optional[str] = None  # As typed, when typed as text
    montant: Decimal
    montant_formatted: str  # "4 500,00 FC"
    montant_lettre: Optional[str] = None  # As written on the voucher
    montant_lettre_computed: str  # As we narrate it
    amount_from_words: Optional[Decimal] = None
    solde_avant: Optional[Decimal] = None
    solde_apres: Optional[Decimal] = None


class VoucherReport(BaseModel):
    """The final output of the voucher pipeline."""

    voucher_number: str
    is_valid: bool
    findings: list[ValidationFinding] = Field(default_factory=list)
    voucher: Optional[EnrichedVoucher] = None
    legal_statement: str = ""
