"""
Montant RDC — FastAPI Server
============================

RESTful API used by the report and voucher screens.

Endpoints:
    POST /format              Canonical RDC layout of any typed amount
    POST /parse               Read an amount (lenient or strict)
    POST /narrate             Amount in French letters
    POST /validate-format     Is a string already canonical?
    POST /vouchers/validate   Enrich and cross-check a cash voucher
    GET  /health              Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from montant_rdc import __version__
from montant_rdc.config import get_settings
from montant_rdc.exceptions import AmountError
from montant_rdc.formatting import format_amount, is_canonical
from montant_rdc.models import (
    EnrichedVoucher,
    FormattingOptions,
    Sign,
    ValidationFinding,
    Voucher,
    VoucherReport,
)
from montant_rdc.narration import narrate_amount
from montant_rdc.parsing import parse_amount, parse_amount_strict, split_amount
from montant_rdc.pipeline import VoucherPipeline

load_dotenv()


# ─── Application Lifespan ────────────────────────────────────────────

_pipeline: VoucherPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the voucher pipeline from settings on startup."""
    global _pipeline  # noqa: PLW0603
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    _pipeline = VoucherPipeline(settings.currency_symbol, settings.currency_name)
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Montant RDC API",
    description=(
        "Canonical RDC amount formatting (4 500,00 FC) and French narration "
        "of amounts for legal financial documents."
    ),
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(AmountError)
async def amount_error_handler(request: Request, exc: AmountError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"code": exc.code, "message": str(exc), "details": exc.details},
    )


# ─── Request / Response Schemas ─────────────────────────────────────


class AmountRequest(BaseModel):
    amount: str | Decimal = Field(
        ...,
        description="Amount as typed (any separator convention) or a JSON number.",
        json_schema_extra={"example": "4/500/00"},
    )


class FormatRequest(AmountRequest):
    show_currency: bool = False
    currency_symbol: Optional[str] = None
    show_sign: bool = False
    decimals: Optional[int] = Field(default=None, ge=0, le=6)


class FormatResponse(BaseModel):
    formatted: str
    is_canonical: bool


class ParseRequest(AmountRequest):
    strict: bool = Field(default=False, description="Return 422 instead of reading zero")
    reject_ambiguous: bool = Field(
        default=False, description="In strict mode, also refuse '1.234'-style input"
    )


class ParseResponse(BaseModel):
    value: Decimal
    sign: Sign
    integer_part: int
    cents: int
    formatted: str


class NarrateRequest(AmountRequest):
    currency_name: Optional[str] = None
    cents: Optional[int] = Field(default=None, ge=0, le=99)


class NarrateResponse(BaseModel):
    words: str
    legal_statement: str


class ValidateFormatRequest(BaseModel):
    amount: str


class ValidateFormatResponse(BaseModel):
    amount: str
    is_canonical: bool


class VoucherResponse(BaseModel):
    """Structured voucher report returned by the API."""

    voucher_number: str
    is_valid: bool
    legal_statement: str
    error_count: int
    warning_count: int
    findings: list[ValidationFinding]
    voucher: Optional[EnrichedVoucher] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    currency_symbol: str
    currency_name: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> VoucherPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _build_response(report: VoucherReport) -> VoucherResponse:
    """Convert the internal VoucherReport to the API response schema."""
    error_count = sum(1 for f in report.findings if f.severity.value == "ERROR")
    warning_count = sum(1 for f in report.findings if f.severity.value == "WARNING")

    return VoucherResponse(
        voucher_number=report.voucher_number,
        is_valid=report.is_valid,
        legal_statement=report.legal_statement,
        error_count=error_count,
        warning_count=warning_count,
        findings=report.findings,
        voucher=report.voucher,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post("/format", summary="Format an amount in the RDC layout", tags=["Amounts"])
def format_endpoint(request: FormatRequest) -> FormatResponse:
    """Repair any typed amount into `4 500,00` (optionally `+` / `FC`)."""
    settings = get_settings()
    options = FormattingOptions(
        show_currency=request.show_currency,
        currency_symbol=request.currency_symbol or settings.currency_symbol,
        show_sign=request.show_sign,
        decimals=settings.decimals if request.decimals is None else request.decimals,
    )
    formatted = format_amount(request.amount, options)
    return FormatResponse(
        formatted=formatted,
        is_canonical=is_canonical(formatted, options.decimals, options.currency_symbol),
    )


@app.post(
    "/parse",
    summary="Read an amount",
    tags=["Amounts"],
    responses={422: {"description": "Unparsable or ambiguous amount (strict mode)"}},
)
def parse_endpoint(request: ParseRequest) -> ParseResponse:
    """Lenient by default: unreadable input is zero. Strict mode reports it."""
    if request.strict:
        value = parse_amount_strict(
            request.amount, reject_ambiguous=request.reject_ambiguous
        )
    else:
        value = parse_amount(request.amount)

    parsed = split_amount(value, 2)
    return ParseResponse(
        value=parsed.to_decimal(),
        sign=parsed.sign,
        integer_part=parsed.integer_part,
        cents=parsed.fraction,
        formatted=format_amount(value),
    )


@app.post("/narrate", summary="Amount in French letters", tags=["Amounts"])
def narrate_endpoint(request: NarrateRequest) -> NarrateResponse:
    currency_name = request.currency_name or get_settings().currency_name
    words = narrate_amount(request.amount, currency_name, cents=request.cents)
    return NarrateResponse(
        words=words,
        legal_statement=f"Nous disons : {words}",
    )


@app.post("/validate-format", summary="Check the canonical layout", tags=["Amounts"])
def validate_format_endpoint(request: ValidateFormatRequest) -> ValidateFormatResponse:
    settings = get_settings()
    return ValidateFormatResponse(
        amount=request.amount,
        is_canonical=is_canonical(
            request.amount, settings.decimals, settings.currency_symbol
        ),
    )


@app.post(
    "/vouchers/validate",
    summary="Enrich and validate a cash voucher",
    tags=["Vouchers"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def validate_voucher(voucher: Voucher) -> VoucherResponse:
    """Run the voucher pipeline.

    Returns a structured report with:
    - **is_valid**: `true` if the voucher passes all checks
    - **findings**: detailed list of errors, warnings, and info items
    - **voucher**: amounts parsed, formatted and narrated
    - **legal_statement**: the "Nous disons" line to print
    """
    pipeline = _get_pipeline()
    report = pipeline.run(voucher)
    return _build_response(report)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    pipeline = _get_pipeline()
    return HealthResponse(
        status="healthy",
        version=__version__,
        currency_symbol=pipeline.currency_symbol,
        currency_name=pipeline.currency_name,
    )
