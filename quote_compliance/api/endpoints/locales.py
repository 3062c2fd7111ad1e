"""Locale pack endpoints.

Pack listing and lookup, locale detection, compliance validation, document
numbering and legal-mention generation. Unknown codes resolve to the default
pack, so the returned ``locale`` may differ from the requested one.
"""

from datetime import date
from typing import Any, Literal

from fastapi import APIRouter, Query
from pydantic import BaseModel

from quote_compliance.locales import (
    detect_locale,
    format_invoice_number,
    format_quote_number,
    generate_legal_mentions,
    get_pack,
    list_packs,
    validate_compliance,
)

router = APIRouter()


class DetectLocaleRequest(BaseModel):
    """Company or client hints, any of which may be missing."""

    vat_number: str | None = None
    postal_code: str | None = None
    country: str | None = None
    browser_locale: str | None = None


# --- Endpoints ---


@router.get("")
async def get_locales() -> dict[str, Any]:
    """List the supported locale packs.

    Returns:
        Pack summaries in registration order.
    """
    return {"locales": [pack.summary() for pack in list_packs()]}


@router.post("/detect")
async def detect(request: DetectLocaleRequest) -> dict[str, str]:
    return {
        "locale": detect_locale(
            vat_number=request.vat_number,
            postal_code=request.postal_code,
            country=request.country,
            browser_locale=request.browser_locale,
        )
    }


@router.get("/{code}")
async def get_locale(code: str) -> dict[str, Any]:
    """Get the full pack for a locale code."""
    return get_pack(code).to_dict()


@router.post("/{code}/validate")
async def validate(code: str, quote: dict[str, Any]) -> dict[str, Any]:
    """Run the pack's compliance rules against a quote.

    Args:
        code: Locale code.
        quote: Quote record.

    Returns:
        Compliance report (valid flag, errors, warnings, info).
    """
    pack = get_pack(code)
    report = validate_compliance(quote, pack.code)
    return {"locale": pack.code, **report.to_dict()}


@router.get("/{code}/quote-number")
async def quote_number(
    code: str,
    sequence: int = Query(..., ge=0, description="Sequence number"),
    on_date: date | None = Query(None, alias="date", description="Document date"),
    kind: Literal["quote", "invoice"] = "quote",
) -> dict[str, str]:
    """Format a quote or invoice number with the pack's template."""
    pack = get_pack(code)
    formatter = format_invoice_number if kind == "invoice" else format_quote_number
    return {"locale": pack.code, "number": formatter(pack.code, sequence, on_date)}


@router.get("/{code}/legal-mentions")
async def legal_mentions(
    code: str,
    include_data_protection: bool = True,
    include_insurance: bool = True,
    custom_terms: str | None = None,
) -> dict[str, str]:
    pack = get_pack(code)
    return {
        "locale": pack.code,
        "text": generate_legal_mentions(
            pack.code,
            include_data_protection=include_data_protection,
            include_insurance=include_insurance,
            custom_terms=custom_terms,
        ),
    }
