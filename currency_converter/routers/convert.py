from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from currency_converter.models.conversion import (
    ConversionIn,
    ConversionOut,
    CurrenciesOut,
    RateTableOut,
)
from currency_converter.services.converter import (
    ConversionOutcome,
    ConversionService,
)

"""Conversion router.

Endpoints:
    - GET  /currencies  -> ordered codes + default pair
    - GET  /rates       -> base currency + full rate table
    - GET  /convert     -> convert ?amount=&from=&to=
    - POST /convert     -> same, JSON body {amount, from, to}

Empty / unparseable amounts are not errors: they come back as 200 with
status "empty" / "invalid" so a client can show the right prompt.
"""

router = APIRouter(tags=["convert"])


def get_service(request: Request) -> ConversionService:
    # installed per app by create_app()
    return request.app.state.conversion_service


def _to_out(outcome: ConversionOutcome) -> ConversionOut:
    return ConversionOut(
        status=outcome.status,
        amount=outcome.amount,
        from_currency=outcome.from_currency,
        to_currency=outcome.to_currency,
        result=outcome.result,
        formatted=outcome.formatted,
        message=outcome.message,
    )


@router.get("/currencies", response_model=CurrenciesOut, summary="List currencies")
async def list_currencies(svc: ConversionService = Depends(get_service)):
    default_from, default_to = svc.default_pair()
    return CurrenciesOut(
        base_currency=svc.table.base_currency,
        currencies=list(svc.table.codes),
        default_from=default_from,
        default_to=default_to,
    )


@router.get("/rates", response_model=RateTableOut, summary="Show the rate table")
async def get_rates(svc: ConversionService = Depends(get_service)):
    return RateTableOut(base_currency=svc.table.base_currency, rates=dict(svc.table))


@router.get("/convert", response_model=ConversionOut, summary="Convert an amount")
async def convert_query(
    amount: str = Query("", description="Amount text, digits with at most one '.'"),
    from_currency: str | None = Query(None, alias="from"),
    to_currency: str | None = Query(None, alias="to"),
    svc: ConversionService = Depends(get_service),
):
    default_from, default_to = svc.default_pair()
    outcome = svc.convert(
        amount, from_currency or default_from, to_currency or default_to
    )
    return _to_out(outcome)


@router.post("/convert", response_model=ConversionOut, summary="Convert an amount")
async def convert_body(
    payload: ConversionIn,
    svc: ConversionService = Depends(get_service),
):
    outcome = svc.convert(payload.amount, payload.from_currency, payload.to_currency)
    return _to_out(outcome)
