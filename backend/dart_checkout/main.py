from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from dart_checkout.config import get_settings
from dart_checkout.engine.darts import parse_route
from dart_checkout.engine.finish import check_visit, finish_rule_for, is_bust, is_checkout
from dart_checkout.engine.ranking import CheckoutRoute
from dart_checkout.engine.service import get_checkout_routes
from dart_checkout.engine.table import bogey_numbers, get_checkout_table

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.eager_table:
        get_checkout_table()
    yield


app = FastAPI(title="Dart Checkout", lifespan=lifespan)


@app.get("/", include_in_schema=False)
def root(request: Request):
    # If a browser hits the root, take them to Swagger UI.
    # Keep the JSON response for API clients (e.g. curl, fetch).
    accept = (request.headers.get("accept") or "").lower()
    if "text/html" in accept:
        return RedirectResponse(url="/docs")
    return {
        "name": "Dart Checkout",
        "docs": "/docs",
        "health": "/health",
        "endpoints": [
            "GET /checkout/{score}?darts_remaining=<1-3>&double_out=<bool>&master_out=<bool>",
            "GET /checkout/bogeys",
            "POST /visit/evaluate",
        ],
    }


@app.get("/health")
def health():
    return {"status": "ok"}


class RouteDTO(BaseModel):
    darts: list[str]
    total: int
    preferred: bool


class CheckoutResponseDTO(BaseModel):
    score: int
    darts_remaining: int
    finish_rule: str
    possible: bool
    suggestion: list[str] | None
    routes: list[RouteDTO]


class BogeyNumbersDTO(BaseModel):
    bogey_numbers: list[int]


class VisitRequest(BaseModel):
    remaining: int = Field(..., gt=0)
    darts: list[str] = Field(..., min_length=1, max_length=3, description="Dart notation, e.g. T20, D16, Bull")
    double_out: bool = Field(default=True)
    master_out: bool = Field(default=False)


class VisitEvaluationDTO(BaseModel):
    total: int
    checkout: bool
    bust: bool
    remaining_after: int


def _route_to_dto(r: CheckoutRoute) -> RouteDTO:
    return RouteDTO(darts=r.as_strings(), total=r.total, preferred=r.preferred)


@app.get("/checkout/bogeys", response_model=BogeyNumbersDTO)
def list_bogey_numbers() -> BogeyNumbersDTO:
    return BogeyNumbersDTO(bogey_numbers=bogey_numbers())


@app.get("/checkout/{score}", response_model=CheckoutResponseDTO)
def checkout_suggestions(
    score: int,
    darts_remaining: int = 3,
    double_out: bool = True,
    master_out: bool = False,
    limit: int | None = Query(default=None, ge=1),
) -> CheckoutResponseDTO:
    try:
        routes = get_checkout_routes(score, darts_remaining, double_out, master_out=master_out)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    shown = list(routes or ())[: limit or settings.max_routes]
    return CheckoutResponseDTO(
        score=score,
        darts_remaining=darts_remaining,
        finish_rule=finish_rule_for(double_out, master_out=master_out).value,
        possible=bool(routes),
        suggestion=routes[0].as_strings() if routes else None,
        routes=[_route_to_dto(r) for r in shown],
    )


@app.post("/visit/evaluate", response_model=VisitEvaluationDTO)
def evaluate_visit(req: VisitRequest) -> VisitEvaluationDTO:
    try:
        darts = parse_route(req.darts)
        check_visit(req.remaining, darts)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    rule = finish_rule_for(req.double_out, master_out=req.master_out)
    total = sum(d.score for d in darts)
    checkout = is_checkout(req.remaining, darts, rule)
    bust = is_bust(req.remaining, darts, rule)
    logger.debug("visit %s from %d: checkout=%s bust=%s", req.darts, req.remaining, checkout, bust)
    return VisitEvaluationDTO(
        total=total,
        checkout=checkout,
        bust=bust,
        remaining_after=req.remaining if bust else req.remaining - total,
    )
