"""Date normalization routes.

GET  /dates/formats          — accepted input shapes, in priority order
POST /dates/normalize        — normalize a single date string
POST /dates/normalize/batch  — normalize many; per-item errors, always 200

An unmatched shape on the single route raises ``InvalidDateFormat``,
which the app-level handler in ``datenorm.api.main`` turns into a 422.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from datenorm.core.errors import InvalidQueryError
from datenorm.normalization.date_formats import ACCEPTED_FORMATS
from datenorm.normalization.date_normalizer import normalize_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dates", tags=["dates"])


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

class NormalizeBody(BaseModel):
    date: str


class NormalizeBatchBody(BaseModel):
    dates: list[str]


class NormalizeResult(BaseModel):
    date: str
    normalized: str | None = None
    error: str | None = None


class NormalizeBatchResponse(BaseModel):
    results: list[NormalizeResult]


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.get("/formats", summary="List accepted date formats")
def list_formats() -> dict[str, list[str]]:
    return {"formats": list(ACCEPTED_FORMATS)}


@router.post("/normalize", response_model=NormalizeResult, summary="Normalize a date string")
def normalize(body: NormalizeBody) -> NormalizeResult:
    return NormalizeResult(date=body.date, normalized=normalize_date(body.date))


@router.post(
    "/normalize/batch",
    response_model=NormalizeBatchResponse,
    summary="Normalize several date strings",
)
def normalize_batch(body: NormalizeBatchBody) -> NormalizeBatchResponse:
    results: list[NormalizeResult] = []
    for raw in body.dates:
        try:
            results.append(NormalizeResult(date=raw, normalized=normalize_date(raw)))
        except InvalidQueryError as exc:
            results.append(NormalizeResult(date=raw, error=str(exc)))

    failed = sum(1 for r in results if r.error is not None)
    logger.info("Normalized batch of %d dates (%d failed)", len(results), failed)
    return NormalizeBatchResponse(results=results)
