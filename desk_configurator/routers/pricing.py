"""
Pricing API - validate-then-price for canonical (cm) desk dimensions.

POST /api/v1/pricing/calculate    - single request, or {"calculations": [...]} batch
GET  /api/v1/pricing/compare      - same desk priced in every material
GET  /api/v1/pricing/cache-stats  - in-memory price cache status
"""

import logging
import time
from typing import Union

from fastapi import APIRouter, HTTPException, Query, Response

from ..config import settings
from ..desk_spec import FinishType, TierType
from ..desk_validation import format_validation_message, validate_desk_options
from ..price_cache import price_cache
from ..pricing.standard_calculator import calculate_standard_price_sync, compare_material_prices
from ..schemas import BatchPriceCalculationBody, PriceCalculationBody, PriceRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/pricing", tags=["pricing"])


def dimension_error(field: str, **extra) -> HTTPException:
    """422 for a dimension outside the desk spec, carrying the formatted message."""
    detail = {
        "code": "VALIDATION_FAILED",
        "field": field,
        "message": format_validation_message(field),
    }
    detail.update(extra)
    return HTTPException(status_code=422, detail=detail)


def _check_dimensions(request: PriceRequest, **extra):
    invalid_field = validate_desk_options(request.width_cm, request.depth_cm, request.height_cm)
    if invalid_field:
        logger.info("Rejected price request: %s out of range (%s x %s x %s)",
                    invalid_field, request.width_cm, request.depth_cm, request.height_cm)
        raise dimension_error(invalid_field, **extra)


def _price(request: PriceRequest, use_cache: bool):
    """Returns (PriceResponse, cache_hit)."""
    if use_cache:
        cached = price_cache.get(request)
        if cached is not None:
            return cached, True

    result = calculate_standard_price_sync(request)
    if use_cache:
        price_cache.set(request, result)
    return result, False


@router.post("/calculate")
def calculate_price(
    body: Union[BatchPriceCalculationBody, PriceCalculationBody],
    response: Response,
):
    """
    Price one desk, or up to MAX_BATCH_SIZE desks in order.

    Every request's dimensions are checked against the desk spec first;
    the first out-of-range field fails the whole call with 422.
    """
    if isinstance(body, BatchPriceCalculationBody):
        return _calculate_batch(body, response)

    _check_dimensions(body)

    start = time.perf_counter()
    result, cache_hit = _price(body, body.use_cache)
    elapsed_ms = round((time.perf_counter() - start) * 1000, 3)

    logger.info("Priced %sx%sx%s %s qty=%d -> %d KRW (cache %s)",
                body.width_cm, body.depth_cm, body.height_cm, body.material,
                body.quantity, result.line_total, "hit" if cache_hit else "miss")

    response.headers["X-Cache-Status"] = "HIT" if cache_hit else "MISS"
    return {
        "request": body.model_dump(),
        "result": result.model_dump(),
        "calculation_time_ms": elapsed_ms,
    }


def _calculate_batch(body: BatchPriceCalculationBody, response: Response) -> dict:
    if len(body.calculations) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=422,
            detail=f"At most {settings.MAX_BATCH_SIZE} calculations per batch "
                   f"(got {len(body.calculations)})",
        )

    for index, calculation in enumerate(body.calculations):
        _check_dimensions(calculation, index=index)

    start = time.perf_counter()
    results = []
    cache_hits = 0
    cache_misses = 0
    for calculation in body.calculations:
        calc_start = time.perf_counter()
        result, cache_hit = _price(calculation, body.use_cache and calculation.use_cache)
        if cache_hit:
            cache_hits += 1
        else:
            cache_misses += 1
        results.append({
            "request": calculation.model_dump(),
            "result": result.model_dump(),
            "calculation_time_ms": round((time.perf_counter() - calc_start) * 1000, 3),
        })
    total_ms = round((time.perf_counter() - start) * 1000, 3)

    logger.info("Priced batch of %d (%d cache hits)", len(results), cache_hits)

    response.headers["X-Cache-Hits"] = str(cache_hits)
    response.headers["X-Cache-Misses"] = str(cache_misses)
    return {
        "calculations": results,
        "total_calculation_time_ms": total_ms,
        "cache_hits": cache_hits,
        "cache_misses": cache_misses,
    }


@router.get("/compare")
def compare_prices(
    width_cm: float = Query(gt=0),
    depth_cm: float = Query(gt=0),
    height_cm: float = Query(gt=0),
    finish: FinishType = FinishType.MATTE,
    tier: TierType = TierType.FREE,
    quantity: int = Query(default=1, ge=1),
):
    """Same dimensions priced in every material. Defaults: matte finish, free tier."""
    invalid_field = validate_desk_options(width_cm, depth_cm, height_cm)
    if invalid_field:
        raise dimension_error(invalid_field)

    results = compare_material_prices(width_cm, depth_cm, height_cm,
                                      finish.value, tier.value, quantity)
    return {
        "finish": finish.value,
        "tier": tier.value,
        "materials": {material: result.model_dump() for material, result in results.items()},
    }


@router.get("/cache-stats")
def cache_stats():
    return {"cache": price_cache.stats()}
