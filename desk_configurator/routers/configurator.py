"""
Configurator BFF - what the 3D configurator page talks to.

GET  /api/v1/configurator        - bootstrap: desk spec, active materials, option tables
POST /api/v1/configurator/snap   - snap scene meters to cm and report the first invalid field
POST /api/v1/configurator/quote  - snap, validate, then price (422 if out of range)
"""

import logging

from fastapi import APIRouter

from ..config import settings
from ..desk_spec import DESK_MODEL_SPEC, FinishType, TierType
from ..desk_validation import format_validation_message, snap_and_validate
from ..materials import default_material_records, filter_materials, material_display_name
from ..pricing.standard_calculator import calculate_standard_price_sync
from ..pricing.tables import DEFAULT_PRICING_TABLES
from ..schemas import DimensionsMeters, PriceRequest, QuoteFromSceneBody
from .pricing import dimension_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/configurator", tags=["configurator"])


@router.get("")
def bootstrap():
    """Everything the configurator UI needs before the first interaction."""
    materials = filter_materials(default_material_records(settings.INACTIVE_MATERIALS))
    return {
        "spec": DESK_MODEL_SPEC.as_dict(),
        "materials": [m.model_dump() for m in materials],
        "finishes": [f.value for f in FinishType],
        "tiers": [t.value for t in TierType],
        "pricing": DEFAULT_PRICING_TABLES.as_dict(),
    }


@router.post("/snap")
def snap(dimensions: DimensionsMeters):
    """
    Always 200 - an out-of-range field is part of the answer, not an error.
    `message` is filled in when invalid_field is set.
    """
    result = snap_and_validate(dimensions)
    payload = result.model_dump()
    payload["message"] = (
        format_validation_message(result.invalid_field) if result.invalid_field else None
    )
    return payload


@router.post("/quote")
def quote(body: QuoteFromSceneBody):
    snapped = snap_and_validate(body.dimensions)
    if snapped.invalid_field:
        logger.info("Quote rejected: %s out of range (%s)",
                    snapped.invalid_field, snapped.snapped_cm.model_dump())
        raise dimension_error(snapped.invalid_field)

    cm = snapped.snapped_cm
    price = calculate_standard_price_sync(PriceRequest(
        width_cm=cm.width_cm,
        depth_cm=cm.depth_cm,
        height_cm=cm.height_cm,
        material=body.material,
        finish=body.finish,
        tier=body.tier,
        quantity=body.quantity,
    ))
    return {
        "dimensions": snapped.model_dump(),
        "material_name": material_display_name(body.material),
        "price": price.model_dump(),
    }
