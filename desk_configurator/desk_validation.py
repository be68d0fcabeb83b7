"""
Dimension snap & validate - quantizes scene measurements onto the cm grid.

The 3D scene reports continuous meters. Everything downstream (pricing, saved
designs, drawings) works in integer centimeters, so every measurement is
snapped first and then range-checked against DESK_MODEL_SPEC.

Range violations are reported in the result, never raised. Callers decide
whether to block the action and show format_validation_message().
"""

import logging

from .desk_spec import DESK_MODEL_SPEC, DIMENSION_FIELDS, DeskModelSpec
from .pricing.rounding import round_half_up
from .schemas import DimensionsCm, DimensionsMeters, SnapValidateResult

logger = logging.getLogger(__name__)

VALIDATION_FAILED_PREFIX = "입력값이 올바르지 않습니다"   # "invalid input"
ALLOWED_RANGE_PREFIX = "허용 범위"                        # "allowed range"


def meters_to_cm(value_m: float) -> int:
    """Snap a meter value to the nearest whole centimeter (ties away from zero)."""
    return round_half_up(value_m * 100)


def find_invalid_field(width_cm: float, depth_cm: float, height_cm: float,
                       spec: DeskModelSpec = DESK_MODEL_SPEC):
    """
    Return the first out-of-range field name, or None.

    Order is fixed: width, then depth, then height. Later fields are not
    checked once one fails.
    """
    values = {"width_cm": width_cm, "depth_cm": depth_cm, "height_cm": height_cm}
    for field in DIMENSION_FIELDS:
        if not spec.range_for(field).contains(values[field]):
            return field
    return None


def snap_and_validate(dimensions_meters, spec: DeskModelSpec = DESK_MODEL_SPEC) -> SnapValidateResult:
    """
    Snap {width, depth, height} in meters to integer cm and validate.

    Args:
        dimensions_meters: DimensionsMeters or a dict with width/depth/height keys.
        spec: dimension ranges to validate against.

    Returns:
        SnapValidateResult. snapped_meters is cm / 100, so re-snapping a snapped
        value gives the same cm. invalid_field is None only if all three
        snapped values lie within [min, max].
    """
    if isinstance(dimensions_meters, dict):
        dimensions_meters = DimensionsMeters(**dimensions_meters)

    width_cm = meters_to_cm(dimensions_meters.width)
    depth_cm = meters_to_cm(dimensions_meters.depth)
    height_cm = meters_to_cm(dimensions_meters.height)

    invalid_field = find_invalid_field(width_cm, depth_cm, height_cm, spec)
    if invalid_field:
        logger.debug("Snapped %dx%dx%d cm - %s out of range",
                     width_cm, depth_cm, height_cm, invalid_field)

    return SnapValidateResult(
        # built from already-validated input, so the bounds are not re-checked
        snapped_meters=DimensionsMeters.model_construct(
            width=width_cm / 100,
            depth=depth_cm / 100,
            height=height_cm / 100,
        ),
        snapped_cm=DimensionsCm(width_cm=width_cm, depth_cm=depth_cm, height_cm=height_cm),
        invalid_field=invalid_field,
    )


def validate_desk_options(width_cm: float, depth_cm: float, height_cm: float,
                          spec: DeskModelSpec = DESK_MODEL_SPEC):
    """Range-check dimensions that are already in centimeters. Same order as snap_and_validate."""
    return find_invalid_field(width_cm, depth_cm, height_cm, spec)


def format_validation_message(field: str, spec: DeskModelSpec = DESK_MODEL_SPEC) -> str:
    """
    User-facing message for a known-invalid field.

    >>> format_validation_message("width_cm")
    '입력값이 올바르지 않습니다: width_cm - 허용 범위 30–300'
    """
    axis = spec.range_for(field)
    return f"{VALIDATION_FAILED_PREFIX}: {field} - {ALLOWED_RANGE_PREFIX} {axis.min}–{axis.max}"
