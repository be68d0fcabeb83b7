"""
Standard price calculator - deterministic, table-driven desk pricing.

Pure math. No I/O, no validation. Callers run desk_validation first and only
hand over in-range dimensions and enumerated material/finish/tier keys; a key
missing from the tables raises KeyError (contract violation, not a business
error).

Formula:
    volume_m3      = w_cm * d_cm * h_cm / 1_000_000
    size           = volume_m3 * SIZE_MULTIPLIER
    unit_price_raw = (BASE_PRICE_KRW + size) * material * finish * tier
    unit_price     = round_half_up(unit_price_raw)
    line_total     = round_half_up(unit_price * quantity)

Example: 120x60x75 wood/matte/premium qty 2 -> 0.54 m3, 48013 KRW each, 96026 total.
"""

import logging

from ..schemas import PriceComponents, PriceRequest, PriceResponse
from .rounding import round_half_up
from .tables import CURRENCY, DEFAULT_PRICING_TABLES, PricingTables

logger = logging.getLogger(__name__)

CM3_PER_M3 = 1_000_000
VOLUME_DISPLAY_DIGITS = 6


class StandardPriceCalculator:
    """
    Applies one PricingTables set to price requests.
    Stateless apart from the (immutable) tables - safe to share across threads.
    """

    def __init__(self, tables: PricingTables = DEFAULT_PRICING_TABLES):
        self.tables = tables

    def calculate(self, request: PriceRequest) -> PriceResponse:
        tables = self.tables

        volume_m3 = self.volume_m3(request.width_cm, request.depth_cm, request.height_cm)
        size = volume_m3 * tables.size_multiplier

        material_mul = tables.material_multipliers[request.material]
        finish_mul = tables.finish_multipliers[request.finish]
        tier_mul = tables.tier_multipliers[request.tier]

        unit_price_raw = (tables.base_price_krw + size) * material_mul * finish_mul * tier_mul
        unit_price = round_half_up(unit_price_raw)
        line_total = round_half_up(unit_price * request.quantity)

        logger.debug("Priced %sx%sx%s %s/%s/%s: raw=%.4f unit=%d",
                     request.width_cm, request.depth_cm, request.height_cm,
                     request.material, request.finish, request.tier,
                     unit_price_raw, unit_price)

        return PriceResponse(
            volume_m3=round_half_up(volume_m3, VOLUME_DISPLAY_DIGITS),
            components=PriceComponents(
                base=tables.base_price_krw,
                # Display only - rounded on its own, so base/size/multipliers
                # won't always reproduce unit_price exactly.
                size=round_half_up(size),
                material=material_mul,
                finish=finish_mul,
                tier=tier_mul,
            ),
            unit_price=unit_price,
            quantity=request.quantity,
            line_total=line_total,
            currency=CURRENCY,
        )

    def volume_m3(self, width_cm: float, depth_cm: float, height_cm: float) -> float:
        """Bounding volume in cubic meters, unrounded."""
        return (width_cm * depth_cm * height_cm) / CM3_PER_M3

    def compare_materials(self, width_cm: float, depth_cm: float, height_cm: float,
                          finish: str, tier: str, quantity: int = 1) -> dict:
        """
        Price the same desk in every material in the table.
        Returns {material: PriceResponse}, in table order.
        Keys come from the tables themselves, so they are not re-checked
        against MaterialType.
        """
        return {
            material: self.calculate(PriceRequest.model_construct(
                width_cm=width_cm,
                depth_cm=depth_cm,
                height_cm=height_cm,
                material=material,
                finish=finish,
                tier=tier,
                quantity=quantity,
            ))
            for material in self.tables.material_multipliers
        }


_default_calculator = StandardPriceCalculator()


def _coerce(request) -> PriceRequest:
    if isinstance(request, PriceRequest):
        return request
    return PriceRequest(**request)


def calculate_standard_price_sync(request, tables: PricingTables = None) -> PriceResponse:
    """
    Synchronous entry point. `request` is a PriceRequest or an equivalent dict.
    Pass `tables` to price against something other than DEFAULT_PRICING_TABLES.
    """
    calculator = _default_calculator if tables is None else StandardPriceCalculator(tables)
    return calculator.calculate(_coerce(request))


async def calculate_standard_price(request, tables: PricingTables = None) -> PriceResponse:
    """
    Async form of calculate_standard_price_sync. Never suspends - exists so
    callers can await local and (future) remote pricing strategies the same way.
    """
    return calculate_standard_price_sync(request, tables)


def calculate_standard_prices(requests, tables: PricingTables = None) -> list:
    """Price each request in order."""
    return [calculate_standard_price_sync(r, tables) for r in requests]


def compare_material_prices(width_cm: float, depth_cm: float, height_cm: float,
                            finish: str, tier: str, quantity: int = 1,
                            tables: PricingTables = None) -> dict:
    calculator = _default_calculator if tables is None else StandardPriceCalculator(tables)
    return calculator.compare_materials(width_cm, depth_cm, height_cm, finish, tier, quantity)
