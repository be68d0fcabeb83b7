"""
Pricing tables - the single source of truth for the standard price formula.

A pricing change is an edit to these tables, never to the formula in
standard_calculator.py. Tables are bundled into one frozen PricingTables object
so a calculator can be handed an alternate set (tests, promotions) without
touching module globals.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Fixed manufacturing base per desk (KRW)
BASE_PRICE_KRW = 50_000

# KRW per cubic meter of desk bounding volume
SIZE_MULTIPLIER = 1_000

MATERIAL_MULTIPLIERS = MappingProxyType({
    "wood": 1.0,
    "mdf": 0.8,
    "steel": 1.15,
    "metal": 1.5,
    "glass": 2.0,
    "fabric": 0.8,
})

FINISH_MULTIPLIERS = MappingProxyType({
    "matte": 1.0,
    "glossy": 1.2,
    "satin": 1.1,
})

# Customer tier - discounts below 1.0
TIER_MULTIPLIERS = MappingProxyType({
    "free": 1.0,
    "premium": 0.95,
    "vip": 0.90,
})

CURRENCY = "KRW"


def _freeze(table: Mapping[str, float], name: str) -> Mapping[str, float]:
    frozen = MappingProxyType(dict(table))
    for key, value in frozen.items():
        if value <= 0:
            raise ValueError(f"{name} multiplier for '{key}' must be positive, got {value}")
    return frozen


@dataclass(frozen=True)
class PricingTables:
    """Read-only bundle of every constant the standard formula uses."""

    base_price_krw: float = BASE_PRICE_KRW
    size_multiplier: float = SIZE_MULTIPLIER
    material_multipliers: Mapping[str, float] = field(default_factory=lambda: MATERIAL_MULTIPLIERS)
    finish_multipliers: Mapping[str, float] = field(default_factory=lambda: FINISH_MULTIPLIERS)
    tier_multipliers: Mapping[str, float] = field(default_factory=lambda: TIER_MULTIPLIERS)

    def __post_init__(self):
        if self.base_price_krw <= 0:
            raise ValueError("base_price_krw must be positive")
        if self.size_multiplier <= 0:
            raise ValueError("size_multiplier must be positive")
        # Copy caller-supplied dicts so later mutation of the source can't leak in
        object.__setattr__(self, "material_multipliers",
                           _freeze(self.material_multipliers, "material"))
        object.__setattr__(self, "finish_multipliers",
                           _freeze(self.finish_multipliers, "finish"))
        object.__setattr__(self, "tier_multipliers",
                           _freeze(self.tier_multipliers, "tier"))

    def as_dict(self) -> dict:
        return {
            "base_price_krw": self.base_price_krw,
            "size_multiplier": self.size_multiplier,
            "material": dict(self.material_multipliers),
            "finish": dict(self.finish_multipliers),
            "tier": dict(self.tier_multipliers),
            "currency": CURRENCY,
        }


DEFAULT_PRICING_TABLES = PricingTables()
