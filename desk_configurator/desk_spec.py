"""
Desk model specification - legal dimension ranges and option identifiers.

All dimensions are integer centimeters. The configurator scene works in meters;
desk_validation.snap_and_validate converts between the two.
"""

import enum
from dataclasses import dataclass


class MaterialType(str, enum.Enum):
    WOOD = "wood"
    MDF = "mdf"
    STEEL = "steel"
    METAL = "metal"
    GLASS = "glass"
    FABRIC = "fabric"


class FinishType(str, enum.Enum):
    MATTE = "matte"
    GLOSSY = "glossy"
    SATIN = "satin"


class TierType(str, enum.Enum):
    FREE = "free"
    PREMIUM = "premium"
    VIP = "vip"


# Dimension fields, in the order they are validated
DIMENSION_FIELDS = ("width_cm", "depth_cm", "height_cm")


@dataclass(frozen=True)
class AxisRange:
    min: int
    max: int
    step: int = 1

    def __post_init__(self):
        if self.min >= self.max:
            raise ValueError(f"AxisRange min ({self.min}) must be below max ({self.max})")

    def contains(self, value_cm: float) -> bool:
        """Inclusive range check."""
        return self.min <= value_cm <= self.max

    def as_dict(self) -> dict:
        return {"min": self.min, "max": self.max, "step": self.step}


@dataclass(frozen=True)
class DeskModelSpec:
    width_cm: AxisRange
    depth_cm: AxisRange
    height_cm: AxisRange
    materials: tuple[str, ...]
    finishes: tuple[str, ...]

    def range_for(self, field: str) -> AxisRange:
        """Look up the range for 'width_cm' | 'depth_cm' | 'height_cm'."""
        if field not in DIMENSION_FIELDS:
            raise ValueError(f"Unknown dimension field: {field}. Expected one of {DIMENSION_FIELDS}")
        return getattr(self, field)

    def as_dict(self) -> dict:
        return {
            "width_cm": self.width_cm.as_dict(),
            "depth_cm": self.depth_cm.as_dict(),
            "height_cm": self.height_cm.as_dict(),
            "materials": list(self.materials),
            "finishes": list(self.finishes),
        }


DESK_MODEL_SPEC = DeskModelSpec(
    width_cm=AxisRange(min=30, max=300, step=1),
    depth_cm=AxisRange(min=30, max=300, step=1),
    height_cm=AxisRange(min=40, max=120, step=1),   # seated through standing height
    materials=tuple(m.value for m in MaterialType),
    finishes=tuple(f.value for f in FinishType),
)
