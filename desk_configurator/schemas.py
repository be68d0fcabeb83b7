from pydantic import BaseModel, Field
from typing import Optional, List, Literal, Union
from .desk_spec import MaterialType, FinishType, TierType

InvalidField = Optional[Literal["width_cm", "depth_cm", "height_cm"]]

# Largest accepted magnitudes. Snapping multiplies meters by 100 and pricing
# multiplies three cm values together; both must stay finite floats.
MAX_METERS = 1e300
MAX_CM = 1e100


# --- Dimension snapping ---

class DimensionsMeters(BaseModel):
    width: float = Field(ge=0, le=MAX_METERS, allow_inf_nan=False)
    depth: float = Field(ge=0, le=MAX_METERS, allow_inf_nan=False)
    height: float = Field(ge=0, le=MAX_METERS, allow_inf_nan=False)


class DimensionsCm(BaseModel):
    width_cm: int
    depth_cm: int
    height_cm: int


class SnapValidateResult(BaseModel):
    snapped_meters: DimensionsMeters
    snapped_cm: DimensionsCm
    invalid_field: InvalidField = None


# --- Standard pricing ---

class PriceRequest(BaseModel):
    width_cm: float = Field(gt=0, le=MAX_CM, allow_inf_nan=False)
    depth_cm: float = Field(gt=0, le=MAX_CM, allow_inf_nan=False)
    height_cm: float = Field(gt=0, le=MAX_CM, allow_inf_nan=False)
    material: MaterialType
    finish: FinishType
    tier: TierType
    quantity: int = Field(ge=1)

    class Config:
        use_enum_values = True


class PriceComponents(BaseModel):
    base: Union[int, float]
    size: int
    material: float
    finish: float
    tier: float


class PriceResponse(BaseModel):
    volume_m3: float
    components: PriceComponents
    unit_price: int
    quantity: int
    line_total: int
    currency: Literal["KRW"] = "KRW"


# --- API request bodies ---

class PriceCalculationBody(PriceRequest):
    use_cache: bool = True


class BatchPriceCalculationBody(BaseModel):
    calculations: List[PriceCalculationBody] = Field(min_length=1)
    use_cache: bool = True


class QuoteFromSceneBody(BaseModel):
    """Raw scene measurements plus the selected options."""
    dimensions: DimensionsMeters
    material: MaterialType
    finish: FinishType
    tier: TierType
    quantity: int = Field(default=1, ge=1)

    class Config:
        use_enum_values = True


# --- Configurator catalog ---

class MaterialRecord(BaseModel):
    """Material row as stored by the catalog backend. Missing is_active means active."""
    id: str
    name: Optional[str] = None
    is_active: Optional[bool] = True

    class Config:
        extra = "allow"
