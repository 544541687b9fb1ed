import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.config import get_settings
from penetration import SIInputRecord


class CamelModel(BaseModel):
    """Accepts both ``armLength`` and ``arm_length`` style keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HammerForm(CamelModel):
    """Arm and hammer section, in display units (cm, s, kg)."""

    arm_length: float = Field(gt=0, le=200, description="cm")
    handle_to_hammer_head_length: float = Field(gt=0, le=50, description="cm")
    hammer_head_height: float = Field(ge=2, le=30, description="cm")
    travel_time: float = Field(gt=0, le=5, description="s")
    hammer_weight: float = Field(gt=0, le=100, description="kg")
    arm_weight: float = Field(gt=0, le=200, description="kg")


class MaterialNailForm(CamelModel):
    """Nail and material section, in display units (mm, cm, deg, MPa)."""

    diameter: float = Field(gt=0, le=50, description="mm")
    nail_length: float = Field(gt=0, le=100, description="cm")
    cone_length: float = Field(gt=0, le=100, description="cm")
    cone_angle_deg: float = Field(ge=0, le=180, description="deg")
    material_hardness: float = Field(gt=0, le=100_000, description="MPa")
    material_height: float = Field(gt=0, le=1000, description="cm")
    nail_friction_coefficient: float = Field(ge=0, le=1)


class CalculatorForm(HammerForm, MaterialNailForm):
    @model_validator(mode="after")
    def check_cone_length(self) -> "CalculatorForm":
        ratio = get_settings().max_cone_length_ratio
        if self.cone_length > ratio * self.nail_length:
            raise ValueError(
                f"cone_length may not exceed {ratio:.0%} of nail_length "
                f"({self.cone_length} > {ratio * self.nail_length:g} cm)"
            )
        return self


class SIPayload(CamelModel):
    """Already-normalized SI values; range checks are left to the calculation pipeline."""

    arm_length: float = Field(description="m")
    handle_to_hammer_head_length: float = Field(description="m")
    hammer_head_height: float = Field(description="m")
    travel_time: float = Field(description="s")
    hammer_weight: float = Field(description="kg")
    arm_weight: float = Field(description="kg")
    diameter: float = Field(description="m")
    nail_length: float = Field(description="m")
    cone_length: float = Field(description="m")
    cone_angle_deg: float = Field(description="deg")
    material_hardness: float = Field(description="Pa")
    material_height: float = Field(description="m")
    nail_friction_coefficient: Optional[float] = None

    def to_record(self, default_friction_coefficient: float) -> SIInputRecord:
        values = self.model_dump()
        if values["nail_friction_coefficient"] is None:
            values["nail_friction_coefficient"] = default_friction_coefficient
        return SIInputRecord(**values)


class PreviewValues(BaseModel):
    total_arm_length: float = Field(description="m")
    velocity: float = Field(description="m/s")
    total_mass: float = Field(description="kg")
    kinetic_energy: float = Field(description="J")
    penetration_percentage: float = math.nan
