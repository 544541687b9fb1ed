"""Display-unit to SI conversion for form values."""

from __future__ import annotations

import math

from app.models import CalculatorForm
from penetration import SIInputRecord


def round_to_3(value: float) -> float:
    # Nearest, halves up. The calculation pipeline truncates instead.
    return math.floor(value * 1000 + 0.5) / 1000


def cm_to_m(value: float) -> float:
    return round_to_3(value / 100)


def mm_to_m(value: float) -> float:
    return round_to_3(value / 1000)


def mpa_to_pa(value: float) -> float:
    return round_to_3(value * 1_000_000)


def normalize_units_to_si(form: CalculatorForm) -> SIInputRecord:
    return SIInputRecord(
        # Arm and hammer
        arm_length=cm_to_m(form.arm_length),
        handle_to_hammer_head_length=cm_to_m(form.handle_to_hammer_head_length),
        hammer_head_height=cm_to_m(form.hammer_head_height),
        travel_time=form.travel_time,
        hammer_weight=form.hammer_weight,
        arm_weight=form.arm_weight,
        # Nail and material
        diameter=mm_to_m(form.diameter),
        nail_length=cm_to_m(form.nail_length),
        cone_length=cm_to_m(form.cone_length),
        cone_angle_deg=form.cone_angle_deg,
        material_hardness=mpa_to_pa(form.material_hardness),
        material_height=cm_to_m(form.material_height),
        nail_friction_coefficient=form.nail_friction_coefficient,
    )
