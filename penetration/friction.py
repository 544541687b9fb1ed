"""Friction resisting the nail and the resulting penetration depth."""

from __future__ import annotations

import math

from .constants import DEFAULT_FRICTION_COEFFICIENT
from .geometry import cone_cross_section_avg, shaft_cross_section_area
from .validation import ValidationError, round3, validate_non_negative, validate_positive_inputs


def friction_force(
    diameter: float,
    material_hardness: float,
    nail_length: float,
    cone_length: float,
    cone_angle_deg: float,
    friction_coefficient: float = DEFAULT_FRICTION_COEFFICIENT,
    *,
    clamp_tip_radius: bool = False,
) -> float:
    """Total friction force (N) on a fully embedded nail.

    The normal force is the material hardness acting over the shaft and the
    cone, each taken as area times length. The shaft length is
    ``nail_length - cone_length`` and is not validated on its own, so a cone
    longer than the nail reduces the shaft contribution below zero.
    """

    validate_non_negative("cone_angle_deg", cone_angle_deg)
    validate_positive_inputs(
        {
            "diameter": diameter,
            "material_hardness": material_hardness,
            "nail_length": nail_length,
            "cone_length": cone_length,
            "friction_coefficient": friction_coefficient,
        }
    )

    shaft_length = nail_length - cone_length
    shaft_area = shaft_cross_section_area(diameter)
    cone_area_avg = cone_cross_section_avg(
        diameter, cone_length, cone_angle_deg, clamp_tip_radius=clamp_tip_radius
    )

    shaft_normal_force = shaft_area * material_hardness * shaft_length
    cone_normal_force = cone_area_avg * material_hardness * cone_length
    total_normal_force = shaft_normal_force + cone_normal_force
    return round3(total_normal_force * friction_coefficient, "friction_force")


def max_penetration_depth(kinetic_energy: float, friction_force: float) -> float:
    """Depth (m) at which friction work equals the strike energy."""

    validate_positive_inputs({"kinetic_energy": kinetic_energy, "friction_force": friction_force})
    depth = kinetic_energy / friction_force
    if not math.isfinite(depth):
        raise ValidationError(
            "friction_force",
            friction_force,
            f'Penetration depth is not finite for friction_force={friction_force}.',
        )
    return round3(depth, "max_penetration_depth")


def penetration_percentage(max_penetration_depth: float, reference_length: float) -> float:
    """Depth as a percentage of ``reference_length``. Not capped at 100."""

    validate_positive_inputs(
        {"max_penetration_depth": max_penetration_depth, "reference_length": reference_length}
    )
    return round3((max_penetration_depth / reference_length) * 100, "penetration_percentage")
