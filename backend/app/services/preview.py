"""Live preview of the intermediate values while the form is being filled in."""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from pydantic.alias_generators import to_camel

from app.models import PreviewValues
from penetration.geometry import cone_tip_radius


def _number(values: Mapping[str, Any], key: str, scale: float = 1.0) -> float:
    value = values.get(key, values.get(to_camel(key)))
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        return math.nan
    return value * scale


def compute_preview(values: Optional[Mapping[str, Any]]) -> Optional[PreviewValues]:
    """Unrounded preview from partial display-unit form values (snake_case or camelCase keys).

    Returns None until the arm and hammer fields form a valid swing. The
    percentage stays NaN until the nail and material fields are complete and
    yield a positive friction force. Never raises on incomplete input.
    """

    if not values:
        return None

    arm = _number(values, "arm_length", 0.01)
    handle = _number(values, "handle_to_hammer_head_length", 0.01)
    head_height = _number(values, "hammer_head_height", 0.01)
    travel_time = _number(values, "travel_time")
    hammer_mass = _number(values, "hammer_weight")
    arm_mass = _number(values, "arm_weight")

    if not all(math.isfinite(x) for x in (arm, handle, head_height, travel_time, hammer_mass, arm_mass)):
        return None
    if travel_time <= 0:
        return None

    total_arm_length = arm + handle + head_height / 2
    velocity = total_arm_length / travel_time
    total_mass = hammer_mass + arm_mass
    kinetic_energy = 0.5 * total_mass * velocity * velocity

    diameter = _number(values, "diameter", 0.001)
    nail_length = _number(values, "nail_length", 0.01)
    cone_length = _number(values, "cone_length", 0.01)
    cone_angle_deg = _number(values, "cone_angle_deg")
    hardness = _number(values, "material_hardness", 1_000_000)
    material_height = _number(values, "material_height", 0.01)
    coefficient = _number(values, "nail_friction_coefficient")

    penetration_percentage = math.nan
    nail_fields = (diameter, nail_length, cone_length, cone_angle_deg, hardness, material_height, coefficient)
    if all(math.isfinite(x) for x in nail_fields):
        base_radius = diameter / 2
        avg_radius = (base_radius + cone_tip_radius(diameter, cone_length, cone_angle_deg)) / 2
        shaft_area = math.pi * base_radius * base_radius
        cone_area_avg = math.pi * avg_radius * avg_radius

        # Unlike the pipeline, the preview never lets the shaft length go negative.
        shaft_length = max(0.0, nail_length - cone_length)
        normal_force = shaft_area * hardness * shaft_length + cone_area_avg * hardness * cone_length
        friction = normal_force * coefficient

        if friction > 0 and material_height > 0:
            penetration_percentage = (kinetic_energy / friction) / material_height * 100

    return PreviewValues(
        total_arm_length=total_arm_length,
        velocity=velocity,
        total_mass=total_mass,
        kinetic_energy=kinetic_energy,
        penetration_percentage=penetration_percentage,
    )
