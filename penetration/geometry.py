"""Cross-section areas of the nail shaft and its conical tip."""

from __future__ import annotations

import math

from .constants import DEG_TO_RAD
from .validation import validate_non_negative, validate_positive_inputs


def shaft_cross_section_area(diameter: float) -> float:
    """Area of the cylindrical shaft (m^2). Left unrounded for callers."""

    validate_positive_inputs({"diameter": diameter})
    radius = diameter / 2
    return math.pi * radius ** 2


def cone_tip_radius(
    diameter: float,
    cone_length: float,
    cone_angle_deg: float,
    *,
    clamp_tip_radius: bool = False,
) -> float:
    base_radius = diameter / 2
    half_angle_rad = (cone_angle_deg / 2) * DEG_TO_RAD
    tip_radius = base_radius - cone_length * math.tan(half_angle_rad)
    if clamp_tip_radius:
        return max(tip_radius, 0.0)
    return tip_radius


def cone_cross_section_avg(
    diameter: float,
    cone_length: float,
    cone_angle_deg: float,
    *,
    clamp_tip_radius: bool = False,
) -> float:
    """Average cross-section area (m^2) of the conical tip.

    The cone is approximated by a cylinder whose radius is the mean of the base
    and tip radii. A 0 degree apex angle gives the shaft area exactly. When the
    cone is long enough for ``cone_length * tan(angle / 2)`` to exceed the base
    radius the tip radius goes negative; it is only clamped at zero when
    ``clamp_tip_radius`` is set.
    """

    validate_non_negative("cone_angle_deg", cone_angle_deg)
    validate_positive_inputs({"diameter": diameter, "cone_length": cone_length})

    base_radius = diameter / 2
    tip_radius = cone_tip_radius(
        diameter, cone_length, cone_angle_deg, clamp_tip_radius=clamp_tip_radius
    )
    avg_radius = (base_radius + tip_radius) / 2
    return math.pi * avg_radius ** 2
