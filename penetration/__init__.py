"""Calculation pipeline estimating how far a single hammer strike drives a nail."""

from .constants import DEFAULT_FRICTION_COEFFICIENT
from .friction import friction_force, max_penetration_depth, penetration_percentage
from .geometry import cone_cross_section_avg, shaft_cross_section_area
from .kinematics import kinetic_energy, total_arm_length, total_mass, velocity
from .pipeline import (
    PenetrationBreakdown,
    SIInputRecord,
    compute_breakdown,
    compute_penetration_percentage,
)
from .validation import ValidationError, round3, validate_non_negative, validate_positive_inputs

__all__ = [
    "DEFAULT_FRICTION_COEFFICIENT",
    "PenetrationBreakdown",
    "SIInputRecord",
    "ValidationError",
    "compute_breakdown",
    "compute_penetration_percentage",
    "cone_cross_section_avg",
    "friction_force",
    "kinetic_energy",
    "max_penetration_depth",
    "penetration_percentage",
    "round3",
    "shaft_cross_section_area",
    "total_arm_length",
    "total_mass",
    "validate_non_negative",
    "validate_positive_inputs",
    "velocity",
]
