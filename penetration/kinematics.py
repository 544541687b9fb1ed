"""Swing kinematics and the kinetic energy delivered by the hammer."""

from __future__ import annotations

from .validation import round3, validate_positive_inputs


def total_arm_length(
    arm_length: float,
    handle_to_hammer_head_length: float,
    hammer_head_height: float,
) -> float:
    """Effective swing radius (m): arm plus handle plus half the head height."""

    validate_positive_inputs(
        {
            "arm_length": arm_length,
            "handle_to_hammer_head_length": handle_to_hammer_head_length,
            "hammer_head_height": hammer_head_height,
        }
    )
    return round3(arm_length + handle_to_hammer_head_length + hammer_head_height / 2, "total_arm_length")


def velocity(distance: float, time: float) -> float:
    """Average head velocity (m/s) over the swing."""

    validate_positive_inputs({"distance": distance, "time": time})
    return round3(distance / time, "velocity")


def total_mass(hammer_weight: float, arm_weight: float) -> float:
    validate_positive_inputs({"hammer_weight": hammer_weight, "arm_weight": arm_weight})
    return round3(hammer_weight + arm_weight, "total_mass")


def kinetic_energy(total_mass: float, velocity: float) -> float:
    """KE = 1/2 m v^2 (J)."""

    validate_positive_inputs({"total_mass": total_mass, "velocity": velocity})
    return round3(0.5 * total_mass * velocity ** 2, "kinetic_energy")
