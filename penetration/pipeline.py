"""End-to-end pipeline from SI measurements to a penetration percentage."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from .friction import friction_force, max_penetration_depth, penetration_percentage
from .kinematics import kinetic_energy, total_arm_length, total_mass, velocity
from .validation import ValidationError

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class SIInputRecord:
    """One strike, every field already normalized to SI units."""

    arm_length: float  # m
    handle_to_hammer_head_length: float  # m
    hammer_head_height: float  # m
    travel_time: float  # s
    hammer_weight: float  # kg
    arm_weight: float  # kg
    diameter: float  # m
    nail_length: float  # m
    cone_length: float  # m
    cone_angle_deg: float  # degrees
    material_hardness: float  # Pa
    material_height: float  # m
    nail_friction_coefficient: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SIInputRecord":
        """Build a record from snake_case or camelCase keys (``armLength``)."""

        normalized = {_to_snake_case(key): value for key, value in data.items()}
        names = [f.name for f in fields(cls)]
        for name in names:
            if name not in normalized:
                raise ValidationError(name, None, f'Missing value for "{name}".')
        return cls(**{name: normalized[name] for name in names})

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class PenetrationBreakdown:
    total_arm_length: float
    velocity: float
    total_mass: float
    kinetic_energy: float
    friction_force: float
    max_penetration_depth: float
    penetration_percentage: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def _as_record(data: SIInputRecord | Mapping[str, Any]) -> SIInputRecord:
    if isinstance(data, SIInputRecord):
        return data
    return SIInputRecord.from_mapping(data)


def compute_breakdown(
    data: SIInputRecord | Mapping[str, Any],
    *,
    clamp_tip_radius: bool = False,
) -> PenetrationBreakdown:
    """Run every stage in order and keep each published value.

    Stages run strictly one after another; the first ``ValidationError``
    propagates and nothing downstream of it executes.
    """

    record = _as_record(data)
    arm = total_arm_length(
        record.arm_length,
        record.handle_to_hammer_head_length,
        record.hammer_head_height,
    )
    vel = velocity(arm, record.travel_time)
    mass = total_mass(record.hammer_weight, record.arm_weight)
    energy = kinetic_energy(mass, vel)
    friction = friction_force(
        record.diameter,
        record.material_hardness,
        record.nail_length,
        record.cone_length,
        record.cone_angle_deg,
        record.nail_friction_coefficient,
        clamp_tip_radius=clamp_tip_radius,
    )
    depth = max_penetration_depth(energy, friction)
    percentage = penetration_percentage(depth, record.material_height)
    logger.debug(
        "Computed penetration arm=%s velocity=%s mass=%s energy=%s friction=%s depth=%s percentage=%s",
        arm,
        vel,
        mass,
        energy,
        friction,
        depth,
        percentage,
    )
    return PenetrationBreakdown(
        total_arm_length=arm,
        velocity=vel,
        total_mass=mass,
        kinetic_energy=energy,
        friction_force=friction,
        max_penetration_depth=depth,
        penetration_percentage=percentage,
    )


def compute_penetration_percentage(
    data: SIInputRecord | Mapping[str, Any],
    *,
    clamp_tip_radius: bool = False,
) -> float:
    return compute_breakdown(data, clamp_tip_radius=clamp_tip_radius).penetration_percentage
