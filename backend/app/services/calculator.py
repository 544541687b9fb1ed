"""Entry points the application shell calls to run the penetration pipeline."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

import pydantic

from app.config import Settings, get_settings
from app.models import CalculatorForm, SIPayload
from app.units import normalize_units_to_si
from penetration import (
    PenetrationBreakdown,
    SIInputRecord,
    ValidationError,
    compute_breakdown,
    compute_penetration_percentage,
)

logger = logging.getLogger(__name__)


def _to_record(payload: SIPayload | Mapping[str, Any], settings: Settings) -> SIInputRecord:
    if not isinstance(payload, SIPayload):
        payload = SIPayload.model_validate(payload)
    return payload.to_record(settings.default_friction_coefficient)


def calculate_breakdown(
    payload: SIPayload | Mapping[str, Any],
    settings: Settings | None = None,
) -> PenetrationBreakdown:
    """Run the pipeline and return every stage; errors propagate to the caller."""

    settings = settings or get_settings()
    record = _to_record(payload, settings)
    return compute_breakdown(record, clamp_tip_radius=settings.clamp_cone_tip_radius)


def calculate(payload: SIPayload | Mapping[str, Any], settings: Settings | None = None) -> float:
    """Penetration percentage for an SI payload, or NaN when it cannot be computed.

    The shell shows NaN as "no result", so failures are logged here rather than raised.
    """

    settings = settings or get_settings()
    try:
        record = _to_record(payload, settings)
        result = compute_penetration_percentage(record, clamp_tip_radius=settings.clamp_cone_tip_radius)
    except ValidationError as exc:
        logger.error("Penetration calculation rejected field=%s value=%r: %s", exc.field, exc.value, exc.message)
        return math.nan
    except pydantic.ValidationError as exc:
        logger.error("Malformed penetration payload: %s", exc)
        return math.nan
    logger.info("Penetration calculated percentage=%s", result)
    return result


def calculate_from_form(form: CalculatorForm, settings: Settings | None = None) -> float:
    """Normalize display-unit form values to SI and calculate."""

    record = normalize_units_to_si(form)
    logger.debug("Normalized form to SI %s", record)
    return calculate(record.to_dict(), settings)
