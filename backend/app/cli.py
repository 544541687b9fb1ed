"""Command line front end: ``nail-calc form.json`` or ``... | nail-calc --si``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

import pydantic

from app.config import get_settings
from app.logging_config import configure_logging
from app.models import CalculatorForm, SIPayload
from app.services.calculator import calculate_breakdown
from app.units import normalize_units_to_si
from penetration import ValidationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nail-calc",
        description="Estimate how much of a nail one hammer strike drives into a material",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="JSON file with the form values (default: stdin)",
    )
    parser.add_argument(
        "--si",
        action="store_true",
        help="Input is already in SI units (m, kg, s, Pa) instead of form units (cm, mm, MPa)",
    )
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Print every intermediate value as JSON instead of just the percentage",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: NAIL_LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    try:
        data = json.load(args.input)
    except json.JSONDecodeError as exc:
        parser.error(f"input is not valid JSON: {exc}")

    try:
        if args.si:
            payload = SIPayload.model_validate(data)
        else:
            payload = SIPayload.model_validate(normalize_units_to_si(CalculatorForm.model_validate(data)).to_dict())
    except pydantic.ValidationError as exc:
        parser.error(str(exc))

    try:
        breakdown = calculate_breakdown(payload, settings)
    except ValidationError as exc:
        logger.error("Calculation failed field=%s value=%r", exc.field, exc.value)
        print(f"error: {exc.message}", file=sys.stderr)
        return 1

    if args.breakdown:
        print(json.dumps(breakdown.to_dict(), indent=2))
    else:
        print(f"{breakdown.penetration_percentage:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
