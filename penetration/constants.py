"""Shared constants for the nail penetration calculator."""

from __future__ import annotations

import math

# Steel nail on timber, used when the caller does not supply a coefficient.
DEFAULT_FRICTION_COEFFICIENT = 0.4

# Published values are truncated (not rounded) to this many decimals.
ROUND_DECIMALS = 3
ROUND_FACTOR = 10 ** ROUND_DECIMALS

DEG_TO_RAD = math.pi / 180.0
