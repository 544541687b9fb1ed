from __future__ import annotations

from pathlib import Path
import sys

import pytest

# Ensure the backend root and the repository root are importable even when pytest runs elsewhere
BACKEND_ROOT = Path(__file__).resolve().parents[1]
REPO_ROOT = BACKEND_ROOT.parent
for path in (BACKEND_ROOT, REPO_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from app.config import Settings, get_settings


@pytest.fixture()
def form_values() -> dict[str, float]:
    """Display-unit form values (cm, mm, MPa) as the shell submits them."""

    return {
        "armLength": 60,
        "handleToHammerHeadLength": 20,
        "hammerHeadHeight": 4,
        "travelTime": 0.3,
        "hammerWeight": 1.2,
        "armWeight": 4,
        "diameter": 4,
        "nailLength": 12,
        "coneLength": 2,
        "coneAngleDeg": 30,
        "materialHardness": 200,
        "materialHeight": 5,
        "nailFrictionCoefficient": 0.4,
    }


@pytest.fixture()
def si_payload() -> dict[str, float]:
    return {
        "armLength": 0.6,
        "handleToHammerHeadLength": 0.2,
        "hammerHeadHeight": 0.04,
        "travelTime": 0.3,
        "hammerWeight": 1.2,
        "armWeight": 4,
        "diameter": 0.004,
        "nailLength": 0.12,
        "coneLength": 0.02,
        "coneAngleDeg": 30,
        "materialHardness": 200_000_000,
        "materialHeight": 0.05,
        "nailFrictionCoefficient": 0.4,
    }


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _reset_settings_cache(monkeypatch):
    for name in ("NAIL_LOG_LEVEL", "NAIL_DEFAULT_FRICTION_COEFFICIENT", "NAIL_CLAMP_CONE_TIP_RADIUS", "NAIL_MAX_CONE_LENGTH_RATIO"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
