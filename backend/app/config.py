from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from penetration.constants import DEFAULT_FRICTION_COEFFICIENT


class Settings(BaseSettings):
    """Calculator configuration loaded from ``NAIL_*`` environment variables."""

    log_level: str = "INFO"

    # Used when a payload omits the nail friction coefficient
    default_friction_coefficient: float = Field(default=DEFAULT_FRICTION_COEFFICIENT, gt=0)

    # Clamp negative cone tip radii at zero (the earlier formulation)
    clamp_cone_tip_radius: bool = False

    # Form rule: the cone may not be longer than this share of the nail
    max_cone_length_ratio: float = Field(default=0.2, gt=0, le=1)

    model_config = SettingsConfigDict(env_prefix="NAIL_", env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    return Settings()
