"""
Engine Configuration

Every threshold and weighting factor used by the calculation engine lives here.
Values load from environment variables prefixed with READYKIT_ (or a .env file)
and can be overridden per call with EngineSettings.with_overrides().
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class EngineSettings(BaseSettings):
    """Calculation settings loaded from environment."""

    # Household weighting
    adult_weight: float = Field(default=1.0, ge=0)
    child_weight: float = Field(default=0.75, ge=0, description="Children need 75% of an adult")
    pet_weight: float = Field(default=1.0, ge=0)

    # Catalog base quantities are calibrated for this many days
    reference_duration_days: int = Field(default=3, ge=1)

    # How an entry flagged for both people and pets combines the two factors
    people_pet_combination: Literal["multiply", "add"] = "multiply"

    # Ceil every target (True) or only inherently discrete units (False)
    round_targets_up: bool = True

    # Item status thresholds
    low_quantity_warning_ratio: float = Field(default=0.5, ge=0, le=1)
    expiring_soon_days: int = Field(default=30, ge=0)

    # Category status bands (percent)
    critical_percentage_threshold: float = Field(default=30, ge=0, le=100)
    warning_percentage_threshold: float = Field(default=70, ge=0, le=100)

    # Preparedness score label tiers
    excellent_score_threshold: int = Field(default=80, ge=0, le=100)
    good_score_threshold: int = Field(default=50, ge=0, le=100)

    # Alert thresholds (percent of recommended)
    critically_low_stock_percentage: float = Field(default=25, ge=0, le=100)
    low_stock_percentage: float = Field(default=50, ge=0, le=100)

    # Daily requirements
    daily_calories_per_person: float = Field(default=2000, ge=0)
    daily_water_per_person: float = Field(default=3.0, ge=0, description="Liters")

    # Category / catalog ids with special handling
    food_category_id: str = "food"
    water_category_id: str = "water-beverages"
    communication_category_id: str = "communication-info"
    drinking_water_item_id: str = "bottled-water"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "READYKIT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def with_overrides(self, **overrides) -> "EngineSettings":
        """Return a validated copy with some values replaced."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return EngineSettings.model_validate(data)

    @property
    def children_percentage(self) -> int:
        """Child weight as a whole percentage, as shown in settings screens."""
        return int(round(self.child_weight * 100))


@lru_cache()
def get_settings() -> EngineSettings:
    """Get cached settings instance."""
    return EngineSettings()


def resolve_settings(settings: Optional[EngineSettings] = None) -> EngineSettings:
    """Use the given settings or fall back to the cached environment settings."""
    return settings if settings is not None else get_settings()
