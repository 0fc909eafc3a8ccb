"""Pytest configuration and fixtures."""

from datetime import date
from typing import List

import pytest

from readykit.config import EngineSettings
from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.household import HouseholdConfig


@pytest.fixture
def today() -> date:
    """Fixed reference date for every date-dependent test."""
    return date(2025, 6, 15)


@pytest.fixture
def settings() -> EngineSettings:
    """Default settings, independent of the environment."""
    return EngineSettings(_env_file=None)


@pytest.fixture
def household() -> HouseholdConfig:
    """Two adults, three days, no freezer."""
    return HouseholdConfig(adults=2, children=0, pets=0, supply_duration_days=3)


@pytest.fixture
def catalog() -> List[RecommendedItemDefinition]:
    """A small catalog covering every special-cased category."""
    raw = [
        # Water (homogeneous liters)
        {"id": "bottled-water", "category": "water-beverages", "base_quantity": 9, "unit": "liters",
         "scale_with_people": True, "scale_with_days": True, "names": {"en": "Bottled water"}},
        {"id": "long-life-milk", "category": "water-beverages", "base_quantity": 1, "unit": "liters",
         "scale_with_people": True, "scale_with_days": True, "names": {"en": "Long-life milk"}},
        # Food
        {"id": "canned-soup", "category": "food", "base_quantity": 3, "unit": "cans",
         "scale_with_people": True, "scale_with_days": True, "calories_per_unit": 200,
         "names": {"en": "Canned soup"}},
        {"id": "pasta", "category": "food", "base_quantity": 0.5, "unit": "kilograms",
         "scale_with_people": True, "scale_with_days": True, "weight_grams_per_unit": 500,
         "calories_per_100g": 350, "requires_water_liters": 1.0, "names": {"en": "Pasta"}},
        {"id": "frozen-meals", "category": "food", "base_quantity": 2, "unit": "pieces",
         "scale_with_people": True, "scale_with_days": True, "requires_freezer": True,
         "calories_per_unit": 400, "names": {"en": "Frozen meals"}},
        {"id": "pet-food", "category": "food", "base_quantity": 1, "unit": "kilograms",
         "scale_with_pets": True, "scale_with_days": True, "names": {"en": "Pet food"}},
        # Communication (tracked by item type)
        {"id": "battery-radio", "category": "communication-info", "base_quantity": 1, "unit": "pieces",
         "names": {"en": "Battery radio"}},
        {"id": "hand-crank-radio", "category": "communication-info", "base_quantity": 1, "unit": "pieces",
         "names": {"en": "Hand-crank radio"}},
        # Light (homogeneous pieces)
        {"id": "flashlight", "category": "light-power", "base_quantity": 1, "unit": "pieces",
         "scale_with_people": True, "names": {"en": "Flashlight"}},
        {"id": "batteries", "category": "light-power", "base_quantity": 4, "unit": "pieces",
         "scale_with_people": True, "names": {"en": "Batteries"}},
        # Medical (mixed units)
        {"id": "first-aid-kit", "category": "medical-health", "base_quantity": 1, "unit": "pieces",
         "names": {"en": "First aid kit"}},
        {"id": "disinfectant", "category": "medical-health", "base_quantity": 0.5, "unit": "liters",
         "names": {"en": "Disinfectant"}},
    ]
    return [RecommendedItemDefinition.model_validate(entry) for entry in raw]
