"""
Household Scaling

Turns a catalog entry's base quantity into a target for a specific household.
Base quantities are calibrated for one person-equivalent over the reference
duration (3 days by default).
"""

import logging
import math
from typing import Iterable, List, Optional

from readykit.config import EngineSettings, resolve_settings
from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.common import DISCRETE_UNITS
from readykit.models.household import HouseholdConfig

logger = logging.getLogger(__name__)

# Float noise tolerated before ceiling (e.g. 42.000000000001 -> 42)
_CEIL_PRECISION = 9


def supply_days(household: HouseholdConfig) -> int:
    """Supply duration, never below one day."""
    return max(1, household.supply_duration_days)


def _count(value: int) -> int:
    return max(0, value)


def people_equivalent(
    household: HouseholdConfig,
    settings: Optional[EngineSettings] = None,
) -> float:
    """Weighted head count: adults at full weight, children at a fraction."""
    settings = resolve_settings(settings)
    return (
        _count(household.adults) * settings.adult_weight
        + _count(household.children) * settings.child_weight
    )


def pet_equivalent(
    household: HouseholdConfig,
    settings: Optional[EngineSettings] = None,
) -> float:
    settings = resolve_settings(settings)
    return _count(household.pets) * settings.pet_weight


def scaled_quantity(
    item: RecommendedItemDefinition,
    household: HouseholdConfig,
    settings: Optional[EngineSettings] = None,
) -> float:
    """
    Scale an entry's base quantity to a household, without rounding.

    Args:
        item: The catalog entry
        household: Household to scale for
        settings: Weighting factors and reference duration

    Returns:
        The unrounded target amount in the entry's unit
    """
    settings = resolve_settings(settings)
    quantity = item.base_quantity

    if item.scale_with_people and item.scale_with_pets:
        people = people_equivalent(household, settings)
        pets = pet_equivalent(household, settings)
        if settings.people_pet_combination == "add":
            quantity *= people + pets
        else:
            quantity *= people * pets
    elif item.scale_with_people:
        quantity *= people_equivalent(household, settings)
    elif item.scale_with_pets:
        quantity *= pet_equivalent(household, settings)

    if item.scale_with_days:
        # Multiply before dividing so whole-number results stay exact
        quantity = quantity * supply_days(household) / settings.reference_duration_days

    return quantity


def round_target(
    quantity: float,
    item: RecommendedItemDefinition,
    settings: Optional[EngineSettings] = None,
) -> float:
    """Ceil a scaled amount when the unit is discrete or rounding is enabled."""
    settings = resolve_settings(settings)
    if settings.round_targets_up or item.unit in DISCRETE_UNITS:
        return float(math.ceil(round(quantity, _CEIL_PRECISION)))
    return quantity


def target_quantity(
    item: RecommendedItemDefinition,
    household: HouseholdConfig,
    settings: Optional[EngineSettings] = None,
) -> float:
    """Scaled quantity rounded the way shortages are compared."""
    settings = resolve_settings(settings)
    return round_target(scaled_quantity(item, household, settings), item, settings)


def is_applicable(item: RecommendedItemDefinition, household: HouseholdConfig) -> bool:
    """Freezer-only entries do not apply to households without a freezer."""
    return not (item.requires_freezer and not household.use_freezer)


def applicable_entries(
    catalog: Iterable[RecommendedItemDefinition],
    household: HouseholdConfig,
    disabled_items: Iterable[str] = (),
    category_id: Optional[str] = None,
) -> List[RecommendedItemDefinition]:
    """
    Catalog entries that count for this household, in catalog order.

    Drops freezer-gated entries for freezer-less households, entries the user
    disabled, and (optionally) entries outside one category.
    """
    disabled = set(disabled_items)
    seen = set()
    entries = []
    for entry in catalog:
        # First occurrence of a duplicated id wins
        if entry.id in seen:
            continue
        seen.add(entry.id)
        if category_id is not None and entry.category != category_id:
            continue
        if entry.id in disabled:
            continue
        if not is_applicable(entry, household):
            continue
        entries.append(entry)
    return entries
