"""
Calorie Calculations

Calorie helpers for food items. Calories on templates are either given per
unit or derived from the unit weight and kcal per 100 g.
"""

from typing import Iterable, Optional

from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.common import Unit
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.services.scaling import supply_days

CALORIE_BASE_WEIGHT_GRAMS = 100
GRAMS_PER_KILOGRAM = 1000


def calories_from_weight(weight_grams: float, calories_per_100g: float) -> int:
    """Calories in one unit given its weight and kcal per 100 g."""
    return int(round(weight_grams / CALORIE_BASE_WEIGHT_GRAMS * calories_per_100g))


def total_calories(
    quantity: float,
    calories_per_unit: float,
    unit: Optional[Unit] = None,
    weight_grams: Optional[float] = None,
) -> float:
    """
    Calories in a quantity of units.

    When the quantity is counted in kilograms and the weight of one unit is
    known, the kilograms are converted to a number of units first.
    """
    if unit == Unit.KILOGRAMS and weight_grams and weight_grams > 0:
        units = quantity * GRAMS_PER_KILOGRAM / weight_grams
        return units * calories_per_unit
    return quantity * calories_per_unit


def item_total_calories(
    item: InventoryItem,
    fallback_calories_per_unit: Optional[float] = None,
    fallback_weight_grams: Optional[float] = None,
) -> float:
    """Calories of an owned item, using the template's values where the item has none."""
    calories_per_unit = item.calories_per_unit
    if calories_per_unit is None:
        calories_per_unit = fallback_calories_per_unit
    if not calories_per_unit:
        return 0.0
    weight_grams = item.weight_grams or fallback_weight_grams
    return total_calories(item.quantity, calories_per_unit, item.unit, weight_grams)


def template_calories_per_unit(entry: RecommendedItemDefinition) -> Optional[float]:
    """Calories per unit from a template, derived from weight when possible."""
    if entry.weight_grams_per_unit and entry.calories_per_100g:
        return calories_from_weight(entry.weight_grams_per_unit, entry.calories_per_100g)
    return entry.calories_per_unit


def resolve_calories_per_unit(
    user_calories_per_unit: Optional[float],
    user_weight_grams: Optional[float],
    template_calories_per_100g: Optional[float],
    template_calories_per_unit: Optional[float],
) -> Optional[float]:
    """
    Pick calories per unit for a new or edited item.

    Priority: the user's own value, then the user's unit weight with the
    template's kcal/100 g, then the template default.
    """
    if user_calories_per_unit is not None and user_calories_per_unit > 0:
        return user_calories_per_unit
    if user_weight_grams and user_weight_grams > 0 and template_calories_per_100g is not None:
        return calories_from_weight(user_weight_grams, template_calories_per_100g)
    return template_calories_per_unit


def needed_calories(
    household: HouseholdConfig,
    people_equivalent: float,
    daily_calories_per_person: float,
) -> float:
    """Calories the household needs over its whole supply duration."""
    return people_equivalent * supply_days(household) * daily_calories_per_person


def sum_calories(items: Iterable[InventoryItem]) -> float:
    """Calories of items that carry their own calorie value."""
    return sum(item_total_calories(item) for item in items)
