"""
Water Requirements

Drinking water for the household plus water needed to prepare dry food
(freeze-dried meals, pasta, rice).
"""

import logging
from typing import Iterable, List, Optional, Sequence

from readykit.config import EngineSettings, resolve_settings
from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.common import Unit
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.models.results import WaterNeeds, WaterRequirementItem, WaterRequirementResult
from readykit.services.matching import normalize_name
from readykit.services.scaling import applicable_entries, people_equivalent, supply_days, target_quantity

logger = logging.getLogger(__name__)


def water_requirement_per_unit(
    item: InventoryItem,
    catalog: Sequence[RecommendedItemDefinition] = (),
) -> float:
    """
    Liters needed to prepare one unit of an owned item.

    The item's own value wins; otherwise the template is looked up by
    product_template_id and then by item_type.
    """
    if item.requires_water_liters is not None and item.requires_water_liters > 0:
        return item.requires_water_liters

    by_id = {entry.id: entry for entry in catalog}
    candidates = []
    if item.product_template_id:
        candidates.append(item.product_template_id)
    if item.item_type:
        candidates.append(normalize_name(item.item_type))

    for template_id in candidates:
        entry = by_id.get(template_id)
        if entry is not None and entry.requires_water_liters:
            return entry.requires_water_liters

    return 0.0


def total_water_required(
    items: Iterable[InventoryItem],
    catalog: Sequence[RecommendedItemDefinition] = (),
) -> float:
    """Liters needed to prepare everything in storage."""
    return sum(water_requirement_per_unit(item, catalog) * item.quantity for item in items)


def total_water_available(
    items: Iterable[InventoryItem],
    settings: Optional[EngineSettings] = None,
) -> float:
    """Liters of stored drinking water in the water category."""
    settings = resolve_settings(settings)
    total = 0.0
    for item in items:
        if item.category_id != settings.water_category_id or item.unit != Unit.LITERS:
            continue
        is_water = (
            item.product_template_id == settings.drinking_water_item_id
            or "water" in (item.item_type or "").lower()
            or "water" in item.name.lower()
        )
        if is_water:
            total += item.quantity
    return total


def water_requirements(
    items: Sequence[InventoryItem],
    catalog: Sequence[RecommendedItemDefinition] = (),
    settings: Optional[EngineSettings] = None,
) -> WaterRequirementResult:
    """Compare the water needed to prepare stored food with the water in storage."""
    requiring: List[WaterRequirementItem] = []
    for item in items:
        per_unit = water_requirement_per_unit(item, catalog)
        if per_unit > 0 and item.quantity > 0:
            requiring.append(WaterRequirementItem(
                item_id=item.id,
                item_name=item.name,
                quantity=item.quantity,
                water_per_unit=per_unit,
                total_water_required=per_unit * item.quantity,
            ))

    required = sum(r.total_water_required for r in requiring)
    available = total_water_available(items, settings)

    return WaterRequirementResult(
        total_water_required=required,
        total_water_available=available,
        has_enough_water=available >= required,
        water_shortfall=max(0.0, required - available),
        items_requiring_water=requiring,
    )


def drinking_water_needed(
    household: HouseholdConfig,
    settings: Optional[EngineSettings] = None,
) -> float:
    """Daily water x person-equivalents x days."""
    settings = resolve_settings(settings)
    return (
        settings.daily_water_per_person
        * people_equivalent(household, settings)
        * supply_days(household)
    )


def preparation_water_needed(
    catalog: Sequence[RecommendedItemDefinition],
    household: HouseholdConfig,
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
) -> float:
    """Water to prepare the recommended amounts of food that need reconstituting."""
    settings = resolve_settings(settings)
    entries = applicable_entries(
        catalog,
        household,
        disabled_items,
        category_id=settings.food_category_id,
    )
    return sum(
        entry.requires_water_liters * target_quantity(entry, household, settings)
        for entry in entries
        if entry.requires_water_liters
    )


def total_water_needs(
    catalog: Sequence[RecommendedItemDefinition],
    household: HouseholdConfig,
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
) -> WaterNeeds:
    """Drinking and preparation water for a household."""
    drinking = drinking_water_needed(household, settings)
    preparation = preparation_water_needed(catalog, household, disabled_items, settings)
    return WaterNeeds(
        drinking_water=drinking,
        preparation_water=preparation,
        total_water=drinking + preparation,
    )
