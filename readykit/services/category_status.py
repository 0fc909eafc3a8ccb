"""
Category Status Aggregator

Combines item statuses with the category completion percentage into the
single status shown on a category card.

Rules:
- Baseline from completion: <30% critical, <70% warning, else ok
- Any critical item (expired or empty) forces the category to critical
- An empty category is critical at 0%
"""

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from readykit.config import EngineSettings, resolve_settings
from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.common import ItemStatus
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.models.results import CategoryPercentageResult, CategoryStatusResult
from readykit.services.item_status import inventory_item_status, status_from_percentage
from readykit.services.matching import DEFAULT_MATCHERS, ItemMatcher
from readykit.services.shortages import CategoryAggregation, aggregate_category

logger = logging.getLogger(__name__)


def aggregation_percentage(aggregation: CategoryAggregation) -> CategoryPercentageResult:
    """Completion percentage from an aggregation pass already computed."""
    category_id = aggregation.context.category_id
    if not aggregation.calculations:
        # Nothing recommended here: tracking anything at all counts as covered
        tracked = len(aggregation.context.category_items) > 0
        return CategoryPercentageResult(
            category_id=category_id,
            percentage=100.0 if tracked else 0.0,
            has_enough=tracked,
            basis="tracked_items",
        )
    return aggregation.strategy.percentage(aggregation.result)


def _item_targets(aggregation: CategoryAggregation) -> Dict[int, float]:
    """Target of the entry each item was matched to, keyed by object identity."""
    needed_by_entry = {calc.entry.id: calc.needed for calc in aggregation.calculations}
    targets = {}
    for entry_id, matched in aggregation.context.assignments.items():
        for item in matched:
            targets[id(item)] = needed_by_entry.get(entry_id, 0.0)
    return targets


def category_percentage(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
) -> CategoryPercentageResult:
    """Completion of one category, 0..100."""
    aggregation = aggregate_category(
        category_id, items, household, catalog,
        disabled_items=disabled_items,
        settings=settings,
        matchers=matchers,
    )
    return aggregation_percentage(aggregation)


def category_status(
    category_id: str,
    items: Sequence[InventoryItem],
    completion_percentage: Optional[float] = None,
    household: Optional[HouseholdConfig] = None,
    catalog: Sequence[RecommendedItemDefinition] = (),
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
    today: Optional[date] = None,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
) -> CategoryStatusResult:
    """
    Status card data for one category.

    Args:
        category_id: Category to evaluate
        items: Full inventory snapshot
        completion_percentage: Precomputed completion; computed when omitted
        household: Household to scale targets for (default household when omitted)
        catalog: Recommended item definitions
        disabled_items: Catalog ids the user switched off
        settings: Engine settings
        today: Reference date for expiration checks (captured once per call)
        matchers: Matching strategy, in priority order

    Returns:
        CategoryStatusResult
    """
    settings = resolve_settings(settings)
    household = household or HouseholdConfig()
    today = today or date.today()

    aggregation = aggregate_category(
        category_id, items, household, catalog,
        disabled_items=disabled_items,
        settings=settings,
        matchers=matchers,
        today=today,
    )
    shortage = aggregation.result
    category_items = aggregation.context.category_items
    targets = _item_targets(aggregation)

    counts = {status: 0 for status in ItemStatus}
    for item in category_items:
        status = inventory_item_status(item, targets.get(id(item), 0.0), today, settings)
        counts[status] += 1

    if completion_percentage is None:
        completion_percentage = aggregation_percentage(aggregation).percentage
    completion_percentage = min(100.0, max(0.0, completion_percentage))

    if not category_items:
        status = ItemStatus.CRITICAL
        completion_percentage = 0.0
    elif counts[ItemStatus.CRITICAL] > 0:
        status = ItemStatus.CRITICAL
    else:
        status = status_from_percentage(completion_percentage, settings)

    return CategoryStatusResult(
        category_id=category_id,
        item_count=len(category_items),
        status=status,
        completion_percentage=completion_percentage,
        critical_count=counts[ItemStatus.CRITICAL],
        warning_count=counts[ItemStatus.WARNING],
        ok_count=counts[ItemStatus.OK],
        shortages=shortage.shortages,
        total_actual=shortage.total_actual,
        total_needed=shortage.total_needed,
        unit_summary=shortage.unit_summary,
        has_recommendations=shortage.has_recommendations,
        total_actual_calories=shortage.total_actual_calories,
        total_needed_calories=shortage.total_needed_calories,
        missing_calories=shortage.missing_calories,
        drinking_water_needed=shortage.drinking_water_needed,
        preparation_water_needed=shortage.preparation_water_needed,
    )


def category_ids_for(
    catalog: Iterable[RecommendedItemDefinition],
    items: Iterable[InventoryItem] = (),
) -> List[str]:
    """Catalog categories in catalog order, then any extra categories used by items."""
    seen: Dict[str, None] = {}
    for entry in catalog:
        seen.setdefault(entry.category, None)
    for item in items:
        seen.setdefault(item.category_id, None)
    return list(seen)


def all_category_statuses(
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    category_ids: Optional[Sequence[str]] = None,
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
    today: Optional[date] = None,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
) -> List[CategoryStatusResult]:
    """Status for every category, evaluated against a single reference date."""
    settings = resolve_settings(settings)
    today = today or date.today()
    disabled = tuple(disabled_items)
    if category_ids is None:
        category_ids = category_ids_for(catalog, items)

    statuses = [
        category_status(
            category_id,
            items,
            household=household,
            catalog=catalog,
            disabled_items=disabled,
            settings=settings,
            today=today,
            matchers=matchers,
        )
        for category_id in category_ids
    ]

    critical = sum(1 for s in statuses if s.status == ItemStatus.CRITICAL)
    logger.info(f"Evaluated {len(statuses)} categories ({critical} critical)")
    return statuses
