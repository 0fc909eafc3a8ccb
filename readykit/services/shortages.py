"""
Category Shortage Aggregator

For one category: match owned items to the catalog entries, compare against
the household's targets and list what is missing, largest gap first.

Entries whose target is zero for this household (e.g. pet food with no pets)
are left out of the totals entirely. Categories without catalog entries, and
unknown custom categories, yield an empty result rather than an error.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from readykit.config import EngineSettings, resolve_settings
from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.models.results import EntryCalculation, ShortageResult
from readykit.services.matching import DEFAULT_MATCHERS, ItemMatcher, assign_items
from readykit.services.scaling import applicable_entries, people_equivalent
from readykit.services.strategies import CalculationContext, CategoryStrategy, get_category_strategy

logger = logging.getLogger(__name__)


@dataclass
class CategoryAggregation:
    """One aggregation pass over a category, kept for callers that need the details."""
    strategy: CategoryStrategy
    context: CalculationContext
    calculations: List[EntryCalculation]
    result: ShortageResult


def build_context(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
    today: Optional[date] = None,
) -> CalculationContext:
    """Filter the catalog and inventory to one category and assign items to entries."""
    settings = resolve_settings(settings)
    disabled = tuple(disabled_items)

    entries = applicable_entries(catalog, household, disabled, category_id=category_id)
    category_items = [item for item in items if item.category_id == category_id]

    return CalculationContext(
        category_id=category_id,
        items=items,
        category_items=category_items,
        entries=entries,
        catalog=catalog,
        household=household,
        settings=settings,
        people_equivalent=people_equivalent(household, settings),
        disabled_items=disabled,
        matchers=matchers,
        today=today,
        assignments=assign_items(entries, category_items, matchers),
    )


def calculate_entries(
    strategy: CategoryStrategy,
    context: CalculationContext,
    include_zero_targets: bool = False,
) -> List[EntryCalculation]:
    """Needed vs owned for every applicable entry, in catalog order."""
    calculations = []
    for entry in context.entries:
        needed = strategy.needed_quantity(entry, context)
        if needed <= 0 and not include_zero_targets:
            continue

        matched = context.assignments.get(entry.id, [])
        actual, calories = strategy.actual_values(matched, entry, context)
        calculations.append(EntryCalculation(
            entry=entry,
            needed=needed,
            actual=actual,
            matched_items=matched,
            marked_as_enough=any(item.marked_as_enough for item in matched),
            actual_calories=calories,
        ))
    return calculations


def aggregate_category(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
    today: Optional[date] = None,
) -> CategoryAggregation:
    """Run the category's strategy and keep the intermediate values."""
    settings = resolve_settings(settings)
    context = build_context(
        category_id, items, household, catalog,
        disabled_items=disabled_items,
        settings=settings,
        matchers=matchers,
        today=today,
    )
    strategy = get_category_strategy(category_id, settings)
    calculations = calculate_entries(strategy, context)

    if calculations or strategy.aggregates_without_entries:
        result = strategy.aggregate(calculations, context)
    else:
        result = ShortageResult(category_id=category_id)

    logger.debug(
        f"Category '{category_id}' ({strategy.strategy_id}): "
        f"{len(calculations)} entries, {len(result.shortages)} shortages, "
        f"actual={result.total_actual:g} needed={result.total_needed:g}"
    )

    return CategoryAggregation(
        strategy=strategy,
        context=context,
        calculations=calculations,
        result=result,
    )


def category_shortages(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
) -> ShortageResult:
    """
    Owned vs needed totals and the missing items for one category.

    Args:
        category_id: Category to aggregate
        items: Full inventory snapshot (only items in the category are used)
        household: Household to scale targets for
        catalog: Recommended item definitions
        disabled_items: Catalog ids the user switched off
        settings: Engine settings (cached settings when omitted)
        matchers: Matching strategy, in priority order

    Returns:
        ShortageResult with shortages sorted by missing amount, largest first
    """
    return aggregate_category(
        category_id, items, household, catalog,
        disabled_items=disabled_items,
        settings=settings,
        matchers=matchers,
    ).result
