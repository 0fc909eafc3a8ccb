"""
Category Calculation Strategies

Most categories compare owned quantities against scaled targets. A few need
their own rules:

- food: completion is measured in calories
- water-beverages: drinking water comes from the daily water setting and
  preparation water for recommended food is added on top
- communication-info: every device type counts once, regardless of quantity

Strategies are tried in registration order; the default strategy is always
last and accepts any category.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from readykit.config import EngineSettings
from readykit.errors import StrategyNotFoundError
from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.common import UnitSummary
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.models.results import (
    CategoryPercentageResult,
    CategoryShortage,
    EntryCalculation,
    ShortageResult,
)
from readykit.services.calories import item_total_calories, needed_calories, template_calories_per_unit
from readykit.services.matching import DEFAULT_MATCHERS, ItemMatcher, sum_quantity, unassigned_items
from readykit.services.scaling import round_target, target_quantity
from readykit.services.water import drinking_water_needed, preparation_water_needed

logger = logging.getLogger(__name__)


@dataclass
class CalculationContext:
    """Inputs shared by every step of one category aggregation pass."""
    category_id: str
    items: Sequence[InventoryItem]
    category_items: List[InventoryItem]
    entries: List[RecommendedItemDefinition]
    catalog: Sequence[RecommendedItemDefinition]
    household: HouseholdConfig
    settings: EngineSettings
    people_equivalent: float
    disabled_items: Tuple[str, ...] = ()
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS
    today: Optional[date] = None
    assignments: Dict[str, List[InventoryItem]] = field(default_factory=dict)


# ============================================================================
# Shared helpers
# ============================================================================

def build_shortages(results: Sequence[EntryCalculation]) -> List[CategoryShortage]:
    """Shortage records for unmet entries, largest gap first, catalog order on ties."""
    shortages = [
        CategoryShortage(
            item_id=r.entry.id,
            item_name=r.entry.display_name,
            actual=r.actual,
            needed=r.needed,
            unit=r.entry.unit,
            missing=r.missing,
        )
        for r in results
        if r.missing > 0 and not r.marked_as_enough
    ]
    # sorted() is stable, so equal gaps keep catalog order
    return sorted(shortages, key=lambda s: -s.missing)


def summarize_units(results: Sequence[EntryCalculation]) -> UnitSummary:
    units = {r.entry.unit for r in results}
    if not units:
        return UnitSummary.empty()
    if len(units) > 1:
        return UnitSummary.mixed()
    return UnitSummary.homogeneous(units.pop())


def aggregate_standard(
    results: Sequence[EntryCalculation],
    context: CalculationContext,
) -> ShortageResult:
    """Sum owned vs needed across entries and collect shortages."""
    unit_summary = summarize_units(results)
    return ShortageResult(
        category_id=context.category_id,
        shortages=build_shortages(results),
        total_actual=sum(r.actual for r in results),
        total_needed=sum(r.needed for r in results),
        unit_summary=unit_summary,
        entry_count=len(results),
        entries_fulfilled=sum(1 for r in results if r.is_fulfilled),
        weighted_fulfillment=sum(r.fulfillment for r in results),
        track_by_item_type=unit_summary.is_mixed,
    )


def _percent(actual: float, needed: float) -> float:
    if needed <= 0:
        return 100.0
    return min(100.0, actual / needed * 100)


# ============================================================================
# Strategies
# ============================================================================

class CategoryStrategy:
    """
    Default strategy: quantity based, switching to per-entry fulfilment when
    the category mixes units.
    """

    strategy_id = "default"
    # Run aggregate even when no entry produced a calculation
    aggregates_without_entries = False

    def can_handle(self, category_id: str, settings: EngineSettings) -> bool:
        return True

    def needed_quantity(
        self,
        entry: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> float:
        return target_quantity(entry, context.household, context.settings)

    def actual_values(
        self,
        matched: List[InventoryItem],
        entry: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> Tuple[float, Optional[float]]:
        """Owned quantity (and calories, where tracked) for one entry."""
        return sum_quantity(matched), None

    def aggregate(
        self,
        results: Sequence[EntryCalculation],
        context: CalculationContext,
    ) -> ShortageResult:
        return aggregate_standard(results, context)

    def has_enough(self, result: ShortageResult) -> bool:
        if result.entry_count == 0:
            return False
        if result.track_by_item_type:
            return result.entries_fulfilled >= result.entry_count
        if result.total_needed <= 0:
            return True
        return result.total_actual >= result.total_needed

    def percentage(self, result: ShortageResult) -> CategoryPercentageResult:
        """Completion for a category that has catalog entries."""
        if result.track_by_item_type:
            value = _percent(result.weighted_fulfillment, result.entry_count)
            basis = "item_types"
        else:
            value = _percent(result.total_actual, result.total_needed)
            basis = "quantity"
        return CategoryPercentageResult(
            category_id=result.category_id,
            percentage=value,
            has_enough=self.has_enough(result),
            basis=basis,
        )


class FoodCategoryStrategy(CategoryStrategy):
    """Calorie-based completion; quantities still drive the shortage list."""

    strategy_id = "food"
    aggregates_without_entries = True

    def can_handle(self, category_id: str, settings: EngineSettings) -> bool:
        return category_id == settings.food_category_id

    def actual_values(self, matched, entry, context):
        fallback = template_calories_per_unit(entry)
        calories = sum(
            item_total_calories(item, fallback, entry.weight_grams_per_unit) for item in matched
        )
        return sum_quantity(matched), calories

    def aggregate(self, results, context):
        result = aggregate_standard(results, context)

        actual_calories = sum(r.actual_calories or 0.0 for r in results)
        # Food the catalog does not list still feeds the household
        counted_ids = {r.entry.id for r in results}
        counted = {k: v for k, v in context.assignments.items() if k in counted_ids}
        extra = unassigned_items(context.category_items, counted)
        actual_calories += sum(item_total_calories(item) for item in extra)

        needed = needed_calories(
            context.household,
            context.people_equivalent,
            context.settings.daily_calories_per_person,
        )

        result.total_actual_calories = actual_calories
        result.total_needed_calories = needed
        result.missing_calories = max(0.0, needed - actual_calories)
        return result

    def has_enough(self, result: ShortageResult) -> bool:
        needed = result.total_needed_calories or 0.0
        if needed <= 0:
            return False
        return (result.total_actual_calories or 0.0) >= needed

    def percentage(self, result: ShortageResult) -> CategoryPercentageResult:
        return CategoryPercentageResult(
            category_id=result.category_id,
            percentage=_percent(result.total_actual_calories or 0.0, result.total_needed_calories or 0.0),
            has_enough=self.has_enough(result),
            basis="calories",
        )


class WaterCategoryStrategy(CategoryStrategy):
    """Drinking water from the daily setting plus preparation water for food."""

    strategy_id = "water"

    def can_handle(self, category_id: str, settings: EngineSettings) -> bool:
        return category_id == settings.water_category_id

    def _water_split(self, context: CalculationContext) -> Tuple[float, float]:
        drinking = drinking_water_needed(context.household, context.settings)
        preparation = preparation_water_needed(
            context.catalog,
            context.household,
            context.disabled_items,
            context.settings,
        )
        return drinking, preparation

    def needed_quantity(self, entry, context):
        if entry.id != context.settings.drinking_water_item_id:
            return super().needed_quantity(entry, context)
        drinking, preparation = self._water_split(context)
        return round_target(drinking + preparation, entry, context.settings)

    def aggregate(self, results, context):
        result = aggregate_standard(results, context)
        drinking, preparation = self._water_split(context)
        result.drinking_water_needed = drinking
        result.preparation_water_needed = preparation
        return result


class CommunicationCategoryStrategy(CategoryStrategy):
    """Each device type is tracked separately: one radio of each kind."""

    strategy_id = "communication"

    def can_handle(self, category_id: str, settings: EngineSettings) -> bool:
        return category_id == settings.communication_category_id

    def aggregate(self, results, context):
        result = aggregate_standard(results, context)
        result.track_by_item_type = True
        return result

    def percentage(self, result: ShortageResult) -> CategoryPercentageResult:
        return CategoryPercentageResult(
            category_id=result.category_id,
            percentage=_percent(result.entries_fulfilled, result.entry_count),
            has_enough=self.has_enough(result),
            basis="item_types",
        )


# ============================================================================
# Registry
# ============================================================================

_strategies: List[CategoryStrategy] = [
    FoodCategoryStrategy(),
    WaterCategoryStrategy(),
    CommunicationCategoryStrategy(),
    CategoryStrategy(),  # Must be last (accepts everything)
]


def get_category_strategy(category_id: str, settings: EngineSettings) -> CategoryStrategy:
    """First registered strategy that handles the category."""
    for strategy in _strategies:
        if strategy.can_handle(category_id, settings):
            return strategy
    raise StrategyNotFoundError(category_id)


def register_category_strategy(strategy: CategoryStrategy) -> None:
    """Register a custom strategy ahead of the default one."""
    default_index = next(
        (i for i, s in enumerate(_strategies) if s.strategy_id == "default"),
        len(_strategies),
    )
    _strategies.insert(default_index, strategy)
    logger.info(f"Registered category strategy '{strategy.strategy_id}'")


def unregister_category_strategy(strategy_id: str) -> None:
    """Remove a previously registered custom strategy."""
    if strategy_id == "default":
        return
    _strategies[:] = [s for s in _strategies if s.strategy_id != strategy_id]


def registered_strategy_ids() -> List[str]:
    return [s.strategy_id for s in _strategies]
