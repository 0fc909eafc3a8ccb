"""
Preparedness Score

Rolls the whole catalog into one 0-100 household score. Every applicable
catalog entry carries equal weight regardless of its category.
"""

import logging
import math
from typing import Iterable, List, Optional, Sequence

from readykit.config import EngineSettings, resolve_settings
from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.common import ItemStatus
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.models.results import CategoryStatusResult, EntryCalculation
from readykit.services.category_status import category_ids_for
from readykit.services.matching import DEFAULT_MATCHERS, ItemMatcher
from readykit.services.shortages import build_context, calculate_entries
from readykit.services.strategies import get_category_strategy

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def entry_scores(
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
    category_ids: Optional[Sequence[str]] = None,
) -> List[EntryCalculation]:
    """Per-entry calculations for every applicable entry, zero targets included."""
    settings = resolve_settings(settings)
    disabled = tuple(disabled_items)
    if category_ids is None:
        category_ids = category_ids_for(catalog)

    calculations: List[EntryCalculation] = []
    for category_id in category_ids:
        context = build_context(
            category_id, items, household, catalog,
            disabled_items=disabled,
            settings=settings,
            matchers=matchers,
        )
        strategy = get_category_strategy(category_id, settings)
        calculations.extend(calculate_entries(strategy, context, include_zero_targets=True))
    return calculations


def _average_score(calculations: Sequence[EntryCalculation]) -> int:
    if not calculations:
        return 0
    # fulfillment is 1.0 for zero targets, so nothing divides by zero here
    total = sum(min(100.0, calc.fulfillment * 100) for calc in calculations)
    return _round_half_up(total / len(calculations))


def preparedness_score(
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
) -> int:
    """
    Household preparedness score, 0..100.

    Each applicable entry scores min(100, actual / needed * 100); entries
    with nothing needed score 100. The score is the rounded average. An empty
    catalog (after freezer and disabled-item exclusion) scores 0.
    """
    calculations = entry_scores(
        items, household, catalog,
        disabled_items=disabled_items,
        settings=settings,
        matchers=matchers,
    )
    score = _average_score(calculations)
    logger.info(f"Preparedness score {score} over {len(calculations)} catalog entries")
    return score


def category_preparedness(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
) -> int:
    """Same score, restricted to one category's entries."""
    calculations = entry_scores(
        items, household, catalog,
        disabled_items=disabled_items,
        settings=settings,
        matchers=matchers,
        category_ids=[category_id],
    )
    return _average_score(calculations)


def preparedness_score_from_statuses(statuses: Sequence[CategoryStatusResult]) -> int:
    """Share of categories currently ok, as 0..100."""
    if not statuses:
        return 0
    ok = sum(1 for s in statuses if s.status == ItemStatus.OK)
    return _round_half_up(ok / len(statuses) * 100)
