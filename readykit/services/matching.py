"""
Item Matching

Decides which owned items count toward which catalog entry.

Matching is a soft heuristic, not a foreign key, so it is spelled out as an
ordered list of matcher functions. Each inventory item is assigned to at most
one entry: the first matcher that accepts the item wins, and within a matcher
the first entry in catalog order wins. That keeps quantities from being
counted twice. Cost is O(entries x items) per category.
"""

import logging
import re
from typing import Callable, Dict, Iterable, List, Sequence

from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.inventory import InventoryItem

logger = logging.getLogger(__name__)

ItemMatcher = Callable[[InventoryItem, RecommendedItemDefinition], bool]


def normalize_name(text: str) -> str:
    """Lowercase and kebab-case a name so 'Bottled  Water' == 'bottled-water'."""
    text = " ".join(text.lower().split())
    return re.sub(r"\s+", "-", text)


def match_by_template(item: InventoryItem, entry: RecommendedItemDefinition) -> bool:
    """Item was created from this entry's template (productTemplateId or itemType)."""
    return entry.id in item.template_ids


def match_by_name(item: InventoryItem, entry: RecommendedItemDefinition) -> bool:
    """Manually entered item whose name spells the entry id. Never for custom items."""
    if item.is_custom:
        return False
    return normalize_name(item.name) == entry.id.lower()


def match_by_category(item: InventoryItem, entry: RecommendedItemDefinition) -> bool:
    """Unlinked or custom item in the entry's category, counted in the same unit."""
    if item.is_linked:
        return False
    return item.category_id == entry.category and item.unit == entry.unit


DEFAULT_MATCHERS: Sequence[ItemMatcher] = (
    match_by_template,
    match_by_name,
    match_by_category,
)

STRICT_MATCHERS: Sequence[ItemMatcher] = (match_by_template,)


def assign_items(
    entries: Sequence[RecommendedItemDefinition],
    items: Iterable[InventoryItem],
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
) -> Dict[str, List[InventoryItem]]:
    """
    Assign inventory items to catalog entries.

    Args:
        entries: Catalog entries, in catalog order
        items: Inventory snapshot (not modified)
        matchers: Matchers in priority order

    Returns:
        entry id -> items counted toward it (every entry id present)
    """
    assignments: Dict[str, List[InventoryItem]] = {entry.id: [] for entry in entries}
    if not entries:
        return assignments

    for item in items:
        for matcher in matchers:
            entry = next((e for e in entries if matcher(item, e)), None)
            if entry is not None:
                assignments[entry.id].append(item)
                break

    return assignments


def find_matching_items(
    items: Iterable[InventoryItem],
    entry: RecommendedItemDefinition,
    matchers: Sequence[ItemMatcher] = DEFAULT_MATCHERS,
) -> List[InventoryItem]:
    """Items any matcher accepts for a single entry, ignoring other entries."""
    return [item for item in items if any(m(item, entry) for m in matchers)]


def unassigned_items(
    items: Iterable[InventoryItem],
    assignments: Dict[str, List[InventoryItem]],
) -> List[InventoryItem]:
    """Items that no entry claimed, in input order."""
    claimed = {id(item) for matched in assignments.values() for item in matched}
    return [item for item in items if id(item) not in claimed]


def sum_quantity(items: Iterable[InventoryItem]) -> float:
    return sum(item.quantity for item in items)
