"""Tests for inventory-to-catalog matching."""

from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.inventory import InventoryItem
from readykit.services.matching import (
    DEFAULT_MATCHERS,
    STRICT_MATCHERS,
    assign_items,
    find_matching_items,
    match_by_category,
    match_by_name,
    match_by_template,
    normalize_name,
    unassigned_items,
)


def create_test_item(
    item_id: str = "1",
    name: str = "Water",
    category_id: str = "water-beverages",
    quantity: float = 1,
    unit: str = "liters",
    **extra,
) -> InventoryItem:
    """Create an inventory item."""
    return InventoryItem(
        id=item_id,
        name=name,
        category_id=category_id,
        quantity=quantity,
        unit=unit,
        **extra,
    )


def entry(entry_id: str, category: str = "water-beverages", unit: str = "liters") -> RecommendedItemDefinition:
    return RecommendedItemDefinition(id=entry_id, category=category, base_quantity=1, unit=unit)


class TestMatchers:
    """Tests for individual matchers."""

    def test_template_id_matches(self):
        item = create_test_item(product_template_id="bottled-water")
        assert match_by_template(item, entry("bottled-water"))
        assert not match_by_template(item, entry("long-life-milk"))

    def test_item_type_matches(self):
        item = create_test_item(item_type="bottled-water")
        assert match_by_template(item, entry("bottled-water"))

    def test_custom_item_type_never_matches_template(self):
        item = create_test_item(item_type="custom")
        assert not match_by_template(item, entry("custom"))

    def test_name_is_kebab_cased(self):
        item = create_test_item(name="Bottled  Water")
        assert normalize_name(item.name) == "bottled-water"
        assert match_by_name(item, entry("bottled-water"))

    def test_custom_items_never_match_by_name(self):
        item = create_test_item(name="Bottled Water", item_type="custom")
        assert not match_by_name(item, entry("bottled-water"))

    def test_category_fallback_requires_same_unit(self):
        item = create_test_item(name="Spring water jug", unit="liters")
        assert match_by_category(item, entry("bottled-water"))
        assert not match_by_category(item, entry("water-filter", unit="pieces"))

    def test_linked_items_do_not_fall_back_to_category(self):
        item = create_test_item(product_template_id="long-life-milk")
        assert not match_by_category(item, entry("bottled-water"))

    def test_custom_items_fall_back_to_category(self):
        item = create_test_item(name="Juice", item_type="custom")
        assert match_by_category(item, entry("bottled-water"))


class TestAssignItems:
    """Tests for assign_items."""

    def test_every_entry_present(self):
        assignments = assign_items([entry("a"), entry("b")], [])
        assert assignments == {"a": [], "b": []}

    def test_template_beats_category_fallback(self):
        """A linked item goes to its own entry, not the first entry in the category."""
        milk = create_test_item(item_id="m", product_template_id="long-life-milk")
        assignments = assign_items([entry("bottled-water"), entry("long-life-milk")], [milk])
        assert assignments["bottled-water"] == []
        assert assignments["long-life-milk"] == [milk]

    def test_each_item_assigned_once(self):
        """Quantities are never counted twice."""
        jug = create_test_item(item_id="j", name="Water jug")
        entries = [entry("bottled-water"), entry("long-life-milk")]
        assignments = assign_items(entries, [jug])
        total = sum(len(v) for v in assignments.values())
        assert total == 1
        assert assignments["bottled-water"] == [jug]

    def test_strict_matchers_ignore_unlinked_items(self):
        jug = create_test_item(item_id="j", name="Water jug")
        assignments = assign_items([entry("bottled-water")], [jug], STRICT_MATCHERS)
        assert assignments["bottled-water"] == []

    def test_custom_matcher(self):
        """Matchers are plain callables."""
        def by_notes(item, e):
            return item.notes == e.id

        item = create_test_item(item_id="n", notes="bottled-water", item_type="x")
        assignments = assign_items([entry("bottled-water")], [item], [by_notes])
        assert assignments["bottled-water"] == [item]

    def test_unassigned_items(self):
        linked = create_test_item(item_id="1", product_template_id="bottled-water")
        stray = create_test_item(item_id="2", name="Sports drink", item_type="sports-drink")
        assignments = assign_items([entry("bottled-water")], [linked, stray])
        assert unassigned_items([linked, stray], assignments) == [stray]


class TestFindMatchingItems:
    """Tests for find_matching_items."""

    def test_returns_all_hits_for_one_entry(self):
        items = [
            create_test_item(item_id="1", product_template_id="bottled-water"),
            create_test_item(item_id="2", name="bottled water"),
            create_test_item(item_id="3", name="Milk", product_template_id="long-life-milk"),
        ]
        matched = find_matching_items(items, entry("bottled-water"), DEFAULT_MATCHERS)
        assert [i.id for i in matched] == ["1", "2"]
