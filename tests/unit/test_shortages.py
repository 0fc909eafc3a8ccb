"""Tests for the category shortage aggregator."""

import pytest

from readykit.models.common import Unit
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.services.shortages import category_shortages


def create_test_item(
    item_id: str,
    category_id: str,
    quantity: float,
    unit: str,
    template: str = None,
    **extra,
) -> InventoryItem:
    """Create an inventory item, optionally linked to a catalog entry."""
    return InventoryItem(
        id=item_id,
        name=extra.pop("name", template or item_id),
        category_id=category_id,
        quantity=quantity,
        unit=unit,
        product_template_id=template,
        **extra,
    )


class TestShortageList:
    """Tests for shortage records and ordering."""

    def test_largest_gap_first(self, catalog, household, settings):
        items = [create_test_item("w1", "water-beverages", 10, "liters", "bottled-water")]
        result = category_shortages("water-beverages", items, household, catalog, settings=settings)

        assert [s.item_id for s in result.shortages] == ["bottled-water", "long-life-milk"]
        assert result.shortages[0].missing == pytest.approx(9)
        assert result.shortages[1].missing == pytest.approx(2)

    def test_never_reports_non_positive_gaps(self, catalog, household, settings):
        items = [
            create_test_item("w1", "water-beverages", 25, "liters", "bottled-water"),
            create_test_item("m1", "water-beverages", 1, "liters", "long-life-milk"),
        ]
        result = category_shortages("water-beverages", items, household, catalog, settings=settings)

        assert [s.item_id for s in result.shortages] == ["long-life-milk"]
        assert all(s.missing > 0 for s in result.shortages)

    def test_ties_keep_catalog_order(self, catalog, household, settings):
        items = [create_test_item("b1", "light-power", 6, "pieces", "batteries")]
        result = category_shortages("light-power", items, household, catalog, settings=settings)

        assert [s.item_id for s in result.shortages] == ["flashlight", "batteries"]
        assert [s.missing for s in result.shortages] == [2, 2]

    def test_marked_as_enough_suppresses_shortage(self, catalog, household, settings):
        items = [
            create_test_item("f1", "light-power", 1, "pieces", "flashlight", marked_as_enough=True),
        ]
        result = category_shortages("light-power", items, household, catalog, settings=settings)

        assert [s.item_id for s in result.shortages] == ["batteries"]
        assert result.total_actual == 1

    def test_shortage_uses_display_name(self, catalog, household, settings):
        result = category_shortages("light-power", [], household, catalog, settings=settings)
        names = {s.item_id: s.item_name for s in result.shortages}
        assert names["flashlight"] == "Flashlight"


class TestTotals:
    """Tests for totals and the unit summary."""

    def test_homogeneous_category(self, catalog, household, settings):
        items = [create_test_item("b1", "light-power", 3, "pieces", "batteries")]
        result = category_shortages("light-power", items, household, catalog, settings=settings)

        assert result.total_actual == 3
        assert result.total_needed == 10
        assert result.unit_summary.kind == "homogeneous"
        assert result.primary_unit == Unit.PIECES

    def test_mixed_units_have_no_primary_unit(self, catalog, household, settings):
        result = category_shortages("medical-health", [], household, catalog, settings=settings)

        assert result.unit_summary.is_mixed
        assert result.primary_unit is None
        assert result.track_by_item_type

    def test_unknown_category_is_empty_not_error(self, catalog, household, settings):
        items = [create_test_item("x", "my-garage", 5, "pieces")]
        result = category_shortages("my-garage", items, household, catalog, settings=settings)

        assert result.shortages == []
        assert result.total_actual == 0
        assert result.total_needed == 0
        assert result.unit_summary.kind == "empty"
        assert not result.has_recommendations

    def test_unlinked_items_count_through_category_fallback(self, catalog, household, settings):
        items = [create_test_item("x", "light-power", 2, "pieces", name="Headlamp")]
        result = category_shortages("light-power", items, household, catalog, settings=settings)

        # Goes to the first entry in catalog order
        assert result.total_actual == 2
        assert [s.item_id for s in result.shortages] == ["batteries"]

    def test_items_in_other_categories_ignored(self, catalog, household, settings):
        items = [create_test_item("f", "tools-supplies", 5, "pieces", "flashlight")]
        result = category_shortages("light-power", items, household, catalog, settings=settings)
        assert result.total_actual == 0

    def test_disabled_entries_excluded(self, catalog, household, settings):
        result = category_shortages(
            "light-power", [], household, catalog, disabled_items=["batteries"], settings=settings
        )
        assert result.total_needed == 2
        assert result.entry_count == 1

    def test_zero_target_entries_skipped(self, catalog, household, settings):
        """Pet food does not count for a household without pets."""
        result = category_shortages("food", [], household, catalog, settings=settings)
        assert "pet-food" not in [s.item_id for s in result.shortages]

        with_pet = HouseholdConfig(adults=2, pets=1)
        result = category_shortages("food", [], with_pet, catalog, settings=settings)
        assert "pet-food" in [s.item_id for s in result.shortages]

    def test_freezer_entries_depend_on_household(self, catalog, household, settings):
        result = category_shortages("food", [], household, catalog, settings=settings)
        assert "frozen-meals" not in [s.item_id for s in result.shortages]

        with_freezer = HouseholdConfig(adults=2, use_freezer=True)
        result = category_shortages("food", [], with_freezer, catalog, settings=settings)
        assert "frozen-meals" in [s.item_id for s in result.shortages]

    def test_duplicate_catalog_ids_counted_once(self, catalog, household, settings):
        items = [create_test_item("f", "light-power", 2, "pieces", "flashlight")]
        doubled = list(catalog) + [e for e in catalog if e.id == "flashlight"]
        result = category_shortages("light-power", items, household, doubled, settings=settings)

        assert result.entry_count == 2
        assert result.total_actual == 2
        assert result == category_shortages("light-power", items, household, catalog, settings=settings)

    def test_idempotent(self, catalog, household, settings):
        items = [create_test_item("w1", "water-beverages", 7.5, "liters", "bottled-water")]
        first = category_shortages("water-beverages", items, household, catalog, settings=settings)
        second = category_shortages("water-beverages", items, household, catalog, settings=settings)
        assert first == second


class TestFoodCategory:
    """Calories for the food category."""

    def test_calorie_totals(self, catalog, household, settings):
        items = [
            create_test_item("s1", "food", 3, "cans", "canned-soup"),
            create_test_item("p1", "food", 0.5, "kilograms", "pasta"),
            create_test_item("e1", "food", 4, "pieces", name="Energy bars", item_type="custom",
                             calories_per_unit=250),
        ]
        result = category_shortages("food", items, household, catalog, settings=settings)

        # 3 x 200 + one 500 g pack at 1750 + 4 x 250 from the uncatalogued bars
        assert result.total_actual_calories == pytest.approx(3350)
        assert result.total_needed_calories == pytest.approx(12000)
        assert result.missing_calories == pytest.approx(8650)

    def test_needed_calories_weight_children(self, catalog, settings):
        household = HouseholdConfig(adults=1, children=2, supply_duration_days=7)
        result = category_shortages("food", [], household, catalog, settings=settings)
        assert result.total_needed_calories == pytest.approx(2.5 * 7 * 2000)

    def test_daily_calories_configurable(self, catalog, household, settings):
        custom = settings.with_overrides(daily_calories_per_person=2500)
        result = category_shortages("food", [], household, catalog, settings=custom)
        assert result.total_needed_calories == pytest.approx(15000)

    def test_calories_computed_without_counted_entries(self, catalog, household, settings):
        """Calorie needs stand even when every food entry is disabled."""
        items = [
            create_test_item("e1", "food", 4, "pieces", name="Energy bars", item_type="custom",
                             calories_per_unit=250),
        ]
        result = category_shortages(
            "food", items, household, catalog,
            disabled_items=["canned-soup", "pasta", "pet-food"],
            settings=settings,
        )

        assert result.entry_count == 0
        assert result.total_actual_calories == pytest.approx(1000)
        assert result.total_needed_calories == pytest.approx(12000)
        assert result.missing_calories == pytest.approx(11000)

    def test_quantity_shortages_still_listed(self, catalog, household, settings):
        items = [create_test_item("s1", "food", 3, "cans", "canned-soup")]
        result = category_shortages("food", items, household, catalog, settings=settings)
        assert [s.item_id for s in result.shortages] == ["canned-soup", "pasta"]
        assert result.shortages[0].missing == 3


class TestWaterCategory:
    """Drinking and preparation water."""

    def test_split_is_additive(self, catalog, household, settings):
        result = category_shortages("water-beverages", [], household, catalog, settings=settings)

        assert result.drinking_water_needed == pytest.approx(18)
        assert result.preparation_water_needed == pytest.approx(1)
        # 18 + 1 for bottled water, 2 for milk
        assert result.total_needed == pytest.approx(21)

    def test_no_preparation_water_when_pasta_disabled(self, catalog, household, settings):
        result = category_shortages(
            "water-beverages", [], household, catalog, disabled_items=["pasta"], settings=settings
        )
        assert result.preparation_water_needed == 0
        assert result.total_needed == pytest.approx(20)

    def test_daily_water_configurable(self, catalog, household, settings):
        custom = settings.with_overrides(daily_water_per_person=4)
        result = category_shortages("water-beverages", [], household, catalog, settings=custom)
        assert result.drinking_water_needed == pytest.approx(24)


class TestCommunicationCategory:
    """Communication devices are tracked by type."""

    def test_tracks_by_item_type(self, catalog, household, settings):
        items = [create_test_item("r1", "communication-info", 3, "pieces", "battery-radio")]
        result = category_shortages("communication-info", items, household, catalog, settings=settings)

        assert result.track_by_item_type
        assert result.entries_fulfilled == 1
        assert result.entry_count == 2
        assert [s.item_id for s in result.shortages] == ["hand-crank-radio"]
