"""Tests for item status classification."""

from datetime import datetime, time, timedelta

from readykit.models.common import ItemStatus, PreparednessLabel
from readykit.models.inventory import InventoryItem
from readykit.services.item_status import (
    days_until_expiration,
    inventory_item_status,
    is_expired,
    item_status,
    preparedness_label,
    status_from_percentage,
    status_from_score,
)


class TestQuantityStatus:
    """Quantity rules when expiration does not apply."""

    def test_empty_is_critical(self, settings):
        assert item_status(0, 10, settings=settings) == ItemStatus.CRITICAL

    def test_below_half_is_warning(self, settings):
        assert item_status(4, 10, settings=settings) == ItemStatus.WARNING

    def test_exactly_half_is_ok(self, settings):
        assert item_status(5, 10, settings=settings) == ItemStatus.OK

    def test_full_is_ok(self, settings):
        assert item_status(10, 10, settings=settings) == ItemStatus.OK

    def test_no_target_with_stock_is_ok(self, settings):
        assert item_status(1, 0, settings=settings) == ItemStatus.OK

    def test_warning_ratio_is_configurable(self, settings):
        strict = settings.with_overrides(low_quantity_warning_ratio=0.8)
        assert item_status(7, 10, settings=strict) == ItemStatus.WARNING


class TestExpirationStatus:
    """Expiration dominates quantity."""

    def test_expired_yesterday_is_critical_even_when_stocked(self, settings, today):
        status = item_status(100, 10, today - timedelta(days=1), today=today, settings=settings)
        assert status == ItemStatus.CRITICAL

    def test_expiring_today_is_not_expired(self, settings, today):
        """Date-only comparison: today is still usable."""
        assert not is_expired(today, today=today)
        status = item_status(100, 10, today, today=today, settings=settings)
        assert status == ItemStatus.WARNING

    def test_expiring_in_twenty_days_is_warning(self, settings, today):
        status = item_status(100, 10, today + timedelta(days=20), today=today, settings=settings)
        assert status == ItemStatus.WARNING

    def test_expiring_in_thirty_days_is_warning(self, settings, today):
        status = item_status(100, 10, today + timedelta(days=30), today=today, settings=settings)
        assert status == ItemStatus.WARNING

    def test_expiring_in_thirty_one_days_is_ok(self, settings, today):
        status = item_status(100, 10, today + timedelta(days=31), today=today, settings=settings)
        assert status == ItemStatus.OK

    def test_never_expires_suppresses_expiration(self, settings, today):
        status = item_status(
            100, 10, today - timedelta(days=400), never_expires=True, today=today, settings=settings
        )
        assert status == ItemStatus.OK

    def test_marked_as_enough_overrides_quantity(self, settings, today):
        assert item_status(0, 10, marked_as_enough=True, today=today, settings=settings) == ItemStatus.OK

    def test_marked_as_enough_does_not_hide_expiration(self, settings, today):
        status = item_status(
            5, 10, today - timedelta(days=2), marked_as_enough=True, today=today, settings=settings
        )
        assert status == ItemStatus.CRITICAL


class TestDaysUntilExpiration:
    """Tests for days_until_expiration."""

    def test_counts_calendar_days(self, today):
        assert days_until_expiration(today + timedelta(days=5), today=today) == 5
        assert days_until_expiration(today - timedelta(days=3), today=today) == -3

    def test_time_of_day_ignored(self, today):
        now = datetime.combine(today, time(hour=23, minute=30))
        expires = datetime.combine(today + timedelta(days=2), time(hour=1))
        assert days_until_expiration(expires, today=now) == 2
        assert days_until_expiration(today + timedelta(days=2), today=now) == 2
        assert not is_expired(datetime.combine(today, time()), today=now)

    def test_none_when_never_expires(self, today):
        assert days_until_expiration(today, never_expires=True, today=today) is None

    def test_none_without_date(self, today):
        assert days_until_expiration(None, today=today) is None
        assert not is_expired(None, today=today)


class TestInventoryItemStatus:
    """Tests for the InventoryItem wrapper."""

    def test_uses_item_fields(self, settings, today):
        item = InventoryItem(
            id="1",
            name="Canned soup",
            category_id="food",
            quantity=2,
            unit="cans",
            expiration_date=today + timedelta(days=365),
        )
        assert inventory_item_status(item, 6, today, settings) == ItemStatus.WARNING
        assert inventory_item_status(item, 4, today, settings) == ItemStatus.OK


class TestStatusBands:
    """Category bands and score tiers."""

    def test_percentage_bands(self, settings):
        assert status_from_percentage(29.9, settings) == ItemStatus.CRITICAL
        assert status_from_percentage(30, settings) == ItemStatus.WARNING
        assert status_from_percentage(69.9, settings) == ItemStatus.WARNING
        assert status_from_percentage(70, settings) == ItemStatus.OK

    def test_score_tiers(self, settings):
        assert status_from_score(80, settings) == ItemStatus.OK
        assert status_from_score(50, settings) == ItemStatus.WARNING
        assert status_from_score(49, settings) == ItemStatus.CRITICAL

    def test_preparedness_labels(self, settings):
        assert preparedness_label(95, settings) == PreparednessLabel.EXCELLENT
        assert preparedness_label(79, settings) == PreparednessLabel.GOOD
        assert preparedness_label(10, settings) == PreparednessLabel.NEEDS_WORK
