"""
Item Status

Classifies a single inventory item as ok / warning / critical.
Expiration always takes precedence over quantity. All date math is
calendar-day based so an item expiring today is not yet expired.
"""

from datetime import date, datetime
from typing import Optional

from readykit.config import EngineSettings, resolve_settings
from readykit.models.common import ItemStatus, PreparednessLabel
from readykit.models.inventory import InventoryItem


def days_until_expiration(
    expiration_date: Optional[date],
    never_expires: bool = False,
    today: Optional[date] = None,
) -> Optional[int]:
    """Whole days from today to the expiration date; None if it never expires."""
    if never_expires or expiration_date is None:
        return None
    today = today or date.today()
    # Timestamps compare by calendar day only
    if isinstance(expiration_date, datetime):
        expiration_date = expiration_date.date()
    if isinstance(today, datetime):
        today = today.date()
    return (expiration_date - today).days


def is_expired(
    expiration_date: Optional[date],
    never_expires: bool = False,
    today: Optional[date] = None,
) -> bool:
    """True only when the expiration date is strictly before today."""
    days = days_until_expiration(expiration_date, never_expires, today)
    return days is not None and days < 0


def item_status(
    quantity: float,
    target_quantity: float,
    expiration_date: Optional[date] = None,
    never_expires: bool = False,
    marked_as_enough: bool = False,
    today: Optional[date] = None,
    settings: Optional[EngineSettings] = None,
) -> ItemStatus:
    """
    Get status for an item based on quantity and expiration.

    Precedence:
        1. Expired -> critical
        2. Expiring within the warning window -> warning (even if fully stocked)
        3. Marked as enough -> ok
        4. Nothing left -> critical
        5. Below the low-quantity ratio of the target -> warning
        6. Otherwise ok
    """
    settings = resolve_settings(settings)

    days = days_until_expiration(expiration_date, never_expires, today)
    if days is not None:
        if days < 0:
            return ItemStatus.CRITICAL
        if days <= settings.expiring_soon_days:
            return ItemStatus.WARNING

    if marked_as_enough:
        return ItemStatus.OK

    if quantity == 0:
        return ItemStatus.CRITICAL
    if quantity < target_quantity * settings.low_quantity_warning_ratio:
        return ItemStatus.WARNING

    return ItemStatus.OK


def inventory_item_status(
    item: InventoryItem,
    target_quantity: float,
    today: Optional[date] = None,
    settings: Optional[EngineSettings] = None,
) -> ItemStatus:
    """item_status() for an InventoryItem."""
    return item_status(
        item.quantity,
        target_quantity,
        expiration_date=item.expiration_date,
        never_expires=item.never_expires,
        marked_as_enough=item.marked_as_enough,
        today=today,
        settings=settings,
    )


def status_from_percentage(
    percentage: float,
    settings: Optional[EngineSettings] = None,
) -> ItemStatus:
    """Category band: below 30% critical, below 70% warning, else ok."""
    settings = resolve_settings(settings)
    if percentage < settings.critical_percentage_threshold:
        return ItemStatus.CRITICAL
    if percentage < settings.warning_percentage_threshold:
        return ItemStatus.WARNING
    return ItemStatus.OK


def status_from_score(
    score: float,
    settings: Optional[EngineSettings] = None,
) -> ItemStatus:
    """Dashboard status for a preparedness score."""
    settings = resolve_settings(settings)
    if score >= settings.excellent_score_threshold:
        return ItemStatus.OK
    if score >= settings.good_score_threshold:
        return ItemStatus.WARNING
    return ItemStatus.CRITICAL


def preparedness_label(
    score: float,
    settings: Optional[EngineSettings] = None,
) -> PreparednessLabel:
    settings = resolve_settings(settings)
    if score >= settings.excellent_score_threshold:
        return PreparednessLabel.EXCELLENT
    if score >= settings.good_score_threshold:
        return PreparednessLabel.GOOD
    return PreparednessLabel.NEEDS_WORK
