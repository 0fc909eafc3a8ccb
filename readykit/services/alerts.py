"""
Dashboard Alerts

Alerts carry a code and parameters; turning them into text is left to the
presentation layer. Alert ids are stable across calls so a dismissed alert
stays dismissed until the underlying condition changes.
"""

import logging
import math
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from readykit.config import EngineSettings, resolve_settings
from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.common import ItemStatus
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.models.results import Alert, AlertCode
from readykit.services.category_status import aggregation_percentage, category_ids_for
from readykit.services.item_status import days_until_expiration
from readykit.services.shortages import aggregate_category
from readykit.services.water import water_requirements

logger = logging.getLogger(__name__)

_SEVERITY_ORDER = {
    ItemStatus.CRITICAL: 0,
    ItemStatus.WARNING: 1,
    ItemStatus.OK: 2,
}


def expiration_alerts(
    items: Iterable[InventoryItem],
    today: Optional[date] = None,
    settings: Optional[EngineSettings] = None,
) -> List[Alert]:
    """Expired items (critical) and items expiring within the warning window."""
    settings = resolve_settings(settings)
    today = today or date.today()
    alerts = []

    for item in items:
        days = days_until_expiration(item.expiration_date, item.never_expires, today)
        if days is None:
            continue
        if days < 0:
            alerts.append(Alert(
                alert_id=f"expired-{item.id}",
                severity=ItemStatus.CRITICAL,
                code=AlertCode.EXPIRED,
                subject=item.name,
                params={"item_id": item.id, "days": days},
            ))
        elif days <= settings.expiring_soon_days:
            alerts.append(Alert(
                alert_id=f"expiring-soon-{item.id}",
                severity=ItemStatus.WARNING,
                code=AlertCode.EXPIRING_SOON,
                subject=item.name,
                params={"item_id": item.id, "days": days},
            ))

    return alerts


def category_stock_alerts(
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_items: Iterable[str] = (),
    settings: Optional[EngineSettings] = None,
) -> List[Alert]:
    """Out-of-stock, critically low and running-low alerts for tracked catalog categories."""
    settings = resolve_settings(settings)
    disabled = tuple(disabled_items)
    alerts = []

    for category_id in category_ids_for(catalog):
        aggregation = aggregate_category(
            category_id, items, household, catalog,
            disabled_items=disabled,
            settings=settings,
        )
        category_items = aggregation.context.category_items
        if not category_items:
            continue

        percent = aggregation_percentage(aggregation).percentage
        params = {"category_id": category_id, "percent": int(math.floor(percent + 0.5))}

        if sum(item.quantity for item in category_items) == 0:
            alerts.append(Alert(
                alert_id=f"category-out-of-stock-{category_id}",
                severity=ItemStatus.CRITICAL,
                code=AlertCode.OUT_OF_STOCK,
                subject=category_id,
                params={"category_id": category_id},
            ))
        elif percent < settings.critically_low_stock_percentage:
            alerts.append(Alert(
                alert_id=f"category-critically-low-{category_id}",
                severity=ItemStatus.CRITICAL,
                code=AlertCode.CRITICALLY_LOW,
                subject=category_id,
                params=params,
            ))
        elif percent < settings.low_stock_percentage:
            alerts.append(Alert(
                alert_id=f"category-low-stock-{category_id}",
                severity=ItemStatus.WARNING,
                code=AlertCode.RUNNING_LOW,
                subject=category_id,
                params=params,
            ))

    return alerts


def water_shortage_alerts(
    items: Sequence[InventoryItem],
    catalog: Sequence[RecommendedItemDefinition] = (),
    settings: Optional[EngineSettings] = None,
) -> List[Alert]:
    """Warn when stored food needs more preparation water than is stored."""
    result = water_requirements(items, catalog, settings)
    if result.has_enough_water or result.water_shortfall <= 0:
        return []

    # One decimal, rounded up so the shortfall is never understated
    liters = math.ceil(round(result.water_shortfall * 10, 9)) / 10
    return [Alert(
        alert_id="water-shortage-preparation",
        severity=ItemStatus.WARNING,
        code=AlertCode.WATER_SHORTFALL,
        subject=resolve_settings(settings).water_category_id,
        params={"liters": liters},
    )]


def generate_alerts(
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    dismissed_ids: Iterable[str] = (),
    disabled_items: Iterable[str] = (),
    today: Optional[date] = None,
    settings: Optional[EngineSettings] = None,
) -> List[Alert]:
    """
    All dashboard alerts, critical first.

    Args:
        items: Inventory snapshot
        household: Household configuration
        catalog: Recommended item definitions
        dismissed_ids: Alert ids the user dismissed
        disabled_items: Catalog ids the user switched off
        today: Reference date for expiration checks
        settings: Engine settings

    Returns:
        Alerts sorted by severity; order within a severity is preserved
    """
    settings = resolve_settings(settings)
    today = today or date.today()

    alerts = (
        expiration_alerts(items, today, settings)
        + category_stock_alerts(items, household, catalog, disabled_items, settings)
        + water_shortage_alerts(items, catalog, settings)
    )

    dismissed = set(dismissed_ids)
    alerts = [a for a in alerts if a.alert_id not in dismissed]
    alerts.sort(key=lambda a: _SEVERITY_ORDER[a.severity])

    logger.debug(f"Generated {len(alerts)} alerts ({len(dismissed)} dismissed ids)")
    return alerts


def count_alerts(alerts: Iterable[Alert]) -> Dict[str, int]:
    """Alert counts per severity plus a total."""
    counts = {"critical": 0, "warning": 0, "total": 0}
    for alert in alerts:
        if alert.severity.value in counts:
            counts[alert.severity.value] += 1
        counts["total"] += 1
    return counts
