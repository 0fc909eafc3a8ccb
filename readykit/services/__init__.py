"""Calculation services for ReadyKit. All functions are pure and stateless."""

from readykit.services.alerts import count_alerts, generate_alerts
from readykit.services.calories import (
    calories_from_weight,
    item_total_calories,
    resolve_calories_per_unit,
    total_calories,
)
from readykit.services.catalog import load_catalog, validate_catalog
from readykit.services.category_status import (
    all_category_statuses,
    category_percentage,
    category_status,
)
from readykit.services.item_status import (
    days_until_expiration,
    inventory_item_status,
    is_expired,
    item_status,
    preparedness_label,
    status_from_percentage,
    status_from_score,
)
from readykit.services.matching import (
    DEFAULT_MATCHERS,
    STRICT_MATCHERS,
    assign_items,
    find_matching_items,
    match_by_category,
    match_by_name,
    match_by_template,
)
from readykit.services.preparedness import (
    category_preparedness,
    preparedness_score,
    preparedness_score_from_statuses,
)
from readykit.services.reporting import (
    get_status_summary,
    shortages_to_dataframe,
    statuses_to_dataframe,
)
from readykit.services.scaling import (
    applicable_entries,
    is_applicable,
    people_equivalent,
    scaled_quantity,
    target_quantity,
)
from readykit.services.shortages import category_shortages
from readykit.services.strategies import (
    CategoryStrategy,
    get_category_strategy,
    register_category_strategy,
)
from readykit.services.water import (
    total_water_needs,
    water_requirements,
)

__all__ = [
    # Scaling
    "people_equivalent",
    "scaled_quantity",
    "target_quantity",
    "is_applicable",
    "applicable_entries",
    # Item status
    "item_status",
    "inventory_item_status",
    "days_until_expiration",
    "is_expired",
    "status_from_percentage",
    "status_from_score",
    "preparedness_label",
    # Matching
    "DEFAULT_MATCHERS",
    "STRICT_MATCHERS",
    "assign_items",
    "find_matching_items",
    "match_by_template",
    "match_by_name",
    "match_by_category",
    # Aggregation
    "category_shortages",
    "category_percentage",
    "category_status",
    "all_category_statuses",
    "CategoryStrategy",
    "get_category_strategy",
    "register_category_strategy",
    # Score
    "preparedness_score",
    "category_preparedness",
    "preparedness_score_from_statuses",
    # Calories / water
    "calories_from_weight",
    "total_calories",
    "item_total_calories",
    "resolve_calories_per_unit",
    "water_requirements",
    "total_water_needs",
    # Alerts
    "generate_alerts",
    "count_alerts",
    # Catalog
    "validate_catalog",
    "load_catalog",
    # Reporting
    "statuses_to_dataframe",
    "shortages_to_dataframe",
    "get_status_summary",
]
