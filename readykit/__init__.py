"""
ReadyKit Core Package

Recommendation and status calculations for household emergency supplies:
quantity targets, item and category status, shortages and the preparedness score.
No storage, UI or network dependencies in this package.
"""

__version__ = "1.0.0"

from readykit.config import EngineSettings, get_settings
from readykit.errors import CatalogValidationError, ReadyKitError, StrategyNotFoundError
from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.common import ItemStatus, Unit, UnitSummary
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.models.results import CategoryShortage, CategoryStatusResult, ShortageResult
from readykit.services.category_status import category_status
from readykit.services.item_status import item_status
from readykit.services.preparedness import preparedness_score
from readykit.services.scaling import scaled_quantity
from readykit.services.shortages import category_shortages

__all__ = [
    "EngineSettings",
    "get_settings",
    "ReadyKitError",
    "CatalogValidationError",
    "StrategyNotFoundError",
    "HouseholdConfig",
    "RecommendedItemDefinition",
    "InventoryItem",
    "ItemStatus",
    "Unit",
    "UnitSummary",
    "CategoryShortage",
    "ShortageResult",
    "CategoryStatusResult",
    "scaled_quantity",
    "item_status",
    "category_shortages",
    "category_status",
    "preparedness_score",
]
