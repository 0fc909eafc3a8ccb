"""Data models for ReadyKit."""

from readykit.models.catalog import CatalogIssue, CatalogValidationResult, RecommendedItemDefinition
from readykit.models.common import (
    CUSTOM_ITEM_TYPE,
    DISCRETE_UNITS,
    ItemStatus,
    PreparednessLabel,
    StandardCategory,
    Unit,
    UnitSummary,
)
from readykit.models.household import HouseholdConfig
from readykit.models.inventory import InventoryItem
from readykit.models.results import (
    Alert,
    AlertCode,
    CategoryPercentageResult,
    CategoryShortage,
    CategoryStatusResult,
    EntryCalculation,
    ShortageResult,
    WaterNeeds,
    WaterRequirementItem,
    WaterRequirementResult,
)

__all__ = [
    # Common
    "ItemStatus",
    "PreparednessLabel",
    "StandardCategory",
    "Unit",
    "UnitSummary",
    "DISCRETE_UNITS",
    "CUSTOM_ITEM_TYPE",
    # Inputs
    "HouseholdConfig",
    "RecommendedItemDefinition",
    "InventoryItem",
    # Catalog validation
    "CatalogIssue",
    "CatalogValidationResult",
    # Results
    "CategoryShortage",
    "EntryCalculation",
    "ShortageResult",
    "CategoryPercentageResult",
    "CategoryStatusResult",
    "WaterRequirementItem",
    "WaterRequirementResult",
    "WaterNeeds",
    "Alert",
    "AlertCode",
]
