"""
Derived Result Models

Everything in this module is recomputed on every call from the current
snapshot. Nothing here is stored.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from readykit.models.catalog import RecommendedItemDefinition
from readykit.models.common import ItemStatus, Unit, UnitSummary
from readykit.models.inventory import InventoryItem


# ============================================================================
# Shortage Models
# ============================================================================

class CategoryShortage(BaseModel):
    """Positive gap between the target and what is owned for one catalog entry."""

    item_id: str
    item_name: str
    actual: float
    needed: float
    unit: Unit
    missing: float = Field(..., gt=0)


class EntryCalculation(BaseModel):
    """Per-entry working values produced while aggregating a category."""

    entry: RecommendedItemDefinition
    needed: float
    actual: float
    matched_items: List[InventoryItem] = Field(default_factory=list)
    marked_as_enough: bool = False
    actual_calories: Optional[float] = None

    @property
    def missing(self) -> float:
        return max(0.0, self.needed - self.actual)

    @property
    def fulfillment(self) -> float:
        """Fraction of the target covered, 0..1."""
        if self.marked_as_enough or self.needed <= 0:
            return 1.0
        return min(self.actual / self.needed, 1.0)

    @property
    def is_fulfilled(self) -> bool:
        return self.marked_as_enough or self.actual >= self.needed


class ShortageResult(BaseModel):
    """Owned vs needed totals and the shortage list for one category."""

    category_id: str
    shortages: List[CategoryShortage] = Field(default_factory=list)
    total_actual: float = 0.0
    total_needed: float = 0.0
    unit_summary: UnitSummary = Field(default_factory=UnitSummary.empty)

    # Mixed-unit and item-type tracking
    entry_count: int = 0
    entries_fulfilled: int = 0
    weighted_fulfillment: float = 0.0
    track_by_item_type: bool = False

    # Food
    total_actual_calories: Optional[float] = None
    total_needed_calories: Optional[float] = None
    missing_calories: Optional[float] = None

    # Water
    drinking_water_needed: Optional[float] = None
    preparation_water_needed: Optional[float] = None

    @property
    def primary_unit(self) -> Optional[Unit]:
        """Shared unit, or None when the category mixes units or is empty."""
        return self.unit_summary.unit if self.unit_summary.kind == "homogeneous" else None

    @property
    def has_recommendations(self) -> bool:
        return self.entry_count > 0


class CategoryPercentageResult(BaseModel):
    """Completion of one category."""

    category_id: str
    percentage: float = Field(..., ge=0, le=100)
    has_enough: bool
    basis: str = Field(default="quantity", description="quantity, calories, item_types or tracked_items")


# ============================================================================
# Category Status Models
# ============================================================================

class CategoryStatusResult(BaseModel):
    """Everything the dashboard needs to render one category card."""

    category_id: str
    item_count: int
    status: ItemStatus
    completion_percentage: float = Field(..., ge=0, le=100)
    critical_count: int = 0
    warning_count: int = 0
    ok_count: int = 0
    shortages: List[CategoryShortage] = Field(default_factory=list)
    total_actual: float = 0.0
    total_needed: float = 0.0
    unit_summary: UnitSummary = Field(default_factory=UnitSummary.empty)
    has_recommendations: bool = False

    total_actual_calories: Optional[float] = None
    total_needed_calories: Optional[float] = None
    missing_calories: Optional[float] = None

    drinking_water_needed: Optional[float] = None
    preparation_water_needed: Optional[float] = None

    @property
    def primary_unit(self) -> Optional[Unit]:
        return self.unit_summary.unit if self.unit_summary.kind == "homogeneous" else None


# ============================================================================
# Water Models
# ============================================================================

class WaterRequirementItem(BaseModel):
    """Water one stored item needs for preparation."""

    item_id: str
    item_name: str
    quantity: float
    water_per_unit: float
    total_water_required: float


class WaterRequirementResult(BaseModel):
    """Preparation water needed by stored food vs water in storage."""

    total_water_required: float = 0.0
    total_water_available: float = 0.0
    has_enough_water: bool = True
    water_shortfall: float = 0.0
    items_requiring_water: List[WaterRequirementItem] = Field(default_factory=list)


class WaterNeeds(BaseModel):
    """Drinking plus preparation water for a household."""

    drinking_water: float
    preparation_water: float
    total_water: float


# ============================================================================
# Alert Models
# ============================================================================

class AlertCode(str, Enum):
    """Why an alert was raised. Text is produced by the presentation layer."""
    EXPIRED = "EXPIRED"
    EXPIRING_SOON = "EXPIRING_SOON"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    CRITICALLY_LOW = "CRITICALLY_LOW"
    RUNNING_LOW = "RUNNING_LOW"
    WATER_SHORTFALL = "WATER_SHORTFALL"


class Alert(BaseModel):
    """A dashboard alert."""

    alert_id: str = Field(..., description="Stable id, used to remember dismissals")
    severity: ItemStatus
    code: AlertCode
    subject: str = Field(..., description="Item name or category id the alert is about")
    params: Dict[str, Any] = Field(default_factory=dict)
