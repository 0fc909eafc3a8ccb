"""Common types used across the preparedness engine."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel

# ============================================================================
# Status Enums (derived, never stored)
# ============================================================================

class ItemStatus(str, Enum):
    """Adequacy status for an item or a whole category."""
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class PreparednessLabel(str, Enum):
    """Presentation tier for the household score."""
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs_work"


class StandardCategory(str, Enum):
    """Categories shipped with the built-in catalog."""
    WATER_BEVERAGES = "water-beverages"
    FOOD = "food"
    COOKING_HEAT = "cooking-heat"
    LIGHT_POWER = "light-power"
    COMMUNICATION_INFO = "communication-info"
    MEDICAL_HEALTH = "medical-health"
    HYGIENE_SANITATION = "hygiene-sanitation"
    TOOLS_SUPPLIES = "tools-supplies"
    CASH_DOCUMENTS = "cash-documents"


class Unit(str, Enum):
    """Units a catalog entry or inventory item can be counted in."""
    PIECES = "pieces"
    LITERS = "liters"
    KILOGRAMS = "kilograms"
    GRAMS = "grams"
    CANS = "cans"
    BOTTLES = "bottles"
    PACKAGES = "packages"
    JARS = "jars"
    CANISTERS = "canisters"
    BOXES = "boxes"
    DAYS = "days"
    ROLLS = "rolls"
    TUBES = "tubes"
    METERS = "meters"
    PAIRS = "pairs"
    EUROS = "euros"
    SETS = "sets"


# Units that only make sense as whole numbers
DISCRETE_UNITS = frozenset({
    Unit.PIECES, Unit.CANS, Unit.BOTTLES, Unit.PACKAGES, Unit.JARS,
    Unit.CANISTERS, Unit.BOXES, Unit.ROLLS, Unit.TUBES, Unit.PAIRS, Unit.SETS,
})

# itemType used for items the user created without a template
CUSTOM_ITEM_TYPE = "custom"


# ============================================================================
# Common Value Objects
# ============================================================================

class UnitSummary(BaseModel):
    """
    Unit shared by a category's catalog entries.

    kind is "homogeneous" when every entry uses the same unit, "mixed" when
    they differ (quantities cannot be summed meaningfully), and "empty" when
    the category has no catalog entries at all.
    """

    kind: Literal["homogeneous", "mixed", "empty"]
    unit: Optional[Unit] = None

    @classmethod
    def homogeneous(cls, unit: Unit) -> "UnitSummary":
        return cls(kind="homogeneous", unit=unit)

    @classmethod
    def mixed(cls) -> "UnitSummary":
        return cls(kind="mixed")

    @classmethod
    def empty(cls) -> "UnitSummary":
        return cls(kind="empty")

    @property
    def is_mixed(self) -> bool:
        return self.kind == "mixed"
