"""
Catalog Data Models

Recommended item definitions ship as static data and are treated as an
immutable input table. The engine never decides what exists in the catalog.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from readykit.models.common import Unit


class RecommendedItemDefinition(BaseModel):
    """A catalog entry: how much of an item a household should keep."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Catalog id, e.g. 'bottled-water'")
    category: str = Field(..., min_length=1, description="Category id the entry belongs to")
    base_quantity: float = Field(..., gt=0, description="Amount for one person-equivalent over the reference duration")
    unit: Unit
    scale_with_people: bool = False
    scale_with_days: bool = False
    scale_with_pets: bool = False
    requires_freezer: bool = False

    # Display
    i18n_key: Optional[str] = None
    names: Dict[str, str] = Field(default_factory=dict, description="Inline localized names")

    # Optional nutrition / power attributes
    default_expiration_months: Optional[int] = Field(default=None, ge=0)
    weight_grams_per_unit: Optional[float] = Field(default=None, gt=0)
    calories_per_100g: Optional[float] = Field(default=None, ge=0)
    calories_per_unit: Optional[float] = Field(default=None, ge=0)
    capacity_mah: Optional[float] = Field(default=None, ge=0)
    capacity_wh: Optional[float] = Field(default=None, ge=0)
    requires_water_liters: Optional[float] = Field(
        default=None,
        gt=0,
        description="Liters of water needed to prepare one unit",
    )

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("id must not be blank")
        return v

    @property
    def display_name(self) -> str:
        """Best available name without translation."""
        if "en" in self.names and self.names["en"].strip():
            return self.names["en"]
        return self.i18n_key or self.id


class CatalogIssue(BaseModel):
    """A single problem found while validating catalog data."""

    path: str
    code: str
    message: str


class CatalogValidationResult(BaseModel):
    """Outcome of validating raw catalog data."""

    valid: bool
    errors: List[CatalogIssue] = Field(default_factory=list)
    warnings: List[CatalogIssue] = Field(default_factory=list)
    entries: List[RecommendedItemDefinition] = Field(
        default_factory=list,
        description="Entries that passed validation, in input order",
    )
