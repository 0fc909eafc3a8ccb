"""
Inventory Data Models

Items the household actually owns. Created and edited by the inventory
collaborator; the engine only reads snapshots of them.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from readykit.models.common import CUSTOM_ITEM_TYPE, Unit


class InventoryItem(BaseModel):
    """An owned item."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier")
    name: str = Field(..., description="Name as entered by the user")
    category_id: str
    quantity: float = Field(default=0.0, ge=0)
    unit: Unit = Unit.PIECES

    # Expiration
    never_expires: bool = False
    expiration_date: Optional[date] = None

    # Link to the catalog: template id or "custom"
    item_type: Optional[str] = None
    product_template_id: Optional[str] = None

    # Optional nutrition / power attributes
    weight_grams: Optional[float] = Field(default=None, gt=0, description="Weight of one unit")
    calories_per_unit: Optional[float] = Field(default=None, ge=0)
    requires_water_liters: Optional[float] = Field(default=None, ge=0)
    capacity_mah: Optional[float] = Field(default=None, ge=0)
    capacity_wh: Optional[float] = Field(default=None, ge=0)

    # User says "I have enough of this" regardless of the recommendation
    marked_as_enough: bool = False

    location: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_custom(self) -> bool:
        return self.item_type == CUSTOM_ITEM_TYPE

    @property
    def is_linked(self) -> bool:
        """True when the item was created from a catalog template."""
        return bool(self.product_template_id) or (
            bool(self.item_type) and not self.is_custom
        )

    @property
    def template_ids(self) -> tuple:
        """Catalog ids this item declares itself to be."""
        ids = []
        for value in (self.product_template_id, self.item_type):
            if value and value != CUSTOM_ITEM_TYPE and value not in ids:
                ids.append(value)
        return tuple(ids)
