"""
Household Configuration Model

The household description every recommendation is scaled against.
Invalid values from a half-edited settings form are clamped, never rejected.
"""

import logging
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

logger = logging.getLogger(__name__)

_COUNT_FIELDS = ("adults", "children", "pets")
_DURATION_FIELD = "supply_duration_days"


class HouseholdConfig(BaseModel):
    """Household composition and supply goal."""

    model_config = ConfigDict(validate_assignment=True)

    adults: int = Field(default=2, description="Number of adults")
    children: int = Field(default=0, description="Number of children")
    pets: int = Field(default=0, description="Number of pets")
    supply_duration_days: int = Field(default=3, description="Days of supplies to keep")
    use_freezer: bool = Field(default=False, description="Household keeps a freezer")
    freezer_hold_time_hours: Optional[float] = Field(default=None, ge=0)

    # Notes about values that were clamped while loading
    adjustments: List[str] = Field(default_factory=list, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def clamp_invalid_values(cls, data: Any) -> Any:
        """Clamp negative counts to 0 and the duration to at least 1 day."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        adjustments = list(data.get("adjustments") or [])

        for name in _COUNT_FIELDS + (_DURATION_FIELD,):
            if data.get(name) is None:
                continue
            data[name], note = _clamp(name, data[name])
            if note:
                adjustments.append(note)

        if len(adjustments) > len(data.get("adjustments") or []):
            logger.warning(f"Household input adjusted: {'; '.join(adjustments)}")
            data["adjustments"] = adjustments

        return data

    @field_validator(*_COUNT_FIELDS, _DURATION_FIELD, mode="before")
    @classmethod
    def clamp_assigned_value(cls, value: Any, info: ValidationInfo) -> Any:
        """Same clamping for values assigned after construction."""
        clamped, note = _clamp(info.field_name, value)
        if note:
            logger.warning(f"Household input adjusted: {note}")
        return clamped

    @property
    def total_people(self) -> int:
        return self.adults + self.children

    @property
    def was_adjusted(self) -> bool:
        return bool(self.adjustments)


def _clamp(name: str, value: Any) -> Tuple[int, Optional[str]]:
    """Clamp one field to its floor; returns the value and a note when changed."""
    floor = 1 if name == _DURATION_FIELD else 0
    number = _as_number(value)
    if number is None or number < floor:
        return floor, f"{name} {value!r} clamped to {floor}"
    return int(number), None


def _as_number(value: Any) -> Optional[float]:
    """Parse a count from form input; None for NaN or non-numeric values."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return number
