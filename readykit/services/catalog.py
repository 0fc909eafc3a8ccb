"""
Catalog Validation

Checks raw recommended-item data (as parsed from JSON) before it is handed
to the engine. Accepts either a list of items or a mapping with an "items"
key, with camelCase or snake_case keys.

Errors make an entry unusable; warnings flag data that is loaded anyway.
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Sequence, Union

from pydantic import ValidationError

from readykit.errors import CatalogValidationError
from readykit.models.catalog import CatalogIssue, CatalogValidationResult, RecommendedItemDefinition
from readykit.models.common import StandardCategory

logger = logging.getLogger(__name__)

RawCatalog = Union[Sequence[Any], Mapping[str, Any]]

# Field -> issue code for pydantic validation errors
FIELD_ERROR_CODES = {
    "id": "MISSING_ID",
    "category": "INVALID_CATEGORY",
    "unit": "INVALID_UNIT",
    "base_quantity": "INVALID_QUANTITY",
    "scale_with_people": "INVALID_BOOLEAN",
    "scale_with_days": "INVALID_BOOLEAN",
    "scale_with_pets": "INVALID_BOOLEAN",
    "requires_freezer": "INVALID_BOOLEAN",
    "requires_water_liters": "INVALID_WATER_REQUIREMENT",
}

_VALID_CATEGORIES = {c.value for c in StandardCategory}


# Keys the generic camelCase split gets wrong
_KEY_ALIASES = {
    "i18nKey": "i18n_key",
    "caloriesPer100g": "calories_per_100g",
}


def to_snake_case(key: str) -> str:
    """'baseQuantity' -> 'base_quantity'."""
    if key in _KEY_ALIASES:
        return _KEY_ALIASES[key]
    return re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key).lower()


def _normalize_keys(raw: Mapping[str, Any]) -> Dict[str, Any]:
    return {to_snake_case(str(k)): v for k, v in raw.items()}


def _camel_path(field: str) -> str:
    head, *rest = field.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _raw_items(raw: RawCatalog) -> Sequence[Any]:
    if isinstance(raw, Mapping):
        return raw.get("items") or []
    return raw


def _validate_entry(index: int, raw_item: Any, result: CatalogValidationResult) -> None:
    path = f"items[{index}]"

    if not isinstance(raw_item, Mapping):
        result.errors.append(CatalogIssue(path=path, code="INVALID_ITEM", message="Item must be an object"))
        return

    data = _normalize_keys(raw_item)
    issues: List[CatalogIssue] = []

    category = data.get("category")
    if category not in _VALID_CATEGORIES:
        issues.append(CatalogIssue(
            path=f"{path}.category",
            code="INVALID_CATEGORY",
            message=f"Invalid category: {category}",
        ))

    names = data.get("names") or {}
    has_english = isinstance(names, Mapping) and isinstance(names.get("en"), str) and names["en"].strip()
    if not data.get("i18n_key") and not has_english:
        issues.append(CatalogIssue(
            path=path,
            code="MISSING_NAME",
            message="Item must have either i18nKey or names.en",
        ))

    try:
        entry = RecommendedItemDefinition.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            code = FIELD_ERROR_CODES.get(field, "INVALID_FIELD")
            if code == "INVALID_CATEGORY" and any(i.code == code for i in issues):
                continue
            issues.append(CatalogIssue(
                path=f"{path}.{_camel_path(field)}" if field else path,
                code=code,
                message=error["msg"],
            ))
        entry = None

    if issues:
        result.errors.extend(issues)
        return

    if any(existing.id == entry.id for existing in result.entries):
        result.warnings.append(CatalogIssue(
            path=f"{path}.id",
            code="DUPLICATE_ID",
            message=f"Duplicate item id: {entry.id}",
        ))
        return

    result.entries.append(entry)


def validate_catalog(raw: RawCatalog) -> CatalogValidationResult:
    """
    Validate raw catalog data.

    Args:
        raw: List of item dicts, or a dict with an "items" list

    Returns:
        CatalogValidationResult with the issues found and the usable entries
    """
    result = CatalogValidationResult(valid=True)
    items = _raw_items(raw)

    if not isinstance(items, Sequence) or isinstance(items, (str, bytes)):
        result.errors.append(CatalogIssue(path="items", code="INVALID_ITEMS", message="Items must be an array"))
    elif not items:
        result.errors.append(CatalogIssue(path="items", code="EMPTY_ITEMS", message="Items array must not be empty"))
    else:
        for index, raw_item in enumerate(items):
            _validate_entry(index, raw_item, result)

    result.valid = not result.errors
    if not result.valid:
        logger.warning(f"Catalog validation found {len(result.errors)} errors")
    return result


def load_catalog(raw: RawCatalog, strict: bool = False) -> List[RecommendedItemDefinition]:
    """
    Parse raw catalog data into entries.

    Invalid entries are skipped (and logged) unless strict is set, in which
    case any error raises CatalogValidationError.
    """
    result = validate_catalog(raw)

    if result.errors:
        if strict:
            raise CatalogValidationError(
                f"Catalog has {len(result.errors)} invalid entries",
                errors=[issue.model_dump() for issue in result.errors],
            )
        for issue in result.errors:
            logger.warning(f"Skipping catalog data at {issue.path}: {issue.code} {issue.message}")

    logger.info(f"Loaded {len(result.entries)} catalog entries")
    return result.entries
