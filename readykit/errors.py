"""
Engine Exceptions

The calculation functions never raise for bad household or inventory input;
they clamp and log instead. These exceptions cover explicit catalog
validation and programming errors.
"""

from typing import Any, Dict, List, Optional


class ReadyKitError(Exception):
    """Base class for engine errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CatalogValidationError(ReadyKitError):
    """Catalog data failed validation in strict mode."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(
            code="CATALOG_INVALID",
            message=message,
            details={"errors": errors or []},
        )


class StrategyNotFoundError(ReadyKitError):
    """No calculation strategy accepted a category."""

    def __init__(self, category_id: str):
        super().__init__(
            code="STRATEGY_NOT_FOUND",
            message=f"No calculation strategy for category: {category_id}",
            details={"category_id": category_id},
        )
