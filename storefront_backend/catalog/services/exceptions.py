# catalog/services/exceptions.py

"""
CATALOG SERVICE ERRORS

Centralized domain errors for catalog reads/writes.
"""

from common.errors import ErrorKind, ServiceError


class CatalogServiceError(ServiceError):
    """Base exception for all catalog service failures."""


class CatalogValidationError(CatalogServiceError):
    """Raised when a create/update payload is incomplete or invalid."""

    kind = ErrorKind.VALIDATION
    default_message = "Invalid catalog data"


class CatalogNotFoundError(CatalogServiceError):
    """Raised when a product or category id does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class CategoryInUseError(CatalogServiceError):
    """Raised when deleting a category that products still reference."""

    kind = ErrorKind.CONFLICT
    default_message = "Category still has products"
