# orders/services/exceptions.py

"""
ORDER SERVICE ERRORS
"""

from common.errors import ErrorKind, ServiceError


class OrderServiceError(ServiceError):
    """Base exception for order lifecycle failures."""


class OrderValidationError(OrderServiceError):
    """Raised when an order form is missing required fields."""

    kind = ErrorKind.VALIDATION
    default_message = "Missing required fields"


class OrderNotFoundError(OrderServiceError):
    """Raised when an order id does not exist (or is not a valid id)."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Order not found"
