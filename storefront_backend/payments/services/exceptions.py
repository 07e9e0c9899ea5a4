# payments/services/exceptions.py

"""
PAYMENT GATEWAY ERRORS

Notification verification fails closed: the first failing check raises and
nothing is written.
"""

from common.errors import ErrorKind, ServiceError


class PaymentGatewayError(ServiceError):
    """Base exception for PayHere adapter failures."""


class PaymentConfigurationError(PaymentGatewayError):
    """Raised when merchant id / secret are not configured."""

    kind = ErrorKind.UPSTREAM
    default_message = "Payment gateway is not configured"


class CheckoutValidationError(PaymentGatewayError):
    """Raised when a checkout request cannot be signed (e.g. bad amount)."""

    kind = ErrorKind.VALIDATION
    default_message = "Invalid checkout request"


class InvalidMerchantError(PaymentGatewayError):
    kind = ErrorKind.INTEGRITY
    default_message = "Invalid merchant ID"


class InvalidSignatureError(PaymentGatewayError):
    kind = ErrorKind.INTEGRITY
    default_message = "Invalid hash"


class MalformedNotificationError(PaymentGatewayError):
    """Raised when a verified notification carries a non-numeric amount."""

    kind = ErrorKind.VALIDATION
    default_message = "Malformed payment notification"
