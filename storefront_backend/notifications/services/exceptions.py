# notifications/services/exceptions.py

from common.errors import ErrorKind, ServiceError


class SmsDeliveryError(ServiceError):
    """Raised when Notify.lk rejects a message or cannot be reached."""

    kind = ErrorKind.UPSTREAM
    default_message = "SMS delivery failed"
