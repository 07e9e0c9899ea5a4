from .notification import PaymentNotification

__all__ = ["PaymentNotification"]
