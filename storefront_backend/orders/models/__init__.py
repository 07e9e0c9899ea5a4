# orders/models/__init__.py

"""
ORDERS MODELS PACKAGE EXPORTS
"""

from .order import Order, PaymentStatus

__all__ = [
    "Order",
    "PaymentStatus",
]
