"""
ORDER PAYMENT LIFECYCLE RULES

Pure rules for applying a gateway payment status to an Order.

DESIGN PRINCIPLES:
- No database writes
- No side effects
- Single source of truth for "what does this status do to the row"
"""

from __future__ import annotations

from decimal import Decimal

from orders.models import Order, PaymentStatus

ZERO = Decimal("0.00")

SETTLED_STATUSES = frozenset(
    {
        PaymentStatus.PAID,
        PaymentStatus.CANCELLED,
        PaymentStatus.FAILED,
        PaymentStatus.CHARGEBACK,
    }
)


def is_stale_pending(*, current: str, incoming: str) -> bool:
    """
    A PENDING delivery arriving after the order settled is out of sequence.
    It must never roll a settled order back.
    """
    return incoming == PaymentStatus.PENDING and current in SETTLED_STATUSES


def is_noop(*, order: Order, incoming: str, amount: Decimal) -> bool:
    """
    Re-delivery of the status the order already carries.
    For PAID the amount must match too; otherwise the paid amount is refreshed.
    """
    if order.payment_status != incoming:
        return False
    if incoming == PaymentStatus.PAID:
        return order.amount_paid == amount
    return order.amount_paid == ZERO and order.payment_date is None


def payment_fields(*, status: str, amount: Decimal, now) -> dict:
    """
    PAID      -> amount_paid = amount, payment_date = now
    otherwise -> amount_paid = 0,      payment_date = None
    """
    if status == PaymentStatus.PAID:
        return {"payment_status": status, "amount_paid": amount, "payment_date": now}
    return {"payment_status": status, "amount_paid": ZERO, "payment_date": None}
