# orders/services/order_service.py

"""
ORDER LIFECYCLE STORE

Create, read, and payment-status mutation for Orders.

Guarantees:
- create_order persists nothing unless every required field is present.
- apply_payment_status is a single-row update under select_for_update and is
  idempotent under repeated delivery of the same notification.
- Owner SMS notifications are sent only after the transaction commits; SMS
  failures never affect the order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from notifications.services import sms
from orders.models import Order, PaymentStatus
from orders.services.exceptions import OrderNotFoundError, OrderValidationError
from orders.services.payment_lifecycle import is_noop, is_stale_pending, payment_fields

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "phone",
    "address_line1",
    "city",
    "province",
    "product_id",
)

SERVER_OWNED_FIELDS = frozenset({"payment_status", "amount_paid", "payment_date"})


@dataclass(frozen=True)
class PaymentUpdateResult:
    order: Order
    previous_status: str
    applied: bool
    amount: Decimal


def _money(v) -> Decimal:
    if v is None or v == "":
        return Decimal("0.00")
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _lookup(queryset: QuerySet, order_id) -> Order:
    try:
        return queryset.get(pk=order_id)
    except (Order.DoesNotExist, ValidationError, ValueError, TypeError):
        raise OrderNotFoundError()


def create_order(*, data: dict) -> Order:
    """
    data uses model field names (the serializer maps camelCase).

    Payment fields are server authoritative: every new order starts
    PENDING with nothing paid, whatever the client sent.
    """
    missing = [f for f in REQUIRED_FIELDS if not str(data.get(f) or "").strip()]
    if missing:
        raise OrderValidationError(
            details={f: ["This field is required."] for f in missing}
        )

    fields = {k: v for k, v in data.items() if k not in SERVER_OWNED_FIELDS}
    fields["payment_method"] = (
        fields.get("payment_method") or Order.DEFAULT_PAYMENT_METHOD
    )
    fields["total"] = _money(fields.get("total"))
    fields["product_price"] = _money(fields.get("product_price"))

    with transaction.atomic():
        order = Order.objects.create(
            payment_status=PaymentStatus.PENDING,
            amount_paid=Decimal("0.00"),
            payment_date=None,
            **fields,
        )
        transaction.on_commit(lambda: sms.notify_order_placed(order))

    logger.info(
        "Order created",
        extra={"order_id": str(order.id), "total": str(order.total)},
    )
    return order


def list_orders() -> QuerySet:
    """All orders, newest first (no pagination)."""
    return Order.objects.order_by("-created_at")


def get_order(order_id) -> Order:
    return _lookup(Order.objects.all(), order_id)


@transaction.atomic
def apply_payment_status(*, order_id, status: str, amount: Decimal) -> PaymentUpdateResult:
    """
    Apply a verified gateway status to one order.

    - PAID: amount_paid = amount, payment_date = now
    - other statuses: amount_paid = 0, payment_date = NULL
    - same status again (same amount for PAID): row untouched
    - PENDING after a settled status: ignored (out-of-sequence delivery)
    """
    order = _lookup(Order.objects.select_for_update(), order_id)
    previous = order.payment_status
    amount = _money(amount)

    if is_stale_pending(current=previous, incoming=status):
        logger.warning(
            "Ignoring out-of-sequence PENDING notification",
            extra={"order_id": str(order.id), "current_status": previous},
        )
        return PaymentUpdateResult(
            order=order, previous_status=previous, applied=False, amount=amount
        )

    if is_noop(order=order, incoming=status, amount=amount):
        logger.info(
            "Duplicate payment notification ignored",
            extra={"order_id": str(order.id), "status": status},
        )
        return PaymentUpdateResult(
            order=order, previous_status=previous, applied=False, amount=amount
        )

    changes = payment_fields(status=status, amount=amount, now=timezone.now())
    for field, value in changes.items():
        setattr(order, field, value)
    order.save(update_fields=[*changes.keys(), "updated_at"])

    logger.info(
        "Order payment status updated",
        extra={
            "order_id": str(order.id),
            "from_status": previous,
            "to_status": status,
            "amount_paid": str(order.amount_paid),
        },
    )

    if status == PaymentStatus.PAID and previous != PaymentStatus.PAID:
        transaction.on_commit(lambda: sms.notify_payment_received(order))

    return PaymentUpdateResult(
        order=order, previous_status=previous, applied=True, amount=amount
    )
