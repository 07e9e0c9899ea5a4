# payments/services/notification_service.py

"""
PAYHERE NOTIFICATION HANDLER

verify -> parse -> apply -> audit

Nothing is written unless merchant id and md5sig both check out.
The order update and its audit row commit together.
"""

from __future__ import annotations

import logging

from django.db import transaction

from orders.services import order_service
from orders.services.order_service import PaymentUpdateResult
from payments.models import PaymentNotification
from payments.services.config import PayHereConfig
from payments.services.exceptions import PaymentGatewayError
from payments.services.payhere import (
    PayHereNotification,
    map_status_code,
    parse_amount,
    verify_notification,
)

logger = logging.getLogger(__name__)


def process_notification(
    notification: PayHereNotification, *, config: PayHereConfig | None = None
) -> PaymentUpdateResult:
    try:
        verify_notification(notification, config=config)
    except PaymentGatewayError:
        logger.warning(
            "Rejected PayHere notification",
            extra={
                "order_id": notification.order_id,
                "payment_id": notification.payment_id,
            },
        )
        raise

    amount = parse_amount(notification.payhere_amount)
    status = map_status_code(notification.status_code)

    with transaction.atomic():
        result = order_service.apply_payment_status(
            order_id=notification.order_id, status=status, amount=amount
        )
        PaymentNotification.objects.create(
            order=result.order,
            payment_id=notification.payment_id,
            status_code=notification.status_code,
            payment_status=status,
            amount=result.amount,
            currency=notification.payhere_currency,
            applied=result.applied,
        )

    logger.info(
        "PayHere notification processed",
        extra={
            "order_id": str(result.order.id),
            "payment_id": notification.payment_id,
            "status_code": notification.status_code,
            "applied": result.applied,
        },
    )
    return result
