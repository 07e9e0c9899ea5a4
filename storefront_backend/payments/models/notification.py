# payments/models/notification.py

from django.db import models
from django.utils import timezone

from orders.models import PaymentStatus


class PaymentNotification(models.Model):
    """
    Audit row for every PayHere notification that passed verification.

    applied=False means the order row was left untouched (duplicate delivery
    or an out-of-sequence PENDING after settlement).
    """

    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="payment_notifications",
    )
    payment_id = models.CharField(max_length=64, blank=True, default="")
    status_code = models.CharField(max_length=8)
    payment_status = models.CharField(max_length=16, choices=PaymentStatus.choices)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=8, blank=True, default="")
    applied = models.BooleanField(default=False)
    received_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-received_at"]
        indexes = [
            models.Index(fields=["order", "received_at"], name="payments_order_recv_idx"),
        ]

    def __str__(self):
        return f"{self.order_id} | {self.status_code} -> {self.payment_status}"
