# orders/models/order.py

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class PaymentStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    PAID = "PAID", "Paid"
    CANCELLED = "CANCELLED", "Cancelled"
    FAILED = "FAILED", "Failed"
    CHARGEBACK = "CHARGEBACK", "Chargeback"
    UNKNOWN = "UNKNOWN", "Unknown"


class Order(models.Model):
    """
    One customer purchase intent.

    Key rules:
    - Created PENDING at checkout submission.
    - payment_status is mutated only by the PayHere notification handler.
    - amount_paid / payment_date are set only while PAID; any other applied
      status resets them to 0 / NULL.
    - Product fields are a snapshot taken at order time (no FK), so later
      catalog edits never change historical orders.
    """

    DEFAULT_PAYMENT_METHOD = "PAYHERE"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Customer
    first_name = models.CharField(max_length=120)
    last_name = models.CharField(max_length=120)
    phone = models.CharField(max_length=40)
    order_notes = models.TextField(blank=True, default="")

    # Delivery address
    address_line1 = models.CharField(max_length=255)
    address_line2 = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=120)
    province = models.CharField(max_length=120)

    # Product snapshot
    product_id = models.CharField(max_length=64, db_index=True)
    product_name = models.CharField(max_length=255, blank=True, default="")
    product_price = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    color_value = models.CharField(max_length=32, blank=True, default="")
    color_name = models.CharField(max_length=64, blank=True, default="")
    product_image = models.URLField(max_length=500, blank=True, default="")
    product_category = models.CharField(max_length=255, blank=True, default="")

    quantity = models.PositiveIntegerField(
        default=1, validators=[MinValueValidator(1)]
    )
    total = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    # Payment
    payment_method = models.CharField(
        max_length=32, default=DEFAULT_PAYMENT_METHOD
    )
    payment_status = models.CharField(
        max_length=16,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
        db_index=True,
    )
    amount_paid = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    payment_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["payment_status", "created_at"],
                name="orders_status_created_idx",
            ),
            models.Index(
                fields=["first_name", "last_name", "phone"],
                name="orders_customer_idx",
            ),
        ]

    @property
    def customer_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self):
        return f"{self.id} | {self.total} | {self.payment_status}"
