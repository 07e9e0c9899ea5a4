import decimal
import uuid

import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("first_name", models.CharField(max_length=120)),
                ("last_name", models.CharField(max_length=120)),
                ("phone", models.CharField(max_length=40)),
                ("order_notes", models.TextField(blank=True, default="")),
                ("address_line1", models.CharField(max_length=255)),
                (
                    "address_line2",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("city", models.CharField(max_length=120)),
                ("province", models.CharField(max_length=120)),
                ("product_id", models.CharField(db_index=True, max_length=64)),
                (
                    "product_name",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                (
                    "product_price",
                    models.DecimalField(
                        decimal_places=2, default=decimal.Decimal("0.00"), max_digits=12
                    ),
                ),
                (
                    "color_value",
                    models.CharField(blank=True, default="", max_length=32),
                ),
                ("color_name", models.CharField(blank=True, default="", max_length=64)),
                (
                    "product_image",
                    models.URLField(blank=True, default="", max_length=500),
                ),
                (
                    "product_category",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                (
                    "quantity",
                    models.PositiveIntegerField(
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "total",
                    models.DecimalField(
                        decimal_places=2, default=decimal.Decimal("0.00"), max_digits=12
                    ),
                ),
                (
                    "payment_method",
                    models.CharField(default="PAYHERE", max_length=32),
                ),
                (
                    "payment_status",
                    models.CharField(
                        choices=[
                            ("PENDING", "Pending"),
                            ("PAID", "Paid"),
                            ("CANCELLED", "Cancelled"),
                            ("FAILED", "Failed"),
                            ("CHARGEBACK", "Chargeback"),
                            ("UNKNOWN", "Unknown"),
                        ],
                        db_index=True,
                        default="PENDING",
                        max_length=16,
                    ),
                ),
                (
                    "amount_paid",
                    models.DecimalField(
                        decimal_places=2, default=decimal.Decimal("0.00"), max_digits=12
                    ),
                ),
                ("payment_date", models.DateTimeField(blank=True, null=True)),
                (
                    "created_at",
                    models.DateTimeField(
                        db_index=True, default=django.utils.timezone.now
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["payment_status", "created_at"],
                        name="orders_status_created_idx",
                    ),
                    models.Index(
                        fields=["first_name", "last_name", "phone"],
                        name="orders_customer_idx",
                    ),
                ],
            },
        ),
    ]
