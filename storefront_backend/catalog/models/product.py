# catalog/models/product.py

import uuid
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from .category import Category


class Product(models.Model):
    """
    Sellable furniture item.

    DENORMALIZATION (IMPORTANT):
    - Orders copy name/price/colour/image/category at purchase time.
    - Editing or deleting a product never rewrites historical orders.

    CATEGORY REFERENCE:
    - PROTECT: a category with products cannot be deleted
      (the catalog service turns this into a 409).

    JSON shapes:
    - dimensions:     {"width": "220 cm", "height": "85 cm", "length": "95 cm"}
    - features:       ["Solid wood frame", ...]
    - tiered_pricing: [{"label": "...", "price": ...}, ...]
    - colors:         [{"name": "Walnut", "value": "#5d4037"}, ...]
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="products",
    )

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    discount_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[
            MinValueValidator(Decimal("0.00")),
            MaxValueValidator(Decimal("100.00")),
        ],
    )
    rating = models.FloatField(null=True, blank=True)

    image = models.URLField(max_length=500, blank=True, default="")

    dimensions = models.JSONField(default=dict, blank=True)
    features = models.JSONField(default=list, blank=True)
    tiered_pricing = models.JSONField(default=list, blank=True)
    colors = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["category", "created_at"], name="catalog_prod_cat_created_idx"
            ),
        ]

    def __str__(self):
        return f"{self.name} | {self.price}"
