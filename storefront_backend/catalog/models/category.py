# catalog/models/category.py

import uuid

from django.db import models


class Category(models.Model):
    """
    Product grouping.

    The type tag drives storefront segmentation
    (/category/imported-used vs /category/brand-new).
    """

    class Type(models.TextChoices):
        IMPORTED_USED = "IMPORTED_USED", "Imported Used"
        BRAND_NEW = "BRAND_NEW", "Brand New"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    image = models.URLField(max_length=500, blank=True, default="")

    type = models.CharField(
        max_length=32,
        choices=Type.choices,
        default=Type.BRAND_NEW,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return f"{self.name} ({self.get_type_display()})"
