# catalog/filters.py

"""
Storefront product filters.

- categoryId: products of one category
- type:       IMPORTED_USED | BRAND_NEW (category type segmentation)
"""

import django_filters

from catalog.models import Category, Product


class ProductFilter(django_filters.FilterSet):
    categoryId = django_filters.UUIDFilter(field_name="category_id")
    type = django_filters.ChoiceFilter(
        field_name="category__type", choices=Category.Type.choices
    )

    class Meta:
        model = Product
        fields = ["categoryId", "type"]
