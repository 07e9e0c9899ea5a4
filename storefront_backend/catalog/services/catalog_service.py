# catalog/services/catalog_service.py

"""
CATALOG QUERY LAYER

Read/write access to Category and Product.

Rules:
- Views validate payload shape (serializers); this module owns persistence.
- Unknown or malformed ids are NOT_FOUND (never a 500).
- Category deletion is blocked while products reference it (PROTECT -> 409).
- No cross-entity transactions beyond single-row atomicity.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count, Prefetch, ProtectedError, QuerySet

from catalog.models import Category, Product
from catalog.services.exceptions import CatalogNotFoundError, CategoryInUseError

logger = logging.getLogger(__name__)

SIMILAR_DEFAULT_LIMIT = 4
SIMILAR_MAX_LIMIT = 24


def _get_or_not_found(queryset: QuerySet, pk, *, label: str):
    try:
        return queryset.get(pk=pk)
    except (queryset.model.DoesNotExist, ValidationError, ValueError, TypeError):
        raise CatalogNotFoundError(f"{label} not found")


def _apply(instance, data: dict) -> None:
    for field, value in data.items():
        setattr(instance, field, value)


# ============================================================
# CATEGORIES
# ============================================================


def list_categories(*, include_products: bool = False) -> QuerySet:
    """
    All categories with an aggregate product_count.
    Products are prefetched (newest first) only when asked for.
    """
    qs = Category.objects.annotate(product_count=Count("products")).order_by("name")
    if include_products:
        qs = qs.prefetch_related(
            Prefetch("products", queryset=Product.objects.order_by("-created_at"))
        )
    return qs


def get_category(category_id) -> Category:
    return _get_or_not_found(
        Category.objects.annotate(product_count=Count("products")),
        category_id,
        label="Category",
    )


def create_category(*, data: dict) -> Category:
    category = Category.objects.create(**data)
    logger.info("Category created", extra={"category_id": str(category.id)})
    return category


@transaction.atomic
def update_category(category_id, *, data: dict) -> Category:
    category = _get_or_not_found(
        Category.objects.select_for_update(), category_id, label="Category"
    )
    _apply(category, data)
    category.save()
    logger.info("Category updated", extra={"category_id": str(category.id)})
    return category


@transaction.atomic
def delete_category(category_id) -> None:
    """
    Blocked when products still point at the category.
    The category and its products are left untouched in that case.
    """
    category = _get_or_not_found(Category.objects.all(), category_id, label="Category")

    try:
        category.delete()
    except ProtectedError as exc:
        count = len(exc.protected_objects)
        logger.warning(
            "Category delete blocked by products",
            extra={"category_id": str(category_id), "product_count": count},
        )
        raise CategoryInUseError(
            f"Category still has {count} product(s); reassign or delete them first",
            details={"productCount": count},
        )

    logger.info("Category deleted", extra={"category_id": str(category_id)})


# ============================================================
# PRODUCTS
# ============================================================


def product_queryset(*, include_category: bool = False) -> QuerySet:
    qs = Product.objects.order_by("-created_at")
    if include_category:
        qs = qs.select_related("category")
    return qs


def get_product(product_id) -> Product:
    return _get_or_not_found(
        Product.objects.select_related("category"), product_id, label="Product"
    )


def create_product(*, data: dict) -> Product:
    product = Product.objects.create(**data)
    logger.info(
        "Product created",
        extra={"product_id": str(product.id), "category_id": str(product.category_id)},
    )
    return product


@transaction.atomic
def update_product(product_id, *, data: dict) -> Product:
    product = _get_or_not_found(
        Product.objects.select_for_update(), product_id, label="Product"
    )
    _apply(product, data)
    product.save()
    logger.info("Product updated", extra={"product_id": str(product.id)})
    return product


def delete_product(product_id) -> None:
    product = _get_or_not_found(Product.objects.all(), product_id, label="Product")
    product.delete()
    logger.info("Product deleted", extra={"product_id": str(product_id)})


def parse_similar_limit(raw) -> int:
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return SIMILAR_DEFAULT_LIMIT
    if limit < 1:
        return SIMILAR_DEFAULT_LIMIT
    return min(limit, SIMILAR_MAX_LIMIT)


def similar_products(*, category_id, exclude_id=None, limit: int = SIMILAR_DEFAULT_LIMIT):
    """
    Products in the same category, excluding one id, capped at limit.
    Malformed ids simply match nothing.
    """
    qs = Product.objects.select_related("category").order_by("-created_at")
    try:
        qs = qs.filter(category_id=category_id)
        if exclude_id:
            qs = qs.exclude(id=exclude_id)
        return list(qs[:limit])
    except ValidationError:
        return []
