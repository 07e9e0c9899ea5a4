# catalog/urls.py

"""
CATALOG URLS

Mounted at /api/ (see backend/urls.py):
- /api/categories
- /api/categories/<uuid>
- /api/products
- /api/products/similar
- /api/products/<uuid>
"""

from django.urls import path

from catalog.views import (
    CategoryCollectionView,
    CategoryDetailView,
    ProductCollectionView,
    ProductDetailView,
    SimilarProductsView,
)

app_name = "catalog"

urlpatterns = [
    path("categories", CategoryCollectionView.as_view(), name="categories"),
    path(
        "categories/<str:category_id>",
        CategoryDetailView.as_view(),
        name="category-detail",
    ),
    path("products", ProductCollectionView.as_view(), name="products"),
    path("products/similar", SimilarProductsView.as_view(), name="products-similar"),
    path(
        "products/<str:product_id>",
        ProductDetailView.as_view(),
        name="product-detail",
    ),
]
