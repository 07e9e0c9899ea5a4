from .category import CategoryCollectionView, CategoryDetailView
from .product import ProductCollectionView, ProductDetailView, SimilarProductsView

__all__ = [
    "CategoryCollectionView",
    "CategoryDetailView",
    "ProductCollectionView",
    "ProductDetailView",
    "SimilarProductsView",
]
