from .category import CategorySerializer, CategorySummarySerializer
from .product import ProductSerializer

__all__ = [
    "CategorySerializer",
    "CategorySummarySerializer",
    "ProductSerializer",
]
