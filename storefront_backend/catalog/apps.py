# catalog/apps.py

"""
CATALOG APP CONFIG

Storefront catalog:
- Categories (Imported Used / Brand New segmentation)
- Products (price, dimensions, features, tiered pricing, colour variants)
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
    verbose_name = "Catalog"
