# orders/apps.py

"""
ORDERS APP CONFIG

Order lifecycle store:
- Orders are created PENDING at checkout submission
- Payment status changes only through verified PayHere notifications
"""

from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "orders"
    verbose_name = "Orders"
