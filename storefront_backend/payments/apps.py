# payments/apps.py

"""
PAYMENTS APP CONFIG

PayHere gateway adapter:
- Signed checkout payload for the hosted checkout redirect
- Notification (webhook) verification + order status update
- Audit trail of verified notifications

Startup:
- Registers system checks that fail fast when merchant config is missing.
"""

from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "payments"
    verbose_name = "Payments (PayHere)"

    def ready(self):
        from payments import checks  # noqa: F401
