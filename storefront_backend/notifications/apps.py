# notifications/apps.py

"""
NOTIFICATIONS APP CONFIG

Owner SMS alerts through Notify.lk (order placed, payment received).
No models.
"""

from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "notifications"
    verbose_name = "Notifications"
