# admin_console/apps.py

"""
ADMIN CONSOLE APP CONFIG

- Stateless signed session cookie (no user table)
- Auth gate middleware for /admin/*
- Dashboard aggregates for the shop owner
"""

from django.apps import AppConfig


class AdminConsoleConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "admin_console"
    verbose_name = "Admin Console"

    def ready(self):
        from admin_console import checks, schema  # noqa: F401
