# admin_console/checks.py

from django.conf import settings
from django.core.checks import Error, Tags, register


@register(Tags.security, deploy=False)
def check_admin_credentials(app_configs, **kwargs):
    errors = []
    if not str(getattr(settings, "ADMIN_USERNAME", "") or "").strip():
        errors.append(
            Error(
                "ADMIN_USERNAME is not set.",
                hint="Set ADMIN_USERNAME in the environment or .env file.",
                id="admin_console.E001",
            )
        )
    if not str(getattr(settings, "ADMIN_PASSWORD", "") or "").strip():
        errors.append(
            Error(
                "ADMIN_PASSWORD is not set.",
                hint="Set ADMIN_PASSWORD in the environment or .env file.",
                id="admin_console.E002",
            )
        )
    return errors
