# payments/checks.py

"""
Startup checks: refuse to run without PayHere merchant config.
"""

from django.conf import settings
from django.core.checks import Error, Tags, Warning, register


@register(Tags.security, deploy=False)
def check_payhere_config(app_configs, **kwargs):
    errors = []
    cfg = (getattr(settings, "PAYMENTS", {}) or {}).get("PAYHERE") or {}

    if not str(cfg.get("MERCHANT_ID") or "").strip():
        errors.append(
            Error(
                "PAYHERE_MERCHANT_ID is not set.",
                hint="Set PAYHERE_MERCHANT_ID in the environment or .env file.",
                id="payments.E001",
            )
        )
    if not str(cfg.get("MERCHANT_SECRET") or "").strip():
        errors.append(
            Error(
                "PAYHERE_MERCHANT_SECRET is not set.",
                hint="Set PAYHERE_MERCHANT_SECRET in the environment or .env file.",
                id="payments.E002",
            )
        )
    if not str(getattr(settings, "PUBLIC_BASE_URL", "") or "").strip():
        errors.append(
            Warning(
                "PUBLIC_BASE_URL is empty; PayHere callback URLs will be relative.",
                id="payments.W001",
            )
        )
    return errors
