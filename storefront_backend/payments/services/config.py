# payments/services/config.py

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings

from payments.services.exceptions import PaymentConfigurationError

PAYHERE_SANDBOX_CHECKOUT_URL = "https://sandbox.payhere.lk/pay/checkout"
PAYHERE_LIVE_CHECKOUT_URL = "https://www.payhere.lk/pay/checkout"


@dataclass(frozen=True)
class PayHereConfig:
    """
    Validated PayHere merchant configuration.

    Built from settings.PAYMENTS["PAYHERE"] + settings.PUBLIC_BASE_URL.
    Startup checks (payments.checks) guarantee the required values exist.
    """

    merchant_id: str
    merchant_secret: str
    sandbox: bool
    public_base_url: str

    @property
    def checkout_url(self) -> str:
        if self.sandbox:
            return PAYHERE_SANDBOX_CHECKOUT_URL
        return PAYHERE_LIVE_CHECKOUT_URL

    @property
    def return_url(self) -> str:
        return f"{self.public_base_url}/checkout/success"

    @property
    def cancel_url(self) -> str:
        return f"{self.public_base_url}/checkout"

    @property
    def notify_url(self) -> str:
        return f"{self.public_base_url}/api/payhere/notify"

    @classmethod
    def from_settings(cls) -> "PayHereConfig":
        payments = getattr(settings, "PAYMENTS", {}) or {}
        cfg = payments.get("PAYHERE") or {}

        merchant_id = str(cfg.get("MERCHANT_ID") or "").strip()
        merchant_secret = str(cfg.get("MERCHANT_SECRET") or "").strip()
        if not merchant_id or not merchant_secret:
            raise PaymentConfigurationError(
                "PAYHERE_MERCHANT_ID and PAYHERE_MERCHANT_SECRET must be configured"
            )

        return cls(
            merchant_id=merchant_id,
            merchant_secret=merchant_secret,
            sandbox=bool(cfg.get("SANDBOX", True)),
            public_base_url=str(getattr(settings, "PUBLIC_BASE_URL", "") or "")
            .strip()
            .rstrip("/"),
        )
