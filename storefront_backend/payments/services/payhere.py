# payments/services/payhere.py
"""
PAYHERE ADAPTER

Pure computation, no database access:
- checkout payload + MD5 signature for the hosted checkout form
- notification (notify_url callback) verification
- PayHere status_code -> PaymentStatus mapping

Signatures:
    secret_hash = MD5(merchant_secret).upper()
    checkout    = MD5(merchant_id + order_id + amount + currency + secret_hash).upper()
    notify      = MD5(merchant_id + order_id + payhere_amount + payhere_currency
                      + status_code + secret_hash).upper()
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from orders.models import PaymentStatus
from payments.services.config import PayHereConfig
from payments.services.exceptions import (
    CheckoutValidationError,
    InvalidMerchantError,
    InvalidSignatureError,
    MalformedNotificationError,
)

CURRENCY = "LKR"
DEFAULT_COUNTRY = "Sri Lanka"
TWOPLACES = Decimal("0.01")

STATUS_BY_CODE = {
    "2": PaymentStatus.PAID,
    "0": PaymentStatus.PENDING,
    "-1": PaymentStatus.CANCELLED,
    "-2": PaymentStatus.FAILED,
    "-3": PaymentStatus.CHARGEBACK,
}


@dataclass(frozen=True)
class CheckoutRequest:
    order_id: str
    amount: Any
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    country: str = DEFAULT_COUNTRY
    items: str = ""


@dataclass(frozen=True)
class PayHereNotification:
    merchant_id: str
    order_id: str
    payment_id: str
    payhere_amount: str
    payhere_currency: str
    status_code: str
    md5sig: str

    @classmethod
    def from_mapping(cls, data) -> "PayHereNotification":
        def _s(key):
            return str(data.get(key) or "").strip()

        return cls(
            merchant_id=_s("merchant_id"),
            order_id=_s("order_id"),
            payment_id=_s("payment_id"),
            payhere_amount=_s("payhere_amount"),
            payhere_currency=_s("payhere_currency"),
            status_code=_s("status_code"),
            md5sig=_s("md5sig"),
        )


def _md5_upper(value: str) -> str:
    return hashlib.md5(value.encode("utf-8")).hexdigest().upper()


def format_amount(amount) -> str:
    """
    Two decimal places, half-up: 1500 -> "1500.00", "99.999" -> "100.00".
    """
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise CheckoutValidationError("Amount must be a number") from exc
    if not value.is_finite():
        raise CheckoutValidationError("Amount must be a number")
    return str(value.quantize(TWOPLACES, rounding=ROUND_HALF_UP))


def secret_hash(merchant_secret: str) -> str:
    return _md5_upper(merchant_secret)


def checkout_signature(
    *, merchant_id: str, merchant_secret: str, order_id: str, amount: str
) -> str:
    return _md5_upper(
        f"{merchant_id}{order_id}{amount}{CURRENCY}{secret_hash(merchant_secret)}"
    )


def build_checkout_payload(
    request: CheckoutRequest, *, config: PayHereConfig | None = None
) -> dict:
    """
    Returns {"formData": {...}, "checkoutUrl": "..."} ready for an
    auto-submitted HTML form on the storefront.
    """
    config = config or PayHereConfig.from_settings()
    amount = format_amount(request.amount)
    order_id = str(request.order_id)

    form_data = {
        "merchant_id": config.merchant_id,
        "return_url": config.return_url,
        "cancel_url": config.cancel_url,
        "notify_url": config.notify_url,
        "first_name": request.first_name,
        "last_name": request.last_name,
        "email": request.email,
        "phone": request.phone,
        "address": request.address,
        "city": request.city,
        "country": request.country or DEFAULT_COUNTRY,
        "order_id": order_id,
        "items": request.items,
        "currency": CURRENCY,
        "amount": amount,
        "hash": checkout_signature(
            merchant_id=config.merchant_id,
            merchant_secret=config.merchant_secret,
            order_id=order_id,
            amount=amount,
        ),
    }
    return {"formData": form_data, "checkoutUrl": config.checkout_url}


def notification_signature(
    notification: PayHereNotification, *, merchant_secret: str
) -> str:
    n = notification
    return _md5_upper(
        f"{n.merchant_id}{n.order_id}{n.payhere_amount}{n.payhere_currency}"
        f"{n.status_code}{secret_hash(merchant_secret)}"
    )


def verify_notification(
    notification: PayHereNotification, *, config: PayHereConfig | None = None
) -> None:
    """
    Raises on the first failing check:
    1) merchant id mismatch -> InvalidMerchantError
    2) md5sig mismatch      -> InvalidSignatureError
    """
    config = config or PayHereConfig.from_settings()

    if not hmac.compare_digest(
        notification.merchant_id.encode("utf-8"),
        config.merchant_id.encode("utf-8"),
    ):
        raise InvalidMerchantError()

    expected = notification_signature(
        notification, merchant_secret=config.merchant_secret
    )
    received = notification.md5sig.upper()
    if not received or not hmac.compare_digest(
        expected.encode("utf-8"), received.encode("utf-8")
    ):
        raise InvalidSignatureError()


def map_status_code(status_code) -> str:
    return STATUS_BY_CODE.get(str(status_code).strip(), PaymentStatus.UNKNOWN)


def parse_amount(raw) -> Decimal:
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise MalformedNotificationError("Invalid payhere_amount") from exc
    if not value.is_finite():
        raise MalformedNotificationError("Invalid payhere_amount")
    return value
