# notifications/services/sms.py

"""
NOTIFY.LK SMS CLIENT

Owner alerts for the storefront:
- notify_order_placed(order)      after an order is created
- notify_payment_received(order)  after PayHere confirms payment

Rules:
- Best effort: every public function returns True/False and never raises.
  An order is never failed because an SMS could not be sent.
- No retries (Notify.lk is fire-and-forget for us).
- Credentials come from settings.NOTIFY; when missing, sending is skipped.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from notifications.services.config import NOTIFY_SEND_URL, NotifyConfig
from notifications.services.exceptions import SmsDeliveryError

logger = logging.getLogger(__name__)

SMS_TIMEOUT_SECONDS = 10


def format_phone(number: str) -> str:
    """Notify.lk expects digits only (94771234567), no leading '+'."""
    return str(number or "").strip().replace("+", "").replace(" ", "")


def _rs(amount) -> str:
    return f"Rs.{Decimal(str(amount or 0)):,.2f}"


def _post_form(params: dict, *, timeout: int = SMS_TIMEOUT_SECONDS) -> dict:
    req = Request(
        f"{NOTIFY_SEND_URL}?{urlencode(params)}",
        data=b"",
        headers={
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        },
        method="POST",
    )

    try:
        with urlopen(req, timeout=timeout) as resp:
            raw = resp.read().decode("utf-8", errors="replace")
    except HTTPError as e:
        raise SmsDeliveryError(f"Notify.lk HTTPError: {e.code}") from e
    except URLError as e:
        raise SmsDeliveryError(f"Notify.lk URLError: {e.reason}") from e
    except (OSError, HTTPException) as e:
        # timeouts / dropped connections while reading the response
        raise SmsDeliveryError(f"Notify.lk request failed: {e!r}") from e

    try:
        parsed = json.loads(raw or "{}")
    except ValueError as e:
        raise SmsDeliveryError("Notify.lk returned non-JSON") from e

    if not isinstance(parsed, dict) or parsed.get("status") != "success":
        raise SmsDeliveryError(
            "Notify.lk rejected message", details={"response": parsed}
        )

    return parsed


def send_sms(
    *,
    message: str,
    phone_number: str | None = None,
    config: NotifyConfig | None = None,
) -> bool:
    """
    Send one SMS. Defaults to the shop owner's number (NOTIFY_ADMIN_PHONE).
    """
    cfg = config or NotifyConfig.from_settings()
    target = format_phone(phone_number or cfg.admin_phone)

    if not cfg.enabled:
        logger.warning("SMS skipped: Notify.lk credentials not configured")
        return False
    if not target:
        logger.warning("SMS skipped: no target phone number")
        return False

    params = {
        "user_id": cfg.user_id,
        "api_key": cfg.api_key,
        "sender_id": cfg.sender_id,
        "to": target,
        "message": message,
    }

    try:
        _post_form(params)
    except SmsDeliveryError as exc:
        logger.error(
            "Failed to send SMS",
            extra={"to": target, "error": exc.message, "details": exc.details},
        )
        return False

    logger.info("SMS sent", extra={"to": target})
    return True


def order_placed_message(order) -> str:
    return (
        f"New Order: {order.customer_name} has ordered {order.quantity}x "
        f"{order.product_name or 'item'} for {_rs(order.total)}. "
        f"Customer phone: {order.phone}"
    )


def payment_received_message(order) -> str:
    return (
        f"Payment received: {_rs(order.amount_paid)} via PayHere from "
        f"{order.customer_name} for {order.quantity}x "
        f"{order.product_name or 'item'} (order {order.id})."
    )


def notify_order_placed(order) -> bool:
    return send_sms(message=order_placed_message(order))


def notify_payment_received(order) -> bool:
    return send_sms(message=payment_received_message(order))
