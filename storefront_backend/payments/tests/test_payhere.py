# payments/tests/test_payhere.py

import hashlib
from dataclasses import replace

from django.test import SimpleTestCase, override_settings

from orders.models import PaymentStatus
from payments.services import payhere
from payments.services.config import PayHereConfig
from payments.services.exceptions import (
    CheckoutValidationError,
    InvalidMerchantError,
    InvalidSignatureError,
    MalformedNotificationError,
    PaymentConfigurationError,
)

CONFIG = PayHereConfig(
    merchant_id="1211149",
    merchant_secret="test-merchant-secret",
    sandbox=True,
    public_base_url="https://shop.example.lk",
)


def md5_upper(value: str) -> str:
    return hashlib.md5(value.encode("utf-8")).hexdigest().upper()


def signed_notification(**overrides) -> payhere.PayHereNotification:
    fields = {
        "merchant_id": CONFIG.merchant_id,
        "order_id": "order-1",
        "payment_id": "320025071278",
        "payhere_amount": "1500.00",
        "payhere_currency": "LKR",
        "status_code": "2",
    }
    fields.update(overrides)
    fields["md5sig"] = md5_upper(
        fields["merchant_id"]
        + fields["order_id"]
        + fields["payhere_amount"]
        + fields["payhere_currency"]
        + fields["status_code"]
        + md5_upper(CONFIG.merchant_secret)
    )
    return payhere.PayHereNotification(**fields)


class CheckoutPayloadTests(SimpleTestCase):
    """
    Checkout payload tests.

    GUARANTEES:
    - hash = MD5(merchant_id + order_id + amount + LKR + MD5(secret)) uppercased
    - amounts are always two decimal places
    - callback URLs hang off the public base URL
    """

    def _build(self, **overrides):
        fields = {"order_id": "order-1", "amount": "1500"}
        fields.update(overrides)
        return payhere.build_checkout_payload(
            payhere.CheckoutRequest(**fields), config=CONFIG
        )

    def test_signature_round_trip(self):
        form = self._build()["formData"]

        expected = md5_upper(
            "1211149" + "order-1" + "1500.00" + "LKR" + md5_upper("test-merchant-secret")
        )
        self.assertEqual(form["amount"], "1500.00")
        self.assertEqual(form["currency"], "LKR")
        self.assertEqual(form["hash"], expected)

    def test_amount_is_rounded_half_up(self):
        self.assertEqual(payhere.format_amount("99.995"), "100.00")
        self.assertEqual(payhere.format_amount(10), "10.00")
        self.assertEqual(payhere.format_amount("0.004"), "0.00")

    def test_non_numeric_amount_is_rejected(self):
        with self.assertRaises(CheckoutValidationError):
            payhere.format_amount("abc")
        with self.assertRaises(CheckoutValidationError):
            payhere.format_amount("NaN")

    def test_form_fields(self):
        payload = self._build(first_name="Nimal", items="Elegant Leather Sofa x 1")
        form = payload["formData"]

        self.assertEqual(payload["checkoutUrl"], "https://sandbox.payhere.lk/pay/checkout")
        self.assertEqual(form["merchant_id"], "1211149")
        self.assertEqual(form["return_url"], "https://shop.example.lk/checkout/success")
        self.assertEqual(form["cancel_url"], "https://shop.example.lk/checkout")
        self.assertEqual(form["notify_url"], "https://shop.example.lk/api/payhere/notify")
        self.assertEqual(form["country"], "Sri Lanka")
        self.assertEqual(form["first_name"], "Nimal")
        self.assertEqual(form["items"], "Elegant Leather Sofa x 1")

    def test_live_checkout_url(self):
        live = PayHereConfig(
            merchant_id="1211149",
            merchant_secret="s",
            sandbox=False,
            public_base_url="https://shop.example.lk",
        )
        self.assertEqual(live.checkout_url, "https://www.payhere.lk/pay/checkout")

    @override_settings(PAYMENTS={"PAYHERE": {"MERCHANT_ID": "", "MERCHANT_SECRET": ""}})
    def test_missing_config_is_an_error(self):
        with self.assertRaises(PaymentConfigurationError) as ctx:
            PayHereConfig.from_settings()
        self.assertIn("PAYHERE_MERCHANT_ID", str(ctx.exception))


class NotificationVerificationTests(SimpleTestCase):
    def test_valid_notification_passes(self):
        payhere.verify_notification(signed_notification(), config=CONFIG)

    def test_lowercase_signature_is_accepted(self):
        n = signed_notification()
        lower = replace(n, md5sig=n.md5sig.lower())
        payhere.verify_notification(lower, config=CONFIG)

    def test_wrong_merchant_is_rejected_first(self):
        n = signed_notification(merchant_id="9999999")
        with self.assertRaises(InvalidMerchantError):
            payhere.verify_notification(n, config=CONFIG)

    def test_tampered_fields_are_rejected(self):
        n = signed_notification()
        for field, value in (
            ("payhere_amount", "1.00"),
            ("status_code", "-2"),
            ("order_id", "order-2"),
            ("payhere_currency", "USD"),
        ):
            with self.subTest(field=field):
                tampered = replace(n, **{field: value})
                with self.assertRaises(InvalidSignatureError):
                    payhere.verify_notification(tampered, config=CONFIG)

    def test_empty_signature_is_rejected(self):
        n = signed_notification()
        unsigned = replace(n, md5sig="")
        with self.assertRaises(InvalidSignatureError):
            payhere.verify_notification(unsigned, config=CONFIG)

    def test_status_code_mapping(self):
        cases = {
            "2": PaymentStatus.PAID,
            "0": PaymentStatus.PENDING,
            "-1": PaymentStatus.CANCELLED,
            "-2": PaymentStatus.FAILED,
            "-3": PaymentStatus.CHARGEBACK,
            "1": PaymentStatus.UNKNOWN,
            "": PaymentStatus.UNKNOWN,
            "02": PaymentStatus.UNKNOWN,
        }
        for code, expected in cases.items():
            with self.subTest(code=code):
                self.assertEqual(payhere.map_status_code(code), expected)

    def test_parse_amount(self):
        self.assertEqual(str(payhere.parse_amount("1500.00")), "1500.00")
        with self.assertRaises(MalformedNotificationError):
            payhere.parse_amount("fifteen")
