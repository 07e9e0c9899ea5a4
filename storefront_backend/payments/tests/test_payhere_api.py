# payments/tests/test_payhere_api.py

import hashlib
from decimal import Decimal
from unittest import mock

from django.test import TestCase, TransactionTestCase, override_settings
from rest_framework.test import APIClient

from notifications.services import sms
from orders.models import Order, PaymentStatus
from payments.models import PaymentNotification

MERCHANT_ID = "1211149"
MERCHANT_SECRET = "test-merchant-secret"


def md5_upper(value: str) -> str:
    return hashlib.md5(value.encode("utf-8")).hexdigest().upper()


def notify_form(order_id, *, status_code="2", amount="10000.00", **overrides):
    form = {
        "merchant_id": MERCHANT_ID,
        "order_id": str(order_id),
        "payment_id": "320025071278",
        "payhere_amount": amount,
        "payhere_currency": "LKR",
        "status_code": status_code,
    }
    form["md5sig"] = md5_upper(
        form["merchant_id"]
        + form["order_id"]
        + form["payhere_amount"]
        + form["payhere_currency"]
        + form["status_code"]
        + md5_upper(MERCHANT_SECRET)
    )
    form.update(overrides)
    return form


class PayHereApiTests(TestCase):
    """
    PayHere endpoint tests.

    GUARANTEES:
    - Checkout signing only for existing orders
    - Notifications mutate nothing unless merchant + signature verify
    - Every verified notification leaves an audit row
    """

    def setUp(self):
        self.client = APIClient()
        self.order = Order.objects.create(
            first_name="Nimal",
            last_name="Perera",
            phone="+94771234567",
            address_line1="12 Galle Road",
            city="Colombo",
            province="Western",
            product_id="prod-1",
            product_name="Vintage Dining Table",
            total=Decimal("10000.00"),
        )

    def _notify(self, form):
        return self.client.post("/api/payhere/notify", form)

    # --------------------------------------------------
    # CHECKOUT
    # --------------------------------------------------

    def test_checkout_payload(self):
        res = self.client.post(
            "/api/payhere",
            {
                "orderId": str(self.order.id),
                "amount": "10000",
                "firstName": "Nimal",
                "lastName": "Perera",
                "items": "Vintage Dining Table",
            },
            format="json",
        )

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["checkoutUrl"], "https://sandbox.payhere.lk/pay/checkout")
        self.assertEqual(body["formData"]["order_id"], str(self.order.id))
        self.assertEqual(body["formData"]["amount"], "10000.00")
        self.assertEqual(
            body["formData"]["hash"],
            md5_upper(
                MERCHANT_ID
                + str(self.order.id)
                + "10000.00"
                + "LKR"
                + md5_upper(MERCHANT_SECRET)
            ),
        )

    def test_checkout_for_unknown_order_is_404(self):
        res = self.client.post(
            "/api/payhere",
            {"orderId": "00000000-0000-0000-0000-000000000000", "amount": "10"},
            format="json",
        )

        self.assertEqual(res.status_code, 404)

    def test_checkout_with_bad_amount_is_400(self):
        res = self.client.post(
            "/api/payhere",
            {"orderId": str(self.order.id), "amount": "ten"},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertIn("amount", res.json()["details"])

    # --------------------------------------------------
    # NOTIFY
    # --------------------------------------------------

    def test_paid_notification(self):
        res = self._notify(notify_form(self.order.id))

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"success": True})
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.PAID)
        self.assertEqual(self.order.amount_paid, Decimal("10000.00"))
        self.assertIsNotNone(self.order.payment_date)

        audit = PaymentNotification.objects.get(order=self.order)
        self.assertTrue(audit.applied)
        self.assertEqual(audit.payment_status, PaymentStatus.PAID)
        self.assertEqual(audit.status_code, "2")

    def test_duplicate_paid_notification_is_idempotent(self):
        self._notify(notify_form(self.order.id))
        self.order.refresh_from_db()
        paid_at = self.order.payment_date

        res = self._notify(notify_form(self.order.id))

        self.assertEqual(res.status_code, 200)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_date, paid_at)
        self.assertEqual(
            list(
                PaymentNotification.objects.filter(order=self.order)
                .order_by("received_at")
                .values_list("applied", flat=True)
            ),
            [True, False],
        )

    def test_paid_then_failed(self):
        self._notify(notify_form(self.order.id, status_code="2"))
        res = self._notify(notify_form(self.order.id, status_code="-2"))

        self.assertEqual(res.status_code, 200)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.FAILED)
        self.assertEqual(self.order.amount_paid, Decimal("0.00"))
        self.assertIsNone(self.order.payment_date)
        self.assertEqual(self.order.total, Decimal("10000.00"))

    def test_invalid_merchant_changes_nothing(self):
        res = self._notify(notify_form(self.order.id, merchant_id="9999999"))

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Invalid merchant ID")
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.PENDING)
        self.assertFalse(PaymentNotification.objects.exists())

    def test_tampered_amount_changes_nothing(self):
        res = self._notify(notify_form(self.order.id, payhere_amount="1.00"))

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Invalid hash")
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.PENDING)
        self.assertEqual(self.order.amount_paid, Decimal("0.00"))
        self.assertFalse(PaymentNotification.objects.exists())

    def test_tampered_status_changes_nothing(self):
        form = notify_form(self.order.id, status_code="2")
        form["status_code"] = "-3"
        res = self._notify(form)

        self.assertEqual(res.status_code, 400)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.PENDING)

    def test_malformed_amount_is_400(self):
        res = self._notify(notify_form(self.order.id, amount="abc"))

        self.assertEqual(res.status_code, 400)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.PENDING)

    def test_unknown_order_is_404(self):
        res = self._notify(notify_form("00000000-0000-0000-0000-000000000000"))

        self.assertEqual(res.status_code, 404)
        self.assertFalse(PaymentNotification.objects.exists())

    def test_unmapped_status_code_is_recorded_as_unknown(self):
        res = self._notify(notify_form(self.order.id, status_code="7"))

        self.assertEqual(res.status_code, 200)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.UNKNOWN)

    def test_sub_cent_amount_rounds_half_up_on_order_and_audit(self):
        res = self._notify(notify_form(self.order.id, amount="10000.005"))

        self.assertEqual(res.status_code, 200)
        self.order.refresh_from_db()
        self.assertEqual(self.order.amount_paid, Decimal("10000.01"))
        audit = PaymentNotification.objects.get(order=self.order)
        self.assertEqual(audit.amount, Decimal("10000.01"))


@override_settings(
    NOTIFY={
        "API_KEY": "key-123",
        "USER_ID": "4242",
        "SENDER_ID": "NotifyDEMO",
        "ADMIN_PHONE": "94771234567",
    }
)
class PayHereSmsFailureTests(TransactionTestCase):
    def test_sms_timeout_does_not_fail_paid_notification(self):
        order = Order.objects.create(
            first_name="Nimal",
            last_name="Perera",
            phone="+94771234567",
            address_line1="12 Galle Road",
            city="Colombo",
            province="Western",
            product_id="prod-1",
            total=Decimal("10000.00"),
        )

        with mock.patch.object(
            sms, "urlopen", side_effect=TimeoutError("timed out")
        ) as urlopen:
            res = APIClient().post("/api/payhere/notify", notify_form(order.id))

        self.assertEqual(res.status_code, 200)
        order.refresh_from_db()
        self.assertEqual(order.payment_status, PaymentStatus.PAID)
        urlopen.assert_called_once()
