# orders/tests/test_orders_api.py

from decimal import Decimal
from unittest import mock

from django.test import TestCase, TransactionTestCase, override_settings
from rest_framework.test import APIClient

from admin_console.sessions import encode_session
from notifications.services import sms
from orders.models import Order, PaymentStatus


def checkout_form(**overrides):
    data = {
        "firstName": "Nimal",
        "lastName": "Perera",
        "phone": "+94771234567",
        "addressLine1": "12 Galle Road",
        "city": "Colombo",
        "province": "Western",
        "productId": "prod-1",
        "productName": "Elegant Leather Sofa",
        "productPrice": "189000.00",
        "quantity": 2,
    }
    data.update(overrides)
    return data


class OrderApiTests(TestCase):
    """
    Order API tests.

    GUARANTEES:
    - New orders always start PENDING with nothing paid
    - Missing required fields persist nothing
    - Order listing is admin-only, single order lookup is public
    """

    def setUp(self):
        self.client = APIClient()

    def test_create_order(self):
        with self.captureOnCommitCallbacks(execute=False) as callbacks:
            res = self.client.post("/api/orders", checkout_form(), format="json")

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["message"], "Order placed successfully")

        order = Order.objects.get(pk=body["orderId"])
        self.assertEqual(order.payment_status, PaymentStatus.PENDING)
        self.assertEqual(order.payment_method, "PAYHERE")
        self.assertEqual(order.quantity, 2)
        self.assertEqual(order.total, Decimal("378000.00"))
        self.assertEqual(body["order"]["paymentStatus"], "PENDING")
        self.assertEqual(len(callbacks), 1)

    def test_client_payment_fields_are_ignored(self):
        res = self.client.post(
            "/api/orders",
            checkout_form(
                total="1000.00",
                paymentStatus="PAID",
                amountPaid="1000.00",
                paymentDate="2026-01-01T00:00:00Z",
            ),
            format="json",
        )

        self.assertEqual(res.status_code, 200)
        order = Order.objects.get(pk=res.json()["orderId"])
        self.assertEqual(order.total, Decimal("1000.00"))
        self.assertEqual(order.payment_status, PaymentStatus.PENDING)
        self.assertEqual(order.amount_paid, Decimal("0.00"))
        self.assertIsNone(order.payment_date)

    def test_missing_required_fields_persist_nothing(self):
        form = checkout_form()
        del form["city"]
        form["phone"] = ""

        res = self.client.post("/api/orders", form, format="json")

        self.assertEqual(res.status_code, 400)
        body = res.json()
        self.assertFalse(body["success"])
        self.assertIn("city", body["details"])
        self.assertIn("phone", body["details"])
        self.assertEqual(Order.objects.count(), 0)

    def test_list_orders_requires_admin(self):
        res = self.client.get("/api/orders")

        self.assertEqual(res.status_code, 401)

    def test_list_orders_newest_first(self):
        first = self.client.post("/api/orders", checkout_form(), format="json")
        second = self.client.post(
            "/api/orders", checkout_form(firstName="Kamal"), format="json"
        )
        self.client.cookies["session"] = encode_session("admin")

        res = self.client.get("/api/orders")

        self.assertEqual(res.status_code, 200)
        ids = [o["id"] for o in res.json()]
        self.assertEqual(ids, [second.json()["orderId"], first.json()["orderId"]])

    def test_get_order_is_public(self):
        created = self.client.post("/api/orders", checkout_form(), format="json")
        order_id = created.json()["orderId"]

        res = self.client.get(f"/api/orders/{order_id}")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["firstName"], "Nimal")

    def test_get_unknown_order_is_404(self):
        res = self.client.get("/api/orders/00000000-0000-0000-0000-000000000000")

        self.assertEqual(res.status_code, 404)
        self.assertFalse(res.json()["success"])


@override_settings(
    NOTIFY={
        "API_KEY": "key-123",
        "USER_ID": "4242",
        "SENDER_ID": "NotifyDEMO",
        "ADMIN_PHONE": "94771234567",
    }
)
class OrderSmsFailureTests(TransactionTestCase):
    """
    Owner SMS runs on commit inside the request; transport failures
    must not turn a committed order into an error response.
    """

    def setUp(self):
        self.client = APIClient()

    def test_sms_timeout_does_not_fail_order(self):
        with mock.patch.object(
            sms, "urlopen", side_effect=TimeoutError("timed out")
        ) as urlopen:
            res = self.client.post("/api/orders", checkout_form(), format="json")

        self.assertEqual(res.status_code, 200)
        self.assertTrue(res.json()["success"])
        self.assertEqual(Order.objects.count(), 1)
        urlopen.assert_called_once()
