# orders/tests/test_payment_status.py

from decimal import Decimal

from django.test import TestCase

from orders.models import Order, PaymentStatus
from orders.services import order_service
from orders.services.exceptions import OrderNotFoundError


class ApplyPaymentStatusTests(TestCase):
    """
    apply_payment_status tests.

    GUARANTEES:
    - PAID records amount + date, anything else resets them
    - Repeated delivery leaves the row untouched
    - A late PENDING never rolls back a settled order
    """

    def setUp(self):
        self.order = Order.objects.create(
            first_name="Nimal",
            last_name="Perera",
            phone="+94771234567",
            address_line1="12 Galle Road",
            city="Colombo",
            province="Western",
            product_id="prod-1",
            total=Decimal("10000.00"),
        )

    def _apply(self, status, amount="10000.00"):
        return order_service.apply_payment_status(
            order_id=self.order.id, status=status, amount=Decimal(amount)
        )

    def test_paid_sets_amount_and_date(self):
        result = self._apply(PaymentStatus.PAID)

        self.assertTrue(result.applied)
        self.assertEqual(result.previous_status, PaymentStatus.PENDING)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.PAID)
        self.assertEqual(self.order.amount_paid, Decimal("10000.00"))
        self.assertIsNotNone(self.order.payment_date)

    def test_repeated_paid_is_idempotent(self):
        self._apply(PaymentStatus.PAID)
        self.order.refresh_from_db()
        first_paid_at = self.order.payment_date

        result = self._apply(PaymentStatus.PAID)

        self.assertFalse(result.applied)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_date, first_paid_at)
        self.assertEqual(self.order.amount_paid, Decimal("10000.00"))

    def test_paid_then_failed_resets_payment(self):
        self._apply(PaymentStatus.PAID)
        self._apply(PaymentStatus.FAILED)

        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.FAILED)
        self.assertEqual(self.order.amount_paid, Decimal("0.00"))
        self.assertIsNone(self.order.payment_date)
        self.assertEqual(self.order.total, Decimal("10000.00"))

    def test_paid_then_chargeback_applies(self):
        self._apply(PaymentStatus.PAID)
        result = self._apply(PaymentStatus.CHARGEBACK)

        self.assertTrue(result.applied)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.CHARGEBACK)

    def test_late_pending_does_not_roll_back(self):
        self._apply(PaymentStatus.PAID)
        result = self._apply(PaymentStatus.PENDING)

        self.assertFalse(result.applied)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.PAID)
        self.assertEqual(self.order.amount_paid, Decimal("10000.00"))

    def test_transition_into_paid_schedules_sms(self):
        with self.captureOnCommitCallbacks(execute=False) as callbacks:
            self._apply(PaymentStatus.PAID)
        self.assertEqual(len(callbacks), 1)

        with self.captureOnCommitCallbacks(execute=False) as callbacks:
            self._apply(PaymentStatus.PAID)
        self.assertEqual(len(callbacks), 0)

    def test_unknown_order(self):
        with self.assertRaises(OrderNotFoundError):
            order_service.apply_payment_status(
                order_id="00000000-0000-0000-0000-000000000000",
                status=PaymentStatus.PAID,
                amount=Decimal("1.00"),
            )
