# admin_console/tests/test_dashboard.py

from datetime import datetime
from decimal import Decimal

from django.test import TestCase
from django.utils import timezone

from admin_console.services.dashboard import build_dashboard
from catalog.models import Category, Product
from orders.models import Order


def local(*args) -> datetime:
    return timezone.make_aware(datetime(*args))


NOW = local(2026, 3, 15, 12, 0)


def make_order(
    created_at,
    *,
    first="Nimal",
    last="Perera",
    phone="0771234567",
    product_id="p1",
    product_name="Sofa",
    quantity=1,
    total="100.00",
):
    return Order.objects.create(
        first_name=first,
        last_name=last,
        phone=phone,
        address_line1="12 Galle Road",
        city="Colombo",
        province="Western",
        product_id=product_id,
        product_name=product_name,
        quantity=quantity,
        total=Decimal(total),
        created_at=created_at,
    )


class DashboardTests(TestCase):
    """
    Dashboard aggregate tests.

    GUARANTEES:
    - Totals cover every order
    - Monthly trend is six calendar months, oldest first
    - Month-over-month change is 0 when the previous month is empty
    """

    def test_empty_store(self):
        data = build_dashboard(now=NOW)

        self.assertEqual(data["totalRevenue"], 0.0)
        self.assertEqual(data["totalOrders"], 0)
        self.assertEqual(data["totalCustomers"], 0)
        self.assertEqual(data["recentOrders"], [])
        self.assertEqual(data["topProducts"], [])
        self.assertEqual(data["revenueChangePercentage"], 0)
        self.assertEqual(data["orderChangePercentage"], 0)
        self.assertEqual(data["customerChangePercentage"], 0)

    def test_change_is_zero_when_previous_month_is_empty(self):
        make_order(local(2026, 3, 2), total="500.00")
        make_order(local(2026, 3, 3), first="Kamal", total="700.00")

        data = build_dashboard(now=NOW)

        self.assertEqual(data["revenueChangePercentage"], 0)
        self.assertEqual(data["orderChangePercentage"], 0)
        self.assertEqual(data["customerChangePercentage"], 0)
        self.assertEqual(data["totalRevenue"], 1200.0)

    def test_month_over_month_change(self):
        make_order(local(2026, 2, 10), total="100.00")
        make_order(local(2026, 3, 1, 0, 30), total="100.00")
        make_order(local(2026, 3, 5), first="Kamal", phone="0770000000", total="50.00")

        data = build_dashboard(now=NOW)

        self.assertEqual(data["revenueChangePercentage"], 50.0)
        self.assertEqual(data["orderChangePercentage"], 100.0)
        self.assertEqual(data["customerChangePercentage"], 100.0)

    def test_totals_and_distinct_customers(self):
        make_order(local(2026, 1, 5), total="100.00")
        make_order(local(2026, 2, 5), total="200.00")
        make_order(local(2026, 3, 5), first="Kamal", total="300.00")

        data = build_dashboard(now=NOW)

        self.assertEqual(data["totalOrders"], 3)
        self.assertEqual(data["totalRevenue"], 600.0)
        self.assertEqual(data["totalCustomers"], 2)

    def test_monthly_revenue_window(self):
        make_order(local(2025, 9, 20), total="999.00")
        make_order(local(2025, 10, 1), total="10.00")
        make_order(local(2026, 1, 31, 23, 59), total="20.00")
        make_order(local(2026, 3, 14), total="30.00")

        data = build_dashboard(now=NOW)

        self.assertEqual(
            [(m["month"], m["year"]) for m in data["monthlyRevenue"]],
            [
                ("Oct", 2025),
                ("Nov", 2025),
                ("Dec", 2025),
                ("Jan", 2026),
                ("Feb", 2026),
                ("Mar", 2026),
            ],
        )
        self.assertEqual(
            [m["revenue"] for m in data["monthlyRevenue"]],
            [10.0, 0.0, 0.0, 20.0, 0.0, 30.0],
        )

    def test_recent_orders_limited_to_five_newest(self):
        orders = [make_order(local(2026, 3, day), total="1.00") for day in range(1, 8)]

        data = build_dashboard(now=NOW)

        self.assertEqual(
            [o["id"] for o in data["recentOrders"]],
            [str(o.id) for o in reversed(orders[2:])],
        )
        self.assertEqual(
            set(data["recentOrders"][0]),
            {"id", "firstName", "lastName", "createdAt", "total", "paymentMethod", "paymentStatus"},
        )

    def test_top_products(self):
        make_order(local(2026, 3, 1), product_id="p1", product_name="Sofa", quantity=2)
        make_order(local(2026, 3, 2), product_id="p1", product_name="Sofa", quantity=1)
        make_order(local(2026, 3, 3), product_id="p2", product_name="Desk", quantity=1)

        data = build_dashboard(now=NOW)

        self.assertEqual(
            data["topProducts"],
            [
                {"id": "p1", "name": "Sofa", "totalSold": 3, "orderCount": 2},
                {"id": "p2", "name": "Desk", "totalSold": 1, "orderCount": 1},
            ],
        )

    def test_product_counts(self):
        category = Category.objects.create(name="Office")
        Product.objects.create(
            category=category,
            name="Desk",
            price=Decimal("1.00"),
            created_at=local(2026, 3, 2),
        )
        Product.objects.create(
            category=category,
            name="Chair",
            price=Decimal("1.00"),
            created_at=local(2026, 1, 2),
        )

        data = build_dashboard(now=NOW)

        self.assertEqual(data["totalProducts"], 2)
        self.assertEqual(data["newProductsThisMonth"], 1)
