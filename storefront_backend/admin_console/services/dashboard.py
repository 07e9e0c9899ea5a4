# admin_console/services/dashboard.py

"""
ADMIN DASHBOARD AGGREGATES

Recomputed on every call straight from orders + catalog (no cache).

Contract:
- Money values are floats in major units (LKR), like the other JSON payloads.
- Calendar months are taken in the configured TIME_ZONE.
- Month-over-month change is (cur - prev) / prev * 100, and exactly 0 when
  the previous month is empty.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from django.db.models import Count, Max, Sum
from django.utils import timezone

from catalog.models import Product
from orders.models import Order

TWOPLACES = Decimal("0.01")
MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
RECENT_ORDERS_LIMIT = 5
TOP_PRODUCTS_LIMIT = 5
TREND_MONTHS = 6


def _to_major_number(amount) -> float:
    return float((amount or Decimal("0.00")).quantize(TWOPLACES, rounding=ROUND_HALF_UP))


def _month_start(year: int, month: int) -> datetime:
    return timezone.make_aware(datetime(year, month, 1))


def _shift_months(start: datetime, months: int) -> datetime:
    index = start.year * 12 + (start.month - 1) + months
    return _month_start(index // 12, index % 12 + 1)


def _change_percentage(current, previous) -> float:
    if not previous:
        return 0.0
    return round((float(current) - float(previous)) / float(previous) * 100, 2)


def _revenue(qs) -> Decimal:
    return qs.aggregate(total=Sum("total"))["total"] or Decimal("0.00")


def _customer_count(qs) -> int:
    return qs.order_by().values("first_name", "last_name", "phone").distinct().count()


def _recent_orders() -> list[dict]:
    rows = Order.objects.order_by("-created_at")[:RECENT_ORDERS_LIMIT]
    return [
        {
            "id": str(o.id),
            "firstName": o.first_name,
            "lastName": o.last_name,
            "createdAt": o.created_at.isoformat(),
            "total": _to_major_number(o.total),
            "paymentMethod": o.payment_method,
            "paymentStatus": o.payment_status,
        }
        for o in rows
    ]


def _monthly_revenue(current_start: datetime) -> list[dict]:
    out = []
    for offset in range(TREND_MONTHS - 1, -1, -1):
        start = _shift_months(current_start, -offset)
        end = _shift_months(start, 1)
        revenue = _revenue(
            Order.objects.filter(created_at__gte=start, created_at__lt=end)
        )
        out.append(
            {
                "month": MONTH_ABBR[start.month - 1],
                "year": start.year,
                "revenue": _to_major_number(revenue),
            }
        )
    return out


def _top_products() -> list[dict]:
    rows = (
        Order.objects.values("product_id")
        .annotate(
            name=Max("product_name"),
            total_sold=Sum("quantity"),
            order_count=Count("id"),
        )
        .order_by("-total_sold", "product_id")[:TOP_PRODUCTS_LIMIT]
    )
    return [
        {
            "id": r["product_id"],
            "name": r["name"] or "",
            "totalSold": int(r["total_sold"] or 0),
            "orderCount": int(r["order_count"] or 0),
        }
        for r in rows
    ]


def build_dashboard(now: datetime | None = None) -> dict:
    local_now = timezone.localtime(now or timezone.now())
    current_start = _month_start(local_now.year, local_now.month)
    previous_start = _shift_months(current_start, -1)
    next_start = _shift_months(current_start, 1)

    orders = Order.objects.all()
    current = orders.filter(created_at__gte=current_start, created_at__lt=next_start)
    previous = orders.filter(created_at__gte=previous_start, created_at__lt=current_start)

    return {
        "totalRevenue": _to_major_number(_revenue(orders)),
        "totalOrders": orders.count(),
        "totalProducts": Product.objects.count(),
        "totalCustomers": _customer_count(orders),
        "recentOrders": _recent_orders(),
        "monthlyRevenue": _monthly_revenue(current_start),
        "topProducts": _top_products(),
        "revenueChangePercentage": _change_percentage(
            _revenue(current), _revenue(previous)
        ),
        "orderChangePercentage": _change_percentage(current.count(), previous.count()),
        "customerChangePercentage": _change_percentage(
            _customer_count(current), _customer_count(previous)
        ),
        "newProductsThisMonth": Product.objects.filter(
            created_at__gte=current_start, created_at__lt=next_start
        ).count(),
    }
