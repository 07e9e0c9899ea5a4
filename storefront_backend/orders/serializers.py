# orders/serializers.py

"""
ORDER SERIALIZERS (camelCase wire format)

- OrderCreateSerializer: checkout form -> model field names
- OrderSerializer:       Order row -> JSON

Client-sent paymentStatus / amountPaid / paymentDate are not accepted:
payment fields change only through verified PayHere notifications.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from orders.models import Order


class OrderCreateSerializer(serializers.Serializer):
    firstName = serializers.CharField(source="first_name", max_length=120)
    lastName = serializers.CharField(source="last_name", max_length=120)
    phone = serializers.CharField(max_length=40)
    orderNotes = serializers.CharField(
        source="order_notes", required=False, allow_blank=True, default=""
    )
    addressLine1 = serializers.CharField(source="address_line1", max_length=255)
    addressLine2 = serializers.CharField(
        source="address_line2",
        max_length=255,
        required=False,
        allow_blank=True,
        default="",
    )
    city = serializers.CharField(max_length=120)
    province = serializers.CharField(max_length=120)

    productId = serializers.CharField(source="product_id", max_length=64)
    productName = serializers.CharField(
        source="product_name", required=False, allow_blank=True, default=""
    )
    productPrice = serializers.DecimalField(
        source="product_price",
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.00"),
        required=False,
        default=Decimal("0.00"),
    )
    quantity = serializers.IntegerField(min_value=1, required=False, default=1)
    colorValue = serializers.CharField(
        source="color_value", required=False, allow_blank=True, default=""
    )
    colorName = serializers.CharField(
        source="color_name", required=False, allow_blank=True, default=""
    )
    productImage = serializers.CharField(
        source="product_image",
        max_length=500,
        required=False,
        allow_blank=True,
        default="",
    )
    productCategory = serializers.CharField(
        source="product_category", required=False, allow_blank=True, default=""
    )
    total = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.00"),
        required=False,
        allow_null=True,
    )
    paymentMethod = serializers.CharField(
        source="payment_method",
        max_length=32,
        required=False,
        allow_blank=True,
        default=Order.DEFAULT_PAYMENT_METHOD,
    )

    def validate(self, attrs):
        if attrs.get("total") is None:
            attrs["total"] = attrs["product_price"] * attrs["quantity"]
        return attrs


class OrderSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    orderNotes = serializers.CharField(source="order_notes")
    addressLine1 = serializers.CharField(source="address_line1")
    addressLine2 = serializers.CharField(source="address_line2")
    productId = serializers.CharField(source="product_id")
    productName = serializers.CharField(source="product_name")
    productPrice = serializers.DecimalField(
        source="product_price", max_digits=12, decimal_places=2
    )
    colorValue = serializers.CharField(source="color_value")
    colorName = serializers.CharField(source="color_name")
    productImage = serializers.CharField(source="product_image")
    productCategory = serializers.CharField(source="product_category")
    paymentMethod = serializers.CharField(source="payment_method")
    paymentStatus = serializers.CharField(source="payment_status")
    amountPaid = serializers.DecimalField(
        source="amount_paid", max_digits=12, decimal_places=2
    )
    paymentDate = serializers.DateTimeField(source="payment_date", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = Order
        fields = [
            "id",
            "firstName",
            "lastName",
            "phone",
            "orderNotes",
            "addressLine1",
            "addressLine2",
            "city",
            "province",
            "productId",
            "productName",
            "productPrice",
            "quantity",
            "colorValue",
            "colorName",
            "productImage",
            "productCategory",
            "total",
            "paymentMethod",
            "paymentStatus",
            "amountPaid",
            "paymentDate",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
