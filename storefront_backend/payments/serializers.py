# payments/serializers.py

"""
PAYHERE REQUEST SERIALIZERS

- CheckoutRequestSerializer: storefront checkout form (camelCase JSON)
- PayHereNotifySerializer:   notify_url callback (form-encoded, snake_case)
"""

from __future__ import annotations

from rest_framework import serializers

from payments.services.exceptions import CheckoutValidationError
from payments.services.payhere import DEFAULT_COUNTRY, CheckoutRequest, format_amount


class CheckoutRequestSerializer(serializers.Serializer):
    orderId = serializers.CharField(source="order_id", max_length=64)
    amount = serializers.CharField(max_length=32)
    firstName = serializers.CharField(
        source="first_name", required=False, allow_blank=True, default=""
    )
    lastName = serializers.CharField(
        source="last_name", required=False, allow_blank=True, default=""
    )
    email = serializers.CharField(required=False, allow_blank=True, default="")
    phone = serializers.CharField(required=False, allow_blank=True, default="")
    address = serializers.CharField(required=False, allow_blank=True, default="")
    city = serializers.CharField(required=False, allow_blank=True, default="")
    country = serializers.CharField(
        required=False, allow_blank=True, default=DEFAULT_COUNTRY
    )
    items = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_amount(self, value):
        try:
            return format_amount(value)
        except CheckoutValidationError as exc:
            raise serializers.ValidationError(exc.message) from exc

    def to_checkout_request(self) -> CheckoutRequest:
        return CheckoutRequest(**self.validated_data)


class PayHereNotifySerializer(serializers.Serializer):
    merchant_id = serializers.CharField(allow_blank=True)
    order_id = serializers.CharField(max_length=64)
    payment_id = serializers.CharField(required=False, allow_blank=True, default="")
    payhere_amount = serializers.CharField()
    payhere_currency = serializers.CharField(allow_blank=True)
    status_code = serializers.CharField()
    md5sig = serializers.CharField(allow_blank=True)
