# payments/views.py

"""
PAYHERE API

POST /api/payhere         (AllowAny, JSON)  -> {success, formData, checkoutUrl}
POST /api/payhere/notify  (AllowAny, form)  -> {success: true}

The notify endpoint is authenticated by its md5sig, not by a session.
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from common.views import ServiceAPIView
from orders.services import order_service
from orders.views import PublicWriteThrottle
from payments.serializers import CheckoutRequestSerializer, PayHereNotifySerializer
from payments.services import notification_service
from payments.services.exceptions import (
    CheckoutValidationError,
    MalformedNotificationError,
)
from payments.services.payhere import PayHereNotification, build_checkout_payload

logger = logging.getLogger(__name__)


class WebhookThrottle(AnonRateThrottle):
    scope = "webhook"


class PayHereCheckoutView(ServiceAPIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [JSONParser]
    throttle_classes = [PublicWriteThrottle]
    generic_error_message = "Failed to initiate payment"

    @extend_schema(
        tags=["Payments"],
        request=CheckoutRequestSerializer,
        responses={
            200: OpenApiResponse(description="Signed PayHere checkout form"),
            400: OpenApiResponse(description="Invalid checkout request"),
            404: OpenApiResponse(description="Order not found"),
        },
        description="Sign a PayHere hosted-checkout form for an existing order.",
    )
    def post(self, request, *args, **kwargs):
        s = CheckoutRequestSerializer(data=request.data)
        if not s.is_valid():
            raise CheckoutValidationError(details=s.errors)

        checkout = s.to_checkout_request()
        order_service.get_order(checkout.order_id)

        payload = build_checkout_payload(checkout)
        logger.info(
            "PayHere checkout signed",
            extra={"order_id": checkout.order_id, "amount": payload["formData"]["amount"]},
        )
        return Response({"success": True, **payload})


class PayHereNotifyView(ServiceAPIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [FormParser, MultiPartParser]
    throttle_classes = [WebhookThrottle]
    generic_error_message = "Failed to process payment notification"

    @extend_schema(
        tags=["Payments"],
        request=PayHereNotifySerializer,
        responses={
            200: OpenApiResponse(description="Notification applied"),
            400: OpenApiResponse(description="Invalid merchant, signature or amount"),
            404: OpenApiResponse(description="Order not found"),
        },
        description="PayHere server-to-server payment notification.",
    )
    def post(self, request, *args, **kwargs):
        s = PayHereNotifySerializer(data=request.data)
        if not s.is_valid():
            raise MalformedNotificationError(details=s.errors)

        notification = PayHereNotification.from_mapping(s.validated_data)
        notification_service.process_notification(notification)
        return Response({"success": True})
