# orders/views.py

"""
ORDERS API

GET  /api/orders            (admin session)  -> Order[] newest first
POST /api/orders            (AllowAny)       -> {success, message, orderId, order}
GET  /api/orders/<uuid>     (AllowAny)       -> Order (checkout success page)
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from admin_console.permissions import IsAdminSession
from common.views import ServiceAPIView
from orders.serializers import OrderCreateSerializer, OrderSerializer
from orders.services import order_service
from orders.services.exceptions import OrderValidationError


class PublicWriteThrottle(AnonRateThrottle):
    """
    For public write endpoints (order creation, checkout signing).
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['public_write'].
    """

    scope = "public_write"

    def allow_request(self, request, view):
        if request.method == "GET":
            return True
        return super().allow_request(request, view)


class OrderCollectionView(ServiceAPIView):
    parser_classes = [JSONParser]
    throttle_classes = [PublicWriteThrottle]
    generic_error_message = "Failed to process order"

    def get_permissions(self):
        if self.request.method == "POST":
            return [AllowAny()]
        return [IsAdminSession()]

    def get_authenticators(self):
        # checkout is anonymous; an admin cookie must not trigger CSRF here
        if self.request.method == "POST":
            return []
        return super().get_authenticators()

    @extend_schema(
        tags=["Orders"],
        responses={
            200: OrderSerializer(many=True),
            401: OpenApiResponse(description="Admin session required"),
        },
        description="All orders, newest first (admin).",
    )
    def get(self, request, *args, **kwargs):
        orders = order_service.list_orders()
        return Response(OrderSerializer(orders, many=True).data)

    @extend_schema(
        tags=["Orders"],
        request=OrderCreateSerializer,
        responses={
            200: OpenApiResponse(description="Order placed"),
            400: OpenApiResponse(description="Missing required fields"),
            429: OpenApiResponse(description="Rate limited"),
        },
        description="Create a PENDING order from the checkout form.",
    )
    def post(self, request, *args, **kwargs):
        s = OrderCreateSerializer(data=request.data)
        if not s.is_valid():
            raise OrderValidationError(details=s.errors)

        order = order_service.create_order(data=s.validated_data)
        return Response(
            {
                "success": True,
                "message": "Order placed successfully",
                "orderId": str(order.id),
                "order": OrderSerializer(order).data,
            }
        )


class OrderDetailView(ServiceAPIView):
    permission_classes = [AllowAny]
    generic_error_message = "Failed to fetch order"

    @extend_schema(
        tags=["Orders"],
        responses={
            200: OrderSerializer,
            404: OpenApiResponse(description="Order not found"),
        },
    )
    def get(self, request, order_id, *args, **kwargs):
        order = order_service.get_order(order_id)
        return Response(OrderSerializer(order).data)
