# catalog/views/category.py

"""
CATEGORY API

GET    /api/categories?includeProducts=<bool>   (AllowAny)
POST   /api/categories                          (admin session)
PUT    /api/categories          {"id": ...}     (admin session)
DELETE /api/categories?id=<uuid>                (admin session; 409 while products exist)
GET    /api/categories/<uuid>                   (AllowAny)
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from admin_console.permissions import IsAdminSession
from catalog.serializers import CategorySerializer
from catalog.services import catalog_service
from catalog.services.exceptions import CatalogValidationError
from common.views import ServiceAPIView, query_flag


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class CategoryCollectionView(ServiceAPIView):
    throttle_classes = [PublicCatalogThrottle]
    generic_error_message = "Failed to process category request"

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAdminSession()]

    @extend_schema(
        tags=["Catalog"],
        parameters=[
            OpenApiParameter(
                name="includeProducts",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Embed each category's products.",
            ),
        ],
        responses={200: CategorySerializer(many=True)},
        description="List categories with product counts.",
    )
    def get(self, request, *args, **kwargs):
        include_products = query_flag(request, "includeProducts")
        categories = catalog_service.list_categories(include_products=include_products)
        data = CategorySerializer(
            categories, many=True, context={"include_products": include_products}
        ).data
        return Response({"success": True, "data": data})

    @extend_schema(
        tags=["Catalog"],
        request=CategorySerializer,
        responses={
            201: CategorySerializer,
            400: OpenApiResponse(description="Validation error"),
            401: OpenApiResponse(description="Admin session required"),
        },
    )
    def post(self, request, *args, **kwargs):
        s = CategorySerializer(data=request.data)
        if not s.is_valid():
            raise CatalogValidationError("Invalid category data", details=s.errors)

        category = catalog_service.create_category(data=s.validated_data)
        return Response(
            {"success": True, "data": CategorySerializer(category).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        tags=["Catalog"],
        request=CategorySerializer,
        responses={
            200: CategorySerializer,
            400: OpenApiResponse(description="Missing id / validation error"),
            404: OpenApiResponse(description="Category not found"),
        },
    )
    def put(self, request, *args, **kwargs):
        category_id = request.data.get("id")
        if not category_id:
            raise CatalogValidationError("Category ID is required")

        s = CategorySerializer(data=request.data, partial=True)
        if not s.is_valid():
            raise CatalogValidationError("Invalid category data", details=s.errors)

        category = catalog_service.update_category(category_id, data=s.validated_data)
        return Response({"success": True, "data": CategorySerializer(category).data})

    @extend_schema(
        tags=["Catalog"],
        parameters=[
            OpenApiParameter(
                name="id", type=str, location=OpenApiParameter.QUERY, required=True
            ),
        ],
        responses={
            200: OpenApiResponse(description="Deleted"),
            400: OpenApiResponse(description="Missing id"),
            404: OpenApiResponse(description="Category not found"),
            409: OpenApiResponse(description="Category still has products"),
        },
    )
    def delete(self, request, *args, **kwargs):
        category_id = (request.query_params.get("id") or "").strip()
        if not category_id:
            raise CatalogValidationError("Category ID is required")

        catalog_service.delete_category(category_id)
        return Response(
            {"success": True, "message": "Category deleted successfully"}
        )


class CategoryDetailView(ServiceAPIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]
    generic_error_message = "Internal server error"

    @extend_schema(
        tags=["Catalog"],
        responses={
            200: CategorySerializer,
            404: OpenApiResponse(description="Category not found"),
        },
    )
    def get(self, request, category_id, *args, **kwargs):
        category = catalog_service.get_category(category_id)
        return Response(CategorySerializer(category).data)
