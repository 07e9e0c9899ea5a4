# catalog/views/product.py

"""
PRODUCT API

GET    /api/products?includeCategory=<bool>&categoryId=<uuid>&type=<TYPE>   (AllowAny)
POST   /api/products                        (admin session)
PUT    /api/products        {"id": ...}     (admin session)
DELETE /api/products?id=<uuid>              (admin session)
GET    /api/products/<uuid>                 (AllowAny, category embedded)
GET    /api/products/similar?categoryId=&excludeId=&limit=4   (AllowAny)
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from admin_console.permissions import IsAdminSession
from catalog.filters import ProductFilter
from catalog.serializers import ProductSerializer
from catalog.services import catalog_service
from catalog.services.exceptions import CatalogValidationError
from catalog.views.category import PublicCatalogThrottle
from common.views import ServiceAPIView, query_flag


class ProductCollectionView(ServiceAPIView):
    throttle_classes = [PublicCatalogThrottle]
    generic_error_message = "Failed to process product request"

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAdminSession()]

    @extend_schema(
        tags=["Catalog"],
        parameters=[
            OpenApiParameter(
                name="includeCategory",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="categoryId",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="type",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="IMPORTED_USED or BRAND_NEW",
            ),
        ],
        responses={200: ProductSerializer(many=True)},
        description="List products, newest first.",
    )
    def get(self, request, *args, **kwargs):
        include_category = query_flag(request, "includeCategory")
        qs = catalog_service.product_queryset(include_category=include_category)

        product_filter = ProductFilter(request.query_params, queryset=qs)
        if not product_filter.is_valid():
            raise CatalogValidationError(
                "Invalid product filters", details=product_filter.errors
            )

        data = ProductSerializer(
            product_filter.qs,
            many=True,
            context={"include_category": include_category},
        ).data
        return Response({"success": True, "data": data})

    @extend_schema(
        tags=["Catalog"],
        request=ProductSerializer,
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(description="Validation error"),
            401: OpenApiResponse(description="Admin session required"),
        },
    )
    def post(self, request, *args, **kwargs):
        s = ProductSerializer(data=request.data)
        if not s.is_valid():
            raise CatalogValidationError("Invalid product data", details=s.errors)

        product = catalog_service.create_product(data=s.validated_data)
        return Response(
            {"success": True, "data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        tags=["Catalog"],
        request=ProductSerializer,
        responses={
            200: ProductSerializer,
            400: OpenApiResponse(description="Missing id / validation error"),
            404: OpenApiResponse(description="Product not found"),
        },
    )
    def put(self, request, *args, **kwargs):
        product_id = request.data.get("id")
        if not product_id:
            raise CatalogValidationError("Product ID is required")

        s = ProductSerializer(data=request.data, partial=True)
        if not s.is_valid():
            raise CatalogValidationError("Invalid product data", details=s.errors)

        product = catalog_service.update_product(product_id, data=s.validated_data)
        return Response({"success": True, "data": ProductSerializer(product).data})

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
            404: OpenApiResponse(description="Product not found"),
        },
    )
    def delete(self, request, *args, **kwargs):
        product_id = (request.query_params.get("id") or "").strip()
        if not product_id:
            raise CatalogValidationError("Product ID is required")

        catalog_service.delete_product(product_id)
        return Response({"success": True, "message": "Product deleted successfully"})


class ProductDetailView(ServiceAPIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]
    generic_error_message = "Internal error"

    @extend_schema(
        tags=["Catalog"],
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(description="Product not found"),
        },
    )
    def get(self, request, product_id, *args, **kwargs):
        product = catalog_service.get_product(product_id)
        return Response(
            ProductSerializer(product, context={"include_category": True}).data
        )


class SimilarProductsView(ServiceAPIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]
    generic_error_message = "Internal error"

    @extend_schema(
        tags=["Catalog"],
        parameters=[
            OpenApiParameter(
                name="categoryId",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
            ),
            OpenApiParameter(
                name="excludeId",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="limit",
                type=int,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Defaults to 4.",
            ),
        ],
        responses={
            200: ProductSerializer(many=True),
            400: OpenApiResponse(description="Missing categoryId"),
        },
    )
    def get(self, request, *args, **kwargs):
        category_id = (request.query_params.get("categoryId") or "").strip()
        if not category_id:
            raise CatalogValidationError("Category ID is required")

        products = catalog_service.similar_products(
            category_id=category_id,
            exclude_id=(request.query_params.get("excludeId") or "").strip() or None,
            limit=catalog_service.parse_similar_limit(
                request.query_params.get("limit")
            ),
        )
        return Response(
            ProductSerializer(
                products, many=True, context={"include_category": True}
            ).data
        )
