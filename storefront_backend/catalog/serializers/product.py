# catalog/serializers/product.py

from decimal import Decimal

from rest_framework import serializers

from catalog.models import Category, Product
from catalog.serializers.category import CategorySummarySerializer


class ProductSerializer(serializers.ModelSerializer):
    """
    Product serializer (camelCase wire format).

    Rules:
    - categoryId is writable and must reference an existing category
    - category (nested) is emitted only when context["include_category"] is true
    - price / discountPercentage are non-negative decimals
    """

    name = serializers.CharField(required=True, allow_blank=False, max_length=255)
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0.00")
    )
    discountPercentage = serializers.DecimalField(
        source="discount_percentage",
        max_digits=5,
        decimal_places=2,
        min_value=Decimal("0.00"),
        max_value=Decimal("100.00"),
        required=False,
        allow_null=True,
    )
    rating = serializers.FloatField(
        required=False, allow_null=True, min_value=0, max_value=5
    )
    dimensions = serializers.JSONField(required=False)
    features = serializers.ListField(
        child=serializers.CharField(allow_blank=False), required=False
    )
    tieredPricing = serializers.JSONField(source="tiered_pricing", required=False)
    colors = serializers.JSONField(required=False)
    categoryId = serializers.PrimaryKeyRelatedField(
        source="category",
        queryset=Category.objects.all(),
        pk_field=serializers.UUIDField(format="hex_verbose"),
    )
    category = CategorySummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "discountPercentage",
            "rating",
            "image",
            "dimensions",
            "features",
            "tieredPricing",
            "colors",
            "categoryId",
            "category",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def validate_dimensions(self, value):
        if value in (None, ""):
            return {}
        if not isinstance(value, dict):
            raise serializers.ValidationError(
                "dimensions must be an object with width/height/length"
            )
        return {k: v for k, v in value.items() if k in {"width", "height", "length"}}

    def _validate_list(self, value, label: str):
        if value in (None, ""):
            return []
        if not isinstance(value, list):
            raise serializers.ValidationError(f"{label} must be a list")
        return value

    def validate_tieredPricing(self, value):
        return self._validate_list(value, "tieredPricing")

    def validate_colors(self, value):
        return self._validate_list(value, "colors")

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not self.context.get("include_category"):
            data.pop("category", None)
        return data
