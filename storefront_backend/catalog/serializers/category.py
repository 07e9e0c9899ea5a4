# catalog/serializers/category.py

from rest_framework import serializers

from catalog.models import Category


class CategorySummarySerializer(serializers.ModelSerializer):
    """Compact category shape embedded in product payloads."""

    class Meta:
        model = Category
        fields = ["id", "name", "type", "image"]
        read_only_fields = fields


class CategorySerializer(serializers.ModelSerializer):
    """
    Category serializer (camelCase wire format).

    Rules:
    - name is required and cannot be blank
    - productCount is read-only (annotated by the catalog service)
    - products are embedded only when context["include_products"] is true
    """

    name = serializers.CharField(required=True, allow_blank=False, max_length=255)
    type = serializers.ChoiceField(choices=Category.Type.choices, required=False)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    productCount = serializers.SerializerMethodField()
    products = serializers.SerializerMethodField()

    class Meta:
        model = Category
        fields = [
            "id",
            "name",
            "description",
            "image",
            "type",
            "createdAt",
            "updatedAt",
            "productCount",
            "products",
        ]
        read_only_fields = ["id"]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def get_productCount(self, obj) -> int:
        count = getattr(obj, "product_count", None)
        if count is None:
            count = obj.products.count()
        return int(count)

    def get_products(self, obj):
        from catalog.serializers.product import ProductSerializer

        return ProductSerializer(obj.products.all(), many=True).data

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not self.context.get("include_products"):
            data.pop("products", None)
        return data
