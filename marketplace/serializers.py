from rest_framework import serializers

from .models import ProductVariant


class AdminProductVariantSerializer(serializers.ModelSerializer):
    """Variantes vistas desde la API administrativa; el stock solo cambia vía ajuste."""

    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = ProductVariant
        fields = [
            "id",
            "product",
            "product_name",
            "name",
            "sku",
            "price",
            "stock",
            "has_unlimited_stock",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class StockAdjustmentSerializer(serializers.Serializer):
    stock = serializers.IntegerField(min_value=0)
    reason = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
