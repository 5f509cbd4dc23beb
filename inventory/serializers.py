from rest_framework import serializers

from core.models import Status

from .models import InventoryItem


class InventoryItemSerializer(serializers.ModelSerializer):
    """Representación de salida de un producto."""

    class Meta:
        model = InventoryItem
        fields = [
            "id",
            "product_name",
            "price_per_unit",
            "quantity",
            "total_price",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class InventoryItemWriteSerializer(serializers.Serializer):
    """Valida altas y actualizaciones completas (POST/PUT)."""

    product_name = serializers.CharField(
        max_length=255,
        error_messages={
            "required": "El nombre del producto es obligatorio.",
            "blank": "El nombre del producto es obligatorio.",
            "null": "El nombre del producto es obligatorio.",
        },
    )
    price_per_unit = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        error_messages={
            "required": "El precio por unidad es obligatorio.",
            "null": "El precio por unidad es obligatorio.",
        },
    )
    quantity = serializers.IntegerField(
        min_value=0,
        error_messages={
            "required": "La cantidad es obligatoria.",
            "null": "La cantidad es obligatoria.",
            "min_value": "La cantidad no puede ser negativa.",
        },
    )
    status = serializers.ChoiceField(choices=Status.choices, required=False, allow_null=True)

    def validate_price_per_unit(self, value):
        if value <= 0:
            raise serializers.ValidationError("El precio por unidad debe ser mayor que 0.")
        return value


class QuantityUpdateSerializer(serializers.Serializer):
    """Valida el PATCH de cantidad."""

    quantity = serializers.IntegerField(
        min_value=0,
        error_messages={
            "required": "La cantidad es obligatoria.",
            "null": "La cantidad es obligatoria.",
            "min_value": "La cantidad no puede ser negativa.",
        },
    )


class LowStockItemSerializer(InventoryItemSerializer):
    """Producto bajo el umbral con su estado en el ledger de alertas."""

    alerted = serializers.SerializerMethodField()

    class Meta(InventoryItemSerializer.Meta):
        fields = InventoryItemSerializer.Meta.fields + ["alerted"]
        read_only_fields = InventoryItemSerializer.Meta.read_only_fields

    def get_alerted(self, obj):
        return obj.pk in self.context.get("alerted_ids", frozenset())
