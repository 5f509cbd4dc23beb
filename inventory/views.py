from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .models import InventoryItem
from .serializers import (
    InventoryItemSerializer,
    InventoryItemWriteSerializer,
    LowStockItemSerializer,
    QuantityUpdateSerializer,
)
from .services import InventoryItemService


class InventoryItemViewSet(viewsets.GenericViewSet):
    """
    CRUD de productos en inventario.

    PATCH solo existe sobre /products/{id}/quantity/; no hay actualización
    parcial genérica del producto.
    """
    queryset = InventoryItem.objects.all()
    serializer_class = InventoryItemSerializer
    filterset_fields = ["status"]
    lookup_value_regex = r"\d+"

    def get_service(self):
        return InventoryItemService()

    def list(self, request):
        items = self.get_service().list_items(self.filter_queryset(self.get_queryset()))
        return Response(self.get_serializer(items, many=True).data)

    def create(self, request):
        serializer = InventoryItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.get_service().create_item(serializer.validated_data)
        return Response(InventoryItemSerializer(item).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        item = self.get_service().get_item(pk)
        return Response(InventoryItemSerializer(item).data)

    def update(self, request, pk=None):
        serializer = InventoryItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.get_service().update_item(pk, serializer.validated_data)
        return Response(InventoryItemSerializer(item).data)

    def destroy(self, request, pk=None):
        self.get_service().delete_item(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["patch"], url_path="quantity")
    def quantity(self, request, pk=None):
        serializer = QuantityUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.get_service().update_quantity(pk, serializer.validated_data["quantity"])
        return Response(InventoryItemSerializer(item).data)

    @action(detail=False, methods=["get"], url_path="low-stock")
    def low_stock(self, request):
        service = self.get_service()
        items, alerted_ids = service.low_stock_report()
        serializer = LowStockItemSerializer(items, many=True, context={"alerted_ids": alerted_ids})
        return Response({
            "threshold": service.alert_service.threshold,
            "items": serializer.data,
        })
