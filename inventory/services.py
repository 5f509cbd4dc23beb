"""
Servicio de gestión de inventario: CRUD, validación y disparo de alertas.
"""
import logging

from django.db import transaction

from core.exceptions import InvalidRequestError, ResourceNotFoundError
from core.models import Status

from .alerts import get_low_stock_checker
from .alerts.services import LowStockChecker
from .models import InventoryItem

logger = logging.getLogger(__name__)


class InventoryItemService:
    """
    Lógica de negocio de productos en inventario.

    Tras crear o actualizar, el producto se evalúa contra el umbral y se
    notifica de inmediato si está bajo; esa notificación no pasa por el ledger.
    Subir la cantidad por encima de CLEAR_THRESHOLD limpia la alerta del ledger.
    """

    def __init__(self, low_stock_checker=None):
        self.low_stock_checker = low_stock_checker or get_low_stock_checker()

    @property
    def alert_service(self):
        return self.low_stock_checker.alert_service

    def list_items(self, queryset=None):
        logger.info("Consultando todos los productos")
        if queryset is None:
            queryset = InventoryItem.objects.all()
        return list(queryset)

    def get_item(self, item_id) -> InventoryItem:
        logger.info("Consultando producto con ID: %s", item_id)
        return self._get_or_404(InventoryItem.objects.all(), item_id)

    def create_item(self, data) -> InventoryItem:
        logger.info("Creando producto: %s", data.get("product_name"))
        self._validate_item_data(data)

        item = InventoryItem(
            product_name=data["product_name"].strip(),
            price_per_unit=data["price_per_unit"],
            quantity=data["quantity"],
            status=data.get("status") or Status.ACTIVE,
        )
        with transaction.atomic():
            item.save()
        logger.info("Producto creado con ID: %s", item.pk)

        self.alert_service.check_and_notify(item)
        return item

    def update_item(self, item_id, data) -> InventoryItem:
        logger.info("Actualizando producto con ID: %s", item_id)
        self._validate_item_data(data)

        with transaction.atomic():
            item = self._get_or_404(InventoryItem.objects.select_for_update(), item_id)
            item.product_name = data["product_name"].strip()
            item.price_per_unit = data["price_per_unit"]
            item.quantity = data["quantity"]
            if data.get("status"):
                item.status = data["status"]
            item.save()
        logger.info("Producto actualizado con ID: %s", item.pk)

        self.alert_service.check_and_notify(item)
        return item

    def update_quantity(self, item_id, quantity) -> InventoryItem:
        logger.info("Actualizando cantidad del producto ID: %s a: %s", item_id, quantity)
        if quantity is None or quantity < 0:
            raise InvalidRequestError("La cantidad no puede ser negativa.")

        with transaction.atomic():
            item = self._get_or_404(InventoryItem.objects.select_for_update(), item_id)
            item.quantity = quantity
            item.save(update_fields=["quantity"])
        logger.info("Cantidad actualizada para el producto ID: %s", item.pk)

        if LowStockChecker.should_clear(quantity):
            logger.info("Stock repuesto para el producto ID: %s, limpiando alerta", item.pk)
            self.low_stock_checker.clear(item.pk)

        self.alert_service.check_and_notify(item)
        return item

    def delete_item(self, item_id):
        logger.info("Eliminando producto con ID: %s", item_id)
        deleted, _ = InventoryItem.objects.filter(pk=item_id).delete()
        if not deleted:
            raise ResourceNotFoundError(f"Producto no encontrado con ID: {item_id}")
        logger.info("Producto eliminado con ID: %s", item_id)

    def low_stock_report(self):
        """Productos bajo el umbral configurado y el snapshot actual del ledger."""
        threshold = self.alert_service.threshold
        items = list(InventoryItem.objects.below_threshold(threshold))
        return items, self.low_stock_checker.alerted_ids

    @staticmethod
    def _get_or_404(queryset, item_id):
        try:
            return queryset.get(pk=item_id)
        except (InventoryItem.DoesNotExist, ValueError, TypeError):
            raise ResourceNotFoundError(f"Producto no encontrado con ID: {item_id}") from None

    @staticmethod
    def _validate_item_data(data):
        name = data.get("product_name")
        if name is None or not str(name).strip():
            raise InvalidRequestError("El nombre del producto es obligatorio.")
        price = data.get("price_per_unit")
        if price is None or price <= 0:
            raise InvalidRequestError("El precio por unidad debe ser mayor que 0.")
        quantity = data.get("quantity")
        if quantity is None or quantity < 0:
            raise InvalidRequestError("La cantidad no puede ser negativa.")
