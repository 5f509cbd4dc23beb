"""
Evaluación de stock bajo y deduplicación de alertas entre ciclos del poller.
"""
import logging

from django.conf import settings

from .notifiers import get_notifiers

logger = logging.getLogger(__name__)


class AlertService:
    """
    Decide si un producto está bajo el umbral y entrega la alerta a todos
    los notificadores. No consulta ni modifica el ledger.
    """

    def __init__(self, threshold=None, notifiers=None):
        self._threshold = threshold
        self._notifiers = notifiers

    @property
    def threshold(self) -> int:
        if self._threshold is not None:
            return self._threshold
        return settings.INVENTORY_ALERT_THRESHOLD

    @property
    def notifiers(self):
        if self._notifiers is not None:
            return self._notifiers
        return get_notifiers()

    def is_low_stock(self, item) -> bool:
        return item.quantity is not None and item.quantity < self.threshold

    def check_and_notify(self, item) -> bool:
        """Notifica si el producto está bajo el umbral. Devuelve True si se entregó la alerta."""
        if not self.is_low_stock(item):
            return False
        self.notify_all(item)
        return True

    def notify_all(self, item):
        # Un notificador que falla no impide que los demás se ejecuten.
        threshold = self.threshold
        for notifier in self.notifiers:
            try:
                notifier(item, threshold)
            except Exception:
                logger.exception(
                    "El notificador %s falló para el producto %s",
                    getattr(notifier, "__name__", repr(notifier)),
                    item.pk,
                )


def _fetch_low_stock_items(threshold):
    from ..models import InventoryItem

    return list(InventoryItem.objects.below_threshold(threshold))


class LowStockChecker:
    """
    Ciclo periódico de revisión de stock bajo con deduplicación por ledger.

    - sweep(): alerta una sola vez por producto mientras siga en el ledger.
      Si la consulta no devuelve productos, vacía el ledger completo.
    - clear(item_id): quita un producto del ledger (reabastecimiento).
    """

    # Umbral fijo usado por el flujo de actualización de cantidad para limpiar
    # la alerta; es independiente de INVENTORY_ALERT_THRESHOLD.
    CLEAR_THRESHOLD = 2

    def __init__(self, alert_service, ledger, fetch_low_stock=None):
        self.alert_service = alert_service
        self.ledger = ledger
        self._fetch_low_stock = fetch_low_stock or _fetch_low_stock_items

    @classmethod
    def should_clear(cls, quantity) -> bool:
        return quantity is not None and quantity >= cls.CLEAR_THRESHOLD

    @property
    def alerted_ids(self) -> frozenset:
        return self.ledger.snapshot()

    def sweep(self) -> list:
        """Ejecuta un ciclo y devuelve los IDs alertados en este ciclo."""
        threshold = self.alert_service.threshold
        logger.debug("Revisión programada de inventario con umbral: %s", threshold)

        try:
            low_stock_items = list(self._fetch_low_stock(threshold))
        except Exception:
            logger.exception("Error durante la revisión programada de inventario")
            return []

        if not low_stock_items:
            logger.debug("No hay productos bajo el umbral")
            self.ledger.reset()
            return []

        logger.info("Se encontraron %d productos bajo el umbral", len(low_stock_items))
        alerted = []
        for item in low_stock_items:
            if self.ledger.claim(item.pk):
                logger.info(
                    "Enviando alerta para el producto: %s (Cantidad: %s)",
                    item.product_name,
                    item.quantity,
                )
                self.alert_service.check_and_notify(item)
                alerted.append(item.pk)
            else:
                logger.debug("Alerta ya enviada para el producto: %s", item.product_name)
        return alerted

    def clear(self, item_id):
        if self.ledger.discard(item_id):
            logger.info("Alerta limpiada para el producto ID: %s", item_id)
