"""
Canales de entrega de alertas de stock bajo.

Cada notificador es una función que recibe el InventoryItem y el umbral con el
que se evaluó. El conjunto es cerrado y se elige por nombre en
settings.INVENTORY_ALERT_NOTIFIERS.
"""
import logging
from typing import Callable

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from ..tasks import send_low_stock_email

logger = logging.getLogger(__name__)

Notifier = Callable[["InventoryItem", int], None]  # noqa: F821


def console_notifier(item, threshold):
    """Escribe la alerta en el log con nivel WARNING."""
    logger.warning("=== ALERTA DE STOCK BAJO ===")
    logger.warning("Producto: %s (ID: %s)", item.product_name, item.pk)
    logger.warning("Cantidad actual: %s (umbral: %s)", item.quantity, threshold)
    logger.warning("Precio por unidad: %s", item.price_per_unit)
    logger.warning("Valor total: %s", item.total_price)
    logger.warning("============================")


def _item_snapshot(item):
    return {
        "id": item.pk,
        "product_name": item.product_name,
        "quantity": item.quantity,
        "price_per_unit": str(item.price_per_unit),
        "total_price": None if item.total_price is None else str(item.total_price),
    }


def email_notifier(item, threshold):
    """
    Encola el email de stock bajo para los destinatarios configurados.

    El envío lo hace la tarea de Celery (con reintentos); si no se puede
    encolar, el error se registra y no se propaga.
    """
    recipients = list(getattr(settings, "INVENTORY_ALERT_EMAIL_RECIPIENTS", []) or [])
    if not recipients:
        logger.debug("Sin destinatarios configurados, se omite el email de stock bajo")
        return

    try:
        send_low_stock_email.delay(_item_snapshot(item), threshold, recipients)
    except Exception:
        logger.exception("No se pudo enviar el email de stock bajo para el producto: %s", item.product_name)


NOTIFIERS: dict[str, Notifier] = {
    "console": console_notifier,
    "email": email_notifier,
}


def get_notifiers(names=None) -> list[Notifier]:
    """Resuelve nombres de notificadores a funciones; un nombre desconocido es un error de configuración."""
    if names is None:
        names = settings.INVENTORY_ALERT_NOTIFIERS
    notifiers = []
    for name in names:
        try:
            notifiers.append(NOTIFIERS[name])
        except KeyError:
            raise ImproperlyConfigured(
                f"Notificador desconocido '{name}'. Opciones: {', '.join(sorted(NOTIFIERS))}"
            ) from None
    return notifiers
