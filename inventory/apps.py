import atexit
import logging
import os
import sys

from django.apps import AppConfig
from django.conf import settings

from .alerts.ledger import AlertLedger

logger = logging.getLogger(__name__)


def _is_runserver_child():
    """
    True solo en el proceso de `runserver` que atiende peticiones: el hijo del
    autoreload (RUN_MAIN=true) o el único proceso con --noreload. Vale para
    manage.py, django-admin y `python -m django`.
    """
    if len(sys.argv) < 2 or sys.argv[1] != "runserver":
        return False
    return os.environ.get("RUN_MAIN") == "true" or "--noreload" in sys.argv


def _should_start_poller():
    """
    El poller y los clear() de las peticiones deben compartir ledger, así que
    solo arranca en el proceso web. Fuera de runserver es opt-in con
    INVENTORY_ALERT_POLLER (un único proceso web, p. ej. gunicorn --workers 1).
    """
    if settings.INVENTORY_ALERT_SCHEDULER != "thread":
        return False
    return settings.INVENTORY_ALERT_POLLER or _is_runserver_child()


class InventoryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "inventory"
    verbose_name = "Inventario"

    def __init__(self, app_name, app_module):
        super().__init__(app_name, app_module)
        self.alert_ledger = AlertLedger()
        self.low_stock_checker = None
        self.poller = None

    def ready(self):
        from .alerts.services import AlertService, LowStockChecker

        self.low_stock_checker = LowStockChecker(AlertService(), self.alert_ledger)
        atexit.register(self.stop_poller)

        if _should_start_poller():
            self.start_poller()

    def start_poller(self):
        from .alerts.poller import LowStockPoller

        if self.poller is not None and self.poller.is_alive():
            return self.poller
        self.poller = LowStockPoller(
            self.low_stock_checker.sweep,
            interval=settings.INVENTORY_ALERT_INTERVAL_SECONDS,
            initial_delay=settings.INVENTORY_ALERT_INITIAL_DELAY_SECONDS,
        )
        self.poller.start()
        logger.info("Poller de stock bajo arrancado en el proceso %s", os.getpid())
        return self.poller

    def stop_poller(self, timeout=5.0):
        if self.poller is None:
            return
        self.poller.stop(timeout)
        self.poller = None
