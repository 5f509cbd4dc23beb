"""
Alertas de stock bajo: ledger de deduplicación, notificadores, servicio y poller.

Las instancias compartidas pertenecen a InventoryConfig; estos helpers las exponen.
"""
from django.apps import apps


def get_low_stock_checker():
    return apps.get_app_config("inventory").low_stock_checker


def get_alert_service():
    return get_low_stock_checker().alert_service
