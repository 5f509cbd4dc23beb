import pytest
from django.apps import apps
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture(autouse=True)
def alert_ledger():
    """El ledger es del proceso: se vacía antes y después de cada test."""
    ledger = apps.get_app_config("inventory").alert_ledger
    ledger.reset()
    yield ledger
    ledger.reset()


@pytest.fixture
def low_stock_checker():
    return apps.get_app_config("inventory").low_stock_checker


@pytest.fixture
def recorded_alerts(low_stock_checker):
    """
    Sustituye los notificadores del servicio compartido por uno que registra
    los productos alertados.
    """
    delivered = []
    service = low_stock_checker.alert_service
    original = service._notifiers
    service._notifiers = [lambda item, threshold: delivered.append(item)]
    yield delivered
    service._notifiers = original
