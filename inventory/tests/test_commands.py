from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from model_bakery import baker

from inventory.models import InventoryItem


@pytest.mark.django_db
class TestCheckLowStockCommand:
    def test_reports_new_alerts(self, recorded_alerts):
        item = baker.make(InventoryItem, price_per_unit=Decimal("1.00"), quantity=1)
        out = StringIO()

        call_command("check_low_stock", stdout=out)

        assert f"Alertas enviadas para 1 productos: {item.pk}" in out.getvalue()
        assert [alerted.pk for alerted in recorded_alerts] == [item.pk]

    def test_second_run_is_deduplicated(self, recorded_alerts):
        baker.make(InventoryItem, price_per_unit=Decimal("1.00"), quantity=0)
        call_command("check_low_stock", stdout=StringIO())
        out = StringIO()

        call_command("check_low_stock", stdout=out)

        assert "Sin alertas nuevas" in out.getvalue()
        assert len(recorded_alerts) == 1

    def test_reports_nothing_to_do(self, recorded_alerts):
        out = StringIO()

        call_command("check_low_stock", stdout=out)

        assert "Sin alertas nuevas" in out.getvalue()
        assert recorded_alerts == []


@pytest.mark.django_db
def test_warns_when_web_poller_is_enabled(settings, recorded_alerts):
    settings.INVENTORY_ALERT_SCHEDULER = "thread"
    out = StringIO()

    call_command("check_low_stock", stdout=out)

    assert "ledger propio" in out.getvalue()
