from decimal import Decimal
from types import SimpleNamespace
from unittest import mock

import pytest
from model_bakery import baker

from inventory.alerts.ledger import AlertLedger
from inventory.alerts.services import AlertService, LowStockChecker
from inventory.models import InventoryItem


def make_item(pk, quantity, name=None):
    return SimpleNamespace(
        pk=pk,
        product_name=name or f"Producto {pk}",
        quantity=quantity,
        price_per_unit=Decimal("1.00"),
        total_price=Decimal(quantity),
    )


class TestAlertService:
    @pytest.mark.parametrize("quantity, expected", [(0, True), (1, True), (2, False), (10, False)])
    def test_is_low_stock_uses_strict_comparison(self, quantity, expected):
        service = AlertService(threshold=2, notifiers=[])
        assert service.is_low_stock(make_item(1, quantity)) is expected

    def test_threshold_defaults_to_settings(self, settings):
        settings.INVENTORY_ALERT_THRESHOLD = 7
        assert AlertService(notifiers=[]).threshold == 7

    def test_check_and_notify_delivers_to_every_notifier(self):
        first, second = mock.Mock(), mock.Mock()
        service = AlertService(threshold=2, notifiers=[first, second])
        item = make_item(1, 1)

        assert service.check_and_notify(item) is True

        first.assert_called_once_with(item, 2)
        second.assert_called_once_with(item, 2)

    def test_notifiers_receive_the_threshold_used_for_the_check(self, settings):
        settings.INVENTORY_ALERT_THRESHOLD = 2
        notifier = mock.Mock()
        service = AlertService(threshold=10, notifiers=[notifier])
        item = make_item(4, 7)

        assert service.check_and_notify(item) is True
        notifier.assert_called_once_with(item, 10)

    def test_check_and_notify_skips_items_above_threshold(self):
        notifier = mock.Mock()
        service = AlertService(threshold=2, notifiers=[notifier])

        assert service.check_and_notify(make_item(1, 5)) is False
        notifier.assert_not_called()

    def test_failing_notifier_does_not_block_the_rest(self, caplog):
        broken = mock.Mock(side_effect=RuntimeError("smtp caído"), __name__="broken")
        healthy = mock.Mock()
        service = AlertService(threshold=2, notifiers=[broken, healthy])

        service.notify_all(make_item(3, 0))

        healthy.assert_called_once()
        assert "broken" in caplog.text


class TestLowStockChecker:
    def build(self, items, notifiers=None):
        delivered = []
        service = AlertService(threshold=2, notifiers=notifiers or [lambda item, threshold: delivered.append(item)])
        fetch = mock.Mock(return_value=items)
        checker = LowStockChecker(service, AlertLedger(), fetch_low_stock=fetch)
        return checker, delivered, fetch

    def test_sweep_alerts_each_item_once(self):
        items = [make_item(1, 1), make_item(2, 0)]
        checker, delivered, fetch = self.build(items)

        assert checker.sweep() == [1, 2]
        assert checker.sweep() == []

        assert [item.pk for item in delivered] == [1, 2]
        assert checker.alerted_ids == frozenset({1, 2})
        fetch.assert_called_with(2)

    def test_new_item_alerted_while_old_stays_deduplicated(self):
        checker, delivered, fetch = self.build([make_item(1, 1)])
        checker.sweep()

        fetch.return_value = [make_item(1, 1), make_item(5, 0)]
        assert checker.sweep() == [5]
        assert [item.pk for item in delivered] == [1, 5]

    def test_clear_allows_realert(self):
        checker, delivered, _ = self.build([make_item(1, 1)])
        checker.sweep()

        checker.clear(1)
        assert 1 not in checker.alerted_ids

        checker.sweep()
        assert [item.pk for item in delivered] == [1, 1]

    def test_clear_unknown_id_is_noop(self):
        checker, _, _ = self.build([])
        checker.clear(99)
        assert checker.alerted_ids == frozenset()

    def test_empty_result_wipes_the_ledger(self):
        checker, _, fetch = self.build([make_item(1, 1), make_item(2, 1)])
        checker.sweep()
        assert len(checker.alerted_ids) == 2

        fetch.return_value = []
        assert checker.sweep() == []
        assert checker.alerted_ids == frozenset()

    def test_items_still_low_keep_stale_entries(self):
        # Solo un resultado vacío limpia: los IDs que salen de la lista siguen en el ledger.
        checker, _, fetch = self.build([make_item(1, 1), make_item(2, 1)])
        checker.sweep()

        fetch.return_value = [make_item(2, 1)]
        checker.sweep()
        assert checker.alerted_ids == frozenset({1, 2})

    def test_fetch_error_is_logged_and_ledger_untouched(self, caplog):
        checker, delivered, fetch = self.build([make_item(1, 1)])
        checker.sweep()

        fetch.side_effect = RuntimeError("sin conexión")
        assert checker.sweep() == []

        assert checker.alerted_ids == frozenset({1})
        assert len(delivered) == 1
        assert "Error durante la revisión programada" in caplog.text

    def test_failing_notifier_still_marks_item_as_alerted(self):
        broken = mock.Mock(side_effect=RuntimeError("boom"))
        checker, _, _ = self.build([make_item(1, 1)], notifiers=[broken])

        assert checker.sweep() == [1]
        assert checker.sweep() == []
        broken.assert_called_once()

    @pytest.mark.parametrize("quantity, expected", [(None, False), (0, False), (1, False), (2, True), (50, True)])
    def test_should_clear_uses_fixed_threshold(self, quantity, expected):
        assert LowStockChecker.should_clear(quantity) is expected


@pytest.mark.django_db
def test_sweep_reads_low_stock_items_from_database(low_stock_checker, recorded_alerts):
    low = baker.make(InventoryItem, product_name="Cable", price_per_unit=Decimal("3.00"), quantity=1)
    baker.make(InventoryItem, product_name="Enchufe", price_per_unit=Decimal("3.00"), quantity=2)

    assert low_stock_checker.sweep() == [low.pk]
    assert [item.pk for item in recorded_alerts] == [low.pk]
