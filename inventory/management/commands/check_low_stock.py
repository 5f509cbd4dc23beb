"""
Management command para ejecutar un ciclo de revisión de stock bajo.
Uso: python manage.py check_low_stock

Pensado para despliegues con INVENTORY_ALERT_SCHEDULER=off (cron) o para
diagnóstico: el ledger es el de este proceso, no el del poller del proceso web.
"""
from django.conf import settings
from django.core.management.base import BaseCommand

from inventory.alerts import get_low_stock_checker


class Command(BaseCommand):
    help = "Ejecuta una revisión de stock bajo y envía las alertas pendientes"

    def handle(self, *args, **options):
        if settings.INVENTORY_ALERT_SCHEDULER == "thread":
            self.stdout.write(
                self.style.NOTICE(
                    "El poller del proceso web está activo: este ciclo usa un ledger propio "
                    "y puede repetir alertas ya enviadas."
                )
            )

        checker = get_low_stock_checker()
        alerted = checker.sweep()
        if alerted:
            self.stdout.write(
                self.style.WARNING(
                    f"⚠️  Alertas enviadas para {len(alerted)} productos: {', '.join(map(str, alerted))}"
                )
            )
        else:
            self.stdout.write(self.style.SUCCESS("✓ Sin alertas nuevas de stock bajo."))
