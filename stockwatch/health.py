from django.apps import apps
from django.conf import settings
from django.db import connections
from django.http import JsonResponse
import logging

logger = logging.getLogger(__name__)


def health_check_view(request):
    """
    Health check que verifica dependencias.

    Verifica:
    - Base de datos
    - Poller de stock bajo (si el scheduler es "thread")
    - Celery workers (opcional, con ?check_celery=1)

    Retorna 200 si todo está OK, 503 si alguna dependencia crítica falla.
    """
    checks = {
        "db": False,
        "alert_poller": "not_applicable",
        "celery": "not_checked",
    }
    errors = []

    # 1. Verificar base de datos
    try:
        cursor = connections["default"].cursor()
        cursor.execute("SELECT 1")
        cursor.fetchone()
        checks["db"] = True
    except Exception as exc:
        errors.append(f"DB error: {exc}")
        logger.error("Health check DB failed: %s", exc)

    # 2. Verificar el hilo de alertas
    inventory_config = apps.get_app_config("inventory")
    if settings.INVENTORY_ALERT_SCHEDULER == "thread":
        poller = inventory_config.poller
        checks["alert_poller"] = bool(poller and poller.is_alive())
        if not checks["alert_poller"]:
            errors.append("Low stock poller is not running")
    checks["alerted_products"] = len(inventory_config.alert_ledger)

    # 3. Verificar Celery (opcional, puede ser lento)
    if request.GET.get("check_celery") == "1":
        try:
            from stockwatch.celery import app as celery_app

            # Timeout de 2 segundos para no bloquear el health check
            active_workers = celery_app.control.inspect(timeout=2.0).ping()
            checks["celery"] = bool(active_workers)
            if not active_workers:
                errors.append("No Celery workers responding")
        except Exception as exc:
            checks["celery"] = False
            errors.append(f"Celery error: {exc}")
            logger.error("Health check Celery failed: %s", exc)

    critical_checks = [checks["db"]]
    if checks["alert_poller"] != "not_applicable":
        critical_checks.append(checks["alert_poller"])

    if all(critical_checks):
        return JsonResponse(
            {
                "status": "ok",
                "app": "stockwatch",
                "checks": checks,
            },
            status=200
        )
    return JsonResponse(
        {
            "status": "error",
            "app": "stockwatch",
            "checks": checks,
            "errors": errors,
        },
        status=503
    )
