import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils import timezone

logger = logging.getLogger(__name__)


@shared_task(bind=True, autoretry_for=(Exception,), retry_backoff=True, retry_kwargs={"max_retries": 3})
def send_low_stock_email(self, item, threshold, recipients):
    """
    Envía el email de stock bajo (HTML + texto plano).

    `item` es una foto serializable del producto tomada al momento de la alerta:
    el producto pudo cambiar o borrarse antes de que el worker tome la tarea.
    """
    context = {
        "item": item,
        "threshold": threshold,
        "generated_at": timezone.localtime(),
    }
    send_mail(
        f"ALERTA DE STOCK BAJO: {item['product_name']}",
        render_to_string("inventory/emails/low_stock_alert.txt", context),
        settings.DEFAULT_FROM_EMAIL,
        recipients,
        html_message=render_to_string("inventory/emails/low_stock_alert.html", context),
        fail_silently=False,
    )
    logger.info("Email de stock bajo enviado para el producto: %s", item["product_name"])
    return "Enviado"
