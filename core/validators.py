"""
Validadores reutilizables para modelos y serializadores.
"""
import re
from decimal import Decimal

from django.core.exceptions import ValidationError

_PHONE_PATTERN = re.compile(r'^\+?[0-9]{7,15}$')


def validate_phone_number(value: str):
    """
    Valida un número de teléfono en formato internacional.
    Formato: +XXXXXXXXXXX (7 a 15 dígitos, el + es opcional)
    """
    if not value:
        return
    normalized = re.sub(r'[\s-]', '', value)
    if not _PHONE_PATTERN.match(normalized):
        raise ValidationError(
            "Número de teléfono inválido. Formato esperado: +XXXXXXXXXXX (7 a 15 dígitos)"
        )


def validate_positive_amount(value: Decimal | float | int):
    """Valida que un monto sea estrictamente positivo."""
    if value is None:
        return

    if value < 0:
        raise ValidationError("El monto debe ser positivo.")

    if value == 0:
        raise ValidationError("El monto debe ser mayor que cero.")
