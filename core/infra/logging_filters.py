"""
Core Infra - Logging Filters.

Sanitización de datos personales del personal (emails, teléfonos) en logs.
"""
import logging
import re


class SanitizePIIFilter(logging.Filter):
    """
    Filtro de logging que remueve información personal identificable (PII).

    Los emails y teléfonos del personal pasan por los logs de los servicios;
    este filtro los enmascara antes de que lleguen a consola o archivo.
    """

    PATTERNS = [
        # Emails
        (
            re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b'),
            '***EMAIL***'
        ),
        # Números de teléfono (formato internacional con +)
        (
            re.compile(r'\+\d{1,3}[-.\s]?\(?\d{1,4}\)?[-.\s]?\d{1,4}[-.\s]?\d{1,9}'),
            '***PHONE***'
        ),
    ]

    def _sanitize(self, value):
        if not isinstance(value, str):
            return value
        for pattern, replacement in self.PATTERNS:
            value = pattern.sub(replacement, value)
        return value

    def filter(self, record):
        """Sanitiza PII del mensaje de log y de sus argumentos."""
        record.msg = self._sanitize(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {key: self._sanitize(value) for key, value in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._sanitize(arg) for arg in record.args)

        return True
