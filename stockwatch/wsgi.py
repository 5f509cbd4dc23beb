"""
Configuración WSGI del proyecto stockwatch.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "stockwatch.settings")

application = get_wsgi_application()
