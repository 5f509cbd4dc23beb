from pathlib import Path
import os

import dj_database_url
from dotenv import load_dotenv

# Carga de variables de entorno temprana
load_dotenv()


def validate_required_env_vars():
    """
    Valida que todas las variables de entorno críticas estén configuradas.
    """
    required_vars = {
        "SECRET_KEY": "Clave secreta de Django",
    }

    # En producción, validar más variables
    if os.getenv("DEBUG", "0") not in ("1", "true", "True"):
        required_vars.update({
            "DATABASE_URL": "URL de la base de datos",
        })
        # El email de alertas se envía por Celery
        if "email" in os.getenv("INVENTORY_ALERT_NOTIFIERS", "console,email"):
            if not os.getenv("CELERY_BROKER_URL") and not os.getenv("REDIS_URL"):
                required_vars["CELERY_BROKER_URL"] = "URL del broker de Celery (o REDIS_URL)"

    missing = []
    for var, description in required_vars.items():
        if not os.getenv(var):
            missing.append(f"{var} ({description})")

    if missing:
        raise RuntimeError(
            "Variables de entorno faltantes:\n"
            + "\n".join(f"  - {var}" for var in missing)
            + "\n\nConfigura estas variables en el archivo .env o como variables de entorno del sistema."
        )


validate_required_env_vars()

# --------------------------------------------------------------------------------------
# Paths básicos
# --------------------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# --------------------------------------------------------------------------------------
# Claves y modo
# --------------------------------------------------------------------------------------
SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("SECRET_KEY no configurada. Define la variable de entorno antes de iniciar la aplicación.")

DEBUG = os.getenv("DEBUG", "0") in ("1", "true", "True")


def _split_env(name, default=""):
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.replace(",", " ").split() if x.strip()]


ALLOWED_HOSTS = _split_env("ALLOWED_HOSTS", "localhost 127.0.0.1" if DEBUG else "")
CORS_ALLOWED_ORIGINS = _split_env("CORS_ALLOWED_ORIGINS")

# --------------------------------------------------------------------------------------
# Apps
# --------------------------------------------------------------------------------------
INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Terceros
    "rest_framework",
    "corsheaders",                  # CORS
    "django_filters",               # Filtros por query params

    # Apps del proyecto
    "core",
    "inventory",
    "staff",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    # CORS antes de CommonMiddleware
    "corsheaders.middleware.CorsMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "core.middleware.RequestIDMiddleware",
]

ROOT_URLCONF = "stockwatch.urls"
WSGI_APPLICATION = "stockwatch.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# --------------------------------------------------------------------------------------
# Base de datos
# --------------------------------------------------------------------------------------
DATABASES = {
    "default": dj_database_url.config(
        default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        conn_max_age=int(os.getenv("DB_CONN_MAX_AGE", "60")),
        conn_health_checks=True,
    )
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# --------------------------------------------------------------------------------------
# Internacionalización
# --------------------------------------------------------------------------------------
LANGUAGE_CODE = "es-co"
TIME_ZONE = os.getenv("TIME_ZONE", "America/Bogota")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# --------------------------------------------------------------------------------------
# Django REST Framework
# --------------------------------------------------------------------------------------
REST_FRAMEWORK = {
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.AllowAny",
    ),
    "DEFAULT_FILTER_BACKENDS": (
        "django_filters.rest_framework.DjangoFilterBackend",
    ),
    "DEFAULT_RENDERER_CLASSES": (
        "rest_framework.renderers.JSONRenderer",
    ) if not DEBUG else (
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",
    ),
    "EXCEPTION_HANDLER": "core.exceptions.drf_exception_handler",
}

# --------------------------------------------------------------------------------------
# Email
# --------------------------------------------------------------------------------------
if DEBUG:
    EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"
else:
    EMAIL_BACKEND = os.getenv(
        "EMAIL_BACKEND", "django.core.mail.backends.smtp.EmailBackend")
    EMAIL_HOST = os.getenv("EMAIL_HOST", "smtp.gmail.com")
    EMAIL_PORT = int(os.getenv("EMAIL_PORT", "587"))
    EMAIL_USE_TLS = os.getenv("EMAIL_USE_TLS", "1") in ("1", "true", "True")
    EMAIL_HOST_USER = os.getenv("EMAIL_HOST_USER", "")
    EMAIL_HOST_PASSWORD = os.getenv("EMAIL_HOST_PASSWORD", "")
    EMAIL_TIMEOUT = int(os.getenv("EMAIL_TIMEOUT", "10"))

DEFAULT_FROM_EMAIL = os.getenv(
    "DEFAULT_FROM_EMAIL", "Stockwatch <no-reply@stockwatch.local>")

# --------------------------------------------------------------------------------------
# Alertas de inventario
# --------------------------------------------------------------------------------------
INVENTORY_ALERT_THRESHOLD = int(os.getenv("INVENTORY_ALERT_THRESHOLD", "2"))
# thread: hilo dentro del proceso web | off: sin ticks automáticos
INVENTORY_ALERT_SCHEDULER = os.getenv("INVENTORY_ALERT_SCHEDULER", "thread")
if INVENTORY_ALERT_SCHEDULER not in ("thread", "off"):
    raise RuntimeError(
        f"INVENTORY_ALERT_SCHEDULER inválido: {INVENTORY_ALERT_SCHEDULER}. Usa thread u off."
    )
# El ledger vive en memoria del proceso que corre el poller y atiende las peticiones:
# debe haber un único proceso web. Activar en su entrypoint (p. ej. gunicorn --workers 1).
# `manage.py runserver` lo arranca sin esta variable.
INVENTORY_ALERT_POLLER = os.getenv("INVENTORY_ALERT_POLLER", "0") in ("1", "true", "True")
INVENTORY_ALERT_INTERVAL_SECONDS = float(os.getenv("INVENTORY_ALERT_INTERVAL_SECONDS", "60"))
INVENTORY_ALERT_INITIAL_DELAY_SECONDS = float(os.getenv("INVENTORY_ALERT_INITIAL_DELAY_SECONDS", "5"))
INVENTORY_ALERT_NOTIFIERS = _split_env("INVENTORY_ALERT_NOTIFIERS", "console,email")
INVENTORY_ALERT_EMAIL_RECIPIENTS = _split_env("INVENTORY_ALERT_EMAIL_RECIPIENTS")
