"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Archivo de configuración global de Django. Contiene configuraciones
               de base de datos, seguridad, aplicaciones instaladas, middleware,
               archivos estáticos, DRF, Celery, logging y parámetros del núcleo
               de reservas.
--------------------------------------------------------------------------------
"""

from pathlib import Path
import os
from dotenv import load_dotenv
import dj_database_url  # Utilidad para configurar DB desde una URL string

# -----------------------------------------------------------------------------
# Paths & .env
# -----------------------------------------------------------------------------
# Define el directorio base del proyecto
BASE_DIR = Path(__file__).resolve().parent.parent

# Cargar variables de entorno desde un archivo .env en la raíz del proyecto
load_dotenv(os.path.join(BASE_DIR, '.env'))

# -------------------------------------------------------------------
# Seguridad / Debug
# -------------------------------------------------------------------
# Clave secreta para firma criptográfica (debe venir desde .env en producción)
SECRET_KEY = os.environ.get('SECRET_KEY', default='your secret key')
# Modo Debug (True para desarrollo, False para producción)
DEBUG = os.getenv("DEBUG", "True").lower() == "true"

# Lista de hosts/dominios permitidos para servir la aplicación
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

# Orígenes confiables para CSRF (Cross-Site Request Forgery)
CSRF_TRUSTED_ORIGINS = [
    origen for origen in os.getenv("CSRF_TRUSTED_ORIGINS", "http://127.0.0.1,http://localhost").split(",") if origen
]

# -----------------------------------------------------------------------------
# Apps (Aplicaciones Instaladas)
# -----------------------------------------------------------------------------
INSTALLED_APPS = [
    "django.contrib.admin",       # Panel de administración
    "django.contrib.auth",        # Sistema de autenticación
    "django.contrib.contenttypes",# Tipos de contenido genéricos
    "django.contrib.sessions",    # Gestión de sesiones
    "django.contrib.messages",    # Mensajes flash
    "django.contrib.staticfiles", # Archivos estáticos

    # Project apps (Módulos desarrollados por el equipo)
    "core.apps.CoreConfig",
    "salas",
    "reservas",

    # Terceros (Librerías externas)
    "rest_framework",            # API REST Framework
    "django_filters",            # Filtrado avanzado en API
]

# -----------------------------------------------------------------------------
# Middleware (Procesadores de petición/respuesta)
# -----------------------------------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    'whitenoise.middleware.WhiteNoiseMiddleware',      # Sirve estáticos en producción
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    'bookingpro.middleware.MonitorRendimientoMiddleware', # Mide performance
]

# Archivo principal de rutas URL
ROOT_URLCONF = "bookingpro.urls"

# -----------------------------------------------------------------------------
# Templates (solo los del admin de Django)
# -----------------------------------------------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# Definición de aplicaciones WSGI y ASGI
ASGI_APPLICATION = "bookingpro.asgi.application"
WSGI_APPLICATION = "bookingpro.wsgi.application"

# -----------------------------------------------------------------------------
# Base de datos (SQLite por defecto; MySQL/TiDB o PostgreSQL vía DATABASE_URL)
# -----------------------------------------------------------------------------
db_config = dj_database_url.config(
    default=os.getenv('DATABASE_URL', f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
    conn_max_age=600,         # Persistencia de conexiones
    conn_health_checks=True,  # Verificar salud de conexión
)

# Opciones de compatibilidad para MySQL/TiDB
if db_config.get('ENGINE') == 'django.db.backends.mysql':
    db_config.setdefault('OPTIONS', {})
    # Parámetros que PyMySQL no acepta
    db_config['OPTIONS'].pop('ssl_mode', None)
    db_config['OPTIONS'].pop('ssl-mode', None)
    db_config['OPTIONS'].update({
        "connect_timeout": 10,
        "charset": "utf8mb4",
        "init_command": "SET sql_mode='STRICT_TRANS_TABLES'",
    })

DATABASES = {
    'default': db_config
}

# -----------------------------------------------------------------------------
# Internacionalización y Zona Horaria
# -----------------------------------------------------------------------------
LANGUAGE_CODE = "es-cl" # Español de Chile
TIME_ZONE = os.getenv("TIME_ZONE", "America/Santiago")
USE_I18N = True
USE_TZ = True

# -----------------------------------------------------------------------------
# Archivos estáticos
# -----------------------------------------------------------------------------
STATIC_URL = "static/"
STATIC_ROOT = os.path.join(BASE_DIR, 'staticfiles') # Carpeta para collectstatic

# --- Configuración de WhiteNoise (Para servir estáticos eficientemente en producción) ---
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": (
            "django.contrib.staticfiles.storage.StaticFilesStorage"
            if DEBUG
            else "whitenoise.storage.CompressedManifestStaticFilesStorage"
        ),
    },
}

# -----------------------------------------------------------------------------
# Configuración DRF (Django REST Framework)
# -----------------------------------------------------------------------------
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.SessionAuthentication", # Auth por Sesión (Web)
    ),
    # La autorización queda fuera del alcance: el llamador se identifica
    # con core.identidad.usuario_de()
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.AllowAny",
    ),
    "DEFAULT_FILTER_BACKENDS": (
        "django_filters.rest_framework.DjangoFilterBackend",
    ),
    # Traduce ValidationError / NotFoundError / ConflictError a 400 / 404 / 409
    "EXCEPTION_HANDLER": "core.api.manejador_excepciones",
}

# -----------------------------------------------------------------------------
# Parámetros del núcleo de reservas
# -----------------------------------------------------------------------------
# Identidad usada cuando la request no trae usuario autenticado
USUARIO_POR_DEFECTO = os.getenv("USUARIO_POR_DEFECTO", "admin")
# Tiempo máximo (segundos) por operación de escritura en la base de datos.
# Vacío = sin límite; cada llamada puede pasar su propio 'timeout'.
RESERVAS_TIMEOUT_DB = float(os.getenv("RESERVAS_TIMEOUT_DB")) if os.getenv("RESERVAS_TIMEOUT_DB") else None

# -----------------------------------------------------------------------------
# Configuración adicional
# -----------------------------------------------------------------------------
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# =================================================
# --- CONFIGURACIÓN DE CELERY (CON REDIS) ---
# =================================================
CELERY_BROKER_URL = os.environ.get('REDIS_URL')
CELERY_RESULT_BACKEND = os.environ.get('REDIS_URL')
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_SERIALIZER = 'json'
CELERY_RESULT_SERIALIZER = 'json'
CELERY_TIMEZONE = TIME_ZONE
# Sin broker configurado (desarrollo y pruebas) las tareas se ejecutan en el mismo proceso
CELERY_TASK_ALWAYS_EAGER = not CELERY_BROKER_URL
CELERY_TASK_EAGER_PROPAGATES = True

# =================================================
# --- LOGGING ---
# =================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "[{asctime}] {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "bookingpro": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "core": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "salas": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "reservas": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
