"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Configuración ASGI para el proyecto (solo HTTP).
--------------------------------------------------------------------------------
"""
import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bookingpro.settings")

application = get_asgi_application()
