"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Configuración WSGI para el proyecto. Es el punto de entrada estándar 
               para servidores web compatibles con Python (como Gunicorn) en producción.
--------------------------------------------------------------------------------
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'bookingpro.settings')

application = get_wsgi_application()
