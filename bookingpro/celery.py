"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Configuración de Celery, el gestor de tareas asíncronas. 
               Se usa para escribir la bitácora de actividad fuera del ciclo
               de la request.
--------------------------------------------------------------------------------
"""
import os
from celery import Celery

# Establece la variable de entorno para que Celery sepa dónde están los settings de Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'bookingpro.settings')

app = Celery('bookingpro')

# namespace='CELERY': lee las variables CELERY_* de settings.py
app.config_from_object('django.conf:settings', namespace='CELERY')

# Busca las tareas (tasks.py) de cada aplicación instalada
app.autodiscover_tasks()
