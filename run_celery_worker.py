"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Script de arranque para el worker de Celery que procesa la
               bitácora de actividad. En Windows usa el pool 'solo', ya que
               el pool por defecto (prefork) no está soportado.
--------------------------------------------------------------------------------
"""
# run_celery_worker.py

import os
import sys
from celery.bin.celery import main as celery_main

if __name__ == "__main__":
    # Apunta a la app de celery estableciendo la variable de entorno de configuración
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'bookingpro.settings')

    args = [
        'celery',
        '-A', 'bookingpro',
        'worker',
        '--loglevel=info',
    ]
    if sys.platform.startswith("win"):
        args += ['-P', 'solo']

    # Pasa los argumentos a la función principal de Celery simulando la línea de comandos
    sys.argv = args
    celery_main()
