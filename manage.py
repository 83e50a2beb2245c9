#!/usr/bin/env python
"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Utilidad de línea de comandos de Django para BookingPro.
               Ejemplos: 'migrate', 'runserver', 'test salas reservas core'.
--------------------------------------------------------------------------------
"""
import os
import sys


def main():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'bookingpro.settings')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        # Falta entorno virtual o Django no está instalado
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
