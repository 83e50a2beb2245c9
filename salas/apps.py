"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Configuración de la aplicación 'salas' (directorio de salas).
--------------------------------------------------------------------------------
"""
from django.apps import AppConfig

class SalasConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'salas'
