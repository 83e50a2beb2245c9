"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:           Clase de configuración de la app 'core' (errores tipados,
                       identidad del llamador, utilidades de base de datos y
                       bitácora de actividad).
--------------------------------------------------------------------------------
"""

# Importa AppConfig.
from django.apps import AppConfig

class CoreConfig(AppConfig):
    # Define BigAutoField como tipo por defecto para IDs.
    default_auto_field = "django.db.models.BigAutoField"
    # Nombre de la aplicación.
    name = "core"
    verbose_name = "Núcleo"
