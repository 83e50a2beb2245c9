"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:           Configura el panel de administración para la bitácora
                       de actividad (solo lectura).
--------------------------------------------------------------------------------
"""

# Importa módulo admin.
from django.contrib import admin
# Importa modelo RegistroActividad.
from .models import RegistroActividad


@admin.register(RegistroActividad)
class RegistroActividadAdmin(admin.ModelAdmin):
    # Columnas visibles en la lista.
    list_display = ("creado_el", "entidad", "entidad_id", "accion", "usuario")
    # Filtros laterales.
    list_filter = ("entidad", "accion")
    search_fields = ("usuario",)
    date_hierarchy = "creado_el"

    # La bitácora no se edita a mano
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
