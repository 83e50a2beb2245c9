"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Configuración del panel de administración de Django para la app
               'salas'.
--------------------------------------------------------------------------------
"""
from django.contrib import admin
from .models import Sala

# Registro del modelo Sala en el admin
@admin.register(Sala)
class SalaAdmin(admin.ModelAdmin):
    # Columnas visibles en la lista de salas
    list_display = ("id", "nombre", "capacidad", "disponible", "creada_el")
    search_fields = ("nombre",)
    # Filtros laterales (por disponibilidad)
    list_filter = ("disponible",)
    readonly_fields = ("creada_el",)
