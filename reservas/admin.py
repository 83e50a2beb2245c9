"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Configuración del panel de administración de Django para la app
               'reservas'. Permite visualizar y depurar las reservas.
--------------------------------------------------------------------------------
"""
from django.contrib import admin
from .models import Reserva

# Registro del modelo Reserva en el admin
@admin.register(Reserva)
class ReservaAdmin(admin.ModelAdmin):
    # Columnas visibles: ID, sala, fecha reservada, quién la pidió y cuándo
    list_display = ("id", "sala", "fecha_reserva", "solicitante", "creada_el")
    # Filtros laterales por sala
    list_filter = ("sala",)
    # Búsqueda por nombre de la sala o solicitante
    search_fields = ("sala__nombre", "solicitante")
    # Navegación jerárquica por fecha de reserva
    date_hierarchy = "fecha_reserva"
    readonly_fields = ("creada_el",)
    list_select_related = ("sala",)
