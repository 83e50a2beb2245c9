"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Filtros (django-filter) para el listado general de reservas.
--------------------------------------------------------------------------------
"""
import django_filters
from .models import Reserva


class ReservaFilter(django_filters.FilterSet):
    class Meta:
        model = Reserva
        fields = ["sala", "solicitante"]
