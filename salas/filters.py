"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Filtros (django-filter) para el listado de salas.
               - ?disponible=true|false
               - ?nombre=texto (búsqueda parcial, sin distinguir mayúsculas)
--------------------------------------------------------------------------------
"""
import django_filters
from .models import Sala


class SalaFilter(django_filters.FilterSet):
    nombre = django_filters.CharFilter(lookup_expr="icontains")

    class Meta:
        model = Sala
        fields = ["disponible", "nombre"]
