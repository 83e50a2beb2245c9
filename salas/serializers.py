"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Serializadores para convertir el modelo Sala a JSON.
               Las reglas (nombre obligatorio y único, capacidad positiva) las
               aplica salas.servicios, así la API responde siempre con el
               mismo formato de error {"codigo", "mensaje", "detalle"}.
--------------------------------------------------------------------------------
"""
from rest_framework import serializers
from .models import Sala


class SalaSerializer(serializers.ModelSerializer):
    nombre = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    capacidad = serializers.IntegerField(required=False, allow_null=True)
    disponible = serializers.BooleanField(required=False)

    class Meta:
        model = Sala
        fields = ["id", "nombre", "capacidad", "disponible", "creada_el"]
        read_only_fields = ["creada_el"]
