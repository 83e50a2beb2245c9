"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Serializadores para convertir el modelo Reserva a JSON.
               Incluye los campos derivados nombre_sala y nombre_usuario, que
               se calculan al leer y nunca se guardan.
--------------------------------------------------------------------------------
"""
from rest_framework import serializers
from .models import Reserva


class ReservaSerializer(serializers.ModelSerializer):
    # Se expone el id de la sala; su existencia la valida reservas.servicios
    sala = serializers.IntegerField(source="sala_id", required=False, allow_null=True)
    fecha_reserva = serializers.DateTimeField(required=False, allow_null=True)
    nombre_sala = serializers.CharField(read_only=True)
    nombre_usuario = serializers.CharField(read_only=True)

    class Meta:
        model = Reserva
        fields = [
            "id", "sala", "nombre_sala",
            "fecha_reserva", "solicitante", "nombre_usuario",
            "creada_el",
        ]
        read_only_fields = ["solicitante", "creada_el"]
        # El choque (sala, fecha_reserva) lo resuelve el servicio (responde 409)
        validators = []


class FiltroReservasSerializer(serializers.Serializer):
    """Parámetros de /reservas/filtrar/ (query string)."""
    desde = serializers.CharField(required=False, allow_blank=True)
    hasta = serializers.CharField(required=False, allow_blank=True)
    sala = serializers.CharField(required=False, allow_blank=True)
    solicitante = serializers.CharField(required=False, allow_blank=True)
