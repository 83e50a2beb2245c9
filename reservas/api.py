"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   ViewSet (Controlador de API) del libro de reservas.
               - CRUD de reservas delegando en reservas.servicios.
               - Acción 'filtrar' por rango de fechas, sala y solicitante.
--------------------------------------------------------------------------------
"""
import logging

from rest_framework import viewsets
from rest_framework.decorators import action

from core.api import DefaultPagination
from core.identidad import usuario_de
from . import servicios
from .filters import ReservaFilter
from .serializers import ReservaSerializer, FiltroReservasSerializer

logger = logging.getLogger(__name__)


class ReservaViewSet(viewsets.ModelViewSet):
    """
    CRUD de reservas, ordenadas por fecha_reserva y luego por id.
    Filtros del listado:
      - ?sala=<id>
      - ?solicitante=<usuario>
    """
    serializer_class = ReservaSerializer
    pagination_class = DefaultPagination
    filterset_class = ReservaFilter

    def get_queryset(self):
        return servicios.listar_reservas()

    def get_object(self):
        return servicios.obtener_reserva(self.kwargs[self.lookup_field])

    def perform_create(self, serializer):
        datos = serializer.validated_data
        usuario = usuario_de(self.request)
        serializer.instance = servicios.crear_reserva(
            datos.get("sala_id"),
            datos.get("fecha_reserva"),
            usuario,
        )
        logger.info("Reserva %s creada por %s", serializer.instance.pk, usuario)

    def perform_update(self, serializer):
        # En PATCH los campos ausentes conservan su valor actual
        reserva = serializer.instance
        datos = serializer.validated_data
        usuario = usuario_de(self.request)
        serializer.instance = servicios.actualizar_reserva(
            reserva.pk,
            datos.get("sala_id", reserva.sala_id),
            datos.get("fecha_reserva", reserva.fecha_reserva),
            usuario,
        )
        logger.info("Reserva %s actualizada por %s", reserva.pk, usuario)

    def perform_destroy(self, instance):
        usuario = usuario_de(self.request)
        servicios.eliminar_reserva(instance.pk, usuario=usuario)
        logger.info("Reserva %s eliminada por %s", instance.pk, usuario)

    @action(detail=False, methods=["get"])
    def filtrar(self, request):
        """
        Reservas en el rango [desde, hasta] (inclusive).
        Parámetros: ?desde=...&hasta=...&sala=<id>&solicitante=<usuario>
        """
        parametros = FiltroReservasSerializer(data=request.query_params)
        parametros.is_valid(raise_exception=True)
        datos = parametros.validated_data

        qs = servicios.filtrar_reservas(
            datos.get("desde"),
            datos.get("hasta"),
            sala_id=datos.get("sala"),
            solicitante=datos.get("solicitante"),
        )
        pagina = self.paginate_queryset(qs)
        serializer = self.get_serializer(pagina, many=True)
        return self.get_paginated_response(serializer.data)
