"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   ViewSet (Controlador de API) del directorio de salas.
               Las escrituras se delegan en salas.servicios; los errores del
               dominio los traduce core.api.manejador_excepciones.
--------------------------------------------------------------------------------
"""
import logging

from rest_framework import viewsets
from rest_framework.decorators import action

from core.api import DefaultPagination
from core.identidad import usuario_de
from . import servicios
from .filters import SalaFilter
from .serializers import SalaSerializer

logger = logging.getLogger(__name__)


class SalaViewSet(viewsets.ModelViewSet):
    """
    CRUD de salas.
    Filtros:
      - ?disponible=true|false
      - ?nombre=texto
    """
    serializer_class = SalaSerializer
    pagination_class = DefaultPagination
    filterset_class = SalaFilter

    def get_queryset(self):
        return servicios.listar_salas()

    def get_object(self):
        # NotFoundError -> 404 con código 'sala_no_encontrada'
        return servicios.obtener_sala(self.kwargs[self.lookup_field])

    def perform_create(self, serializer):
        datos = serializer.validated_data
        usuario = usuario_de(self.request)
        serializer.instance = servicios.crear_sala(
            datos.get("nombre"),
            datos.get("capacidad"),
            datos.get("disponible", True),
            usuario=usuario,
        )
        logger.info("Sala %s creada por %s", serializer.instance.pk, usuario)

    def perform_update(self, serializer):
        # En PATCH los campos ausentes conservan su valor actual
        sala = serializer.instance
        datos = serializer.validated_data
        usuario = usuario_de(self.request)
        serializer.instance = servicios.actualizar_sala(
            sala.pk,
            datos.get("nombre", sala.nombre),
            datos.get("capacidad", sala.capacidad),
            datos.get("disponible", sala.disponible),
            usuario=usuario,
        )
        logger.info("Sala %s actualizada por %s", sala.pk, usuario)

    def perform_destroy(self, instance):
        usuario = usuario_de(self.request)
        servicios.eliminar_sala(instance.pk, usuario=usuario)
        logger.info("Sala %s eliminada por %s", instance.pk, usuario)

    @action(detail=False, methods=["get"])
    def disponibles(self, request):
        """Salas que admiten reservas nuevas (las que se ofrecen al reservar)."""
        qs = self.filter_queryset(servicios.salas_disponibles())
        pagina = self.paginate_queryset(qs)
        serializer = self.get_serializer(pagina, many=True)
        return self.get_paginated_response(serializer.data)
