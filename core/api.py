"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:           Piezas comunes de la API REST (Django REST Framework):
                       manejador de excepciones y paginación por defecto.
                       El manejador traduce los errores tipados del núcleo (ErrorReserva) a
                       respuestas JSON con código HTTP y razón estable.
--------------------------------------------------------------------------------
"""

# bookingpro/core/api.py

import logging

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .errores import ErrorReserva

logger = logging.getLogger(__name__)

# Mensajes legibles para cada código. El núcleo solo entrega el código;
# la capa web decide el texto que ve el usuario.
MENSAJES = {
    "sala_requerida": "La Sala es obligatoria.",
    "sala_no_disponible": "La Sala seleccionada no está disponible.",
    "sala_no_encontrada": "Sala no encontrada.",
    "sala_con_reservas": "No se puede eliminar una sala con reservas activas.",
    "nombre_requerido": "El nombre es obligatorio.",
    "nombre_muy_largo": "El nombre no puede tener más de 100 caracteres.",
    "nombre_duplicado": "Ya existe una sala con ese nombre.",
    "capacidad_invalida": "La capacidad debe ser un número positivo.",
    "disponibilidad_requerida": "La disponibilidad es obligatoria.",
    "fecha_requerida": "La Fecha de Reserva es obligatoria.",
    "fecha_ya_reservada": "Ya existe una reserva en esta fecha para la sala.",
    "fecha_invalida": "La fecha indicada no tiene un formato válido.",
    "reserva_no_encontrada": "Reserva no encontrada.",
    "sala_invalida": "El identificador de sala no es válido.",
    "rango_requerido": "Por favor, proporciona un rango de fechas válido.",
    "rango_invalido": "La fecha de inicio no puede ser posterior a la fecha de fin.",
    "tiempo_agotado": "La operación tardó demasiado y fue cancelada.",
}


def manejador_excepciones(exc, context):
    """
    EXCEPTION_HANDLER de DRF. Si el error es del dominio responde con
    {"codigo", "mensaje", "detalle"}; si no, delega en el manejador estándar.
    """
    if isinstance(exc, ErrorReserva):
        vista = context.get("view")
        logger.warning(
            "Operación rechazada en %s: %s %s",
            type(vista).__name__ if vista else "-",
            exc.codigo,
            exc.detalle,
        )
        cuerpo = {
            "codigo": exc.codigo,
            "mensaje": MENSAJES.get(exc.codigo, exc.codigo),
            "detalle": exc.detalle,
        }
        return Response(cuerpo, status=exc.status_http)

    # Errores propios de DRF (validación de serializers, 404 de routers, etc.)
    return exception_handler(exc, context)


# Paginación por defecto para los listados de la API
class DefaultPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = "page_size"
