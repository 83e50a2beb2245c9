# core/tasks.py
from celery import shared_task
from django.db import transaction
from .models import RegistroActividad
import logging

logger = logging.getLogger(__name__)


@shared_task
def registrar_actividad(entidad, entidad_id, accion, usuario, detalle=None):
    """
    Guarda una fila en la bitácora de actividad.
    Recibe todos los datos como argumentos: la entidad puede ya no existir
    (caso de eliminación) cuando el worker procesa la tarea.
    """
    registro = RegistroActividad.objects.create(
        entidad=entidad,
        entidad_id=entidad_id,
        accion=accion,
        usuario=usuario,
        detalle=detalle or {},
    )
    logger.info("Actividad registrada: %s", registro)
    return registro.id


def programar_registro(entidad, entidad_id, accion, usuario, detalle=None):
    """
    Encola registrar_actividad cuando la transacción en curso se confirme.
    Si la operación se revierte, no queda rastro en la bitácora.
    """
    transaction.on_commit(
        lambda: registrar_actividad.delay(entidad, entidad_id, accion, usuario, detalle)
    )
