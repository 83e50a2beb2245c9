"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Lógica de negocio del directorio de salas.
               - Consulta, creación, edición y eliminación de Salas.
               - Validación de nombre y capacidad.
               - Bloqueo de eliminación si la sala tiene reservas activas
                 (consultado al libro de reservas).
               Todas las escrituras son atómicas y fallan con errores tipados.
--------------------------------------------------------------------------------
"""
from django.db import IntegrityError

from core.db import operacion_atomica
from core.errores import ValidationError, NotFoundError, ConflictError
from core.models import RegistroActividad
from core.tasks import programar_registro
from .models import Sala, NOMBRE_MAX


def a_entero(valor):
    """Convierte un identificador recibido a int; None si no es válido."""
    if valor is None or isinstance(valor, bool):
        return None
    try:
        return int(valor)
    except (TypeError, ValueError):
        return None


def _validar_datos(nombre, capacidad, disponible):
    """Valida los campos de una sala y devuelve el nombre normalizado."""
    if nombre is None or not str(nombre).strip():
        raise ValidationError("nombre_requerido", {"campo": "nombre"})
    nombre = str(nombre).strip()
    if len(nombre) > NOMBRE_MAX:
        raise ValidationError("nombre_muy_largo", {"campo": "nombre", "maximo": NOMBRE_MAX})

    if isinstance(capacidad, bool) or not isinstance(capacidad, int) or capacidad <= 0:
        raise ValidationError("capacidad_invalida", {"campo": "capacidad"})

    if not isinstance(disponible, bool):
        raise ValidationError("disponibilidad_requerida", {"campo": "disponible"})
    return nombre


def _foto(sala):
    # Datos que se guardan en la bitácora
    return {"nombre": sala.nombre, "capacidad": sala.capacidad, "disponible": sala.disponible}


def listar_salas():
    """Todas las salas, en orden estable (nombre, id)."""
    return Sala.objects.order_by("nombre", "id")


def salas_disponibles():
    """Salas que admiten reservas nuevas."""
    return listar_salas().filter(disponible=True)


def obtener_sala(sala_id):
    pk = a_entero(sala_id)
    sala = Sala.objects.filter(pk=pk).first() if pk is not None else None
    if sala is None:
        raise NotFoundError("sala_no_encontrada", {"sala_id": sala_id})
    return sala


def bloquear_sala(sala_id):
    """
    Obtiene la sala con bloqueo de fila (SELECT ... FOR UPDATE).
    Debe llamarse dentro de una transacción. Devuelve None si no existe.
    """
    pk = a_entero(sala_id)
    if pk is None:
        return None
    return Sala.objects.select_for_update().filter(pk=pk).first()


def crear_sala(nombre, capacidad, disponible=True, *, usuario, timeout=None):
    nombre = _validar_datos(nombre, capacidad, disponible)
    try:
        with operacion_atomica(timeout):
            if Sala.objects.filter(nombre=nombre).exists():
                raise ConflictError("nombre_duplicado", {"nombre": nombre})
            sala = Sala.objects.create(nombre=nombre, capacidad=capacidad, disponible=disponible)
            programar_registro(
                RegistroActividad.Entidad.SALA, sala.id, RegistroActividad.Accion.CREAR, usuario, _foto(sala)
            )
    except IntegrityError as exc:
        # Otro proceso registró el mismo nombre entre la verificación y el INSERT
        raise ConflictError("nombre_duplicado", {"nombre": nombre}) from exc
    return sala


def actualizar_sala(sala_id, nombre, capacidad, disponible, *, usuario, timeout=None):
    nombre = _validar_datos(nombre, capacidad, disponible)
    try:
        with operacion_atomica(timeout):
            sala = bloquear_sala(sala_id)
            if sala is None:
                raise NotFoundError("sala_no_encontrada", {"sala_id": sala_id})

            if Sala.objects.filter(nombre=nombre).exclude(pk=sala.pk).exists():
                raise ConflictError("nombre_duplicado", {"nombre": nombre})

            sala.nombre = nombre
            sala.capacidad = capacidad
            sala.disponible = disponible
            sala.save(update_fields=["nombre", "capacidad", "disponible"])
            programar_registro(
                RegistroActividad.Entidad.SALA, sala.id, RegistroActividad.Accion.ACTUALIZAR, usuario, _foto(sala)
            )
    except IntegrityError as exc:
        raise ConflictError("nombre_duplicado", {"nombre": nombre}) from exc
    return sala


def eliminar_sala(sala_id, *, usuario, timeout=None):
    """
    Elimina una sala sin reservas activas.
    El libro de reservas es la única fuente para saber si la sala está en uso.
    """
    # Importación local: el libro de reservas depende a su vez de este módulo
    from reservas.servicios import reservas_por_sala

    try:
        with operacion_atomica(timeout):
            sala = bloquear_sala(sala_id)
            if sala is None:
                raise NotFoundError("sala_no_encontrada", {"sala_id": sala_id})

            activas = reservas_por_sala(sala.pk).count()
            if activas:
                raise ConflictError("sala_con_reservas", {"sala_id": sala.pk, "reservas": activas})

            foto = _foto(sala)
            pk = sala.pk
            sala.delete()
            programar_registro(
                RegistroActividad.Entidad.SALA, pk, RegistroActividad.Accion.ELIMINAR, usuario, foto
            )
    except IntegrityError as exc:
        # ProtectedError (FK PROTECT) o violación de FK en la base de datos
        raise ConflictError("sala_con_reservas", {"sala_id": a_entero(sala_id)}) from exc
