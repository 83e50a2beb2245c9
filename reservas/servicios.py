"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Lógica de negocio del libro de reservas.
               - Admisión de reservas nuevas o editadas: la sala debe existir y
                 estar disponible, y la fecha/hora no puede estar ya tomada.
               - Consultas: listado ordenado, filtro por rango de fechas,
                 sala y solicitante, y reservas por sala.
               El choque (sala, fecha_reserva) se verifica dentro de la
               transacción y lo respalda una restricción UNIQUE en la base
               de datos: si dos solicitudes compiten, solo una se confirma.
--------------------------------------------------------------------------------
"""
from datetime import date, datetime, time

from django.db import IntegrityError
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from core.db import operacion_atomica
from core.errores import ValidationError, NotFoundError, ConflictError
from core.models import RegistroActividad
from core.tasks import programar_registro
from salas.models import Sala
from salas.servicios import a_entero, bloquear_sala
from .models import Reserva


def normalizar_fecha(valor, fin_del_dia=False):
    """
    Convierte la entrada (datetime, date o texto ISO 8601) a un datetime
    con zona horaria. Una fecha sin hora se interpreta como el inicio del día,
    o como el final del día si fin_del_dia=True (límite superior de un rango).
    Devuelve None si no se recibió valor.
    """
    if valor is None or valor == "":
        return None

    if isinstance(valor, str):
        texto = valor.strip()
        try:
            # parse_datetime también acepta "AAAA-MM-DD": se prueba la fecha sola primero
            convertido = parse_date(texto) or parse_datetime(texto)
        except ValueError:
            convertido = None
        if convertido is None:
            raise ValidationError("fecha_invalida", {"valor": valor})
        valor = convertido

    if isinstance(valor, datetime):
        resultado = valor
    elif isinstance(valor, date):
        resultado = datetime.combine(valor, time.max if fin_del_dia else time.min)
    else:
        raise ValidationError("fecha_invalida", {"valor": str(valor)})

    if timezone.is_naive(resultado):
        resultado = timezone.make_aware(resultado)
    return resultado


def _validar_entrada(sala_id, fecha_reserva):
    """Valida los campos obligatorios y devuelve la fecha normalizada."""
    if a_entero(sala_id) is None:
        raise ValidationError("sala_requerida", {"campo": "sala"})
    fecha = normalizar_fecha(fecha_reserva)
    if fecha is None:
        raise ValidationError("fecha_requerida", {"campo": "fecha_reserva"})
    # Se guarda con granularidad de segundos: la comparación de choques y la
    # restricción UNIQUE trabajan sobre el mismo valor.
    return fecha.replace(microsecond=0)


def _sala_reservable(sala_id):
    """Resuelve y bloquea la sala. Debe llamarse dentro de la transacción."""
    sala = bloquear_sala(sala_id)
    if sala is None:
        raise ValidationError("sala_requerida", {"sala_id": sala_id})
    if not sala.disponible:
        raise ValidationError("sala_no_disponible", {"sala_id": sala.pk})
    return sala


def existe_conflicto(sala_id, fecha, excluir_id=None) -> bool:
    """
    Hay choque si otra reserva activa tiene exactamente la misma sala y
    fecha/hora. Misma sala y mismo día a distinta hora no es un choque.
    """
    qs = Reserva.objects.filter(sala_id=sala_id, fecha_reserva=fecha)
    if excluir_id is not None:
        qs = qs.exclude(pk=excluir_id)
    return qs.exists()


def _error_integridad(sala_id, fecha):
    """
    Traduce un IntegrityError de la base de datos al error del dominio.
    La transacción ya se revirtió: si la sala desapareció fue una violación
    de FK, si no, otra solicitud tomó la misma fecha/hora.
    """
    if not Sala.objects.filter(pk=a_entero(sala_id)).exists():
        return ValidationError("sala_requerida", {"sala_id": sala_id})
    return ConflictError("fecha_ya_reservada", {"sala_id": a_entero(sala_id), "fecha_reserva": fecha.isoformat()})


def _foto(reserva):
    # Datos que se guardan en la bitácora
    return {
        "sala_id": reserva.sala_id,
        "fecha_reserva": reserva.fecha_reserva.isoformat(),
        "solicitante": reserva.solicitante,
    }


def listar_reservas():
    """Todas las reservas, por fecha ascendente y luego por id."""
    return Reserva.objects.select_related("sala").order_by("fecha_reserva", "id")


def obtener_reserva(reserva_id):
    pk = a_entero(reserva_id)
    reserva = listar_reservas().filter(pk=pk).first() if pk is not None else None
    if reserva is None:
        raise NotFoundError("reserva_no_encontrada", {"reserva_id": reserva_id})
    return reserva


def reservas_por_sala(sala_id):
    """Reservas activas de una sala (usado por el directorio antes de eliminarla)."""
    pk = a_entero(sala_id)
    if pk is None:
        return Reserva.objects.none()
    return listar_reservas().filter(sala_id=pk)


def crear_reserva(sala_id, fecha_reserva, usuario, *, timeout=None):
    fecha = _validar_entrada(sala_id, fecha_reserva)
    try:
        with operacion_atomica(timeout):
            sala = _sala_reservable(sala_id)
            if existe_conflicto(sala.pk, fecha):
                raise ConflictError("fecha_ya_reservada", {"sala_id": sala.pk, "fecha_reserva": fecha.isoformat()})

            reserva = Reserva.objects.create(sala=sala, fecha_reserva=fecha, solicitante=usuario)
            programar_registro(
                RegistroActividad.Entidad.RESERVA, reserva.id, RegistroActividad.Accion.CREAR, usuario, _foto(reserva)
            )
    except IntegrityError as exc:
        raise _error_integridad(sala_id, fecha) from exc
    return reserva


def actualizar_reserva(reserva_id, sala_id, fecha_reserva, usuario, *, timeout=None):
    """
    Edita sala y/o fecha de una reserva. La propia reserva no cuenta como
    choque, así que guardarla sin cambios siempre es válido.
    """
    fecha = _validar_entrada(sala_id, fecha_reserva)
    try:
        with operacion_atomica(timeout):
            pk = a_entero(reserva_id)
            reserva = Reserva.objects.select_for_update().filter(pk=pk).first() if pk is not None else None
            if reserva is None:
                raise NotFoundError("reserva_no_encontrada", {"reserva_id": reserva_id})

            sala = _sala_reservable(sala_id)
            if existe_conflicto(sala.pk, fecha, excluir_id=reserva.pk):
                raise ConflictError("fecha_ya_reservada", {"sala_id": sala.pk, "fecha_reserva": fecha.isoformat()})

            reserva.sala = sala
            reserva.fecha_reserva = fecha
            reserva.save(update_fields=["sala", "fecha_reserva"])
            programar_registro(
                RegistroActividad.Entidad.RESERVA, reserva.id, RegistroActividad.Accion.ACTUALIZAR, usuario, _foto(reserva)
            )
    except IntegrityError as exc:
        raise _error_integridad(sala_id, fecha) from exc
    return reserva


def eliminar_reserva(reserva_id, *, usuario, timeout=None):
    with operacion_atomica(timeout):
        pk = a_entero(reserva_id)
        reserva = Reserva.objects.select_for_update().filter(pk=pk).first() if pk is not None else None
        if reserva is None:
            raise NotFoundError("reserva_no_encontrada", {"reserva_id": reserva_id})

        foto = _foto(reserva)
        reserva.delete()
        programar_registro(
            RegistroActividad.Entidad.RESERVA, pk, RegistroActividad.Accion.ELIMINAR, usuario, foto
        )


def filtrar_reservas(desde, hasta, sala_id=None, solicitante=None):
    """
    Reservas con desde <= fecha_reserva <= hasta (ambos inclusive).
    Opcionalmente restringidas a una sala y/o a un solicitante.
    """
    inicio = normalizar_fecha(desde)
    fin = normalizar_fecha(hasta, fin_del_dia=True)
    if inicio is None or fin is None:
        raise ValidationError("rango_requerido", {"desde": desde, "hasta": hasta})
    if inicio > fin:
        raise ValidationError("rango_invalido", {"desde": inicio.isoformat(), "hasta": fin.isoformat()})

    qs = listar_reservas().filter(fecha_reserva__gte=inicio, fecha_reserva__lte=fin)

    if sala_id not in (None, ""):
        pk = a_entero(sala_id)
        if pk is None:
            raise ValidationError("sala_invalida", {"sala_id": sala_id})
        qs = qs.filter(sala_id=pk)

    if solicitante:
        qs = qs.filter(solicitante=solicitante)
    return qs
