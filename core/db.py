"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:           Utilidades de base de datos para las operaciones de
                       escritura de salas y reservas:
                       - Transacción atómica (todo o nada).
                       - Límite de tiempo por operación, aplicado según el
                         motor (PostgreSQL, MySQL/TiDB o SQLite).
                       - Traducción de cancelaciones a TiempoAgotadoError.
--------------------------------------------------------------------------------
"""
from contextlib import contextmanager

from django.conf import settings
from django.db import connection, transaction, OperationalError

from .errores import TiempoAgotadoError

# Códigos de error de MySQL que indican cancelación por tiempo
# 1205: Lock wait timeout exceeded / 3024: Query execution was interrupted
MYSQL_CODIGOS_TIEMPO = {1205, 3024}
# SQLSTATE de PostgreSQL para "query_canceled"
PG_QUERY_CANCELED = "57014"


def _limite_postgresql(cursor, segundos):
    # set_config(..., true) equivale a SET LOCAL: dura hasta el fin de la
    # transacción externa, no del savepoint, así que se restaura al salir.
    cursor.execute("SELECT current_setting('statement_timeout')")
    previo = cursor.fetchone()[0]
    cursor.execute("SELECT set_config('statement_timeout', %s, true)", [str(int(segundos * 1000))])

    def restaurar(cur):
        # Fuera de una transacción el valor local ya se descartó
        if connection.in_atomic_block:
            cur.execute("SELECT set_config('statement_timeout', %s, true)", [previo])
    return restaurar


def _limite_mysql(cursor, segundos):
    cursor.execute("SELECT @@SESSION.max_execution_time, @@SESSION.innodb_lock_wait_timeout")
    previo_exec, previo_lock = cursor.fetchone()
    cursor.execute("SET SESSION max_execution_time = %s", [int(segundos * 1000)])
    cursor.execute("SET SESSION innodb_lock_wait_timeout = %s", [max(1, int(segundos))])

    def restaurar(cur):
        cur.execute("SET SESSION max_execution_time = %s", [previo_exec])
        cur.execute("SET SESSION innodb_lock_wait_timeout = %s", [previo_lock])
    return restaurar


def _limite_sqlite(cursor, segundos):
    cursor.execute("PRAGMA busy_timeout")
    previo = cursor.fetchone()[0]
    cursor.execute(f"PRAGMA busy_timeout = {int(segundos * 1000)}")

    def restaurar(cur):
        cur.execute(f"PRAGMA busy_timeout = {int(previo)}")
    return restaurar


LIMITES_POR_MOTOR = {
    "postgresql": _limite_postgresql,
    "mysql": _limite_mysql,
    "sqlite": _limite_sqlite,
}


def es_cancelacion(exc: OperationalError) -> bool:
    """Indica si un OperationalError corresponde a un tiempo agotado."""
    causa = exc.__cause__ or exc
    if getattr(causa, "pgcode", None) == PG_QUERY_CANCELED:
        return True
    args = getattr(causa, "args", ())
    if args and args[0] in MYSQL_CODIGOS_TIEMPO:
        return True
    return "database is locked" in str(exc).lower()


@contextmanager
def operacion_atomica(timeout=None):
    """
    Abre una transacción atómica con un límite de tiempo opcional (segundos).
    Si el motor cancela la operación, la transacción se revierte completa y se
    lanza TiempoAgotadoError.
    """
    if timeout is None:
        timeout = getattr(settings, "RESERVAS_TIMEOUT_DB", None)

    restaurar = None
    try:
        with transaction.atomic():
            if timeout:
                aplicar = LIMITES_POR_MOTOR.get(connection.vendor)
                if aplicar is not None:
                    with connection.cursor() as cursor:
                        restaurar = aplicar(cursor, timeout)
            yield
    except OperationalError as exc:
        if es_cancelacion(exc):
            raise TiempoAgotadoError("tiempo_agotado", {"timeout": timeout}) from exc
        raise
    finally:
        # Las variables de sesión se restauran fuera de la transacción
        if restaurar is not None:
            with connection.cursor() as cursor:
                restaurar(cursor)
