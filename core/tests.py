"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Pruebas del núcleo compartido: errores tipados, manejador de
               excepciones de la API, identidad del llamador, transacciones
               con límite de tiempo y bitácora de actividad.
--------------------------------------------------------------------------------
"""
from types import SimpleNamespace
from unittest import mock

from django.contrib.auth.models import AnonymousUser, User
from django.db import OperationalError
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated

from .api import manejador_excepciones, MENSAJES
from .db import operacion_atomica, es_cancelacion, _limite_postgresql
from .errores import ErrorReserva, ValidationError, NotFoundError, ConflictError, TiempoAgotadoError
from .identidad import usuario_de, nombre_visible
from .models import RegistroActividad
from .tasks import registrar_actividad, programar_registro


# ==========================================
# 1. ERRORES Y MANEJADOR DE LA API
# ==========================================
class ErroresTest(TestCase):
    def test_codigos_http(self):
        self.assertEqual(ValidationError("x").status_http, 400)
        self.assertEqual(NotFoundError("x").status_http, 404)
        self.assertEqual(ConflictError("x").status_http, 409)
        self.assertEqual(TiempoAgotadoError("x").status_http, 503)
        self.assertTrue(issubclass(ConflictError, ErrorReserva))

    def test_detalle_por_defecto(self):
        error = ConflictError("fecha_ya_reservada")
        self.assertEqual(error.codigo, "fecha_ya_reservada")
        self.assertEqual(error.detalle, {})

    def test_manejador_traduce_error_del_dominio(self):
        error = ConflictError("fecha_ya_reservada", {"sala_id": 1})
        resp = manejador_excepciones(error, {"view": None})
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["codigo"], "fecha_ya_reservada")
        self.assertEqual(resp.data["mensaje"], MENSAJES["fecha_ya_reservada"])
        self.assertEqual(resp.data["detalle"], {"sala_id": 1})

    def test_manejador_delega_errores_de_drf(self):
        resp = manejador_excepciones(NotAuthenticated(), {"view": None})
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertNotIn("codigo", resp.data)


# ==========================================
# 2. IDENTIDAD DEL LLAMADOR
# ==========================================
class IdentidadTest(TestCase):
    @override_settings(USUARIO_POR_DEFECTO="recepcion")
    def test_usuario_por_defecto(self):
        self.assertEqual(usuario_de(SimpleNamespace(user=AnonymousUser())), "recepcion")
        self.assertEqual(usuario_de(SimpleNamespace()), "recepcion")

    def test_usuario_autenticado(self):
        usuario = User.objects.create_user(username="ana", password="x")
        self.assertEqual(usuario_de(SimpleNamespace(user=usuario)), "ana")

    def test_nombre_visible(self):
        User.objects.create_user(username="ana", password="x", first_name="Ana", last_name="Soto")
        User.objects.create_user(username="luis", password="x")
        self.assertEqual(nombre_visible("ana"), "Ana Soto")
        self.assertEqual(nombre_visible("luis"), "luis")
        self.assertEqual(nombre_visible("desconocido"), "desconocido")
        self.assertEqual(nombre_visible(""), "")


# ==========================================
# 3. TRANSACCIONES CON LÍMITE DE TIEMPO
# ==========================================
class _ErrorPostgres(Exception):
    # Error del driver de PostgreSQL para "query_canceled"
    pgcode = "57014"


class OperacionAtomicaTest(TestCase):
    def test_revierte_si_falla(self):
        with self.assertRaises(ConflictError):
            with operacion_atomica(timeout=2):
                RegistroActividad.objects.create(entidad="SALA", entidad_id=1, accion="CREAR", usuario="admin")
                raise ConflictError("nombre_duplicado")
        self.assertFalse(RegistroActividad.objects.exists())

    def test_cancelacion_se_traduce(self):
        """CP-DB-001: Un bloqueo agotado se informa como TiempoAgotadoError."""
        with self.assertRaises(TiempoAgotadoError) as ctx:
            with operacion_atomica(timeout=1):
                raise OperationalError("database is locked")
        self.assertEqual(ctx.exception.codigo, "tiempo_agotado")
        self.assertEqual(ctx.exception.detalle, {"timeout": 1})

    def test_otros_errores_se_propagan(self):
        with self.assertRaises(OperationalError):
            with operacion_atomica():
                raise OperationalError("no such table: x")

    def test_es_cancelacion(self):
        pg = OperationalError("canceling statement")
        pg.__cause__ = _ErrorPostgres()
        self.assertTrue(es_cancelacion(pg))

        mysql = OperationalError(1205, "Lock wait timeout exceeded")
        self.assertTrue(es_cancelacion(mysql))

        self.assertFalse(es_cancelacion(OperationalError("disk I/O error")))

    def test_limite_postgresql_se_restaura(self):
        """CP-DB-002: El statement_timeout previo vuelve al salir de una operación anidada."""
        cursor = mock.MagicMock()
        cursor.fetchone.return_value = ("30s",)

        restaurar = _limite_postgresql(cursor, 2)
        cursor.execute.assert_called_with("SELECT set_config('statement_timeout', %s, true)", ["2000"])

        # TestCase corre dentro de una transacción, como ATOMIC_REQUESTS
        restaurar(cursor)
        cursor.execute.assert_called_with("SELECT set_config('statement_timeout', %s, true)", ["30s"])


# ==========================================
# 4. BITÁCORA DE ACTIVIDAD
# ==========================================
class BitacoraTest(TestCase):
    def test_tarea_crea_registro(self):
        registro_id = registrar_actividad("RESERVA", 7, "ELIMINAR", "ana", {"sala_id": 3})
        registro = RegistroActividad.objects.get(pk=registro_id)
        self.assertEqual(registro.entidad_id, 7)
        self.assertEqual(registro.detalle, {"sala_id": 3})
        self.assertIn("ana", str(registro))

    def test_programar_espera_la_confirmacion(self):
        with self.captureOnCommitCallbacks() as callbacks:
            programar_registro("SALA", 1, "CREAR", "admin")
        self.assertEqual(len(callbacks), 1)
        self.assertFalse(RegistroActividad.objects.exists())

        callbacks[0]()
        registro = RegistroActividad.objects.get()
        self.assertEqual(registro.detalle, {})


# ==========================================
# 5. MONITOR DE RENDIMIENTO
# ==========================================
class MonitorRendimientoTest(TestCase):
    def test_registra_peticiones_de_api(self):
        with self.assertLogs("bookingpro.rendimiento", level="INFO") as logs:
            self.client.get("/api/v1/salas/")
        self.assertIn("GET /api/v1/salas/ -> 200", logs.output[0])
        self.assertIn("usuario=Anónimo", logs.output[0])

    def test_falla_del_log_no_rompe_la_peticion(self):
        with mock.patch("bookingpro.middleware.logger.info", side_effect=RuntimeError("sin disco")):
            resp = self.client.get("/api/v1/salas/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
