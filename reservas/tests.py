"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Pruebas unitarias y de integración del libro de reservas:
               regla de no doble reserva, edición, eliminación, filtro por
               rango de fechas, campos derivados, bitácora y endpoints.
--------------------------------------------------------------------------------
"""
from datetime import date, datetime
from unittest import mock

from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from core.errores import ValidationError, NotFoundError, ConflictError
from core.models import RegistroActividad
from salas.models import Sala
from salas.servicios import crear_sala, actualizar_sala, eliminar_sala
from . import servicios
from .models import Reserva


def fecha(*args):
    return timezone.make_aware(datetime(*args))


# ==========================================
# 1. ESCENARIO COMPLETO
# ==========================================
class EscenarioReservasTest(TestCase):
    def test_flujo_completo(self):
        """CP-RES-000: Alta de salas, reservas, choque, edición y filtro."""
        sala_a = crear_sala("Sala A", 10, True, usuario="admin")
        sala_b = crear_sala("Sala B", 4, True, usuario="admin")

        r1 = servicios.crear_reserva(sala_a.pk, fecha(2024, 6, 1, 10, 0), "ana")
        r2 = servicios.crear_reserva(sala_b.pk, fecha(2024, 6, 1, 10, 0), "luis")

        # Misma sala y misma hora -> choque
        with self.assertRaises(ConflictError):
            servicios.crear_reserva(sala_a.pk, fecha(2024, 6, 1, 10, 0), "luis")

        # Mover r2 a la hora de r1 en la misma sala -> choque
        with self.assertRaises(ConflictError):
            servicios.actualizar_reserva(r2.pk, sala_a.pk, fecha(2024, 6, 1, 10, 0), "luis")

        # Mismo día, otra hora -> válido
        r3 = servicios.crear_reserva(sala_a.pk, fecha(2024, 6, 1, 15, 0), "ana")

        encontrados = list(
            servicios.filtrar_reservas(fecha(2024, 6, 1, 0, 0), fecha(2024, 6, 1, 23, 59, 59))
        )
        self.assertEqual(encontrados, [r1, r2, r3])

        solo_sala_a = list(
            servicios.filtrar_reservas(date(2024, 6, 1), date(2024, 6, 1), sala_id=sala_a.pk)
        )
        self.assertEqual(solo_sala_a, [r1, r3])

        self.assertEqual(Reserva.objects.count(), 3)

    def test_ciclo_de_vida_de_una_sala(self):
        """CP-RES-009: Reservar, chocar, bloquear la eliminación y liberar la sala."""
        sala_a = crear_sala("Sala A", 10, True, usuario="admin")

        r1 = servicios.crear_reserva(sala_a.pk, fecha(2024, 6, 1, 10, 0), "ana")
        with self.assertRaises(ConflictError):
            servicios.crear_reserva(sala_a.pk, fecha(2024, 6, 1, 10, 0), "luis")
        r2 = servicios.crear_reserva(sala_a.pk, fecha(2024, 6, 1, 11, 0), "luis")

        # Con dos reservas activas la sala no se puede eliminar
        with self.assertRaises(ConflictError) as ctx:
            eliminar_sala(sala_a.pk, usuario="admin")
        self.assertEqual(ctx.exception.codigo, "sala_con_reservas")
        self.assertEqual(ctx.exception.detalle["reservas"], 2)

        servicios.eliminar_reserva(r1.pk, usuario="ana")
        servicios.eliminar_reserva(r2.pk, usuario="luis")
        eliminar_sala(sala_a.pk, usuario="admin")
        self.assertFalse(Sala.objects.filter(pk=sala_a.pk).exists())


# ==========================================
# 2. ADMISIÓN DE RESERVAS
# ==========================================
class CrearReservaTest(TestCase):
    def setUp(self):
        self.sala = crear_sala("Sala A", 10, usuario="admin")
        self.cerrada = crear_sala("Bodega", 3, False, usuario="admin")

    def test_crear_reserva_valida(self):
        """CP-RES-001: La reserva queda con id, solicitante y fecha de creación."""
        reserva = servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana")
        self.assertIsNotNone(reserva.pk)
        self.assertEqual(reserva.solicitante, "ana")
        self.assertEqual(reserva.sala, self.sala)
        self.assertIsNotNone(reserva.creada_el)

    def test_sala_requerida(self):
        """CP-RES-002: Sin sala o con sala inexistente -> ValidationError."""
        for sala_id in (None, "", 9999):
            with self.assertRaises(ValidationError) as ctx:
                servicios.crear_reserva(sala_id, fecha(2024, 6, 1, 10, 0), "ana")
            self.assertEqual(ctx.exception.codigo, "sala_requerida")
        self.assertFalse(Reserva.objects.exists())

    def test_fecha_requerida(self):
        with self.assertRaises(ValidationError) as ctx:
            servicios.crear_reserva(self.sala.pk, None, "ana")
        self.assertEqual(ctx.exception.codigo, "fecha_requerida")

    def test_fecha_invalida(self):
        with self.assertRaises(ValidationError) as ctx:
            servicios.crear_reserva(self.sala.pk, "mañana a las diez", "ana")
        self.assertEqual(ctx.exception.codigo, "fecha_invalida")

    def test_fecha_en_texto_iso(self):
        reserva = servicios.crear_reserva(self.sala.pk, "2024-06-01T10:00:00", "ana")
        self.assertEqual(reserva.fecha_reserva, fecha(2024, 6, 1, 10, 0))

    def test_sala_no_disponible(self):
        """CP-RES-003: Una sala marcada como no disponible no admite reservas."""
        with self.assertRaises(ValidationError) as ctx:
            servicios.crear_reserva(self.cerrada.pk, fecha(2024, 6, 1, 10, 0), "ana")
        self.assertEqual(ctx.exception.codigo, "sala_no_disponible")

    def test_doble_reserva(self):
        """CP-RES-004: Misma sala y misma fecha/hora -> ConflictError."""
        servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana")
        with self.assertRaises(ConflictError) as ctx:
            servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "luis")
        self.assertEqual(ctx.exception.codigo, "fecha_ya_reservada")
        self.assertEqual(Reserva.objects.count(), 1)

    def test_misma_sala_otra_hora(self):
        servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana")
        servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 1), "ana")
        self.assertEqual(Reserva.objects.count(), 2)

    def test_microsegundos_no_evitan_choque(self):
        servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0, 0, 100), "ana")
        with self.assertRaises(ConflictError):
            servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0, 0, 900), "luis")

    def test_restriccion_de_base_de_datos(self):
        """CP-RES-005: Si la verificación previa no ve el choque, la base de datos lo rechaza."""
        servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana")
        with mock.patch("reservas.servicios.existe_conflicto", return_value=False):
            with self.assertRaises(ConflictError) as ctx:
                servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "luis")
        self.assertEqual(ctx.exception.codigo, "fecha_ya_reservada")
        self.assertEqual(Reserva.objects.count(), 1)

    def test_con_limite_de_tiempo(self):
        reserva = servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana", timeout=2)
        self.assertTrue(Reserva.objects.filter(pk=reserva.pk).exists())


# ==========================================
# 3. EDICIÓN Y ELIMINACIÓN
# ==========================================
class EditarReservaTest(TestCase):
    def setUp(self):
        self.sala_a = crear_sala("Sala A", 10, usuario="admin")
        self.sala_b = crear_sala("Sala B", 6, usuario="admin")
        self.reserva = servicios.crear_reserva(self.sala_a.pk, fecha(2024, 6, 1, 10, 0), "ana")

    def test_guardar_sin_cambios(self):
        """CP-RES-006: Una reserva no choca consigo misma."""
        reserva = servicios.actualizar_reserva(
            self.reserva.pk, self.sala_a.pk, fecha(2024, 6, 1, 10, 0), "ana"
        )
        self.assertEqual(reserva.pk, self.reserva.pk)
        self.assertEqual(Reserva.objects.count(), 1)

    def test_mover_a_otra_sala_y_hora(self):
        reserva = servicios.actualizar_reserva(
            self.reserva.pk, self.sala_b.pk, fecha(2024, 6, 2, 9, 30), "ana"
        )
        reserva.refresh_from_db()
        self.assertEqual(reserva.sala, self.sala_b)
        self.assertEqual(reserva.fecha_reserva, fecha(2024, 6, 2, 9, 30))
        # El solicitante no cambia al editar
        self.assertEqual(reserva.solicitante, "ana")

    def test_mover_a_horario_tomado(self):
        otra = servicios.crear_reserva(self.sala_b.pk, fecha(2024, 6, 1, 10, 0), "luis")
        with self.assertRaises(ConflictError):
            servicios.actualizar_reserva(otra.pk, self.sala_a.pk, fecha(2024, 6, 1, 10, 0), "luis")
        otra.refresh_from_db()
        self.assertEqual(otra.sala, self.sala_b)

    def test_mover_a_sala_no_disponible(self):
        actualizar_sala(self.sala_b.pk, "Sala B", 6, False, usuario="admin")
        with self.assertRaises(ValidationError) as ctx:
            servicios.actualizar_reserva(self.reserva.pk, self.sala_b.pk, fecha(2024, 6, 1, 10, 0), "ana")
        self.assertEqual(ctx.exception.codigo, "sala_no_disponible")

    def test_editar_inexistente(self):
        with self.assertRaises(NotFoundError) as ctx:
            servicios.actualizar_reserva(9999, self.sala_a.pk, fecha(2024, 6, 1, 10, 0), "ana")
        self.assertEqual(ctx.exception.codigo, "reserva_no_encontrada")

    def test_eliminar(self):
        servicios.eliminar_reserva(self.reserva.pk, usuario="ana")
        self.assertFalse(Reserva.objects.exists())
        # El horario queda libre otra vez
        servicios.crear_reserva(self.sala_a.pk, fecha(2024, 6, 1, 10, 0), "luis")

    def test_eliminar_inexistente(self):
        with self.assertRaises(NotFoundError):
            servicios.eliminar_reserva(9999, usuario="ana")


# ==========================================
# 4. CONSULTAS Y FILTRO POR RANGO
# ==========================================
class FiltrarReservasTest(TestCase):
    def setUp(self):
        self.sala_a = crear_sala("Sala A", 10, usuario="admin")
        self.sala_b = crear_sala("Sala B", 6, usuario="admin")
        self.r1 = servicios.crear_reserva(self.sala_a.pk, fecha(2024, 6, 3, 12, 0), "ana")
        self.r2 = servicios.crear_reserva(self.sala_b.pk, fecha(2024, 6, 1, 9, 0), "luis")
        self.r3 = servicios.crear_reserva(self.sala_a.pk, fecha(2024, 6, 1, 9, 0), "ana")

    def test_listado_ordenado_por_fecha_e_id(self):
        self.assertEqual(list(servicios.listar_reservas()), [self.r2, self.r3, self.r1])

    def test_limites_inclusivos(self):
        """CP-RES-007: Ambos extremos del rango se incluyen."""
        resultado = list(servicios.filtrar_reservas(fecha(2024, 6, 1, 9, 0), fecha(2024, 6, 3, 12, 0)))
        self.assertEqual(resultado, [self.r2, self.r3, self.r1])

    def test_desde_igual_a_hasta(self):
        resultado = list(servicios.filtrar_reservas(fecha(2024, 6, 3, 12, 0), fecha(2024, 6, 3, 12, 0)))
        self.assertEqual(resultado, [self.r1])

    def test_rango_sin_resultados(self):
        self.assertEqual(list(servicios.filtrar_reservas(date(2024, 7, 1), date(2024, 7, 31))), [])

    def test_hasta_como_fecha_cubre_todo_el_dia(self):
        resultado = list(servicios.filtrar_reservas("2024-06-03", "2024-06-03"))
        self.assertEqual(resultado, [self.r1])

    def test_desde_mayor_que_hasta(self):
        """CP-RES-008: Rango invertido -> ValidationError."""
        with self.assertRaises(ValidationError) as ctx:
            servicios.filtrar_reservas(fecha(2024, 6, 3, 0, 0), fecha(2024, 6, 1, 0, 0))
        self.assertEqual(ctx.exception.codigo, "rango_invalido")

    def test_rango_requerido(self):
        with self.assertRaises(ValidationError) as ctx:
            servicios.filtrar_reservas(None, date(2024, 6, 1))
        self.assertEqual(ctx.exception.codigo, "rango_requerido")

    def test_filtro_por_sala_y_solicitante(self):
        por_sala = list(servicios.filtrar_reservas(date(2024, 6, 1), date(2024, 6, 30), sala_id=self.sala_b.pk))
        self.assertEqual(por_sala, [self.r2])

        por_solicitante = list(servicios.filtrar_reservas(date(2024, 6, 1), date(2024, 6, 30), solicitante="ana"))
        self.assertEqual(por_solicitante, [self.r3, self.r1])

        with self.assertRaises(ValidationError) as ctx:
            servicios.filtrar_reservas(date(2024, 6, 1), date(2024, 6, 30), sala_id="abc")
        self.assertEqual(ctx.exception.codigo, "sala_invalida")

    def test_reservas_por_sala(self):
        self.assertEqual(list(servicios.reservas_por_sala(self.sala_a.pk)), [self.r3, self.r1])
        self.assertEqual(list(servicios.reservas_por_sala(None)), [])


# ==========================================
# 5. CAMPOS DERIVADOS Y BITÁCORA
# ==========================================
class CamposDerivadosTest(TestCase):
    def setUp(self):
        self.sala = crear_sala("Sala A", 10, usuario="admin")

    def test_nombre_sala_refleja_cambios(self):
        reserva = servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana")
        actualizar_sala(self.sala.pk, "Sala Azul", 10, True, usuario="admin")
        self.assertEqual(servicios.obtener_reserva(reserva.pk).nombre_sala, "Sala Azul")

    def test_nombre_usuario(self):
        User.objects.create_user(username="mperez", password="x", first_name="María", last_name="Pérez")
        reserva = servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "mperez")
        self.assertEqual(reserva.nombre_usuario, "María Pérez")

        # Sin usuario registrado se muestra la identidad tal cual
        otra = servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 11, 0), "visita")
        self.assertEqual(otra.nombre_usuario, "visita")

    def test_bitacora(self):
        with self.captureOnCommitCallbacks(execute=True):
            reserva = servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana")
        with self.captureOnCommitCallbacks(execute=True):
            servicios.eliminar_reserva(reserva.pk, usuario="admin")

        registros = RegistroActividad.objects.filter(entidad="RESERVA", entidad_id=reserva.pk).order_by("id")
        self.assertEqual([r.accion for r in registros], ["CREAR", "ELIMINAR"])
        self.assertEqual(registros[0].usuario, "ana")
        self.assertEqual(registros[0].detalle["sala_id"], self.sala.pk)


# ==========================================
# 6. PRUEBAS DE INTEGRACIÓN (API)
# ==========================================
class ReservaApiTest(TestCase):
    def setUp(self):
        self.api_client = APIClient()
        self.sala = crear_sala("Sala A", 10, usuario="admin")
        self.url_lista = reverse("reservas:api-reservas-list")
        self.url_filtrar = reverse("reservas:api-reservas-filtrar")

    def test_crear_reserva_por_api(self):
        """PI-RES-01: POST crea la reserva con el usuario por defecto."""
        resp = self.api_client.post(
            self.url_lista, {"sala": self.sala.pk, "fecha_reserva": "2024-06-01T10:00:00"}, format="json"
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["sala"], self.sala.pk)
        self.assertEqual(resp.data["nombre_sala"], "Sala A")
        self.assertEqual(resp.data["solicitante"], "admin")

    def test_usuario_autenticado_es_solicitante(self):
        usuario = User.objects.create_user(username="ana", password="x", first_name="Ana", last_name="Soto")
        self.api_client.force_authenticate(user=usuario)
        resp = self.api_client.post(
            self.url_lista, {"sala": self.sala.pk, "fecha_reserva": "2024-06-01T10:00:00"}, format="json"
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["solicitante"], "ana")
        self.assertEqual(resp.data["nombre_usuario"], "Ana Soto")

    def test_doble_reserva_responde_409(self):
        datos = {"sala": self.sala.pk, "fecha_reserva": "2024-06-01T10:00:00"}
        self.api_client.post(self.url_lista, datos, format="json")
        resp = self.api_client.post(self.url_lista, datos, format="json")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["codigo"], "fecha_ya_reservada")
        self.assertIn("mensaje", resp.data)

    def test_sin_sala_responde_400(self):
        resp = self.api_client.post(self.url_lista, {"fecha_reserva": "2024-06-01T10:00:00"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["codigo"], "sala_requerida")

    def test_reserva_inexistente_responde_404(self):
        resp = self.api_client.get(reverse("reservas:api-reservas-detail", args=[9999]))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["codigo"], "reserva_no_encontrada")

    def test_patch_mueve_fecha(self):
        reserva = servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana")
        url = reverse("reservas:api-reservas-detail", args=[reserva.pk])
        resp = self.api_client.patch(url, {"fecha_reserva": "2024-06-01T12:00:00"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        reserva.refresh_from_db()
        self.assertEqual(reserva.fecha_reserva, fecha(2024, 6, 1, 12, 0))
        self.assertEqual(reserva.solicitante, "ana")

    def test_eliminar_por_api(self):
        reserva = servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana")
        resp = self.api_client.delete(reverse("reservas:api-reservas-detail", args=[reserva.pk]))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Reserva.objects.exists())

    def test_filtrar_por_api(self):
        """PI-RES-02: GET filtrar devuelve el rango solicitado."""
        servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "ana")
        servicios.crear_reserva(self.sala.pk, fecha(2024, 6, 5, 10, 0), "ana")

        resp = self.api_client.get(self.url_filtrar, {"desde": "2024-06-01", "hasta": "2024-06-02"})
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["count"], 1)
        self.assertEqual(resp.data["results"][0]["nombre_sala"], "Sala A")

        resp = self.api_client.get(self.url_filtrar, {"desde": "2024-06-05", "hasta": "2024-06-01"})
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["codigo"], "rango_invalido")

        resp = self.api_client.get(self.url_filtrar)
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["codigo"], "rango_requerido")
