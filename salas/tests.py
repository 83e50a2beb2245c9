"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Pruebas unitarias y de integración del directorio de salas:
               validaciones, unicidad de nombre, bloqueo de eliminación con
               reservas activas, bitácora y endpoints de la API.
--------------------------------------------------------------------------------
"""
from datetime import datetime

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from core.errores import ValidationError, NotFoundError, ConflictError
from core.models import RegistroActividad
from reservas.models import Reserva
from reservas.servicios import crear_reserva, eliminar_reserva
from . import servicios
from .models import Sala


def fecha(*args):
    return timezone.make_aware(datetime(*args))


# ==========================================
# 1. PRUEBAS UNITARIAS (Servicio de salas)
# ==========================================
class SalaServicioTest(TestCase):
    def setUp(self):
        self.sala = servicios.crear_sala("Sala A", 10, True, usuario="admin")

    def test_crear_sala_asigna_id_y_fecha(self):
        """CP-SAL-001: Una sala nueva recibe id y fecha de creación."""
        self.assertIsNotNone(self.sala.pk)
        self.assertIsNotNone(self.sala.creada_el)
        self.assertEqual(Sala.objects.count(), 1)

    def test_nombre_se_normaliza(self):
        sala = servicios.crear_sala("  Sala B  ", 5, usuario="admin")
        self.assertEqual(sala.nombre, "Sala B")

    def test_nombre_vacio_es_invalido(self):
        """CP-SAL-002: Nombre vacío o solo espacios -> ValidationError."""
        for nombre in ("", "   ", None):
            with self.assertRaises(ValidationError) as ctx:
                servicios.crear_sala(nombre, 5, usuario="admin")
            self.assertEqual(ctx.exception.codigo, "nombre_requerido")

    def test_nombre_muy_largo(self):
        with self.assertRaises(ValidationError) as ctx:
            servicios.crear_sala("x" * 101, 5, usuario="admin")
        self.assertEqual(ctx.exception.codigo, "nombre_muy_largo")

        # 100 caracteres es el máximo permitido
        sala = servicios.crear_sala("y" * 100, 5, usuario="admin")
        self.assertEqual(len(sala.nombre), 100)

    def test_capacidad_debe_ser_positiva(self):
        """CP-SAL-003: Capacidad 0, negativa o no entera -> ValidationError."""
        for capacidad in (0, -3, True, "10", None):
            with self.assertRaises(ValidationError) as ctx:
                servicios.crear_sala("Sala C", capacidad, usuario="admin")
            self.assertEqual(ctx.exception.codigo, "capacidad_invalida")
        self.assertFalse(Sala.objects.filter(nombre="Sala C").exists())

    def test_nombre_duplicado_es_conflicto(self):
        """CP-SAL-004: No pueden existir dos salas con el mismo nombre."""
        with self.assertRaises(ConflictError) as ctx:
            servicios.crear_sala("Sala A", 20, usuario="admin")
        self.assertEqual(ctx.exception.codigo, "nombre_duplicado")
        self.assertEqual(Sala.objects.count(), 1)

    def test_actualizar_conservando_su_nombre(self):
        sala = servicios.actualizar_sala(self.sala.pk, "Sala A", 15, False, usuario="admin")
        self.assertEqual(sala.capacidad, 15)
        self.assertFalse(sala.disponible)
        self.sala.refresh_from_db()
        self.assertEqual(self.sala.capacidad, 15)

    def test_actualizar_a_nombre_de_otra_sala(self):
        otra = servicios.crear_sala("Sala B", 8, usuario="admin")
        with self.assertRaises(ConflictError):
            servicios.actualizar_sala(otra.pk, "Sala A", 8, True, usuario="admin")
        otra.refresh_from_db()
        self.assertEqual(otra.nombre, "Sala B")

    def test_actualizar_valida_campos(self):
        with self.assertRaises(ValidationError) as ctx:
            servicios.actualizar_sala(self.sala.pk, "Sala A", 0, True, usuario="admin")
        self.assertEqual(ctx.exception.codigo, "capacidad_invalida")

    def test_actualizar_inexistente(self):
        with self.assertRaises(NotFoundError) as ctx:
            servicios.actualizar_sala(9999, "Sala Z", 5, True, usuario="admin")
        self.assertEqual(ctx.exception.codigo, "sala_no_encontrada")

    def test_obtener_sala(self):
        self.assertEqual(servicios.obtener_sala(self.sala.pk), self.sala)
        self.assertEqual(servicios.obtener_sala(str(self.sala.pk)), self.sala)
        for sala_id in (9999, "abc", None):
            with self.assertRaises(NotFoundError):
                servicios.obtener_sala(sala_id)

    def test_listado_estable_y_disponibles(self):
        servicios.crear_sala("Auditorio", 100, True, usuario="admin")
        servicios.crear_sala("Box 1", 2, False, usuario="admin")

        nombres = [s.nombre for s in servicios.listar_salas()]
        self.assertEqual(nombres, ["Auditorio", "Box 1", "Sala A"])
        self.assertEqual(nombres, [s.nombre for s in servicios.listar_salas()])

        disponibles = [s.nombre for s in servicios.salas_disponibles()]
        self.assertEqual(disponibles, ["Auditorio", "Sala A"])


# ==========================================
# 2. ELIMINACIÓN CON RESERVAS ACTIVAS
# ==========================================
class EliminarSalaTest(TestCase):
    def setUp(self):
        self.sala = servicios.crear_sala("Sala A", 10, usuario="admin")

    def test_eliminar_sin_reservas(self):
        servicios.eliminar_sala(self.sala.pk, usuario="admin")
        self.assertFalse(Sala.objects.filter(pk=self.sala.pk).exists())

    def test_eliminar_inexistente(self):
        with self.assertRaises(NotFoundError):
            servicios.eliminar_sala(9999, usuario="admin")

    def test_eliminar_con_reservas_es_conflicto(self):
        """CP-SAL-005: Una sala con reservas activas no se puede eliminar."""
        reserva = crear_reserva(self.sala.pk, fecha(2024, 6, 1, 10, 0), "admin")

        with self.assertRaises(ConflictError) as ctx:
            servicios.eliminar_sala(self.sala.pk, usuario="admin")
        self.assertEqual(ctx.exception.codigo, "sala_con_reservas")
        self.assertEqual(ctx.exception.detalle["reservas"], 1)
        self.assertTrue(Sala.objects.filter(pk=self.sala.pk).exists())

        # Al quitar la reserva, la sala ya se puede eliminar
        eliminar_reserva(reserva.pk, usuario="admin")
        servicios.eliminar_sala(self.sala.pk, usuario="admin")
        self.assertFalse(Sala.objects.exists())
        self.assertFalse(Reserva.objects.exists())


# ==========================================
# 3. BITÁCORA DE ACTIVIDAD
# ==========================================
class BitacoraSalaTest(TestCase):
    def test_operaciones_quedan_registradas(self):
        with self.captureOnCommitCallbacks(execute=True):
            sala = servicios.crear_sala("Sala A", 10, usuario="secretaria")
        with self.captureOnCommitCallbacks(execute=True):
            servicios.actualizar_sala(sala.pk, "Sala A", 12, True, usuario="secretaria")
        with self.captureOnCommitCallbacks(execute=True):
            servicios.eliminar_sala(sala.pk, usuario="presidente")

        acciones = list(
            RegistroActividad.objects.filter(entidad="SALA", entidad_id=sala.pk)
            .order_by("id")
            .values_list("accion", "usuario")
        )
        self.assertEqual(
            acciones,
            [("CREAR", "secretaria"), ("ACTUALIZAR", "secretaria"), ("ELIMINAR", "presidente")],
        )
        ultimo = RegistroActividad.objects.filter(accion="ELIMINAR").get()
        self.assertEqual(ultimo.detalle["capacidad"], 12)

    def test_operacion_rechazada_no_deja_registro(self):
        servicios.crear_sala("Sala A", 10, usuario="admin")
        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            with self.assertRaises(ConflictError):
                servicios.crear_sala("Sala A", 10, usuario="admin")
        self.assertEqual(len(callbacks), 0)


# ==========================================
# 4. PRUEBAS DE INTEGRACIÓN (API)
# ==========================================
class SalaApiTest(TestCase):
    def setUp(self):
        self.api_client = APIClient()
        self.url_lista = reverse("salas:api-salas-list")

    def test_crear_y_listar(self):
        """PI-SAL-01: POST crea la sala y GET la lista en JSON."""
        resp = self.api_client.post(
            self.url_lista, {"nombre": "Sala A", "capacidad": 10, "disponible": True}, format="json"
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["nombre"], "Sala A")
        self.assertIn("creada_el", resp.data)

        resp = self.api_client.get(self.url_lista)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["count"], 1)

    def test_errores_del_dominio(self):
        """PI-SAL-02: Validación -> 400, duplicado -> 409, inexistente -> 404."""
        resp = self.api_client.post(self.url_lista, {"nombre": "", "capacidad": 10}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["codigo"], "nombre_requerido")

        self.api_client.post(self.url_lista, {"nombre": "Sala A", "capacidad": 10}, format="json")
        resp = self.api_client.post(self.url_lista, {"nombre": "Sala A", "capacidad": 4}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["codigo"], "nombre_duplicado")

        resp = self.api_client.get(reverse("salas:api-salas-detail", args=[9999]))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["codigo"], "sala_no_encontrada")

    def test_patch_conserva_campos_ausentes(self):
        sala = servicios.crear_sala("Sala A", 10, usuario="admin")
        url = reverse("salas:api-salas-detail", args=[sala.pk])
        resp = self.api_client.patch(url, {"disponible": False}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["capacidad"], 10)
        self.assertFalse(resp.data["disponible"])

    def test_eliminar_sala_con_reservas(self):
        sala = servicios.crear_sala("Sala A", 10, usuario="admin")
        crear_reserva(sala.pk, fecha(2024, 6, 1, 10, 0), "admin")
        url = reverse("salas:api-salas-detail", args=[sala.pk])

        resp = self.api_client.delete(url)
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["codigo"], "sala_con_reservas")

    def test_salas_disponibles(self):
        servicios.crear_sala("Sala A", 10, True, usuario="admin")
        servicios.crear_sala("Sala B", 10, False, usuario="admin")
        resp = self.api_client.get(reverse("salas:api-salas-disponibles"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual([s["nombre"] for s in resp.data["results"]], ["Sala A"])
