"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Definición de la estructura de datos del libro de reservas.
               - Reserva: vincula una Sala con una fecha/hora.
               La unicidad (sala, fecha_reserva) la garantiza la base de datos,
               incluso frente a dos solicitudes concurrentes.
--------------------------------------------------------------------------------
"""
from django.db import models
from django.db.models import UniqueConstraint

from core.identidad import nombre_visible


class Reserva(models.Model):
    # PROTECT: la base nunca borra reservas en cascada al eliminar una sala
    sala = models.ForeignKey("salas.Sala", on_delete=models.PROTECT, related_name="reservas")
    fecha_reserva = models.DateTimeField(verbose_name="Fecha de Reserva")

    # Identidad opaca de quien solicitó la reserva
    solicitante = models.CharField(max_length=150, verbose_name="Solicitante")
    creada_el = models.DateTimeField(auto_now_add=True, verbose_name="Fecha de Creación")

    def __str__(self):
        return f"{self.sala.nombre} · {self.fecha_reserva:%Y-%m-%d %H:%M}"

    class Meta:
        ordering = ["fecha_reserva", "id"]
        verbose_name = "Reserva"
        verbose_name_plural = "Reservas"
        indexes = [
            models.Index(fields=["fecha_reserva"], name="reserva_fecha_idx"),
        ]
        constraints = [
            # Restricción SQL: una sola reserva por sala y fecha/hora
            UniqueConstraint(
                fields=["sala", "fecha_reserva"],
                name="reserva_unica_por_sala_y_fecha",
            ),
        ]

    # Campos derivados: se calculan al leer, nunca se guardan

    @property
    def nombre_sala(self) -> str:
        return self.sala.nombre

    @property
    def nombre_usuario(self) -> str:
        return nombre_visible(self.solicitante)
