"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Definición de la estructura de datos del directorio de salas.
               - Sala: espacio físico reservable con capacidad y disponibilidad.
--------------------------------------------------------------------------------
"""
from django.db import models
from django.core.validators import MinValueValidator

# Largo máximo del nombre de una sala
NOMBRE_MAX = 100


class Sala(models.Model):
    nombre = models.CharField(max_length=NOMBRE_MAX, unique=True, verbose_name="Nombre de la Sala")
    capacidad = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        verbose_name="Capacidad de la Sala",
    )

    # Control maestro de disponibilidad (una sala no disponible no admite reservas nuevas)
    disponible = models.BooleanField(default=True, verbose_name="Disponibilidad")
    creada_el = models.DateTimeField(auto_now_add=True, verbose_name="Fecha de Creación")

    def __str__(self):
        return self.nombre

    class Meta:
        ordering = ["nombre", "id"]
        verbose_name = "Sala"
        verbose_name_plural = "Salas"
        constraints = [
            # Restricción SQL: capacidad estrictamente positiva
            models.CheckConstraint(condition=models.Q(capacidad__gte=1), name="sala_capacidad_positiva"),
        ]
