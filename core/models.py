"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:           Modelos compartidos del núcleo. Contiene 'RegistroActividad',
                       la bitácora de auditoría que registra quién creó, editó o
                       eliminó cada sala o reserva.
--------------------------------------------------------------------------------
"""

# Importa el módulo base de modelos de Django.
from django.db import models


class RegistroActividad(models.Model):
    """
    Bitácora de operaciones de escritura sobre salas y reservas.
    Se alimenta de forma asíncrona (Celery) una vez confirmada la transacción.
    """

    class Accion(models.TextChoices):
        CREAR = "CREAR", "Creación"
        ACTUALIZAR = "ACTUALIZAR", "Actualización"
        ELIMINAR = "ELIMINAR", "Eliminación"

    class Entidad(models.TextChoices):
        SALA = "SALA", "Sala"
        RESERVA = "RESERVA", "Reserva"

    # Tipo de objeto afectado y su identificador (no es FK: sobrevive al borrado).
    entidad = models.CharField(max_length=10, choices=Entidad.choices)
    entidad_id = models.BigIntegerField()

    accion = models.CharField(max_length=10, choices=Accion.choices)
    # Identidad opaca de quien ejecutó la operación.
    usuario = models.CharField(max_length=150)
    # Foto de los datos relevantes al momento de la operación.
    detalle = models.JSONField(default=dict, blank=True)
    creado_el = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-creado_el", "-id"]
        indexes = [models.Index(fields=["entidad", "entidad_id"], name="registro_entidad_idx")]
        verbose_name = "Registro de actividad"
        verbose_name_plural = "Registros de actividad"

    def __str__(self):
        return f"{self.get_accion_display()} {self.get_entidad_display()} #{self.entidad_id} por {self.usuario}"
