import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("salas", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Reserva",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("fecha_reserva", models.DateTimeField(verbose_name="Fecha de Reserva")),
                ("solicitante", models.CharField(max_length=150, verbose_name="Solicitante")),
                ("creada_el", models.DateTimeField(auto_now_add=True, verbose_name="Fecha de Creación")),
                (
                    "sala",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="reservas",
                        to="salas.sala",
                    ),
                ),
            ],
            options={
                "verbose_name": "Reserva",
                "verbose_name_plural": "Reservas",
                "ordering": ["fecha_reserva", "id"],
                "indexes": [models.Index(fields=["fecha_reserva"], name="reserva_fecha_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("sala", "fecha_reserva"), name="reserva_unica_por_sala_y_fecha"),
                ],
            },
        ),
    ]
