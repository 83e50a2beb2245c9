import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Sala",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre", models.CharField(max_length=100, unique=True, verbose_name="Nombre de la Sala")),
                ("capacidad", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)], verbose_name="Capacidad de la Sala")),
                ("disponible", models.BooleanField(default=True, verbose_name="Disponibilidad")),
                ("creada_el", models.DateTimeField(auto_now_add=True, verbose_name="Fecha de Creación")),
            ],
            options={
                "verbose_name": "Sala",
                "verbose_name_plural": "Salas",
                "ordering": ["nombre", "id"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(capacidad__gte=1), name="sala_capacidad_positiva"),
                ],
            },
        ),
    ]
