from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="RegistroActividad",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entidad", models.CharField(choices=[("SALA", "Sala"), ("RESERVA", "Reserva")], max_length=10)),
                ("entidad_id", models.BigIntegerField()),
                ("accion", models.CharField(choices=[("CREAR", "Creación"), ("ACTUALIZAR", "Actualización"), ("ELIMINAR", "Eliminación")], max_length=10)),
                ("usuario", models.CharField(max_length=150)),
                ("detalle", models.JSONField(blank=True, default=dict)),
                ("creado_el", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Registro de actividad",
                "verbose_name_plural": "Registros de actividad",
                "ordering": ["-creado_el", "-id"],
                "indexes": [models.Index(fields=["entidad", "entidad_id"], name="registro_entidad_idx")],
            },
        ),
    ]
