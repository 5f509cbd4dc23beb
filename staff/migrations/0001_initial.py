import core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StaffMember",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(editable=False, verbose_name="Creado")),
                ("updated_at", models.DateTimeField(editable=False, verbose_name="Actualizado")),
                ("name", models.CharField(max_length=150, verbose_name="Nombre")),
                ("email", models.EmailField(max_length=254, unique=True, verbose_name="Email")),
                ("designation", models.CharField(blank=True, max_length=100, null=True, verbose_name="Cargo")),
                ("department", models.CharField(blank=True, max_length=100, null=True, verbose_name="Departamento")),
                (
                    "rights",
                    models.CharField(
                        choices=[
                            ("ADMIN", "Administrador"),
                            ("MANAGER", "Gerente"),
                            ("EMPLOYEE", "Empleado"),
                            ("VIEWER", "Solo lectura"),
                        ],
                        max_length=20,
                        verbose_name="Permisos",
                    ),
                ),
                (
                    "phone_number",
                    models.CharField(
                        blank=True,
                        max_length=20,
                        null=True,
                        validators=[core.validators.validate_phone_number],
                        verbose_name="Teléfono",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("ACTIVE", "Activo"), ("INACTIVE", "Inactivo"), ("DISCONTINUED", "Descontinuado")],
                        default="ACTIVE",
                        max_length=20,
                        verbose_name="Estado",
                    ),
                ),
            ],
            options={
                "verbose_name": "Miembro del Personal",
                "verbose_name_plural": "Personal",
                "db_table": "staff_member",
                "ordering": ["id"],
            },
        ),
    ]
