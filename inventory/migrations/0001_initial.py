import core.validators
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="InventoryItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(editable=False, verbose_name="Creado")),
                ("updated_at", models.DateTimeField(editable=False, verbose_name="Actualizado")),
                ("product_name", models.CharField(max_length=255, verbose_name="Nombre del Producto")),
                (
                    "price_per_unit",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[core.validators.validate_positive_amount],
                        verbose_name="Precio por Unidad",
                    ),
                ),
                (
                    "quantity",
                    models.IntegerField(
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Cantidad en Stock",
                    ),
                ),
                (
                    "total_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        editable=False,
                        help_text="Calculado automáticamente: precio por unidad × cantidad.",
                        max_digits=15,
                        null=True,
                        verbose_name="Valor Total",
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
                "verbose_name": "Producto en Inventario",
                "verbose_name_plural": "Productos en Inventario",
                "db_table": "inventory_item",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["quantity"], name="inventory_item_qty_idx"),
                    models.Index(fields=["status"], name="inventory_item_status_idx"),
                ],
            },
        ),
    ]
