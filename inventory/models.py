from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from core.models import Status, TimeStampedModel
from core.validators import validate_positive_amount


def calculate_total_price(price_per_unit, quantity):
    """
    Calcula el valor total de la línea: precio por unidad × cantidad.

    Aritmética Decimal exacta; si falta alguno de los dos valores
    el total queda sin definir (None).
    """
    if price_per_unit is None or quantity is None:
        return None
    if not isinstance(price_per_unit, Decimal):
        price_per_unit = Decimal(str(price_per_unit))
    return price_per_unit * quantity


class InventoryItemQuerySet(models.QuerySet):
    def below_threshold(self, threshold):
        """Productos cuya cantidad es estrictamente menor que el umbral."""
        return self.filter(quantity__lt=threshold)

    def active(self):
        return self.filter(status=Status.ACTIVE)


class InventoryItem(TimeStampedModel):
    """
    Producto en inventario.

    total_price se recalcula en cada save() a partir de price_per_unit y quantity.
    """
    product_name = models.CharField(max_length=255, verbose_name="Nombre del Producto")
    price_per_unit = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[validate_positive_amount],
        verbose_name="Precio por Unidad",
    )
    quantity = models.IntegerField(
        validators=[MinValueValidator(0)],
        verbose_name="Cantidad en Stock",
    )
    total_price = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        null=True,
        blank=True,
        editable=False,
        verbose_name="Valor Total",
        help_text="Calculado automáticamente: precio por unidad × cantidad.",
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
        verbose_name="Estado",
    )

    objects = InventoryItemQuerySet.as_manager()

    class Meta:
        db_table = "inventory_item"
        verbose_name = "Producto en Inventario"
        verbose_name_plural = "Productos en Inventario"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["quantity"], name="inventory_item_qty_idx"),
            models.Index(fields=["status"], name="inventory_item_status_idx"),
        ]

    def __str__(self):
        return f"{self.product_name} ({self.quantity})"

    def save(self, *args, **kwargs):
        if not self.status:
            self.status = Status.ACTIVE
        self.total_price = calculate_total_price(self.price_per_unit, self.quantity)

        update_fields = kwargs.get("update_fields")
        if update_fields is not None and {"price_per_unit", "quantity"} & set(update_fields):
            kwargs["update_fields"] = {*update_fields, "total_price"}
        super().save(*args, **kwargs)
