"""
Modelos base y choices compartidos entre apps.
"""
from django.db import models
from django.utils import timezone


class Status(models.TextChoices):
    ACTIVE = "ACTIVE", "Activo"
    INACTIVE = "INACTIVE", "Inactivo"
    DISCONTINUED = "DISCONTINUED", "Descontinuado"


class TimeStampedModel(models.Model):
    """
    Modelo base con timestamps gestionados en save().

    No usamos auto_now_add/auto_now porque cada uno lee el reloj por separado;
    aquí ambos campos salen de la misma lectura al crear el registro.
    """
    created_at = models.DateTimeField(editable=False, verbose_name="Creado")
    updated_at = models.DateTimeField(editable=False, verbose_name="Actualizado")

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def save(self, *args, **kwargs):
        now_ts = timezone.now()
        if self._state.adding and self.created_at is None:
            self.created_at = now_ts
        self.updated_at = now_ts

        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = {*update_fields, "updated_at"}
        super().save(*args, **kwargs)
