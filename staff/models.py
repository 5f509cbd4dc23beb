from django.db import models

from core.models import Status, TimeStampedModel
from core.validators import validate_phone_number


class StaffMember(TimeStampedModel):
    class UserRights(models.TextChoices):
        ADMIN = "ADMIN", "Administrador"
        MANAGER = "MANAGER", "Gerente"
        EMPLOYEE = "EMPLOYEE", "Empleado"
        VIEWER = "VIEWER", "Solo lectura"

    name = models.CharField(max_length=150, verbose_name="Nombre")
    email = models.EmailField(unique=True, verbose_name="Email")
    designation = models.CharField(max_length=100, blank=True, null=True, verbose_name="Cargo")
    department = models.CharField(max_length=100, blank=True, null=True, verbose_name="Departamento")
    rights = models.CharField(
        max_length=20,
        choices=UserRights.choices,
        verbose_name="Permisos",
    )
    phone_number = models.CharField(
        max_length=20,
        blank=True,
        null=True,
        validators=[validate_phone_number],
        verbose_name="Teléfono",
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
        verbose_name="Estado",
    )

    class Meta:
        db_table = "staff_member"
        verbose_name = "Miembro del Personal"
        verbose_name_plural = "Personal"
        ordering = ["id"]

    def __str__(self):
        return f"{self.name} <{self.email}>"

    def save(self, *args, **kwargs):
        if not self.status:
            self.status = Status.ACTIVE
        super().save(*args, **kwargs)
