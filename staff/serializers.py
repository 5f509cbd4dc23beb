from rest_framework import serializers

from core.models import Status
from core.validators import validate_phone_number

from .models import StaffMember


class StaffMemberSerializer(serializers.ModelSerializer):
    """Representación de salida de un miembro del personal."""

    class Meta:
        model = StaffMember
        fields = [
            "id",
            "name",
            "email",
            "designation",
            "department",
            "rights",
            "phone_number",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class StaffMemberWriteSerializer(serializers.Serializer):
    """Valida altas y actualizaciones (POST/PUT). La unicidad del email la verifica el servicio."""

    name = serializers.CharField(
        max_length=150,
        error_messages={
            "required": "El nombre es obligatorio.",
            "blank": "El nombre es obligatorio.",
            "null": "El nombre es obligatorio.",
        },
    )
    email = serializers.EmailField(
        max_length=254,
        error_messages={
            "required": "El email es obligatorio.",
            "blank": "El email es obligatorio.",
            "null": "El email es obligatorio.",
            "invalid": "El email debe ser válido.",
        },
    )
    designation = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    department = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    rights = serializers.ChoiceField(
        choices=StaffMember.UserRights.choices,
        error_messages={
            "required": "Los permisos son obligatorios.",
            "null": "Los permisos son obligatorios.",
        },
    )
    phone_number = serializers.CharField(
        max_length=20,
        required=False,
        allow_blank=True,
        allow_null=True,
        validators=[validate_phone_number],
    )
    status = serializers.ChoiceField(choices=Status.choices, required=False, allow_null=True)
