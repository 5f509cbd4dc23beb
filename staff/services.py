"""
Servicio de gestión del personal.
"""
import logging

from django.db import IntegrityError, transaction

from core.exceptions import InvalidRequestError, ResourceNotFoundError
from core.models import Status

from .models import StaffMember

logger = logging.getLogger(__name__)


class StaffMemberService:
    @staticmethod
    def list_staff(queryset=None):
        logger.info("Consultando todo el personal")
        if queryset is None:
            queryset = StaffMember.objects.all()
        return list(queryset)

    @staticmethod
    def get_staff(staff_id) -> StaffMember:
        logger.info("Consultando personal con ID: %s", staff_id)
        return StaffMemberService._get_or_404(StaffMember.objects.all(), staff_id)

    @staticmethod
    def create_staff(data) -> StaffMember:
        logger.info("Creando miembro del personal: %s", data.get("email"))
        StaffMemberService._validate_staff_data(data)

        if StaffMember.objects.filter(email=data["email"]).exists():
            raise InvalidRequestError(f"El email ya existe: {data['email']}", internal_code="EMAIL_TAKEN")

        staff = StaffMember(
            name=data["name"].strip(),
            email=data["email"],
            designation=data.get("designation"),
            department=data.get("department"),
            rights=data["rights"],
            phone_number=data.get("phone_number"),
            status=data.get("status") or Status.ACTIVE,
        )
        StaffMemberService._save(staff)
        logger.info("Personal creado con ID: %s", staff.pk)
        return staff

    @staticmethod
    def update_staff(staff_id, data) -> StaffMember:
        logger.info("Actualizando personal con ID: %s", staff_id)
        StaffMemberService._validate_staff_data(data)

        with transaction.atomic():
            staff = StaffMemberService._get_or_404(StaffMember.objects.select_for_update(), staff_id)

            # El email nuevo no puede pertenecer a otro miembro
            if staff.email != data["email"] and StaffMember.objects.filter(email=data["email"]).exists():
                raise InvalidRequestError(f"El email ya existe: {data['email']}", internal_code="EMAIL_TAKEN")

            staff.name = data["name"].strip()
            staff.email = data["email"]
            staff.designation = data.get("designation")
            staff.department = data.get("department")
            staff.rights = data["rights"]
            staff.phone_number = data.get("phone_number")
            if data.get("status"):
                staff.status = data["status"]
            StaffMemberService._save(staff)
        logger.info("Personal actualizado con ID: %s", staff.pk)
        return staff

    @staticmethod
    def delete_staff(staff_id):
        logger.info("Eliminando personal con ID: %s", staff_id)
        deleted, _ = StaffMember.objects.filter(pk=staff_id).delete()
        if not deleted:
            raise ResourceNotFoundError(f"Personal no encontrado con ID: {staff_id}")
        logger.info("Personal eliminado con ID: %s", staff_id)

    @staticmethod
    def _save(staff):
        # La restricción única de la BD cubre la carrera entre el exists() y el INSERT.
        try:
            with transaction.atomic():
                staff.save()
        except IntegrityError:
            raise InvalidRequestError(f"El email ya existe: {staff.email}", internal_code="EMAIL_TAKEN") from None

    @staticmethod
    def _get_or_404(queryset, staff_id):
        try:
            return queryset.get(pk=staff_id)
        except (StaffMember.DoesNotExist, ValueError, TypeError):
            raise ResourceNotFoundError(f"Personal no encontrado con ID: {staff_id}") from None

    @staticmethod
    def _validate_staff_data(data):
        name = data.get("name")
        if name is None or not str(name).strip():
            raise InvalidRequestError("El nombre es obligatorio.")
        email = data.get("email")
        if email is None or not str(email).strip():
            raise InvalidRequestError("El email es obligatorio.")
        if not data.get("rights"):
            raise InvalidRequestError("Los permisos son obligatorios.")
