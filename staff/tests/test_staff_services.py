from unittest import mock

import pytest
from django.db import IntegrityError
from model_bakery import baker

from core.exceptions import InvalidRequestError, ResourceNotFoundError
from core.models import Status
from staff.models import StaffMember
from staff.services import StaffMemberService


def data(**overrides):
    values = {
        "name": " Marta ",
        "email": "marta@example.com",
        "rights": StaffMember.UserRights.EMPLOYEE,
    }
    values.update(overrides)
    return values


@pytest.mark.django_db
class TestStaffMemberService:
    def test_create_strips_name_and_defaults_status(self):
        member = StaffMemberService.create_staff(data())

        assert member.name == "Marta"
        assert member.status == Status.ACTIVE

    def test_create_requires_rights(self):
        with pytest.raises(InvalidRequestError):
            StaffMemberService.create_staff(data(rights=None))

    def test_unique_constraint_race_maps_to_email_taken(self):
        with mock.patch.object(StaffMember, "save", side_effect=IntegrityError("unique")):
            with pytest.raises(InvalidRequestError) as excinfo:
                StaffMemberService.create_staff(data())

        assert excinfo.value.detail["code"] == "EMAIL_TAKEN"

    def test_update_keeps_status_when_absent(self):
        member = baker.make(StaffMember, email="marta@example.com", status=Status.INACTIVE,
                            rights=StaffMember.UserRights.VIEWER)

        updated = StaffMemberService.update_staff(member.pk, data())

        assert updated.status == Status.INACTIVE
        assert updated.rights == StaffMember.UserRights.EMPLOYEE

    def test_get_and_delete_missing(self):
        with pytest.raises(ResourceNotFoundError):
            StaffMemberService.get_staff(1000)
        with pytest.raises(ResourceNotFoundError):
            StaffMemberService.delete_staff(1000)

    def test_list_staff(self):
        baker.make(StaffMember, rights=StaffMember.UserRights.VIEWER, _quantity=2)
        assert len(StaffMemberService.list_staff()) == 2
