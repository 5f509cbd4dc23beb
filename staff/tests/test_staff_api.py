import pytest
from model_bakery import baker
from rest_framework import status

from core.models import Status
from staff.models import StaffMember

STAFF_URL = "/api/v1/staff/"


def detail_url(staff_id):
    return f"{STAFF_URL}{staff_id}/"


def staff_payload(**overrides):
    payload = {
        "name": "Ana Torres",
        "email": "ana@example.com",
        "designation": "Jefa de bodega",
        "department": "Logística",
        "rights": StaffMember.UserRights.MANAGER,
        "phone_number": "+57 300-123-4567",
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestStaffCrud:
    def test_create(self, api_client):
        response = api_client.post(STAFF_URL, staff_payload(), format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["email"] == "ana@example.com"
        assert response.data["rights"] == StaffMember.UserRights.MANAGER
        assert response.data["status"] == Status.ACTIVE
        assert response.data["created_at"] == response.data["updated_at"]

    def test_create_duplicate_email(self, api_client):
        baker.make(StaffMember, email="ana@example.com", rights=StaffMember.UserRights.ADMIN)

        response = api_client.post(STAFF_URL, staff_payload(), format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "EMAIL_TAKEN"
        assert response.data["detail"] == "El email ya existe: ana@example.com"
        assert StaffMember.objects.count() == 1

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"email": "no-es-un-email"}, "email"),
            ({"name": ""}, "name"),
            ({"rights": None}, "rights"),
            ({"rights": "SUPERUSER"}, "rights"),
            ({"phone_number": "12"}, "phone_number"),
        ],
    )
    def test_create_rejects_invalid_payload(self, api_client, overrides, field):
        response = api_client.post(STAFF_URL, staff_payload(**overrides), format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert field in response.data["errors"]
        assert not StaffMember.objects.exists()

    def test_optional_fields_can_be_omitted(self, api_client):
        payload = {"name": "Luis", "email": "luis@example.com", "rights": StaffMember.UserRights.VIEWER}

        response = api_client.post(STAFF_URL, payload, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["designation"] is None
        assert response.data["phone_number"] is None

    def test_list_filters_by_rights(self, api_client):
        baker.make(StaffMember, rights=StaffMember.UserRights.EMPLOYEE, _quantity=2)
        admin = baker.make(StaffMember, rights=StaffMember.UserRights.ADMIN)

        response = api_client.get(STAFF_URL, {"rights": StaffMember.UserRights.ADMIN})

        assert response.status_code == status.HTTP_200_OK
        assert [row["id"] for row in response.data] == [admin.id]

    def test_retrieve_missing(self, api_client):
        response = api_client.get(detail_url(31))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["detail"] == "Personal no encontrado con ID: 31"

    def test_update(self, api_client):
        member = baker.make(StaffMember, email="ana@example.com", rights=StaffMember.UserRights.EMPLOYEE)

        response = api_client.put(
            detail_url(member.id),
            staff_payload(rights=StaffMember.UserRights.ADMIN, status=Status.INACTIVE),
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        member.refresh_from_db()
        assert member.rights == StaffMember.UserRights.ADMIN
        assert member.status == Status.INACTIVE

    def test_update_to_taken_email(self, api_client):
        baker.make(StaffMember, email="otro@example.com", rights=StaffMember.UserRights.VIEWER)
        member = baker.make(StaffMember, email="ana@example.com", rights=StaffMember.UserRights.VIEWER)

        response = api_client.put(detail_url(member.id), staff_payload(email="otro@example.com"), format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "EMAIL_TAKEN"
        member.refresh_from_db()
        assert member.email == "ana@example.com"

    def test_update_keeping_own_email(self, api_client):
        member = baker.make(StaffMember, email="ana@example.com", rights=StaffMember.UserRights.VIEWER)

        response = api_client.put(detail_url(member.id), staff_payload(name="Ana T."), format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["name"] == "Ana T."

    def test_delete(self, api_client):
        member = baker.make(StaffMember, rights=StaffMember.UserRights.VIEWER)

        response = api_client.delete(detail_url(member.id))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert api_client.delete(detail_url(member.id)).status_code == status.HTTP_404_NOT_FOUND
