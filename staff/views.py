from rest_framework import status, viewsets
from rest_framework.response import Response

from .models import StaffMember
from .serializers import StaffMemberSerializer, StaffMemberWriteSerializer
from .services import StaffMemberService


class StaffMemberViewSet(viewsets.GenericViewSet):
    """CRUD del personal."""
    queryset = StaffMember.objects.all()
    serializer_class = StaffMemberSerializer
    filterset_fields = ["status", "rights", "department"]
    lookup_value_regex = r"\d+"

    def list(self, request):
        staff = StaffMemberService.list_staff(self.filter_queryset(self.get_queryset()))
        return Response(self.get_serializer(staff, many=True).data)

    def create(self, request):
        serializer = StaffMemberWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        staff = StaffMemberService.create_staff(serializer.validated_data)
        return Response(StaffMemberSerializer(staff).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        staff = StaffMemberService.get_staff(pk)
        return Response(StaffMemberSerializer(staff).data)

    def update(self, request, pk=None):
        serializer = StaffMemberWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        staff = StaffMemberService.update_staff(pk, serializer.validated_data)
        return Response(StaffMemberSerializer(staff).data)

    def destroy(self, request, pk=None):
        StaffMemberService.delete_staff(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
