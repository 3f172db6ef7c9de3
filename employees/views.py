from accounts.permissions import IsAdmin
from accounts.viewsets import EntityViewSet

from . import services
from .models import Department, Position
from .serializers import DepartmentSerializer, PositionSerializer


class DepartmentViewSet(EntityViewSet):
    """ViewSet for managing departments"""

    permission_classes = [IsAdmin]
    label = 'Department'
    list_key = 'departments'
    queryset = Department.objects.all()
    serializer_class = DepartmentSerializer
    full_update_required = False

    def perform_create(self, data, actor):
        return services.create_department(data, actor)

    def perform_update(self, instance, data, actor, partial):
        return services.update_department(instance, data, actor, partial=partial)

    def perform_destroy(self, instance, actor):
        services.delete_department(instance, actor)


class PositionViewSet(EntityViewSet):
    """ViewSet for managing positions"""

    permission_classes = [IsAdmin]
    label = 'Position'
    list_key = 'positions'
    queryset = Position.objects.select_related('department', 'leave_policy')
    serializer_class = PositionSerializer

    def perform_create(self, data, actor):
        return services.create_position(data, actor)

    def perform_update(self, instance, data, actor, partial):
        return services.update_position(instance, data, actor, partial=partial)

    def perform_destroy(self, instance, actor):
        services.delete_position(instance, actor)
