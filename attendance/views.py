from accounts.permissions import IsAdmin, IsAdminOrSupervisor
from accounts.viewsets import ApprovalStatusMixin, EntityViewSet

from . import services
from .models import Shift
from .serializers import ShiftSerializer


class ShiftViewSet(ApprovalStatusMixin, EntityViewSet):
    """Working shifts with break intervals and working days."""

    permission_classes = [IsAdmin]
    permission_classes_by_action = {
        "list": [IsAdminOrSupervisor],
        "retrieve": [IsAdminOrSupervisor],
        "select_list": [IsAdminOrSupervisor],
        "create": [IsAdminOrSupervisor],
    }
    label = "Shift"
    list_key = "shifts"
    queryset = Shift.objects.prefetch_related("intervals")
    serializer_class = ShiftSerializer

    def perform_create(self, data, actor):
        return services.create_shift(data, actor)

    def perform_update(self, instance, data, actor, partial):
        return services.update_shift(instance, data, actor, partial=partial)

    def perform_destroy(self, instance, actor):
        services.delete_shift(instance, actor)
