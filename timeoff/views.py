from accounts.permissions import IsAdmin, IsAdminOrSupervisor
from accounts.viewsets import ApprovalStatusMixin, EntityViewSet

from . import services
from .models import LeavePolicy, LeaveType
from .serializers import LeavePolicySerializer, LeaveTypeSerializer

READ_ACTIONS = ("list", "retrieve", "select_list")


class LeaveTypeViewSet(EntityViewSet):
    permission_classes = [IsAdmin]
    permission_classes_by_action = {action: [IsAdminOrSupervisor] for action in READ_ACTIONS}
    label = "Leave Type"
    list_key = "leaveTypes"
    queryset = LeaveType.objects.all()
    serializer_class = LeaveTypeSerializer

    def perform_create(self, data, actor):
        return services.create_leave_type(data, actor)

    def perform_update(self, instance, data, actor, partial):
        return services.update_leave_type(instance, data, actor, partial=partial)

    def perform_destroy(self, instance, actor):
        services.delete_leave_type(instance, actor)


class LeavePolicyViewSet(ApprovalStatusMixin, EntityViewSet):
    """Leave policies; supervisors may read and propose, admins decide."""

    permission_classes = [IsAdmin]
    permission_classes_by_action = {action: [IsAdminOrSupervisor] for action in READ_ACTIONS + ("create",)}
    label = "Leave Policy"
    list_key = "leavePolicies"
    queryset = LeavePolicy.objects.prefetch_related("entitlements__leave_type")
    serializer_class = LeavePolicySerializer
    full_update_required = False

    def perform_create(self, data, actor):
        return services.create_leave_policy(data, actor)

    def perform_update(self, instance, data, actor, partial):
        return services.update_leave_policy(instance, data, actor, partial=partial)

    def perform_destroy(self, instance, actor):
        services.delete_leave_policy(instance, actor)
