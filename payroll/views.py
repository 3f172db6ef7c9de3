from accounts.permissions import IsAdmin, IsAdminOrSupervisor
from accounts.viewsets import ApprovalStatusMixin, EntityViewSet

from . import services
from .models import SalaryComponent, SalaryPolicy
from .serializers import SalaryComponentSerializer, SalaryPolicySerializer

SUPERVISOR_ACTIONS = ("list", "retrieve", "select_list", "create")


class SalaryComponentViewSet(ApprovalStatusMixin, EntityViewSet):
    permission_classes = [IsAdmin]
    permission_classes_by_action = {action: [IsAdminOrSupervisor] for action in SUPERVISOR_ACTIONS}
    label = "Salary Component"
    list_key = "salaryComponents"
    queryset = SalaryComponent.objects.all()
    serializer_class = SalaryComponentSerializer

    def perform_create(self, data, actor):
        return services.create_salary_component(data, actor)

    def perform_update(self, instance, data, actor, partial):
        return services.update_salary_component(instance, data, actor, partial=partial)

    def perform_destroy(self, instance, actor):
        services.delete_salary_component(instance, actor)


class SalaryPolicyViewSet(ApprovalStatusMixin, EntityViewSet):
    permission_classes = [IsAdmin]
    permission_classes_by_action = {action: [IsAdminOrSupervisor] for action in SUPERVISOR_ACTIONS}
    label = "Salary Policy"
    list_key = "salaryPolicies"
    queryset = SalaryPolicy.objects.prefetch_related("components__salary_component")
    serializer_class = SalaryPolicySerializer
    full_update_required = False

    def perform_create(self, data, actor):
        return services.create_salary_policy(data, actor)

    def perform_update(self, instance, data, actor, partial):
        return services.update_salary_policy(instance, data, actor, partial=partial)

    def perform_destroy(self, instance, actor):
        services.delete_salary_policy(instance, actor)
