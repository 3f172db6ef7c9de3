from rest_framework import serializers

from .models import SalaryComponent, SalaryPolicy, SalaryPolicyComponent


class SalaryComponentSerializer(serializers.ModelSerializer):
    createdBy = serializers.CharField(source="created_by_name", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = SalaryComponent
        fields = ["id", "name", "status", "createdBy", "createdAt", "updatedAt"]
        read_only_fields = fields


class SalaryPolicyComponentSerializer(serializers.ModelSerializer):
    salaryComponent = serializers.SerializerMethodField()

    class Meta:
        model = SalaryPolicyComponent
        fields = ["salaryComponent", "amount"]
        read_only_fields = fields

    def get_salaryComponent(self, obj):
        return {"id": str(obj.salary_component_id), "name": obj.salary_component.name}


class SalaryPolicySerializer(serializers.ModelSerializer):
    components = SalaryPolicyComponentSerializer(many=True, read_only=True)
    createdBy = serializers.CharField(source="created_by_name", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = SalaryPolicy
        fields = ["id", "name", "components", "status", "createdBy", "createdAt", "updatedAt"]
        read_only_fields = fields
