from rest_framework import serializers

from .models import Department, Position


class DepartmentRefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ['id', 'name']


class DepartmentSerializer(serializers.ModelSerializer):
    """Serializer for Department model"""

    positionCount = serializers.CharField(source='position_count', read_only=True)
    createdBy = serializers.CharField(source='created_by_name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Department
        fields = ['id', 'name', 'positionCount', 'createdBy', 'createdAt', 'updatedAt']
        read_only_fields = fields


class PositionSerializer(serializers.ModelSerializer):
    """Serializer for Position model with its department joined in"""

    department = DepartmentRefSerializer(read_only=True)
    reportsTo = serializers.CharField(source='reports_to', read_only=True)
    employeeLimit = serializers.CharField(source='employee_limit', read_only=True)
    leavePolicy = serializers.SerializerMethodField()
    createdBy = serializers.CharField(source='created_by_name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Position
        fields = [
            'id', 'name', 'department', 'reportsTo', 'employeeLimit', 'leavePolicy',
            'createdBy', 'createdAt', 'updatedAt',
        ]
        read_only_fields = fields

    def get_leavePolicy(self, obj):
        if obj.leave_policy_id is None:
            return None
        return {'id': str(obj.leave_policy_id), 'name': obj.leave_policy.name}
