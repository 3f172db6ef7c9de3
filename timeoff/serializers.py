from rest_framework import serializers

from .models import LeaveEntitlement, LeavePolicy, LeaveType


class LeaveTypeSerializer(serializers.ModelSerializer):
    createdBy = serializers.CharField(source="created_by_name", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = LeaveType
        fields = ["id", "name", "description", "createdBy", "createdAt", "updatedAt"]
        read_only_fields = fields


class LeaveEntitlementSerializer(serializers.ModelSerializer):
    leaveType = serializers.SerializerMethodField()

    class Meta:
        model = LeaveEntitlement
        fields = ["leaveType", "days"]
        read_only_fields = fields

    def get_leaveType(self, obj):
        return {"id": str(obj.leave_type_id), "name": obj.leave_type.name}


class LeavePolicySerializer(serializers.ModelSerializer):
    """Leave policy with its entitlements in stored order."""

    entitlements = serializers.SerializerMethodField()
    createdBy = serializers.CharField(source="created_by_name", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = LeavePolicy
        fields = ["id", "name", "entitlements", "status", "createdBy", "createdAt", "updatedAt"]
        read_only_fields = fields

    def get_entitlements(self, obj):
        return LeaveEntitlementSerializer(obj.entitlements.all(), many=True).data
