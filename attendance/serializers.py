from rest_framework import serializers

from .models import Shift, ShiftBreak


class ShiftBreakSerializer(serializers.ModelSerializer):
    startTime = serializers.CharField(source="start_time", read_only=True)
    endTime = serializers.CharField(source="end_time", read_only=True)

    class Meta:
        model = ShiftBreak
        fields = ["startTime", "endTime"]


class ShiftSerializer(serializers.ModelSerializer):
    startTime = serializers.CharField(source="start_time", read_only=True)
    endTime = serializers.CharField(source="end_time", read_only=True)
    intervals = ShiftBreakSerializer(many=True, read_only=True)
    workingDays = serializers.JSONField(source="working_days", read_only=True)
    createdBy = serializers.CharField(source="created_by_name", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Shift
        fields = [
            "id",
            "name",
            "startTime",
            "endTime",
            "intervals",
            "workingDays",
            "notes",
            "status",
            "createdBy",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
