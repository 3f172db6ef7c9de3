from rest_framework import serializers

from .models import Idea


class IdeaSerializer(serializers.ModelSerializer):
    user = serializers.PrimaryKeyRelatedField(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Idea
        fields = ['id', 'title', 'summary', 'description', 'tags', 'user', 'createdAt', 'updatedAt']
        read_only_fields = fields
