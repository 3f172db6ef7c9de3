from rest_framework import serializers
from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model"""

    class Meta:
        model = User
        fields = ('id', 'name', 'username', 'role', 'created_at')
        read_only_fields = ('id', 'created_at')


class RegisterSerializer(serializers.Serializer):
    """Serializer for creating a user account"""

    name = serializers.CharField(max_length=255)
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, validators=[validate_password])
    role = serializers.ChoiceField(choices=User.ROLE_CHOICES)

    def validate_username(self, value):
        if User.objects.filter(username__iexact=value.strip()).exists():
            raise serializers.ValidationError("User already exists")
        return value.strip()

    def validate_role(self, value):
        # Only an admin may hand out elevated roles
        if value != User.ROLE_EMPLOYEE:
            request = self.context.get('request')
            requester = getattr(request, 'user', None)
            if not (requester and requester.is_authenticated and requester.is_admin):
                raise serializers.ValidationError("Only an admin can create admin or supervisor accounts.")
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data['username'],
            password=validated_data['password'],
            name=validated_data['name'].strip(),
            role=validated_data['role'],
        )


class LoginSerializer(serializers.Serializer):
    """Serializer for user login"""

    username = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, data):
        user = authenticate(username=data.get('username'), password=data.get('password'))
        if user is None:
            raise serializers.ValidationError({"username": "Invalid Credentials"})

        if not user.is_active:
            raise serializers.ValidationError({"username": "Your account has been disabled. Please contact the administrator."})

        data['user'] = user
        return data
