from rest_framework import status, permissions
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from django_ratelimit.decorators import ratelimit
from django.utils.decorators import method_decorator
from .serializers import UserSerializer, RegisterSerializer, LoginSerializer
from .utils import api_response
import logging

logger = logging.getLogger(__name__)


def _token_payload(user):
    refresh = RefreshToken.for_user(user)
    refresh['role'] = user.role
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@method_decorator(ratelimit(key='ip', rate='10/h', method='POST'), name='dispatch')
class RegisterView(APIView):
    """View to create a user account and log it in"""

    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data, context={'request': request})

        if serializer.is_valid():
            user = serializer.save()
            logger.info("Registered user %s with role %s", user.username, user.role)

            return api_response(
                success=True,
                message='Account created successfully.',
                data={'user': UserSerializer(user).data, 'tokens': _token_payload(user)},
                status=status.HTTP_201_CREATED
            )

        return api_response(
            success=False,
            message='Registration failed.',
            errors=serializer.errors,
            status=status.HTTP_400_BAD_REQUEST
        )


@method_decorator(ratelimit(key='ip', rate='10/m', method='POST'), name='dispatch')
class LoginView(APIView):
    """View for user login with JWT"""

    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)

        if serializer.is_valid():
            user = serializer.validated_data['user']

            return api_response(
                success=True,
                message='Login successful.',
                data={'user': UserSerializer(user).data, 'tokens': _token_payload(user)},
                status=status.HTTP_200_OK
            )

        logger.warning("Failed login for username %r", request.data.get('username'))
        return api_response(
            success=False,
            message='Login failed.',
            errors=serializer.errors,
            status=status.HTTP_401_UNAUTHORIZED
        )


class UserProfileView(APIView):
    """View to get the current user's profile"""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return api_response(
            success=True,
            message='Profile retrieved successfully.',
            data=UserSerializer(request.user).data,
            status=status.HTTP_200_OK
        )
