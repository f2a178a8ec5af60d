"""
User authentication views.
"""
import logging

from django.contrib.auth.hashers import check_password
from django.contrib.auth.models import update_last_login
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from apps.common.exceptions import InvalidCredentials, Unauthorized
from apps.common.utils import error_response, success_response
from ..models import User
from ..serializers import (
    LoginSerializer, LogoutSerializer, UserDetailSerializer, UserRegistrationSerializer
)
from ..services import AccountRegistrar

logger = logging.getLogger(__name__)


def _token_payload(user, request):
    refresh = RefreshToken.for_user(user)
    return {
        'token': str(refresh.access_token),
        'refresh': str(refresh),
        'user': UserDetailSerializer(user, context={'request': request}).data
    }


class RegisterView(APIView):
    """User registration endpoint"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = AccountRegistrar.register(**serializer.to_registration_kwargs())
        return success_response(
            _token_payload(user, request), 'Registration successful', status.HTTP_201_CREATED
        )


class PasswordLoginView(APIView):
    """Email and password login endpoint"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data['email']

        user = User.objects.filter(email__iexact=email).first()
        if user is None or not check_password(serializer.validated_data['password'], user.password):
            logger.info(f"Failed login for {email}")
            raise InvalidCredentials()
        if not user.is_enabled:
            raise Unauthorized('This account has been disabled')

        update_last_login(None, user)
        return success_response(_token_payload(user, request), 'Login successful')


class LogoutView(APIView):
    """Blacklist the given refresh token"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            RefreshToken(serializer.validated_data['refresh']).blacklist()
        except TokenError as e:
            return error_response(str(e), error_code='INVALID_TOKEN')
        return success_response(None, 'Logout successful')


class CurrentUserView(APIView):
    """Return the signed-in user"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        request.user.refresh_from_db()
        return success_response(
            UserDetailSerializer(request.user, context={'request': request}).data,
            'User retrieved'
        )
