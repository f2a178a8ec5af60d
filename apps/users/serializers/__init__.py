"""
User serializers module.
"""
from .user_serializers import (
    AdminCreateSerializer,
    AdminUpdateSerializer,
    AdminUserUpdateSerializer,
    LoginSerializer,
    LogoutSerializer,
    UserDetailSerializer,
    UserRegistrationSerializer,
)

__all__ = [
    'AdminCreateSerializer',
    'AdminUpdateSerializer',
    'AdminUserUpdateSerializer',
    'LoginSerializer',
    'LogoutSerializer',
    'UserDetailSerializer',
    'UserRegistrationSerializer',
]
