"""
User serializers for registration, login, detail and admin update operations.
"""
from django.contrib.auth.hashers import make_password
from rest_framework import serializers

from apps.common.validators import (
    validate_email_unique, validate_password_strength, validate_phone
)
from ..models import User


class UserDetailSerializer(serializers.ModelSerializer):
    """
    Serializer for user detail view.
    Used for: GET /api/users/me/, GET /api/admin/users/
    Note: Does not include the password hash.
    """
    is_enabled = serializers.BooleanField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'first_name', 'last_name', 'phone_number', 'points',
            'referral_code', 'referred_by', 'is_admin', 'is_super_admin',
            'is_enabled', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """
    Serializer for user registration input.
    Used for: POST /api/users/register/

    Email uniqueness is enforced by AccountRegistrar so a duplicate maps to
    DUPLICATE_EMAIL rather than a generic validation error.
    """
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password_strength],
        help_text="Password must be at least 6 characters long"
    )
    first_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    last_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    phone_number = serializers.CharField(
        max_length=32,
        required=False,
        allow_blank=True,
        default='',
        help_text="International phone number, e.g. +15551234567"
    )
    referral_code = serializers.CharField(max_length=32, required=False, allow_blank=True, default='')

    def validate_phone_number(self, value):
        if value:
            return validate_phone(value)
        return value

    def to_registration_kwargs(self):
        """Arguments for AccountRegistrar.register"""
        data = self.validated_data
        return {
            'email': data['email'],
            'password_hash': make_password(data['password']),
            'profile': {
                'first_name': data['first_name'],
                'last_name': data['last_name'],
                'phone_number': data['phone_number'],
            },
            'referral_code': data['referral_code'] or None,
        }


class LoginSerializer(serializers.Serializer):
    """
    Serializer for password login.
    Used for: POST /api/users/login/
    """
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField()


class AdminUserUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for admin edits of a customer profile.
    Used for: PATCH /api/admin/users/{id}/
    """
    email = serializers.EmailField(required=False)
    phone_number = serializers.CharField(max_length=32, required=False, allow_blank=True)

    class Meta:
        model = User
        fields = ['email', 'first_name', 'last_name', 'phone_number']

    def validate_email(self, value):
        return validate_email_unique(value, exclude_user=self.instance)

    def validate_phone_number(self, value):
        if value:
            return validate_phone(value)
        return value


class AdminCreateSerializer(serializers.Serializer):
    """
    Serializer for granting admin rights.
    Used for: POST /api/admin/admins/

    Either ``user_id`` (promote an existing account) or ``email`` and
    ``password`` (create a new admin account).
    """
    user_id = serializers.IntegerField(min_value=1, required=False)
    email = serializers.EmailField(required=False)
    password = serializers.CharField(
        write_only=True, required=False, validators=[validate_password_strength]
    )
    first_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    is_super_admin = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):
        if 'user_id' in attrs:
            return attrs
        if not attrs.get('email') or not attrs.get('password'):
            raise serializers.ValidationError('Provide user_id, or email and password')
        return attrs


class AdminUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for super-admin edits of an admin account.
    Used for: PATCH /api/admin/admins/{id}/
    """

    class Meta:
        model = User
        fields = ['first_name', 'last_name', 'phone_number', 'is_super_admin']

    def validate_phone_number(self, value):
        if value:
            return validate_phone(value)
        return value
