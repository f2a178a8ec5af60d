"""
User-related validators for phone, email, and password validation.
"""
import re
from rest_framework import serializers
from django.contrib.auth import get_user_model

User = get_user_model()

# E.164-ish: optional +, 7 to 15 digits, spaces and dashes allowed between groups
PHONE_PATTERN = re.compile(r'^\+?[0-9][0-9 \-]{5,18}[0-9]$')


def validate_phone(value):
    """
    Validate phone number format.

    Args:
        value: Phone number string

    Raises:
        serializers.ValidationError: If phone format is invalid

    Returns:
        str: Validated phone number
    """
    if not value:
        return value

    if not PHONE_PATTERN.match(value):
        raise serializers.ValidationError("Invalid phone number format.")

    return value


def validate_email_unique(value, exclude_user=None):
    """
    Validate email uniqueness (case-insensitive).

    Args:
        value: Email string
        exclude_user: User instance to exclude from uniqueness check (for updates)

    Raises:
        serializers.ValidationError: If email already exists

    Returns:
        str: Validated email
    """
    if not value:
        return value

    queryset = User.objects.filter(email__iexact=value)
    if exclude_user:
        queryset = queryset.exclude(pk=exclude_user.pk)

    if queryset.exists():
        raise serializers.ValidationError("Email already registered.")

    return value


def validate_password_strength(value):
    """
    Validate password strength: at least 6 characters.
    """
    if not value:
        raise serializers.ValidationError("Password cannot be empty.")

    if len(value) < 6:
        raise serializers.ValidationError("Password must be at least 6 characters long.")

    return value
