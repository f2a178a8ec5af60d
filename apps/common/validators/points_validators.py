"""
Points-related validators.
"""
from rest_framework import serializers


def validate_points_delta(value):
    """
    Validate a signed points adjustment: any non-zero integer.
    """
    if value == 0:
        raise serializers.ValidationError("Points adjustment cannot be zero.")
    return value


def validate_positive_points(value):
    """
    Validate a points cost or value: must be greater than 0.
    """
    if value <= 0:
        raise serializers.ValidationError("Points must be greater than 0.")
    return value
