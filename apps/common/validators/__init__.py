"""
Common validators module.
"""
from .user_validators import (
    validate_phone, validate_email_unique, validate_password_strength
)
from .points_validators import validate_points_delta, validate_positive_points

__all__ = [
    'validate_phone',
    'validate_email_unique',
    'validate_password_strength',
    'validate_points_delta',
    'validate_positive_points',
]
