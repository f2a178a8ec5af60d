"""
User models module.
"""
from .user import User, UserManager, generate_referral_code

__all__ = [
    'User',
    'UserManager',
    'generate_referral_code',
]
