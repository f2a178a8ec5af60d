"""
User services module.
"""
from .registration_service import AccountRegistrar
from .admin_user_service import AdminUserService

__all__ = [
    'AccountRegistrar',
    'AdminUserService',
]
