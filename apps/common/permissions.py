"""
Role-based permissions for admin endpoints.
"""
from rest_framework.permissions import BasePermission


class IsAdmin(BasePermission):
    """Allows access only to enabled admin accounts"""
    message = 'Admin access required'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_active and user.is_admin)


class IsSuperAdmin(BasePermission):
    """Allows access only to enabled super-admin accounts"""
    message = 'Super admin access required'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated and user.is_active
            and user.is_admin and user.is_super_admin
        )
