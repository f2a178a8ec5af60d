"""
User views module.
"""
from .auth_views import CurrentUserView, LogoutView, PasswordLoginView, RegisterView
from .admin_user_views import (
    AdminDetailView,
    AdminListView,
    AdminToggleStatusView,
    AdminUserDetailView,
    AdminUserListView,
    AdminUserToggleStatusView,
)

__all__ = [
    'CurrentUserView',
    'LogoutView',
    'PasswordLoginView',
    'RegisterView',
    'AdminDetailView',
    'AdminListView',
    'AdminToggleStatusView',
    'AdminUserDetailView',
    'AdminUserListView',
    'AdminUserToggleStatusView',
]
