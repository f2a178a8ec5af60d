"""
Common views module.
"""
from .admin_log_views import AdminLogListView

__all__ = [
    'AdminLogListView',
]
