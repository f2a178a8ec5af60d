"""
Common serializers module.
"""
from .admin_log_serializers import AdminLogSerializer

__all__ = [
    'AdminLogSerializer',
]
