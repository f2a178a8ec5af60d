"""
Common services module.
"""
from .admin_log_service import AdminLogService
from .notification_service import NotificationService

__all__ = [
    'AdminLogService',
    'NotificationService',
]
