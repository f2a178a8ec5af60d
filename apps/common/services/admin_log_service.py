"""
Admin log service. Every admin-initiated mutation writes one entry in the
same atomic unit as the change it describes.
"""
import logging

from django.db import DatabaseError, transaction

from ..exceptions import StorageError
from ..models import AdminLog

audit_logger = logging.getLogger('audit')


class AdminLogService:
    """Service for appending to and reading the admin log"""

    @staticmethod
    def append(admin, target_user, action_type, details):
        """
        Persist one admin log entry.

        A failed write raises StorageError so the enclosing adjustment is
        rolled back with it; the audit trail never silently drops an entry.
        """
        try:
            with transaction.atomic():
                entry = AdminLog.objects.create(
                    admin=admin,
                    target_user=target_user,
                    action_type=action_type,
                    details=details,
                )
        except DatabaseError as exc:
            raise StorageError('Could not record the admin action') from exc

        target_id = target_user.pk if target_user else None
        transaction.on_commit(lambda: audit_logger.info(
            "admin=%s action=%s target=%s details=%s",
            admin.pk, action_type, target_id, details
        ))
        return entry

    @staticmethod
    def recent(action_type=None, target_user_id=None):
        """Admin log entries, most recent first"""
        queryset = AdminLog.objects.select_related('admin', 'target_user')
        if action_type:
            queryset = queryset.filter(action_type=action_type)
        if target_user_id:
            queryset = queryset.filter(target_user_id=target_user_id)
        return queryset.order_by('-created_at', '-id')
