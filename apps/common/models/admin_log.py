from django.db import models
from django.conf import settings


class AdminLog(models.Model):
    """Append-only audit trail of admin-initiated mutations"""

    class ActionType(models.TextChoices):
        POINT_ADJUSTMENT = 'POINT_ADJUSTMENT', 'Point adjustment'
        ADMIN_CREATED = 'ADMIN_CREATED', 'Admin created'
        ADMIN_REMOVED = 'ADMIN_REMOVED', 'Admin removed'
        ADMIN_UPDATED = 'ADMIN_UPDATED', 'Admin updated'
        ADMIN_ENABLED = 'ADMIN_ENABLED', 'Admin enabled'
        ADMIN_DISABLED = 'ADMIN_DISABLED', 'Admin disabled'
        USER_ENABLED = 'USER_ENABLED', 'User enabled'
        USER_DISABLED = 'USER_DISABLED', 'User disabled'
        USER_UPDATED = 'USER_UPDATED', 'User updated'
        REWARD_CREATED = 'REWARD_CREATED', 'Reward created'
        REWARD_UPDATED = 'REWARD_UPDATED', 'Reward updated'
        REWARD_DELETED = 'REWARD_DELETED', 'Reward deleted'
        PRODUCT_CREATED = 'PRODUCT_CREATED', 'Product created'
        PRODUCT_UPDATED = 'PRODUCT_UPDATED', 'Product updated'
        PRODUCT_DELETED = 'PRODUCT_DELETED', 'Product deleted'
        PRODUCT_ASSIGNED = 'PRODUCT_ASSIGNED', 'Product assigned'
        PRODUCT_UNASSIGNED = 'PRODUCT_UNASSIGNED', 'Product unassigned'

    admin = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='admin_logs_created'
    )
    target_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='admin_logs_target'
    )
    action_type = models.CharField(max_length=32, choices=ActionType.choices)
    details = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'admin_logs'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['admin', 'created_at']),
            models.Index(fields=['action_type', 'created_at']),
        ]

    def __str__(self):
        return f"{self.admin.email} - {self.action_type} - {self.created_at}"
