"""
Admin log serializers.
"""
from rest_framework import serializers
from ..models import AdminLog


class AdminLogSerializer(serializers.ModelSerializer):
    """
    Serializer for admin log list view.
    Used for: GET /api/admin/logs/
    """
    admin_email = serializers.EmailField(source='admin.email', read_only=True)
    target_user_email = serializers.EmailField(source='target_user.email', read_only=True, default=None)
    action_type_display = serializers.CharField(source='get_action_type_display', read_only=True)

    class Meta:
        model = AdminLog
        fields = [
            'id', 'admin', 'admin_email', 'target_user', 'target_user_email',
            'action_type', 'action_type_display', 'details', 'created_at'
        ]
        read_only_fields = fields
