"""
Points transaction and adjustment serializers.
"""
from rest_framework import serializers

from apps.common.validators import validate_points_delta
from ..models import PointsTransaction


class PointsTransactionSerializer(serializers.ModelSerializer):
    """
    Serializer for ledger history.
    Used for: GET /api/points/transactions/, GET /api/admin/users/{id}/transactions/
    """
    type_display = serializers.CharField(source='get_type_display', read_only=True)
    reward_name = serializers.CharField(source='reward.name', read_only=True, default=None)

    class Meta:
        model = PointsTransaction
        fields = [
            'id', 'user', 'points', 'type', 'type_display', 'description',
            'reward', 'reward_name', 'created_at'
        ]
        read_only_fields = fields


class AdminPointsAdjustmentSerializer(serializers.Serializer):
    """
    Serializer for admin point adjustments.
    Used for: POST /api/admin/points/

    Either ``points`` (a signed, non-zero delta) or ``activity_ids`` (activities
    of products assigned to the user) must be given, not both.
    """
    user_id = serializers.IntegerField(min_value=1)
    points = serializers.IntegerField(required=False, validators=[validate_points_delta])
    activity_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        required=False,
        allow_empty=False,
    )
    description = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')

    def validate(self, attrs):
        has_points = 'points' in attrs
        has_activities = 'activity_ids' in attrs
        if has_points == has_activities:
            raise serializers.ValidationError(
                'Provide either points or activity_ids'
            )
        return attrs
