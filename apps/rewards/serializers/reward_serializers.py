"""
Reward serializers.
"""
from rest_framework import serializers

from apps.common.validators import validate_positive_points
from ..models import Reward


class RewardSerializer(serializers.ModelSerializer):
    """
    Serializer for reward catalog entries.
    Used for: GET /api/rewards/, GET/POST/PATCH /api/admin/rewards/
    """
    points_cost = serializers.IntegerField(validators=[validate_positive_points])

    class Meta:
        model = Reward
        fields = [
            'id', 'name', 'description', 'points_cost', 'image_url',
            'available', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
