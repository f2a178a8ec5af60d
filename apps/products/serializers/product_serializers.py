"""
Product serializers for list, create, update and assignment operations.
"""
from rest_framework import serializers

from apps.common.validators import validate_positive_points
from ..models import Activity, Product, ProductAssignment


class ActivitySerializer(serializers.ModelSerializer):
    points_value = serializers.IntegerField(validators=[validate_positive_points])

    class Meta:
        model = Activity
        fields = ['id', 'name', 'points_value']
        read_only_fields = ['id']


class ProductSerializer(serializers.ModelSerializer):
    """
    Serializer for products with their activities.
    Used for: GET/POST /api/admin/products/, PATCH /api/admin/products/{id}/
    """
    activities = ActivitySerializer(many=True, required=False)
    assigned_users = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description', 'is_enabled', 'points_allocation',
            'activities', 'assigned_users', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_assigned_users(self, obj):
        return [assignment.user_id for assignment in obj.assignments.all()]


class ProductAssignmentSerializer(serializers.ModelSerializer):
    """
    Serializer for a product assignment.
    Used for: POST /api/admin/products/{id}/assign/
    """
    user_email = serializers.EmailField(source='user.email', read_only=True)
    product_name = serializers.CharField(source='product.name', read_only=True)

    class Meta:
        model = ProductAssignment
        fields = ['id', 'user', 'user_email', 'product', 'product_name', 'created_at']
        read_only_fields = fields


class AssignProductSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(min_value=1)
