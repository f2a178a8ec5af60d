"""
Product serializers module.
"""
from .product_serializers import (
    ActivitySerializer,
    AssignProductSerializer,
    ProductAssignmentSerializer,
    ProductSerializer,
)

__all__ = [
    'ActivitySerializer',
    'AssignProductSerializer',
    'ProductAssignmentSerializer',
    'ProductSerializer',
]
