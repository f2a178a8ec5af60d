"""
Points serializers module.
"""
from .transaction_serializers import (
    AdminPointsAdjustmentSerializer,
    PointsTransactionSerializer,
)

__all__ = [
    'AdminPointsAdjustmentSerializer',
    'PointsTransactionSerializer',
]
