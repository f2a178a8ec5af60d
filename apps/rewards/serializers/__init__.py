"""
Reward serializers module.
"""
from .reward_serializers import RewardSerializer

__all__ = [
    'RewardSerializer',
]
