"""
Reward services module.
"""
from .redemption_service import RedemptionService
from .reward_service import RewardService

__all__ = [
    'RedemptionService',
    'RewardService',
]
