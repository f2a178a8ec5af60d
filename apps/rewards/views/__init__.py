"""
Reward views module.
"""
from .reward_views import (
    AdminRewardDetailView,
    AdminRewardListView,
    RedeemRewardView,
    RewardListView,
)

__all__ = [
    'AdminRewardDetailView',
    'AdminRewardListView',
    'RedeemRewardView',
    'RewardListView',
]
