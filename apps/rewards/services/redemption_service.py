"""
Reward redemption: exchanges points for a catalog reward.
"""
import logging

from django.db import DatabaseError, transaction

from apps.common.exceptions import NotFound, RewardUnavailable, StorageError
from apps.points.models import PointsTransaction
from apps.points.services import BalanceMutator

from ..models import Reward

logger = logging.getLogger(__name__)


class RedemptionService:
    """Service for redeeming rewards"""

    @staticmethod
    def redeem(user_id, reward_id):
        """
        Debit the reward's cost from the user and record a REDEEMED entry
        referencing the reward.

        The reward row stays locked until the debit commits, so an admin
        change to its price or availability lands entirely before or after
        the redemption.

        Raises NotFound for an unknown reward or user, RewardUnavailable when
        the reward is switched off, and InsufficientBalance when the user
        cannot afford it. A failed redemption leaves no ledger entry.
        """
        with transaction.atomic():
            try:
                reward = Reward.objects.select_for_update().filter(pk=reward_id).first()
            except DatabaseError as exc:
                raise StorageError('Could not load the reward') from exc
            if reward is None:
                raise NotFound('Reward not found', reward_id=reward_id)
            if not reward.available:
                raise RewardUnavailable(reward_id=reward_id)

            new_balance, entry = BalanceMutator.apply_delta(
                user_id,
                -reward.points_cost,
                PointsTransaction.Type.REDEEMED,
                f"Redeemed {reward.name}",
                reward=reward,
            )
        logger.info(f"User {user_id} redeemed reward {reward.pk} for {reward.points_cost} points")
        return entry
