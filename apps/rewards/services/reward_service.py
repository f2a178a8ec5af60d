"""
Reward catalog management for admins.
"""
from django.db import transaction
from django.db.models import ProtectedError

from apps.common.exceptions import NotFound, RewardInUse
from apps.common.models import AdminLog
from apps.common.services import AdminLogService

from ..models import Reward


class RewardService:
    """Create, update and delete rewards, logging each change"""

    @staticmethod
    def list_rewards(include_unavailable=False):
        rewards = Reward.objects.all()
        if not include_unavailable:
            rewards = rewards.filter(available=True)
        return rewards

    @staticmethod
    def get_reward(reward_id, for_update=False):
        rewards = Reward.objects.select_for_update() if for_update else Reward.objects.all()
        reward = rewards.filter(pk=reward_id).first()
        if reward is None:
            raise NotFound('Reward not found', reward_id=reward_id)
        return reward

    @staticmethod
    def create_reward(admin, **fields):
        with transaction.atomic():
            reward = Reward.objects.create(**fields)
            AdminLogService.append(
                admin, None, AdminLog.ActionType.REWARD_CREATED,
                f"Created reward '{reward.name}' ({reward.points_cost} points)"
            )
        return reward

    @staticmethod
    def update_reward(admin, reward_id, **fields):
        with transaction.atomic():
            reward = RewardService.get_reward(reward_id, for_update=True)
            changes = []
            for name, value in fields.items():
                if getattr(reward, name) != value:
                    changes.append(f"{name}: {getattr(reward, name)!r} -> {value!r}")
                    setattr(reward, name, value)
            reward.save()
            AdminLogService.append(
                admin, None, AdminLog.ActionType.REWARD_UPDATED,
                f"Updated reward '{reward.name}'" + (f": {', '.join(changes)}" if changes else '')
            )
        return reward

    @staticmethod
    def delete_reward(admin, reward_id):
        """
        Delete a reward that has never been redeemed. Redeemed rewards are
        referenced by ledger entries and raise RewardInUse.
        """
        with transaction.atomic():
            reward = RewardService.get_reward(reward_id)
            name = reward.name
            try:
                with transaction.atomic():
                    reward.delete()
            except ProtectedError as exc:
                raise RewardInUse(reward_id=reward_id) from exc
            AdminLogService.append(
                admin, None, AdminLog.ActionType.REWARD_DELETED,
                f"Deleted reward '{name}'"
            )
