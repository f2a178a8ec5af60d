"""
Reward catalog and redemption views.
"""
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.common.permissions import IsAdmin
from apps.common.utils import success_response
from apps.points.serializers import PointsTransactionSerializer
from ..serializers import RewardSerializer
from ..services import RedemptionService, RewardService


class RewardListView(APIView):
    """List rewards; admins also see unavailable ones"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        rewards = RewardService.list_rewards(include_unavailable=request.user.is_admin)
        return success_response(RewardSerializer(rewards, many=True).data, 'Rewards retrieved')


class RedeemRewardView(APIView):
    """Redeem a reward for the signed-in user"""
    permission_classes = [IsAuthenticated]

    def post(self, request, reward_id):
        entry = RedemptionService.redeem(request.user.pk, reward_id)
        return success_response({
            'transaction': PointsTransactionSerializer(entry).data,
            'new_balance': entry.user.points,
        }, 'Reward redeemed successfully', status.HTTP_201_CREATED)


class AdminRewardListView(APIView):
    """List all rewards or create one"""
    permission_classes = [IsAdmin]

    def get(self, request):
        rewards = RewardService.list_rewards(include_unavailable=True)
        return success_response(RewardSerializer(rewards, many=True).data, 'Rewards retrieved')

    def post(self, request):
        serializer = RewardSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reward = RewardService.create_reward(request.user, **serializer.validated_data)
        return success_response(
            RewardSerializer(reward).data, 'Reward created successfully', status.HTTP_201_CREATED
        )


class AdminRewardDetailView(APIView):
    """Update or delete a reward"""
    permission_classes = [IsAdmin]

    def patch(self, request, reward_id):
        reward = RewardService.get_reward(reward_id)
        serializer = RewardSerializer(reward, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        reward = RewardService.update_reward(request.user, reward_id, **serializer.validated_data)
        return success_response(RewardSerializer(reward).data, 'Reward updated successfully')

    def delete(self, request, reward_id):
        RewardService.delete_reward(request.user, reward_id)
        return success_response(None, 'Reward deleted successfully')
