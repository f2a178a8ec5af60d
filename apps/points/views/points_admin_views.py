"""
Admin points views: adjustments, per-user history and the balance check.
"""
import logging

from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes

from apps.common.exceptions import NotFound
from apps.common.permissions import IsAdmin
from apps.common.utils import error_response, paginated_response, success_response
from ..serializers import AdminPointsAdjustmentSerializer, PointsTransactionSerializer
from ..services import AdminAdjustmentService, BalanceAuditor, LedgerStore

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAdmin])
def adjust_points(request):
    """Credit or debit a user's points, by amount or by assigned activities"""
    serializer = AdminPointsAdjustmentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    try:
        if 'activity_ids' in data:
            entry = AdminAdjustmentService.award_activities(
                request.user, data['user_id'], data['activity_ids'], data['description']
            )
        else:
            entry = AdminAdjustmentService.adjust(
                request.user, data['user_id'], data['points'], data['description']
            )
    except ValueError as e:
        return error_response(str(e), error_code='VALIDATION_ERROR')

    return success_response({
        'transaction': PointsTransactionSerializer(entry).data,
        'new_balance': entry.user.points,
    }, 'Points updated successfully', status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAdmin])
def get_user_transactions(request, user_id):
    """Get any user's points transaction history"""
    if not get_user_model().objects.filter(pk=user_id).exists():
        raise NotFound('User not found')
    return paginated_response(
        LedgerStore.history(user_id), PointsTransactionSerializer, request,
        'Transactions retrieved'
    )


@api_view(['GET'])
@permission_classes([IsAdmin])
def check_balances(request):
    """Report users whose stored balance differs from their ledger sum"""
    discrepancies = BalanceAuditor.find_discrepancies()
    return success_response({
        'consistent': not discrepancies,
        'discrepancies': [item.as_dict() for item in discrepancies],
    }, 'Balance check complete')
