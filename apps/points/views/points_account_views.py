"""
Points balance and history views for the signed-in user.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import paginated_response, success_response
from ..serializers import PointsTransactionSerializer
from ..services import LedgerStore


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_balance(request):
    """Get user's current points balance"""
    request.user.refresh_from_db(fields=['points'])
    return success_response({
        'points': request.user.points,
        'referral_code': request.user.referral_code,
    }, 'Balance retrieved')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_transactions(request):
    """Get user's points transaction history, most recent first"""
    transactions = LedgerStore.history(request.user.pk)

    transaction_type = request.GET.get('type')
    if transaction_type:
        transactions = transactions.filter(type=transaction_type)

    return paginated_response(
        transactions, PointsTransactionSerializer, request, 'Transactions retrieved'
    )
