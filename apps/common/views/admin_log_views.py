"""
Admin log views.
"""
from rest_framework.views import APIView

from apps.common.permissions import IsAdmin
from apps.common.serializers import AdminLogSerializer
from apps.common.services import AdminLogService
from apps.common.utils import paginated_response


class AdminLogListView(APIView):
    """List admin actions, most recent first"""
    permission_classes = [IsAdmin]

    def get(self, request):
        target_user_id = request.GET.get('target_user', '')
        logs = AdminLogService.recent(
            action_type=request.GET.get('action_type'),
            target_user_id=int(target_user_id) if target_user_id.isdigit() else None,
        )
        return paginated_response(logs, AdminLogSerializer, request, 'Admin logs retrieved')
