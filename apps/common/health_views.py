"""
Health check view for monitoring tools.
"""
import logging
import time

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone
from django.views import View

logger = logging.getLogger(__name__)


class HealthCheckView(View):
    """
    Returns HTTP 200 when the application and its database are reachable,
    503 otherwise. No authentication required.
    """

    def get(self, request):
        start_time = time.time()

        health_response = {
            'status': 'healthy',
            'service': 'loyalty-points',
            'timestamp': timezone.now().isoformat(),
        }

        db_status = self._check_database_health()
        health_response['database'] = db_status
        if db_status['status'] != 'healthy':
            health_response['status'] = 'unhealthy'

        health_response['response_time_ms'] = round((time.time() - start_time) * 1000, 2)

        status_code = 200 if health_response['status'] == 'healthy' else 503
        return JsonResponse(health_response, status=status_code)

    def _check_database_health(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                result = cursor.fetchone()
        except DatabaseError as e:
            logger.error(f"Database health check failed: {e}")
            return {
                'status': 'unhealthy',
                'message': 'Database connection failed',
            }

        if result and result[0] == 1:
            return {'status': 'healthy', 'message': 'Database connection successful'}
        return {'status': 'unhealthy', 'message': 'Database query returned unexpected result'}
