from django.urls import path
from .health_views import HealthCheckView
from .views import AdminLogListView

app_name = 'common'

urlpatterns = [
    path('health/', HealthCheckView.as_view(), name='health_check'),
    path('admin/logs/', AdminLogListView.as_view(), name='admin-logs'),
]
