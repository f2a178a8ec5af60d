"""
URL configuration for loyalty_server project.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/users/', include('apps.users.urls')),
    path('api/points/', include('apps.points.urls')),
    path('api/rewards/', include('apps.rewards.urls')),
    path('api/admin/', include('apps.users.admin_urls')),
    path('api/admin/', include('apps.points.admin_urls')),
    path('api/admin/', include('apps.rewards.admin_urls')),
    path('api/admin/', include('apps.products.admin_urls')),
    path('api/', include('apps.common.urls')),
    # OpenAPI documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/schema/swagger-ui/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/schema/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
