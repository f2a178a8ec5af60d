from django.urls import path
from . import views

app_name = 'users_admin'

urlpatterns = [
    path('users/', views.AdminUserListView.as_view(), name='users'),
    path('users/<int:user_id>/', views.AdminUserDetailView.as_view(), name='user_detail'),
    path('users/<int:user_id>/toggle-status/', views.AdminUserToggleStatusView.as_view(), name='user_toggle_status'),
    path('admins/', views.AdminListView.as_view(), name='admins'),
    path('admins/<int:admin_id>/', views.AdminDetailView.as_view(), name='admin_detail'),
    path('admins/<int:admin_id>/toggle-status/', views.AdminToggleStatusView.as_view(), name='admin_toggle_status'),
]
