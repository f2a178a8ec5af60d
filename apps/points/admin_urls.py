from django.urls import path
from . import views

app_name = 'points_admin'

urlpatterns = [
    path('points/', views.adjust_points, name='adjust'),
    path('users/<int:user_id>/transactions/', views.get_user_transactions, name='user_transactions'),
    path('balances/check/', views.check_balances, name='check_balances'),
]
