from django.urls import path
from . import views

app_name = 'rewards_admin'

urlpatterns = [
    path('rewards/', views.AdminRewardListView.as_view(), name='list'),
    path('rewards/<int:reward_id>/', views.AdminRewardDetailView.as_view(), name='detail'),
]
