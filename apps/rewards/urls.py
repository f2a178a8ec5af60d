from django.urls import path
from . import views

app_name = 'rewards'

urlpatterns = [
    path('', views.RewardListView.as_view(), name='list'),
    path('<int:reward_id>/redeem/', views.RedeemRewardView.as_view(), name='redeem'),
]
