from django.urls import path
from . import views

app_name = 'products_admin'

urlpatterns = [
    path('products/', views.AdminProductListView.as_view(), name='list'),
    path('products/<int:product_id>/', views.AdminProductDetailView.as_view(), name='detail'),
    path('products/<int:product_id>/assign/', views.AssignProductView.as_view(), name='assign'),
    path('products/<int:product_id>/unassign/', views.UnassignProductView.as_view(), name='unassign'),
]
