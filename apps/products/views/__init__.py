"""
Product views module.
"""
from .admin_product_views import (
    AdminProductDetailView,
    AdminProductListView,
    AssignProductView,
    UnassignProductView,
)

__all__ = [
    'AdminProductDetailView',
    'AdminProductListView',
    'AssignProductView',
    'UnassignProductView',
]
