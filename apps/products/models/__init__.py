"""
Product models module.
"""
from .product import Activity, Product, ProductAssignment

__all__ = [
    'Activity',
    'Product',
    'ProductAssignment',
]
