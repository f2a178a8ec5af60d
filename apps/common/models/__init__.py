"""
Common models module.
"""
from .admin_log import AdminLog

__all__ = [
    'AdminLog',
]
