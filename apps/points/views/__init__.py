"""
Points views module.
"""
from .points_account_views import get_points_balance, get_points_transactions
from .points_admin_views import adjust_points, check_balances, get_user_transactions

__all__ = [
    'get_points_balance',
    'get_points_transactions',
    'adjust_points',
    'check_balances',
    'get_user_transactions',
]
