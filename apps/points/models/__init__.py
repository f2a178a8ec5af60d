"""
Points models module.
"""
from .transaction import ImmutableLedgerError, PointsTransaction

__all__ = [
    'ImmutableLedgerError',
    'PointsTransaction',
]
