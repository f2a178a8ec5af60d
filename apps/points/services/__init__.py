"""
Points services module.
"""
from .ledger_store import LedgerStore
from .balance_mutator import BalanceMutator
from .admin_adjustment_service import AdminAdjustmentService
from .balance_auditor import BalanceAuditor, BalanceDiscrepancy

__all__ = [
    'LedgerStore',
    'BalanceMutator',
    'AdminAdjustmentService',
    'BalanceAuditor',
    'BalanceDiscrepancy',
]
