"""
Consistency check between stored balances and ledger sums.
"""
import logging
from dataclasses import dataclass

from django.contrib.auth import get_user_model
from django.db.models import IntegerField, OuterRef, Subquery, Sum, Value
from django.db.models.functions import Coalesce

from ..models import PointsTransaction
from .balance_mutator import BalanceMutator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceDiscrepancy:
    user_id: int
    email: str
    stored_balance: int
    ledger_balance: int

    @property
    def difference(self):
        return self.stored_balance - self.ledger_balance

    def as_dict(self):
        return {
            'user_id': self.user_id,
            'email': self.email,
            'stored_balance': self.stored_balance,
            'ledger_balance': self.ledger_balance,
            'difference': self.difference,
        }


class BalanceAuditor:
    """Finds and repairs users whose stored balance drifted from their ledger"""

    @staticmethod
    def find_discrepancies(user_ids=None):
        ledger_sum = (
            PointsTransaction.objects
            .filter(user=OuterRef('pk'))
            .order_by()
            .values('user')
            .annotate(total=Sum('points'))
            .values('total')
        )
        users = get_user_model().objects.annotate(
            ledger_balance=Coalesce(
                Subquery(ledger_sum, output_field=IntegerField()), Value(0)
            )
        )
        if user_ids is not None:
            users = users.filter(pk__in=user_ids)

        discrepancies = [
            BalanceDiscrepancy(user.pk, user.email, user.points, user.ledger_balance)
            for user in users.order_by('pk').only('pk', 'email', 'points')
            if user.points != user.ledger_balance
        ]
        if discrepancies:
            logger.warning(f"Found {len(discrepancies)} balance discrepancies")
        return discrepancies

    @staticmethod
    def repair(user_ids=None):
        """Repair every discrepancy found; returns the repaired ones"""
        repaired = []
        for discrepancy in BalanceAuditor.find_discrepancies(user_ids):
            BalanceMutator.repair_balance(discrepancy.user_id)
            repaired.append(discrepancy)
        return repaired
