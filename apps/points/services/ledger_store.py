"""
Append-only store for points ledger entries.
"""
from django.db import DatabaseError, transaction
from django.db.models import Sum

from apps.common.exceptions import StorageError

from ..models import PointsTransaction


class LedgerStore:
    """Reads and appends ledger entries. Existing entries are never changed."""

    @staticmethod
    def append(user_id, delta, entry_type, description, reward=None):
        """
        Insert one ledger entry. Must run inside the atomic unit that also
        writes the balance; a failed insert raises StorageError so that unit
        rolls back as a whole.
        """
        try:
            with transaction.atomic():
                return PointsTransaction.objects.create(
                    user_id=user_id,
                    points=delta,
                    type=entry_type,
                    description=description,
                    reward=reward,
                )
        except DatabaseError as exc:
            raise StorageError('Could not record the points transaction') from exc

    @staticmethod
    def sum_for(user_id):
        """Signed sum of the user's entries; 0 when there are none"""
        total = PointsTransaction.objects.filter(user_id=user_id).aggregate(
            total=Sum('points')
        )['total']
        return total or 0

    @staticmethod
    def history(user_id):
        """The user's entries, most recent first"""
        return (
            PointsTransaction.objects
            .filter(user_id=user_id)
            .select_related('reward')
            .order_by('-created_at', '-id')
        )
