"""
The single write path for user balances.

Every balance change locks the user row, checks the new balance, writes it
and appends the matching ledger entry in one atomic unit, so a stored
balance always equals the sum of that user's ledger entries.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.common.exceptions import InsufficientBalance, NotFound, StorageError
from apps.common.services import NotificationService

from .ledger_store import LedgerStore

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')


class BalanceMutator:
    """Applies signed point deltas to user balances"""

    @staticmethod
    def _lock_user(user_id):
        User = get_user_model()
        user = User.objects.select_for_update().filter(pk=user_id).first()
        if user is None:
            raise NotFound('User not found', user_id=user_id)
        return user

    @staticmethod
    def _write_balance(user, new_balance):
        get_user_model().objects.filter(pk=user.pk).update(
            points=new_balance, updated_at=timezone.now()
        )
        user.points = new_balance

    @staticmethod
    def apply_delta(user_id, delta, entry_type, description, reward=None):
        """
        Apply ``delta`` to the user's balance and record it in the ledger.

        Returns ``(new_balance, entry)``. Raises NotFound for an unknown user,
        InsufficientBalance when the balance would go negative (nothing is
        written), and StorageError when the database fails mid-unit.

        Calls for the same user serialize on the row lock. When called inside
        an outer atomic block the change commits with that block.
        """
        try:
            with transaction.atomic():
                user = BalanceMutator._lock_user(user_id)
                new_balance = user.points + delta
                if new_balance < 0:
                    logger.info(
                        f"Rejected {entry_type} of {delta} for user {user_id}: balance {user.points}"
                    )
                    raise InsufficientBalance(
                        balance=user.points, required=-delta
                    )

                BalanceMutator._write_balance(user, new_balance)
                entry = LedgerStore.append(user.pk, delta, entry_type, description, reward=reward)
                entry.user = user
        except DatabaseError as exc:
            raise StorageError('Could not update the points balance') from exc

        logger.debug(f"User {user_id} balance {new_balance} after {entry_type} {delta:+d}")
        transaction.on_commit(
            lambda: NotificationService.points_updated(user_id, delta, new_balance, description),
            robust=True,
        )
        return new_balance, entry

    @staticmethod
    def repair_balance(user_id):
        """
        Reset a drifted stored balance to the sum of the user's ledger.

        Returns ``(old_balance, new_balance)``; both are equal when there was
        nothing to repair.
        """
        try:
            with transaction.atomic():
                user = BalanceMutator._lock_user(user_id)
                old_balance = user.points
                ledger_total = LedgerStore.sum_for(user.pk)
                if ledger_total < 0:
                    raise InsufficientBalance(
                        'Ledger sum is negative; the balance cannot be repaired automatically',
                        balance=ledger_total,
                    )
                if ledger_total != old_balance:
                    BalanceMutator._write_balance(user, ledger_total)
        except DatabaseError as exc:
            raise StorageError('Could not repair the points balance') from exc

        if ledger_total != old_balance:
            audit_logger.warning(
                "balance_repair user=%s stored=%s ledger=%s", user_id, old_balance, ledger_total
            )
        return old_balance, ledger_total
