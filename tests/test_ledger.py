"""
Tests for the points ledger and the balance write path.
"""
from unittest import mock

import pytest
from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError, transaction

from apps.common.exceptions import InsufficientBalance, NotFound, StorageError
from apps.points.models import ImmutableLedgerError, PointsTransaction
from apps.points.services import BalanceMutator, LedgerStore
from tests.factories import UserFactory, credit

User = get_user_model()


@pytest.mark.django_db
class TestLedgerStore:

    def test_sum_for_user_without_entries_is_zero(self):
        user = UserFactory()
        assert LedgerStore.sum_for(user.pk) == 0

    def test_history_is_most_recent_first(self):
        user = UserFactory()
        credit(user, 100, 'first')
        credit(user, 200, 'second')
        BalanceMutator.apply_delta(user.pk, -50, PointsTransaction.Type.REDEEMED, 'third')

        descriptions = [entry.description for entry in LedgerStore.history(user.pk)]
        assert descriptions == ['third', 'second', 'first']
        assert LedgerStore.sum_for(user.pk) == 250

    def test_history_reads_are_repeatable(self):
        user = credit(UserFactory(), 300)
        first = list(LedgerStore.history(user.pk).values_list('id', flat=True))
        second = list(LedgerStore.history(user.pk).values_list('id', flat=True))
        assert first == second

    def test_history_only_contains_the_users_entries(self):
        user = credit(UserFactory(), 300)
        credit(UserFactory(), 400)
        assert [entry.points for entry in LedgerStore.history(user.pk)] == [300]

    def test_append_failure_raises_storage_error(self):
        user = UserFactory()
        with mock.patch.object(
            PointsTransaction.objects, 'create', side_effect=DatabaseError('disk full')
        ):
            with pytest.raises(StorageError) as excinfo:
                LedgerStore.append(user.pk, 10, PointsTransaction.Type.EARNED, 'x')
        assert excinfo.value.retryable


@pytest.mark.django_db
class TestLedgerImmutability:

    def test_existing_entry_cannot_be_saved(self):
        entry = credit(UserFactory(), 100).points_transactions.get()
        entry.points = 1000
        with pytest.raises(ImmutableLedgerError):
            entry.save()

    def test_entry_cannot_be_deleted(self):
        entry = credit(UserFactory(), 100).points_transactions.get()
        with pytest.raises(ImmutableLedgerError):
            entry.delete()

    def test_queryset_cannot_update_or_delete(self):
        user = credit(UserFactory(), 100)
        with pytest.raises(ImmutableLedgerError):
            PointsTransaction.objects.filter(user=user).update(points=5)
        with pytest.raises(ImmutableLedgerError):
            PointsTransaction.objects.filter(user=user).delete()
        assert LedgerStore.sum_for(user.pk) == 100

    def test_immutable_error_is_a_type_error(self):
        assert issubclass(ImmutableLedgerError, TypeError)


@pytest.mark.django_db
class TestBalanceWriteBoundary:

    def test_user_save_does_not_write_points(self):
        user = credit(UserFactory(), 100)
        user.points = 99999
        user.first_name = 'Changed'
        user.save()

        user.refresh_from_db()
        assert user.points == 100
        assert user.first_name == 'Changed'

    def test_save_with_points_in_update_fields_is_refused(self):
        user = UserFactory()
        user.points = 10
        with pytest.raises(ValueError):
            user.save(update_fields=['points'])

    def test_new_user_with_points_is_refused(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='rich@example.com', password='secret1', points=500)
        assert not User.objects.filter(email='rich@example.com').exists()

    def test_database_rejects_negative_balance(self):
        user = UserFactory()
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                User.objects.filter(pk=user.pk).update(points=-1)


@pytest.mark.django_db
class TestBalanceMutator:

    def test_apply_delta_updates_balance_and_ledger(self):
        user = UserFactory()
        new_balance, entry = BalanceMutator.apply_delta(
            user.pk, 750, PointsTransaction.Type.EARNED, 'Signup survey'
        )

        user.refresh_from_db()
        assert new_balance == 750
        assert user.points == 750
        assert entry.points == 750
        assert entry.type == PointsTransaction.Type.EARNED
        assert entry.user.points == 750

    def test_debit_to_exactly_zero_is_allowed(self):
        user = credit(UserFactory(), 400)
        new_balance, _ = BalanceMutator.apply_delta(
            user.pk, -400, PointsTransaction.Type.REDEEMED, 'All in'
        )
        assert new_balance == 0

    def test_overdraft_leaves_no_trace(self):
        user = credit(UserFactory(), 400)
        with pytest.raises(InsufficientBalance) as excinfo:
            BalanceMutator.apply_delta(user.pk, -401, PointsTransaction.Type.REDEEMED, 'Too much')

        user.refresh_from_db()
        assert user.points == 400
        assert user.points_transactions.count() == 1
        assert excinfo.value.context == {'balance': 400, 'required': 401}

    def test_unknown_user_raises_not_found(self):
        with pytest.raises(NotFound):
            BalanceMutator.apply_delta(987654, 10, PointsTransaction.Type.EARNED, 'Nobody')

    def test_failed_ledger_append_rolls_back_balance(self):
        user = credit(UserFactory(), 400)
        with mock.patch.object(
            PointsTransaction.objects, 'create', side_effect=DatabaseError('connection lost')
        ):
            with pytest.raises(StorageError):
                BalanceMutator.apply_delta(user.pk, 100, PointsTransaction.Type.EARNED, 'Lost')

        user.refresh_from_db()
        assert user.points == 400
        assert LedgerStore.sum_for(user.pk) == 400

    def test_repair_balance_resets_drift_to_ledger_sum(self):
        user = credit(UserFactory(), 400)
        User.objects.filter(pk=user.pk).update(points=900)

        old_balance, new_balance = BalanceMutator.repair_balance(user.pk)

        user.refresh_from_db()
        assert (old_balance, new_balance) == (900, 400)
        assert user.points == 400
        assert user.points_transactions.count() == 1
