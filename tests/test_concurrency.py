"""
Concurrency tests: operations on one user serialize, so no update is lost
and no debit overdraws the balance.
"""
import threading
import time

import pytest
from django.contrib.auth import get_user_model
from django.db import connection, transaction

from apps.common.exceptions import InsufficientBalance, RewardUnavailable
from apps.points.models import PointsTransaction
from apps.points.services import AdminAdjustmentService, LedgerStore
from apps.rewards.models import Reward
from apps.rewards.services import RedemptionService
from tests.factories import AdminFactory, RewardFactory, UserFactory, credit

User = get_user_model()


def run_in_threads(target, count):
    """Run ``target(index)`` in ``count`` threads; return collected results"""
    results = []
    lock = threading.Lock()
    barrier = threading.Barrier(count)

    def worker(index):
        try:
            barrier.wait()
            outcome = target(index)
        except Exception as exc:
            outcome = exc
        finally:
            connection.close()
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results


@pytest.mark.django_db(transaction=True)
class TestConcurrentBalanceUpdates:

    def test_concurrent_adjustments_are_not_lost(self):
        admin = AdminFactory()
        user = credit(UserFactory(), 1000)

        results = run_in_threads(
            lambda i: AdminAdjustmentService.adjust(admin, user.pk, 10 * (i + 1), f'Bonus {i}'),
            8,
        )

        assert all(isinstance(result, PointsTransaction) for result in results)
        user.refresh_from_db()
        assert user.points == 1000 + sum(10 * (i + 1) for i in range(8))
        assert LedgerStore.sum_for(user.pk) == user.points

    def test_concurrent_redemptions_never_overdraw(self):
        user = credit(UserFactory(), 1000)
        reward = RewardFactory(points_cost=300)

        results = run_in_threads(lambda i: RedemptionService.redeem(user.pk, reward.pk), 6)

        successes = [r for r in results if isinstance(r, PointsTransaction)]
        failures = [r for r in results if isinstance(r, InsufficientBalance)]
        assert len(successes) == 3
        assert len(failures) == 3

        user.refresh_from_db()
        assert user.points == 100
        assert LedgerStore.sum_for(user.pk) == 100

    def test_different_users_proceed_independently(self):
        admin = AdminFactory()
        users = [credit(UserFactory(), 100) for _ in range(4)]

        results = run_in_threads(
            lambda i: AdminAdjustmentService.adjust(admin, users[i].pk, 50, 'Bonus'),
            4,
        )

        assert all(isinstance(result, PointsTransaction) for result in results)
        for user in users:
            user.refresh_from_db()
            assert user.points == 150

    def test_redemption_waits_for_reward_change_in_progress(self):
        user = credit(UserFactory(), 1000)
        reward = RewardFactory(points_cost=300)
        changed = threading.Event()

        def disable_reward():
            try:
                with transaction.atomic():
                    locked = Reward.objects.select_for_update().get(pk=reward.pk)
                    locked.available = False
                    locked.save()
                    changed.set()
                    time.sleep(0.5)
            finally:
                connection.close()

        admin_thread = threading.Thread(target=disable_reward)
        admin_thread.start()
        changed.wait(timeout=5)
        try:
            with pytest.raises(RewardUnavailable):
                RedemptionService.redeem(user.pk, reward.pk)
        finally:
            admin_thread.join()

        user.refresh_from_db()
        assert user.points == 1000
        assert not user.points_transactions.filter(type=PointsTransaction.Type.REDEEMED).exists()
