"""
Tests for the balance consistency check, its endpoint and its
management command.
"""
from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command

from apps.points.services import BalanceAuditor
from tests.factories import UserFactory, credit

User = get_user_model()


def drift(user, points):
    """Simulate a stored balance that no longer matches the ledger."""
    User.objects.filter(pk=user.pk).update(points=points)


@pytest.mark.django_db
class TestBalanceAuditor:

    def test_consistent_balances_report_nothing(self, customer):
        credit(UserFactory(), 10)
        assert BalanceAuditor.find_discrepancies() == []

    def test_drift_is_reported(self, customer):
        drift(customer, 7000)
        [item] = BalanceAuditor.find_discrepancies()

        assert item.user_id == customer.pk
        assert item.stored_balance == 7000
        assert item.ledger_balance == 5000
        assert item.difference == 2000

    def test_user_without_entries_has_zero_ledger_balance(self):
        user = UserFactory()
        drift(user, 50)
        [item] = BalanceAuditor.find_discrepancies([user.pk])
        assert item.ledger_balance == 0

    def test_filter_by_user(self, customer):
        other = credit(UserFactory(), 100)
        drift(customer, 1)
        assert BalanceAuditor.find_discrepancies([other.pk]) == []

    def test_repair(self, customer):
        drift(customer, 1)
        repaired = BalanceAuditor.repair()

        customer.refresh_from_db()
        assert len(repaired) == 1
        assert customer.points == 5000
        assert BalanceAuditor.find_discrepancies() == []


@pytest.mark.django_db
class TestCheckBalancesCommand:

    def test_reports_consistent_ledger(self, customer):
        out = StringIO()
        call_command('check_balances', stdout=out)
        assert 'All balances match' in out.getvalue()

    def test_reports_without_repairing(self, customer):
        drift(customer, 1)
        out = StringIO()
        call_command('check_balances', stdout=out)

        assert f'User {customer.pk}' in out.getvalue()
        assert 'out of sync' in out.getvalue()
        customer.refresh_from_db()
        assert customer.points == 1

    def test_repair_flag(self, customer):
        drift(customer, 1)
        out = StringIO()
        call_command('check_balances', '--repair', '--user-id', str(customer.pk), stdout=out)

        assert 'Repaired 1 balance(s)' in out.getvalue()
        customer.refresh_from_db()
        assert customer.points == 5000


@pytest.mark.django_db
class TestBalanceCheckEndpoint:

    def test_endpoint_reports_discrepancies(self, client_for, admin_user, customer):
        drift(customer, 1)
        response = client_for(admin_user).get('/api/admin/balances/check/')

        assert response.status_code == 200
        data = response.json()['data']
        assert data['consistent'] is False
        assert data['discrepancies'][0]['user_id'] == customer.pk
        assert data['discrepancies'][0]['difference'] == -4999

    def test_endpoint_requires_admin(self, client_for, customer):
        response = client_for(customer).get('/api/admin/balances/check/')
        assert response.status_code == 403
