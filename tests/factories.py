"""
Test factories for creating test data using factory_boy.
"""
import factory
from factory import Faker, SubFactory
from factory.django import DjangoModelFactory, Password
from django.contrib.auth import get_user_model

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """
    Factory for creating test users. Users start at 0 points; use ``credit``
    to give them a ledger-backed balance.
    """

    class Meta:
        model = User
        django_get_or_create = ('email',)

    email = factory.Sequence(lambda n: f"customer{n}@example.com")
    password = Password('password123')
    first_name = Faker('first_name')
    last_name = Faker('last_name')
    phone_number = factory.Sequence(lambda n: f"+1555{n:07d}")
    referral_code = factory.Sequence(lambda n: f"{n:016x}")
    is_active = True


class AdminFactory(UserFactory):
    """Factory for admin accounts."""
    email = factory.Sequence(lambda n: f"admin{n}@example.com")
    is_admin = True
    is_staff = True


class SuperAdminFactory(AdminFactory):
    """Factory for super-admin accounts."""
    email = factory.Sequence(lambda n: f"superadmin{n}@example.com")
    is_super_admin = True


class RewardFactory(DjangoModelFactory):
    """Factory for creating rewards."""

    class Meta:
        model = 'rewards.Reward'

    name = factory.Sequence(lambda n: f"Reward {n}")
    description = Faker('sentence')
    points_cost = 1000
    available = True


class ProductFactory(DjangoModelFactory):
    """Factory for creating products."""

    class Meta:
        model = 'products.Product'

    name = factory.Sequence(lambda n: f"Product {n}")
    description = Faker('text', max_nb_chars=200)
    is_enabled = True
    points_allocation = 10000


class ActivityFactory(DjangoModelFactory):
    """Factory for creating product activities."""

    class Meta:
        model = 'products.Activity'

    product = SubFactory(ProductFactory)
    name = factory.Sequence(lambda n: f"Activity {n}")
    points_value = 250


class ProductAssignmentFactory(DjangoModelFactory):
    """Factory for assigning products to users."""

    class Meta:
        model = 'products.ProductAssignment'

    user = SubFactory(UserFactory)
    product = SubFactory(ProductFactory)


def credit(user, points, description='Test credit'):
    """Give ``user`` a ledger-backed balance and return the refreshed user."""
    from apps.points.models import PointsTransaction
    from apps.points.services import BalanceMutator

    BalanceMutator.apply_delta(user.pk, points, PointsTransaction.Type.EARNED, description)
    user.refresh_from_db()
    return user
