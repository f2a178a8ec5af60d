import secrets

from django.conf import settings
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


def generate_referral_code():
    """
    Allocate an unused referral code (hex of REFERRAL_CODE_BYTES random bytes),
    retrying on the rare collision.
    """
    from apps.common.exceptions import StorageError

    config = settings.LOYALTY
    for _ in range(config['REFERRAL_CODE_MAX_ATTEMPTS']):
        code = secrets.token_hex(config['REFERRAL_CODE_BYTES'])
        if not User.objects.filter(referral_code=code).exists():
            return code
    raise StorageError('Could not allocate a unique referral code')


class UserManager(BaseUserManager):
    """Manager for email-identified users"""
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('The email address must be set')
        email = self.normalize_email(email)
        extra_fields.setdefault('referral_code', generate_referral_code())
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_admin', True)
        extra_fields.setdefault('is_super_admin', True)
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """
    Loyalty account. ``points`` is a running total of the user's ledger and
    is written only by BalanceMutator; ``save()`` leaves it untouched.
    """
    username = None
    email = models.EmailField(unique=True)
    phone_number = models.CharField(max_length=32, blank=True, default='')
    is_admin = models.BooleanField(default=False)
    is_super_admin = models.BooleanField(default=False)
    points = models.PositiveIntegerField(default=0)
    referral_code = models.CharField(max_length=32, unique=True)
    referred_by = models.CharField(max_length=32, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(points__gte=0),
                name='users_points_non_negative',
            ),
        ]

    def __str__(self):
        return self.email or f"User {self.id}"

    @property
    def is_enabled(self):
        return self.is_active

    def save(self, *args, **kwargs):
        if self._state.adding:
            if self.points:
                raise ValueError("New accounts start at 0 points; credit them through the ledger")
        else:
            update_fields = kwargs.get('update_fields')
            if update_fields is None:
                kwargs['update_fields'] = [
                    field.name for field in self._meta.concrete_fields
                    if not field.primary_key and field.name != 'points'
                ]
            elif 'points' in update_fields:
                raise ValueError("points can only be changed through BalanceMutator")
        super().save(*args, **kwargs)
