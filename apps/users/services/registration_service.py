"""
Account registration with welcome and referral bonuses.
"""
import logging

from django.conf import settings
from django.db import DatabaseError, transaction

from apps.common.exceptions import DuplicateEmail, InvalidReferralCode, StorageError
from apps.points.models import PointsTransaction
from apps.points.services import BalanceMutator

from ..models import User, generate_referral_code

logger = logging.getLogger(__name__)


class AccountRegistrar:
    """Creates accounts and credits their sign-up bonuses"""

    @staticmethod
    def register(email, password_hash, profile=None, referral_code=None):
        """
        Create an account and credit its bonuses as one atomic unit.

        ``password_hash`` is an already hashed credential (see
        ``django.contrib.auth.hashers.make_password``). ``profile`` may carry
        first_name, last_name and phone_number.

        The new account receives the welcome bonus. When ``referral_code``
        belongs to an existing user, that user receives the referral bonus.
        If any step fails nothing is kept: no account and no ledger entries.
        """
        profile = profile or {}
        config = settings.LOYALTY
        email = User.objects.normalize_email(email)

        if User.objects.filter(email__iexact=email).exists():
            logger.info(f"Registration rejected, email already registered: {email}")
            raise DuplicateEmail()

        referrer = None
        if referral_code:
            referrer = User.objects.filter(referral_code=referral_code).first()
            if referrer is None:
                logger.info(f"Registration rejected, unknown referral code: {referral_code}")
                raise InvalidReferralCode()

        try:
            with transaction.atomic():
                user = User(
                    email=email,
                    password=password_hash,
                    first_name=profile.get('first_name', ''),
                    last_name=profile.get('last_name', ''),
                    phone_number=profile.get('phone_number', ''),
                    referral_code=generate_referral_code(),
                    referred_by=referrer.referral_code if referrer else None,
                )
                user.save()

                BalanceMutator.apply_delta(
                    user.pk,
                    config['WELCOME_BONUS_POINTS'],
                    PointsTransaction.Type.WELCOME_BONUS,
                    'Welcome bonus for new registration',
                )
                if referrer is not None:
                    BalanceMutator.apply_delta(
                        referrer.pk,
                        config['REFERRAL_BONUS_POINTS'],
                        PointsTransaction.Type.REFERRAL_BONUS,
                        f'Referral bonus for referring {email}',
                    )
        except DatabaseError as exc:
            # Includes a unique-email race lost to a concurrent registration
            if User.objects.filter(email__iexact=email).exists():
                raise DuplicateEmail() from exc
            raise StorageError('Could not create the account') from exc

        user.points = config['WELCOME_BONUS_POINTS']
        logger.info(f"Registered user {user.pk}" + (f" referred by {referrer.pk}" if referrer else ''))
        return user
