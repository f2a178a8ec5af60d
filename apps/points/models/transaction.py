from django.conf import settings
from django.db import models


class ImmutableLedgerError(TypeError):
    """Raised on any attempt to modify or remove a ledger entry."""


class PointsTransactionQuerySet(models.QuerySet):
    def update(self, **kwargs):
        raise ImmutableLedgerError("Points transactions cannot be updated")

    def delete(self):
        raise ImmutableLedgerError("Points transactions cannot be deleted")


class PointsTransaction(models.Model):
    """
    One signed entry in a user's points ledger. Entries are append-only: the
    sum of a user's entries is their balance.
    """

    class Type(models.TextChoices):
        EARNED = 'EARNED', 'Points Earned'
        REDEEMED = 'REDEEMED', 'Points Redeemed'
        ADMIN_ADJUSTMENT = 'ADMIN_ADJUSTMENT', 'Admin Adjustment'
        WELCOME_BONUS = 'WELCOME_BONUS', 'Welcome Bonus'
        REFERRAL_BONUS = 'REFERRAL_BONUS', 'Referral Bonus'

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='points_transactions')
    points = models.IntegerField()  # Positive for credits, negative for debits
    type = models.CharField(max_length=20, choices=Type.choices)
    description = models.CharField(max_length=255)
    reward = models.ForeignKey(
        'rewards.Reward',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='redemptions',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    objects = PointsTransactionQuerySet.as_manager()

    class Meta:
        db_table = 'points_transactions'
        ordering = ['-created_at', '-id']
        verbose_name = 'Points Transaction'
        verbose_name_plural = 'Points Transactions'
        indexes = [
            models.Index(fields=['user', '-created_at']),
        ]

    def __str__(self):
        return f"{self.user.email} - {self.points} points ({self.get_type_display()})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableLedgerError("Points transactions cannot be modified once recorded")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableLedgerError("Points transactions cannot be deleted")
