"""
Admin-initiated point changes. Each change and its admin log entry commit
together or not at all.
"""
import logging

from django.db import transaction

from apps.common.exceptions import NotFound, Unauthorized
from apps.common.models import AdminLog
from apps.common.services import AdminLogService

from ..models import PointsTransaction
from .balance_mutator import BalanceMutator

logger = logging.getLogger(__name__)


class AdminAdjustmentService:
    """Service for admin point adjustments and activity awards"""

    @staticmethod
    def _check_admin(admin):
        if not (admin and admin.is_authenticated and admin.is_active and admin.is_admin):
            raise Unauthorized()

    @staticmethod
    def _apply(admin, target_user_id, delta, entry_type, description):
        with transaction.atomic():
            new_balance, entry = BalanceMutator.apply_delta(
                target_user_id, delta, entry_type, description
            )
            AdminLogService.append(
                admin,
                entry.user,
                AdminLog.ActionType.POINT_ADJUSTMENT,
                f"Adjusted points by {delta:+d} for {entry.user.email} "
                f"(new balance {new_balance}): {description}",
            )
        logger.info(f"Admin {admin.pk} adjusted user {target_user_id} by {delta:+d}")
        return entry

    @staticmethod
    def adjust(admin, target_user_id, delta, description):
        """
        Credit (positive delta) or debit (negative delta) a user's balance.

        Raises Unauthorized unless ``admin`` is an enabled admin, ValueError
        for a zero delta, and InsufficientBalance if a debit exceeds the
        balance; in every failure case neither the ledger nor the admin log
        changes.
        """
        AdminAdjustmentService._check_admin(admin)
        if delta == 0:
            raise ValueError("Adjustment must be a non-zero number of points")
        return AdminAdjustmentService._apply(
            admin,
            target_user_id,
            delta,
            PointsTransaction.Type.ADMIN_ADJUSTMENT,
            description or 'Points adjusted by admin',
        )

    @staticmethod
    def award_activities(admin, target_user_id, activity_ids, description=''):
        """
        Credit the summed point values of the given activities. Each activity
        must belong to an enabled product assigned to the user.
        """
        from apps.products.models import Activity

        AdminAdjustmentService._check_admin(admin)
        wanted = set(activity_ids)
        if not wanted:
            raise ValueError("Select at least one activity")

        activities = list(
            Activity.objects.filter(
                id__in=wanted,
                product__is_enabled=True,
                product__assignments__user_id=target_user_id,
            ).distinct().order_by('id')
        )
        if {activity.id for activity in activities} != wanted:
            raise NotFound("Activity not found among the user's assigned products")

        total = sum(activity.points_value for activity in activities)
        if not description:
            description = 'Activities: ' + ', '.join(activity.name for activity in activities)
        return AdminAdjustmentService._apply(
            admin, target_user_id, total, PointsTransaction.Type.EARNED, description
        )
