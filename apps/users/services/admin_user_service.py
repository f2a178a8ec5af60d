"""
Admin management of customer and admin accounts. Every change writes an
admin log entry in the same atomic unit.
"""
from django.db import transaction

from apps.common.exceptions import DuplicateEmail, NotFound, Unauthorized
from apps.common.models import AdminLog
from apps.common.services import AdminLogService

from ..models import User

ActionType = AdminLog.ActionType


class AdminUserService:
    """Service for managing users and admins"""

    @staticmethod
    def _lock(user_id, admins_only=False):
        queryset = User.objects.select_for_update()
        if admins_only:
            queryset = queryset.filter(is_admin=True)
        user = queryset.filter(pk=user_id).first()
        if user is None:
            raise NotFound('Admin not found' if admins_only else 'User not found', user_id=user_id)
        return user

    @staticmethod
    def _require_super_admin(actor):
        if not (actor.is_active and actor.is_admin and actor.is_super_admin):
            raise Unauthorized('Super admin access required')

    @staticmethod
    def _apply_changes(user, fields):
        changes = []
        for name, value in fields.items():
            if getattr(user, name) != value:
                changes.append(f"{name}: {getattr(user, name)!r} -> {value!r}")
                setattr(user, name, value)
        return changes

    @staticmethod
    def list_customers(search=''):
        users = User.objects.filter(is_admin=False).order_by('-created_at', '-id')
        if search:
            users = users.filter(email__icontains=search)
        return users

    @staticmethod
    def list_admins():
        return User.objects.filter(is_admin=True).order_by('email')

    @staticmethod
    def update_user(admin, user_id, **fields):
        """Update a customer's profile fields"""
        with transaction.atomic():
            user = AdminUserService._lock(user_id)
            if 'email' in fields and User.objects.filter(
                email__iexact=fields['email']
            ).exclude(pk=user.pk).exists():
                raise DuplicateEmail()
            changes = AdminUserService._apply_changes(user, fields)
            user.save()
            AdminLogService.append(
                admin, user, ActionType.USER_UPDATED,
                f"Updated {user.email}" + (f": {', '.join(changes)}" if changes else '')
            )
        return user

    @staticmethod
    def toggle_user_status(admin, user_id):
        """Enable a disabled account or disable an enabled one"""
        with transaction.atomic():
            user = AdminUserService._lock(user_id)
            if user.pk == admin.pk:
                raise ValueError("You cannot disable your own account")
            user.is_active = not user.is_active
            user.save(update_fields=['is_active', 'updated_at'])
            AdminLogService.append(
                admin, user,
                ActionType.USER_ENABLED if user.is_active else ActionType.USER_DISABLED,
                f"{'Enabled' if user.is_active else 'Disabled'} account {user.email}"
            )
        return user

    @staticmethod
    def create_admin(actor, email, password, **profile):
        """Create a new admin account (no sign-up bonuses)"""
        AdminUserService._require_super_admin(actor)
        with transaction.atomic():
            if User.objects.filter(email__iexact=email).exists():
                raise DuplicateEmail()
            admin = User.objects.create_user(
                email=email,
                password=password,
                is_admin=True,
                is_staff=True,
                is_super_admin=profile.pop('is_super_admin', False),
                **profile,
            )
            AdminLogService.append(
                actor, admin, ActionType.ADMIN_CREATED, f"Created admin {admin.email}"
            )
        return admin

    @staticmethod
    def promote(actor, user_id, is_super_admin=False):
        """Grant admin rights to an existing account"""
        AdminUserService._require_super_admin(actor)
        with transaction.atomic():
            user = AdminUserService._lock(user_id)
            user.is_admin = True
            user.is_staff = True
            user.is_super_admin = is_super_admin
            user.save(update_fields=['is_admin', 'is_staff', 'is_super_admin', 'updated_at'])
            AdminLogService.append(
                actor, user, ActionType.ADMIN_CREATED, f"Promoted {user.email} to admin"
            )
        return user

    @staticmethod
    def update_admin(actor, admin_id, **fields):
        AdminUserService._require_super_admin(actor)
        with transaction.atomic():
            admin = AdminUserService._lock(admin_id, admins_only=True)
            changes = AdminUserService._apply_changes(admin, fields)
            admin.save()
            AdminLogService.append(
                actor, admin, ActionType.ADMIN_UPDATED,
                f"Updated admin {admin.email}" + (f": {', '.join(changes)}" if changes else '')
            )
        return admin

    @staticmethod
    def demote(actor, admin_id):
        """Revoke admin rights; the account itself is kept"""
        AdminUserService._require_super_admin(actor)
        with transaction.atomic():
            admin = AdminUserService._lock(admin_id, admins_only=True)
            if admin.pk == actor.pk:
                raise ValueError("You cannot remove your own admin rights")
            admin.is_admin = False
            admin.is_super_admin = False
            admin.is_staff = False
            admin.save(update_fields=['is_admin', 'is_super_admin', 'is_staff', 'updated_at'])
            AdminLogService.append(
                actor, admin, ActionType.ADMIN_REMOVED, f"Removed admin rights from {admin.email}"
            )
        return admin

    @staticmethod
    def toggle_admin_status(actor, admin_id):
        AdminUserService._require_super_admin(actor)
        with transaction.atomic():
            admin = AdminUserService._lock(admin_id, admins_only=True)
            if admin.pk == actor.pk:
                raise ValueError("You cannot disable your own account")
            admin.is_active = not admin.is_active
            admin.save(update_fields=['is_active', 'updated_at'])
            AdminLogService.append(
                actor, admin,
                ActionType.ADMIN_ENABLED if admin.is_active else ActionType.ADMIN_DISABLED,
                f"{'Enabled' if admin.is_active else 'Disabled'} admin {admin.email}"
            )
        return admin
