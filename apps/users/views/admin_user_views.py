"""
Admin views for customer and admin account management.
"""
from rest_framework import status
from rest_framework.views import APIView

from apps.common.permissions import IsAdmin, IsSuperAdmin
from apps.common.utils import error_response, paginated_response, success_response
from ..models import User
from ..serializers import (
    AdminCreateSerializer, AdminUpdateSerializer, AdminUserUpdateSerializer,
    UserDetailSerializer
)
from ..services import AdminUserService


class AdminUserListView(APIView):
    """List customers with their balances"""
    permission_classes = [IsAdmin]

    def get(self, request):
        users = AdminUserService.list_customers(request.GET.get('search', ''))
        return paginated_response(users, UserDetailSerializer, request, 'Users retrieved')


class AdminUserDetailView(APIView):
    """Update a customer's profile"""
    permission_classes = [IsAdmin]

    def patch(self, request, user_id):
        serializer = AdminUserUpdateSerializer(
            User.objects.filter(pk=user_id).first(),
            data=request.data,
            partial=True,
        )
        serializer.is_valid(raise_exception=True)
        user = AdminUserService.update_user(request.user, user_id, **serializer.validated_data)
        return success_response(UserDetailSerializer(user).data, 'User updated successfully')


class AdminUserToggleStatusView(APIView):
    """Enable or disable a customer account"""
    permission_classes = [IsAdmin]

    def post(self, request, user_id):
        try:
            user = AdminUserService.toggle_user_status(request.user, user_id)
        except ValueError as e:
            return error_response(str(e), error_code='VALIDATION_ERROR')
        message = 'User enabled' if user.is_enabled else 'User disabled'
        return success_response(UserDetailSerializer(user).data, message)


class AdminListView(APIView):
    """List admins or grant admin rights"""
    permission_classes = [IsSuperAdmin]

    def get(self, request):
        admins = AdminUserService.list_admins()
        return success_response(UserDetailSerializer(admins, many=True).data, 'Admins retrieved')

    def post(self, request):
        serializer = AdminCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        if 'user_id' in data:
            admin = AdminUserService.promote(
                request.user, data['user_id'], is_super_admin=data['is_super_admin']
            )
        else:
            admin = AdminUserService.create_admin(
                request.user,
                data.pop('email'),
                data.pop('password'),
                **data,
            )
        return success_response(
            UserDetailSerializer(admin).data, 'Admin created successfully', status.HTTP_201_CREATED
        )


class AdminDetailView(APIView):
    """Update an admin or revoke their admin rights"""
    permission_classes = [IsSuperAdmin]

    def patch(self, request, admin_id):
        serializer = AdminUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        admin = AdminUserService.update_admin(request.user, admin_id, **serializer.validated_data)
        return success_response(UserDetailSerializer(admin).data, 'Admin updated successfully')

    def delete(self, request, admin_id):
        try:
            AdminUserService.demote(request.user, admin_id)
        except ValueError as e:
            return error_response(str(e), error_code='VALIDATION_ERROR')
        return success_response(None, 'Admin removed successfully')


class AdminToggleStatusView(APIView):
    """Enable or disable an admin account"""
    permission_classes = [IsSuperAdmin]

    def post(self, request, admin_id):
        try:
            admin = AdminUserService.toggle_admin_status(request.user, admin_id)
        except ValueError as e:
            return error_response(str(e), error_code='VALIDATION_ERROR')
        message = 'Admin enabled' if admin.is_enabled else 'Admin disabled'
        return success_response(UserDetailSerializer(admin).data, message)
