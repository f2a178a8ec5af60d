from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from .models import AdminLog

admin.site.site_header = 'Loyalty Points Administration'
admin.site.site_title = 'Loyalty Admin'


@admin.register(AdminLog)
class AdminLogAdmin(admin.ModelAdmin):
    """Read-only admin interface for the admin log"""

    list_display = ['admin_link', 'action_type', 'target_user', 'details', 'created_at']
    list_filter = ['action_type', 'created_at']
    search_fields = ['admin__email', 'target_user__email', 'details']
    ordering = ['-created_at']
    readonly_fields = ['admin', 'target_user', 'action_type', 'details', 'created_at']

    def admin_link(self, obj):
        """Link to user admin page"""
        url = reverse('admin:users_user_change', args=[obj.admin.id])
        return format_html('<a href="{}">{}</a>', url, obj.admin.email)
    admin_link.short_description = 'Admin'
    admin_link.admin_order_field = 'admin__email'

    def has_add_permission(self, request):
        # Entries are written by the services that perform the action
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
