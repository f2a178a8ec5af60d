from django.contrib import admin

from .models import PointsTransaction


@admin.register(PointsTransaction)
class PointsTransactionAdmin(admin.ModelAdmin):
    list_display = ['user', 'type', 'points', 'description', 'reward', 'created_at']
    list_filter = ['type', 'created_at']
    search_fields = ['user__email', 'description']
    readonly_fields = ['user', 'points', 'type', 'description', 'reward', 'created_at']
    list_select_related = ['user', 'reward']

    def has_add_permission(self, request):
        return False  # Transactions are created by BalanceMutator

    def has_change_permission(self, request, obj=None):
        return False  # Ledger entries are immutable

    def has_delete_permission(self, request, obj=None):
        return False
