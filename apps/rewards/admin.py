from django.contrib import admin

from .models import Reward


@admin.register(Reward)
class RewardAdmin(admin.ModelAdmin):
    list_display = ['name', 'points_cost', 'available', 'created_at', 'updated_at']
    list_filter = ['available', 'created_at']
    search_fields = ['name', 'description']
    list_editable = ['available']
    readonly_fields = ['created_at', 'updated_at']
