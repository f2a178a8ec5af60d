from django.contrib import admin

from .models import Activity, Product, ProductAssignment


class ActivityInline(admin.TabularInline):
    model = Activity
    extra = 1
    fields = ['name', 'points_value']


class ProductAssignmentInline(admin.TabularInline):
    model = ProductAssignment
    extra = 0
    fields = ['user', 'created_at']
    readonly_fields = ['created_at']
    autocomplete_fields = ['user']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'is_enabled', 'points_allocation', 'activity_count', 'created_at']
    list_filter = ['is_enabled', 'created_at']
    search_fields = ['name', 'description']
    list_editable = ['is_enabled']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ActivityInline, ProductAssignmentInline]

    def activity_count(self, obj):
        return obj.activities.count()
    activity_count.short_description = 'Activities'
