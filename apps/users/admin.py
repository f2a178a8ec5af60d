from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserChangeForm, UserCreationForm
from django.urls import reverse
from django.utils.html import format_html

from .models import User, generate_referral_code


class LoyaltyUserCreationForm(UserCreationForm):
    class Meta:
        model = User
        fields = ("email",)


class LoyaltyUserChangeForm(UserChangeForm):
    class Meta:
        model = User
        fields = "__all__"


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin keyed by email; balances are read-only here"""
    form = LoyaltyUserChangeForm
    add_form = LoyaltyUserCreationForm
    list_display = [
        'email', 'first_name', 'last_name', 'points', 'referral_code',
        'is_admin', 'is_super_admin', 'is_active', 'created_at'
    ]
    list_filter = ['is_admin', 'is_super_admin', 'is_active', 'created_at']
    search_fields = ['email', 'first_name', 'last_name', 'phone_number', 'referral_code']
    ordering = ['-created_at']

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Personal info', {'fields': ('first_name', 'last_name', 'phone_number')}),
        ('Loyalty', {'fields': ('points', 'referral_code', 'referred_by', 'ledger_link')}),
        ('Permissions', {
            'fields': ('is_active', 'is_admin', 'is_super_admin', 'is_staff', 'is_superuser',
                       'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('last_login', 'date_joined', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'password1', 'password2'),
        }),
    )
    readonly_fields = [
        'points', 'referral_code', 'referred_by', 'ledger_link',
        'last_login', 'date_joined', 'created_at', 'updated_at'
    ]

    def ledger_link(self, obj):
        """Link to the user's points transactions"""
        url = reverse('admin:points_pointstransaction_changelist') + f'?user__id__exact={obj.pk}'
        return format_html('<a href="{}">View ledger</a>', url)
    ledger_link.short_description = 'Ledger'

    def save_model(self, request, obj, form, change):
        if not change and not obj.referral_code:
            obj.referral_code = generate_referral_code()
        super().save_model(request, obj, form, change)
