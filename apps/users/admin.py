from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, Profile


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    verbose_name_plural = 'Profile'
    fk_name = 'user'
    fields = ('full_name', 'phone_number', 'avatar_url')


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin for users, owners and customers"""
    list_display = ['username', 'email', 'user_type', 'is_active', 'is_staff', 'date_joined']
    list_filter = ['user_type', 'is_active', 'is_staff', 'is_superuser', 'date_joined']
    search_fields = ['username', 'email', 'profile__full_name']
    readonly_fields = ['date_joined', 'last_login', 'created_at', 'updated_at']
    inlines = [ProfileInline]

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Role', {'fields': ('user_type',)}),
        ('Timestamps', {'fields': ('created_at', 'updated_at')}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Role', {'fields': ('email', 'user_type')}),
    )
