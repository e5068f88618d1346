from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from accounts.models import User


@admin.register(User)
class AccountAdmin(UserAdmin):
    list_display = ["username", "email", "first_name", "last_name", "is_admin", "is_approved"]
    list_filter = ["is_admin", "is_approved", "profile_completed"]
    fieldsets = UserAdmin.fieldsets + (
        ("Club", {"fields": ["image", "is_admin", "is_approved", "profile_completed"]}),
    )
