from django.contrib import admin

from scheduling.models import Registration, Session


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    ordering = ["registered_at", "id"]
    fields = ["user", "has_paid", "registered_at"]


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    list_display = ["date", "time", "duration_minutes", "places", "cost", "created_by"]
    list_filter = ["date"]
    date_hierarchy = "date"
    inlines = [RegistrationInline]


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["user", "session", "has_paid", "registered_at"]
    list_filter = ["has_paid", "session__date"]
    search_fields = ["user__email", "user__first_name", "user__last_name"]
