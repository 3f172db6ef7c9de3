from django.contrib import admin
from .models import LeaveEntitlement, LeavePolicy, LeaveType


@admin.register(LeaveType)
class LeaveTypeAdmin(admin.ModelAdmin):
    list_display = ("name", "created_by_name", "created_at")
    search_fields = ("name",)


class LeaveEntitlementInline(admin.TabularInline):
    model = LeaveEntitlement
    extra = 0


@admin.register(LeavePolicy)
class LeavePolicyAdmin(admin.ModelAdmin):
    list_display = ("name", "status", "created_by_name", "created_at")
    list_filter = ("status",)
    search_fields = ("name",)
    inlines = [LeaveEntitlementInline]
