from django.contrib import admin

from .models import SalaryComponent, SalaryPolicy, SalaryPolicyComponent


class SalaryPolicyComponentInline(admin.TabularInline):
    model = SalaryPolicyComponent
    extra = 0


@admin.register(SalaryPolicy)
class SalaryPolicyAdmin(admin.ModelAdmin):
    list_display = ("name", "status", "created_by_name", "created_at")
    list_filter = ("status",)
    inlines = [SalaryPolicyComponentInline]


admin.site.register(SalaryComponent)
