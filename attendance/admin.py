from django.contrib import admin

from .models import Shift, ShiftBreak


class ShiftBreakInline(admin.TabularInline):
    model = ShiftBreak
    extra = 0


@admin.register(Shift)
class ShiftAdmin(admin.ModelAdmin):
    list_display = ("name", "start_time", "end_time", "status", "created_by_name", "updated_at")
    list_filter = ("status",)
    search_fields = ("name",)
    inlines = [ShiftBreakInline]
