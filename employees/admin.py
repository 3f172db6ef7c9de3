from django.contrib import admin
from .models import Department, Position, Employee


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ['name', 'position_count', 'created_by_name', 'created_at']
    search_fields = ['name']
    readonly_fields = ['id', 'created_by', 'created_by_name', 'created_at', 'updated_at']


@admin.register(Position)
class PositionAdmin(admin.ModelAdmin):
    list_display = ['name', 'department', 'reports_to', 'employee_limit', 'leave_policy']
    list_filter = ['department']
    search_fields = ['name', 'department__name']
    readonly_fields = ['id', 'created_by', 'created_by_name', 'created_at', 'updated_at']


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'department', 'position']
    list_filter = ['department']
    search_fields = ['full_name']
    readonly_fields = ['id', 'created_at', 'updated_at']
