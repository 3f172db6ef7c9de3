"""
URL configuration for the HRMS backend.
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("accounts.urls")),
    path("api/", include("employees.urls")),
    path("api/", include("timeoff.urls")),
    path("api/", include("payroll.urls")),
    path("api/", include("attendance.urls")),
    path("api/", include("ideas.urls")),
]
