# admin_console/api_urls.py

from django.urls import path

from admin_console.views import AdminDashboardView

app_name = "admin_api"

urlpatterns = [
    path("admin/dashboard", AdminDashboardView.as_view(), name="dashboard"),
]
