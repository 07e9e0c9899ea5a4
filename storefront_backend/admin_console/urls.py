# admin_console/urls.py

from django.urls import path

from admin_console.views import (
    AdminDashboardPageView,
    AdminIndexView,
    AdminLoginView,
    AdminLogoutView,
)

app_name = "admin_console"

urlpatterns = [
    path("", AdminIndexView.as_view(), name="index"),
    path("login/", AdminLoginView.as_view(), name="login"),
    path("logout/", AdminLogoutView.as_view(), name="logout"),
    path("dashboard/", AdminDashboardPageView.as_view(), name="dashboard"),
]
