# orders/urls.py

from django.urls import path

from orders.views import OrderCollectionView, OrderDetailView

app_name = "orders"

urlpatterns = [
    path("orders", OrderCollectionView.as_view(), name="orders"),
    path("orders/<str:order_id>", OrderDetailView.as_view(), name="order-detail"),
]
