# payments/urls.py

from django.urls import path

from payments.views import PayHereCheckoutView, PayHereNotifyView

app_name = "payments"

urlpatterns = [
    path("payhere", PayHereCheckoutView.as_view(), name="payhere-checkout"),
    path("payhere/notify", PayHereNotifyView.as_view(), name="payhere-notify"),
]
