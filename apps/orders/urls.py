"""
URLs for Orders app
"""
from django.urls import path
from .views import (
    OrderListCreateView,
    RestaurantOrderListView,
    OrderVerifyView,
    OrderDetailView,
    OrderUpdateStatusView,
)

app_name = 'orders'

urlpatterns = [
    path('', OrderListCreateView.as_view(), name='list'),
    path('restaurant/', RestaurantOrderListView.as_view(), name='restaurant-orders'),
    path('verify/', OrderVerifyView.as_view(), name='verify'),
    path('<int:order_id>/', OrderDetailView.as_view(), name='detail'),
    path('<int:order_id>/status/', OrderUpdateStatusView.as_view(), name='update-status'),
]
