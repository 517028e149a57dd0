from django.urls import path
from .views import RestaurantListView, RestaurantDetailView, RestaurantMenuView

app_name = 'restaurants'

urlpatterns = [
    path('', RestaurantListView.as_view(), name='list'),
    path('<int:restaurant_id>/', RestaurantDetailView.as_view(), name='detail'),
    path('<int:restaurant_id>/menu/', RestaurantMenuView.as_view(), name='menu'),
]
