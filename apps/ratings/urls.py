from django.urls import path
from . import views

app_name = 'ratings'

urlpatterns = [
    path('', views.RatingSubmitView.as_view(), name='submit'),
    path('<int:rating_id>/', views.RatingDetailView.as_view(), name='detail'),
    path('restaurant/<int:restaurant_id>/', views.RestaurantRatingsView.as_view(), name='restaurant-ratings'),
]
