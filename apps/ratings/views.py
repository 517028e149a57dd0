"""
Views for ratings app
"""
from rest_framework import permissions
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema
from apps.api.mixins import StandardResponseMixin
from apps.api.response import ApiResponse
from apps.restaurants.selectors import RestaurantSelector
from .serializers import (
    RestaurantRatingSerializer,
    RatingSubmitSerializer,
    RestaurantRatingSummarySerializer,
)
from .services import RatingService
from .selectors import RatingSelector


class RatingSubmitView(StandardResponseMixin, APIView):
    """
    POST /api/ratings/ - rate a served/completed order
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.rating_service = RatingService()

    @extend_schema(
        tags=['Ratings'],
        summary="Rate an order",
        description="Rating is 1.0 to 5.0 in steps of 0.1. Rating the same order again replaces the value.",
        request=RatingSubmitSerializer,
        responses={201: RestaurantRatingSerializer, 200: RestaurantRatingSerializer}
    )
    def post(self, request):
        serializer = RatingSubmitSerializer(data=request.data)
        if not serializer.is_valid():
            return ApiResponse.validation_error(message="Invalid data", errors=serializer.errors)

        rating, created = self.rating_service.submit_rating(
            request.user,
            serializer.validated_data['order_id'],
            serializer.validated_data['rating'],
        )
        data = RestaurantRatingSerializer(rating).data
        if created:
            return ApiResponse.created(data=data, message="Thank you for your rating")
        return ApiResponse.updated(data=data, message="Rating updated successfully")


class RatingDetailView(StandardResponseMixin, APIView):
    """
    DELETE /api/ratings/{rating_id}/
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.rating_service = RatingService()

    @extend_schema(tags=['Ratings'], summary="Delete my rating", responses={200: None})
    def delete(self, request, rating_id):
        self.rating_service.delete_rating(request.user, rating_id)
        return ApiResponse.deleted(message="Rating deleted successfully")


class RestaurantRatingsView(StandardResponseMixin, APIView):
    """
    GET /api/ratings/restaurant/{restaurant_id}/
    """
    permission_classes = [permissions.AllowAny]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.rating_selector = RatingSelector()
        self.restaurant_selector = RestaurantSelector()

    @extend_schema(
        tags=['Ratings'],
        summary="Restaurant rating summary",
        responses={200: RestaurantRatingSummarySerializer}
    )
    def get(self, request, restaurant_id):
        restaurant = self.restaurant_selector.get_restaurant_by_id(restaurant_id)
        if not restaurant:
            return ApiResponse.not_found(message="Restaurant not found")

        ratings = self.rating_selector.get_restaurant_ratings(restaurant_id)
        summary = {
            'restaurant_id': restaurant.id,
            'rating': restaurant.rating,
            'rating_count': ratings.count(),
            'distribution': self.rating_selector.get_rating_distribution(restaurant_id),
            'ratings': ratings[:50],
        }
        return ApiResponse.success(data=RestaurantRatingSummarySerializer(summary).data)
