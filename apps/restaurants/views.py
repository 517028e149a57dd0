"""
Views for restaurants app (browse only; management happens in the admin)
"""
from rest_framework.views import APIView
from rest_framework import permissions
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.api.mixins import StandardResponseMixin
from apps.api.pagination import StandardPageNumberPagination
from apps.api.response import ApiResponse
from .selectors import RestaurantSelector
from .serializers import RestaurantSerializer, MenuItemSerializer


class RestaurantListView(StandardResponseMixin, APIView):
    """
    GET /api/restaurants/
    """
    permission_classes = [permissions.AllowAny]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.restaurant_selector = RestaurantSelector()

    @extend_schema(
        tags=['Restaurants'],
        summary="List restaurants",
        parameters=[
            OpenApiParameter(name='search', description='Search name, description, cuisine', required=False, type=str),
            OpenApiParameter(name='cuisine', description='Filter by cuisine', required=False, type=str),
            OpenApiParameter(name='page', description='Page number', required=False, type=int),
        ],
        responses={200: RestaurantSerializer(many=True)}
    )
    def get(self, request):
        filters = {
            'search': request.query_params.get('search'),
            'cuisine': request.query_params.get('cuisine'),
        }
        restaurants = self.restaurant_selector.get_active_restaurants(filters)

        paginator = StandardPageNumberPagination()
        page = paginator.paginate_queryset(restaurants, request, view=self)
        return paginator.get_paginated_response(RestaurantSerializer(page, many=True).data)


class RestaurantDetailView(StandardResponseMixin, APIView):
    """
    GET /api/restaurants/{restaurant_id}/
    """
    permission_classes = [permissions.AllowAny]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.restaurant_selector = RestaurantSelector()

    @extend_schema(tags=['Restaurants'], summary="Restaurant detail", responses={200: RestaurantSerializer})
    def get(self, request, restaurant_id):
        restaurant = self.restaurant_selector.get_restaurant_by_id(restaurant_id)
        if not restaurant:
            return ApiResponse.not_found(message="Restaurant not found")

        return ApiResponse.success(data=RestaurantSerializer(restaurant).data)


class RestaurantMenuView(StandardResponseMixin, APIView):
    """
    GET /api/restaurants/{restaurant_id}/menu/
    """
    permission_classes = [permissions.AllowAny]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.restaurant_selector = RestaurantSelector()

    @extend_schema(tags=['Restaurants'], summary="Restaurant menu", responses={200: MenuItemSerializer(many=True)})
    def get(self, request, restaurant_id):
        if not self.restaurant_selector.get_restaurant_by_id(restaurant_id):
            return ApiResponse.not_found(message="Restaurant not found")

        items = self.restaurant_selector.get_menu(restaurant_id)
        return ApiResponse.success(data=MenuItemSerializer(items, many=True).data)
