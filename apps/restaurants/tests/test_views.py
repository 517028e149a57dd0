from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from ..models import Restaurant, MenuItem


class RestaurantModelTest(TestCase):
    """Test cases for Restaurant"""

    def test_slug_generated_and_unique(self):
        first = Restaurant.objects.create(name='Shan Noodle House')
        second = Restaurant.objects.create(name='Shan Noodle House')

        self.assertEqual(first.slug, 'shan-noodle-house')
        self.assertEqual(second.slug, 'shan-noodle-house-2')

    def test_rating_empty_by_default(self):
        self.assertIsNone(Restaurant.objects.create(name='New Place').rating)


class RestaurantAPITest(APITestCase):
    """Test cases for /api/restaurants/"""

    def setUp(self):
        self.restaurant = Restaurant.objects.create(name='Yangon Bistro', cuisine='Burmese', rating=Decimal('4.2'))
        self.closed = Restaurant.objects.create(name='Closed Cafe', is_active=False)
        MenuItem.objects.create(restaurant=self.restaurant, name='Mohinga', price=Decimal('3500.00'))
        MenuItem.objects.create(
            restaurant=self.restaurant, name='Seasonal Soup', price=Decimal('2000.00'), is_available=False
        )

    def test_list_active_restaurants(self):
        response = self.client.get(reverse('restaurants:list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['name'] for item in response.data['data']], ['Yangon Bistro'])
        self.assertEqual(response.data['data'][0]['rating'], Decimal('4.2'))

    def test_search(self):
        response = self.client.get(reverse('restaurants:list'), {'search': 'burmese'})
        self.assertEqual(len(response.data['data']), 1)

        response = self.client.get(reverse('restaurants:list'), {'search': 'pizza'})
        self.assertEqual(response.data['data'], [])

    def test_inactive_restaurant_not_found(self):
        response = self.client.get(reverse('restaurants:detail', args=[self.closed.id]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_menu_lists_available_items(self):
        response = self.client.get(reverse('restaurants:menu', args=[self.restaurant.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['name'] for item in response.data['data']], ['Mohinga'])
