from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.notifications.models import CustomerNotification
from apps.restaurants.models import Restaurant, MenuItem
from ..models import Order
from ..services import OrderService

User = get_user_model()


class OrderAPITestCase(APITestCase):
    """Shared fixtures for order API tests"""

    def setUp(self):
        self.owner = User.objects.create_user(
            username='owner', email='owner@example.com', password='testpass123', user_type='owner'
        )
        self.other_owner = User.objects.create_user(
            username='other_owner', email='other_owner@example.com', password='testpass123', user_type='owner'
        )
        self.customer = User.objects.create_user(
            username='customer', email='customer@example.com', password='testpass123'
        )
        self.restaurant = Restaurant.objects.create(name='Yangon Bistro', owner=self.owner)
        self.mohinga = MenuItem.objects.create(
            restaurant=self.restaurant, name='Mohinga', price=Decimal('3500.00'), category='Noodles'
        )
        self.salad = MenuItem.objects.create(
            restaurant=self.restaurant, name='Tea Leaf Salad', price=Decimal('4000.00'), category='Salads'
        )

    def _create_order(self, **kwargs):
        defaults = {
            'customer': self.customer,
            'restaurant': self.restaurant,
            'payment_method': 'kbzpay',
            'total_amount': Decimal('7500.00'),
        }
        defaults.update(kwargs)
        return Order.objects.create(**defaults)


class OrderCreateAPITest(OrderAPITestCase):
    """Test cases for POST /api/orders/"""

    def test_create_paid_order(self):
        self.client.force_authenticate(self.customer)

        response = self.client.post(reverse('orders:list'), {
            'restaurant_id': self.restaurant.id,
            'order_type': 'takeaway',
            'payment_method': 'wavepay',
            'items': [
                {'menu_item_id': self.mohinga.id, 'quantity': 2},
                {'menu_item_id': self.salad.id, 'quantity': 1},
            ],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        order = Order.objects.get(id=response.data['data']['id'])
        self.assertEqual(order.status, 'paid')
        self.assertEqual(order.customer, self.customer)
        self.assertEqual(order.total_amount, Decimal('11000.00'))
        self.assertRegex(order.qr_code, rf'^ALAN-\d+-{self.restaurant.id}-[0-9a-f]{{8}}$')
        self.assertEqual(
            order.order_items[0],
            {'menu_item_id': self.mohinga.id, 'name': 'Mohinga', 'price': '3500.00', 'quantity': 2}
        )

    def test_unavailable_item_rejected(self):
        self.salad.is_available = False
        self.salad.save()
        self.client.force_authenticate(self.customer)

        response = self.client.post(reverse('orders:list'), {
            'restaurant_id': self.restaurant.id,
            'order_type': 'dine_in',
            'payment_method': 'mpu',
            'items': [{'menu_item_id': self.salad.id, 'quantity': 1}],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], {'items': [self.salad.id]})
        self.assertFalse(Order.objects.exists())

    def test_empty_cart_rejected(self):
        self.client.force_authenticate(self.customer)

        response = self.client.post(reverse('orders:list'), {
            'restaurant_id': self.restaurant.id,
            'order_type': 'dine_in',
            'payment_method': 'mpu',
            'items': [],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)

    def test_list_own_orders(self):
        self._create_order()
        self._create_order(customer=self.owner)
        self.client.force_authenticate(self.customer)

        response = self.client.get(reverse('orders:list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['data']), 1)
        self.assertEqual(response.data['pagination']['count'], 1)


class OrderStatusAPITest(OrderAPITestCase):
    """Test cases for PATCH /api/orders/{id}/status/"""

    def setUp(self):
        super().setUp()
        self.order = self._create_order()

    def _patch(self, new_status):
        return self.client.patch(
            reverse('orders:update-status', args=[self.order.id]), {'status': new_status}, format='json'
        )

    def test_owner_completes_order(self):
        self.client.force_authenticate(self.owner)

        response = self._patch('preparing')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(CustomerNotification.objects.exists())

        response = self._patch('completed')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNotNone(response.data['data']['completed_at'])
        self.assertEqual(CustomerNotification.objects.filter(order=self.order, customer=self.customer).count(), 1)

        response = self._patch('completed')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(CustomerNotification.objects.filter(order=self.order).count(), 1)

    def test_customer_cannot_update_status(self):
        self.client.force_authenticate(self.customer)

        response = self._patch('completed')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, 'paid')

    def test_other_owner_cannot_update_status(self):
        self.client.force_authenticate(self.other_owner)

        response = self._patch('served')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_cancelled_order_cannot_reopen(self):
        self.client.force_authenticate(self.owner)
        self._patch('cancelled')

        response = self._patch('preparing')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_invalid_status(self):
        self.client.force_authenticate(self.owner)

        response = self._patch('delivered')

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)


class RestaurantOrderListAPITest(OrderAPITestCase):
    """Test cases for GET /api/orders/restaurant/"""

    def test_owner_sees_incoming_orders(self):
        self._create_order()
        self._create_order(status='preparing')
        other_restaurant = Restaurant.objects.create(name='Mandalay Kitchen', owner=self.other_owner)
        self._create_order(restaurant=other_restaurant)
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse('orders:restaurant-orders'))
        self.assertEqual(len(response.data['data']), 2)

        response = self.client.get(reverse('orders:restaurant-orders'), {'status': 'preparing'})
        self.assertEqual(len(response.data['data']), 1)

    def test_customer_forbidden(self):
        self.client.force_authenticate(self.customer)

        response = self.client.get(reverse('orders:restaurant-orders'))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_order_detail_visibility(self):
        order = self._create_order()

        self.client.force_authenticate(self.owner)
        self.assertEqual(self.client.get(reverse('orders:detail', args=[order.id])).status_code, status.HTTP_200_OK)

        self.client.force_authenticate(self.other_owner)
        self.assertEqual(
            self.client.get(reverse('orders:detail', args=[order.id])).status_code,
            status.HTTP_404_NOT_FOUND
        )


class OrderVerifyAPITest(OrderAPITestCase):
    """Test cases for GET /api/orders/verify/"""

    def setUp(self):
        super().setUp()
        self.order = self._create_order(qr_code=OrderService.build_qr_code(self.restaurant.id))

    def _verify(self, qr_code):
        return self.client.get(reverse('orders:verify'), {'qr_code': qr_code})

    def test_owner_finds_order_by_qr_code(self):
        self.client.force_authenticate(self.owner)

        response = self._verify(self.order.qr_code)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['id'], self.order.id)
        self.assertEqual(response.data['data']['qr_code'], self.order.qr_code)

    def test_unknown_qr_code(self):
        self.client.force_authenticate(self.owner)

        response = self._verify('ALAN-0-0-deadbeef')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_other_owners_order_not_found(self):
        self.client.force_authenticate(self.other_owner)

        response = self._verify(self.order.qr_code)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_admin_finds_any_order(self):
        admin = User.objects.create_user(
            username='admin', email='admin@example.com', password='testpass123', user_type='admin'
        )
        self.client.force_authenticate(admin)

        response = self._verify(self.order.qr_code)

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_customer_forbidden(self):
        self.client.force_authenticate(self.customer)

        response = self._verify(self.order.qr_code)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_missing_qr_code(self):
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse('orders:verify'))

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)

    def test_scan_then_complete_prompts_rating(self):
        self.client.force_authenticate(self.owner)

        order_id = self._verify(self.order.qr_code).data['data']['id']
        response = self.client.patch(
            reverse('orders:update-status', args=[order_id]), {'status': 'completed'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(CustomerNotification.objects.filter(order=self.order, customer=self.customer).exists())


class QRCodeTest(OrderAPITestCase):
    """Test cases for OrderService.build_qr_code"""

    def test_same_millisecond_codes_differ(self):
        frozen = datetime(2024, 5, 1, 12, 0, 0, tzinfo=dt_timezone.utc)
        with mock.patch('apps.orders.services.timezone.now', return_value=frozen):
            first = OrderService.build_qr_code(self.restaurant.id)
            second = OrderService.build_qr_code(self.restaurant.id)

        self.assertNotEqual(first, second)
        self.assertEqual(first.rsplit('-', 1)[0], second.rsplit('-', 1)[0])

    def test_qr_code_is_unique(self):
        self._create_order(qr_code='ALAN-1-1-00000000')
        with self.assertRaises(IntegrityError), transaction.atomic():
            self._create_order(qr_code='ALAN-1-1-00000000')
