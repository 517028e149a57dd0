from django.contrib.auth import get_user_model
from django.test import TestCase

from ..models import Profile
from ..selectors import UserSelector

User = get_user_model()


class UserModelTest(TestCase):
    """Test cases for User and Profile"""

    def test_profile_created_with_user(self):
        user = User.objects.create_user(username='mya', email='mya@example.com', password='testpass123')

        self.assertTrue(Profile.objects.filter(user=user).exists())
        self.assertTrue(user.is_customer)

    def test_display_name_prefers_profile_name(self):
        user = User.objects.create_user(username='mya', email='mya.thida@example.com', password='testpass123')
        self.assertEqual(user.display_name, 'mya.thida')

        user.profile.full_name = 'Mya Thida'
        user.profile.save()
        self.assertEqual(UserSelector.get_display_name(user.id), 'Mya Thida')

    def test_display_name_without_email(self):
        first = User.objects.create_user(username='first', password='testpass123')
        second = User.objects.create_user(username='second', password='testpass123')

        self.assertIsNone(first.email)
        self.assertIsNone(second.display_name)
        self.assertEqual(UserSelector.get_display_name(second.id, default='A customer'), 'A customer')

    def test_admin_role(self):
        admin = User.objects.create_user(username='boss', email='boss@example.com', user_type='admin')
        superuser = User.objects.create_superuser(username='root', email='root@example.com', password='x')

        self.assertTrue(admin.is_admin)
        self.assertTrue(superuser.is_admin)
