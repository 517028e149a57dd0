from django.db import models
from django.contrib.auth.models import AbstractUser
from apps.api.mixins import TimestampMixin


class User(AbstractUser, TimestampMixin):
    """
    Custom user supporting three roles: customer, restaurant owner, admin
    """
    USER_TYPE_CHOICES = [
        ('customer', 'Customer'),
        ('owner', 'Restaurant owner'),
        ('admin', 'Administrator'),
    ]

    user_type = models.CharField(
        max_length=20,
        choices=USER_TYPE_CHOICES,
        default='customer',
        help_text="Role"
    )
    email = models.EmailField(unique=True, blank=True, null=True, help_text="Email")

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.username} ({self.get_user_type_display()})"

    def save(self, *args, **kwargs):
        # UserManager stores a missing email as '', which would collide on the unique index
        if not self.email:
            self.email = None
        super().save(*args, **kwargs)

    @property
    def is_customer(self):
        return self.user_type == 'customer'

    @property
    def is_owner(self):
        return self.user_type == 'owner'

    @property
    def is_admin(self):
        return self.user_type == 'admin' or self.is_superuser

    @property
    def display_name(self):
        """
        Profile full name, else the part of the email before '@', else None
        """
        profile = getattr(self, 'profile', None)
        if profile is not None and profile.full_name:
            return profile.full_name
        if self.email:
            return self.email.split('@', 1)[0]
        return None


class Profile(TimestampMixin):
    """
    Public profile shown next to comments and in owner notifications
    """
    user = models.OneToOneField(
        User,
        on_delete=models.CASCADE,
        related_name='profile',
        help_text="User"
    )
    full_name = models.CharField(max_length=150, blank=True, default='', help_text="Display name")
    phone_number = models.CharField(max_length=20, blank=True, null=True, help_text="Phone number")
    avatar_url = models.URLField(blank=True, null=True, help_text="Avatar image URL")

    class Meta:
        db_table = 'profiles'
        verbose_name = 'Profile'
        verbose_name_plural = 'Profiles'

    def __str__(self):
        return self.full_name or f"Profile of {self.user.username}"
