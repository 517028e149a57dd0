from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils.text import slugify
from apps.api.mixins import TimestampMixin


class Restaurant(TimestampMixin):
    """
    Restaurant owned by a single owner account
    """
    owner = models.ForeignKey(
        'users.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='owned_restaurants',
        help_text="Owner"
    )

    name = models.CharField(max_length=200, help_text="Display name")
    slug = models.SlugField(max_length=220, unique=True, blank=True, help_text="URL slug")
    description = models.TextField(blank=True, null=True, help_text="Description")
    cuisine = models.CharField(max_length=100, blank=True, null=True, help_text="Cuisine")

    phone_number = models.CharField(max_length=20, blank=True, null=True, help_text="Phone number")
    address = models.TextField(blank=True, null=True, help_text="Address")
    image_url = models.URLField(blank=True, null=True, help_text="Cover image URL")

    # Seeded by an admin; overwritten by the customer average once the first
    # customer rating arrives (see apps.ratings.services.RatingAggregator).
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
        help_text="Displayed rating"
    )

    is_active = models.BooleanField(default=True, help_text="Active")

    class Meta:
        db_table = 'restaurants'
        verbose_name = 'Restaurant'
        verbose_name_plural = 'Restaurants'
        ordering = ['name']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self._build_unique_slug()
        super().save(*args, **kwargs)

    def _build_unique_slug(self):
        base = slugify(self.name)[:200] or 'restaurant'
        slug, suffix = base, 2
        while Restaurant.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base}-{suffix}"
            suffix += 1
        return slug


class MenuItem(TimestampMixin):
    """
    Dish on a restaurant menu
    """
    restaurant = models.ForeignKey(
        Restaurant,
        on_delete=models.CASCADE,
        related_name='menu_items',
        help_text="Restaurant"
    )
    name = models.CharField(max_length=200, help_text="Dish name")
    description = models.TextField(blank=True, null=True, help_text="Description")
    category = models.CharField(max_length=100, blank=True, null=True, help_text="Menu category")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Price"
    )
    image_url = models.URLField(blank=True, null=True, help_text="Image URL")
    is_available = models.BooleanField(default=True, help_text="Available to order")

    class Meta:
        db_table = 'menu_items'
        verbose_name = 'Menu item'
        verbose_name_plural = 'Menu items'
        ordering = ['restaurant', 'category', 'name']
        indexes = [
            models.Index(fields=['restaurant', 'is_available'], name='menu_item_rest_avail_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.restaurant.name})"
