from django.db import models
from django.core.validators import MinValueValidator
from apps.api.mixins import TimestampMixin


class Order(TimestampMixin):
    """
    Paid order placed by a customer at one restaurant
    """
    ORDER_STATUS_CHOICES = [
        ('paid', 'Paid'),
        ('preparing', 'Preparing'),
        ('ready', 'Ready'),
        ('served', 'Served'),
        ('completed', 'Completed'),
        ('cancelled', 'Cancelled'),
    ]

    ORDER_TYPE_CHOICES = [
        ('dine_in', 'Dine in'),
        ('takeaway', 'Takeaway'),
    ]

    PAYMENT_METHOD_CHOICES = [
        ('mpu', 'MPU'),
        ('kbzpay', 'KBZPay'),
        ('wavepay', 'WavePay'),
    ]

    # Statuses after which the customer is asked for a rating
    RATEABLE_STATUSES = ('served', 'completed')

    customer = models.ForeignKey(
        'users.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
        help_text="Customer"
    )
    restaurant = models.ForeignKey(
        'restaurants.Restaurant',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
        help_text="Restaurant"
    )

    order_type = models.CharField(
        max_length=20,
        choices=ORDER_TYPE_CHOICES,
        default='dine_in',
        help_text="Order type"
    )
    payment_method = models.CharField(
        max_length=20,
        choices=PAYMENT_METHOD_CHOICES,
        help_text="Payment method"
    )
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Total amount"
    )
    status = models.CharField(
        max_length=20,
        choices=ORDER_STATUS_CHOICES,
        default='paid',
        help_text="Status"
    )

    qr_code = models.CharField(max_length=100, unique=True, null=True, blank=True, help_text="Pickup QR payload")
    # Snapshot of the cart at payment time: [{menu_item_id, name, price, quantity}]
    order_items = models.JSONField(default=list, blank=True, help_text="Ordered items")
    completed_at = models.DateTimeField(null=True, blank=True, help_text="Completed at")

    class Meta:
        db_table = 'orders'
        verbose_name = 'Order'
        verbose_name_plural = 'Orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['customer', '-created_at'], name='order_customer_created_idx'),
            models.Index(fields=['restaurant', 'status'], name='order_restaurant_status_idx'),
        ]

    def __str__(self):
        return f"Order #{self.id} - {self.get_status_display()}"

    @property
    def is_rateable(self):
        return self.status in self.RATEABLE_STATUSES
