# Initial schema for orders

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('restaurants', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Last updated at')),
                ('order_type', models.CharField(choices=[('dine_in', 'Dine in'), ('takeaway', 'Takeaway')], default='dine_in', help_text='Order type', max_length=20)),
                ('payment_method', models.CharField(choices=[('mpu', 'MPU'), ('kbzpay', 'KBZPay'), ('wavepay', 'WavePay')], help_text='Payment method', max_length=20)),
                ('total_amount', models.DecimalField(decimal_places=2, help_text='Total amount', max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ('status', models.CharField(choices=[('paid', 'Paid'), ('preparing', 'Preparing'), ('ready', 'Ready'), ('served', 'Served'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='paid', help_text='Status', max_length=20)),
                ('qr_code', models.CharField(blank=True, help_text='Pickup QR payload', max_length=100, null=True, unique=True)),
                ('order_items', models.JSONField(blank=True, default=list, help_text='Ordered items')),
                ('completed_at', models.DateTimeField(blank=True, help_text='Completed at', null=True)),
                ('customer', models.ForeignKey(blank=True, help_text='Customer', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='orders', to=settings.AUTH_USER_MODEL)),
                ('restaurant', models.ForeignKey(blank=True, help_text='Restaurant', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='orders', to='restaurants.restaurant')),
            ],
            options={
                'verbose_name': 'Order',
                'verbose_name_plural': 'Orders',
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['customer', '-created_at'], name='order_customer_created_idx'),
                    models.Index(fields=['restaurant', 'status'], name='order_restaurant_status_idx'),
                ],
            },
        ),
    ]
