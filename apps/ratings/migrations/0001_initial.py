# Initial schema for restaurant ratings

import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('orders', '0001_initial'),
        ('restaurants', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='RestaurantRating',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Last updated at')),
                ('rating', models.DecimalField(decimal_places=1, help_text='Rating from 1.0 to 5.0', max_digits=2, validators=[django.core.validators.MinValueValidator(Decimal('1.0')), django.core.validators.MaxValueValidator(Decimal('5.0'))])),
                ('customer', models.ForeignKey(help_text='Customer', on_delete=django.db.models.deletion.CASCADE, related_name='restaurant_ratings', to=settings.AUTH_USER_MODEL)),
                ('order', models.ForeignKey(blank=True, help_text='Rated order', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='ratings', to='orders.order')),
                ('restaurant', models.ForeignKey(help_text='Restaurant', on_delete=django.db.models.deletion.CASCADE, related_name='ratings', to='restaurants.restaurant')),
            ],
            options={
                'verbose_name': 'Restaurant rating',
                'verbose_name_plural': 'Restaurant ratings',
                'db_table': 'restaurant_ratings',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['restaurant', 'customer'], name='rating_rest_customer_idx')],
                'constraints': [models.UniqueConstraint(fields=('restaurant', 'customer', 'order'), name='unique_rating_per_restaurant_customer_order')],
            },
        ),
    ]
