# Initial schema for restaurants and menus

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Restaurant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Last updated at')),
                ('name', models.CharField(help_text='Display name', max_length=200)),
                ('slug', models.SlugField(blank=True, help_text='URL slug', max_length=220, unique=True)),
                ('description', models.TextField(blank=True, help_text='Description', null=True)),
                ('cuisine', models.CharField(blank=True, help_text='Cuisine', max_length=100, null=True)),
                ('phone_number', models.CharField(blank=True, help_text='Phone number', max_length=20, null=True)),
                ('address', models.TextField(blank=True, help_text='Address', null=True)),
                ('image_url', models.URLField(blank=True, help_text='Cover image URL', null=True)),
                ('rating', models.DecimalField(blank=True, decimal_places=1, help_text='Displayed rating', max_digits=2, null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)])),
                ('is_active', models.BooleanField(default=True, help_text='Active')),
                ('owner', models.ForeignKey(blank=True, help_text='Owner', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='owned_restaurants', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Restaurant',
                'verbose_name_plural': 'Restaurants',
                'db_table': 'restaurants',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='MenuItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Last updated at')),
                ('name', models.CharField(help_text='Dish name', max_length=200)),
                ('description', models.TextField(blank=True, help_text='Description', null=True)),
                ('category', models.CharField(blank=True, help_text='Menu category', max_length=100, null=True)),
                ('price', models.DecimalField(decimal_places=2, help_text='Price', max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('image_url', models.URLField(blank=True, help_text='Image URL', null=True)),
                ('is_available', models.BooleanField(default=True, help_text='Available to order')),
                ('restaurant', models.ForeignKey(help_text='Restaurant', on_delete=django.db.models.deletion.CASCADE, related_name='menu_items', to='restaurants.restaurant')),
            ],
            options={
                'verbose_name': 'Menu item',
                'verbose_name_plural': 'Menu items',
                'db_table': 'menu_items',
                'ordering': ['restaurant', 'category', 'name'],
                'indexes': [models.Index(fields=['restaurant', 'is_available'], name='menu_item_rest_avail_idx')],
            },
        ),
    ]
