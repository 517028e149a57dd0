# Initial schema for customer and owner notifications

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('blog', '0001_initial'),
        ('orders', '0001_initial'),
        ('restaurants', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CustomerNotification',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Last updated at')),
                ('title', models.CharField(help_text='Title', max_length=200)),
                ('message', models.TextField(help_text='Message')),
                ('status', models.CharField(choices=[('unread', 'Unread'), ('read', 'Read')], default='unread', help_text='Read status', max_length=10)),
                ('reply_content', models.TextField(blank=True, help_text='Full reply text', null=True)),
                ('restaurant_name', models.CharField(blank=True, help_text='Replying restaurant', max_length=200, null=True)),
                ('blog_post', models.ForeignKey(blank=True, help_text='Related blog post', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='customer_notifications', to='blog.blogpost')),
                ('customer', models.ForeignKey(help_text='Recipient', on_delete=django.db.models.deletion.CASCADE, related_name='notifications', to=settings.AUTH_USER_MODEL)),
                ('order', models.ForeignKey(blank=True, help_text='Related order', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='notifications', to='orders.order')),
            ],
            options={
                'verbose_name': 'Customer notification',
                'verbose_name_plural': 'Customer notifications',
                'db_table': 'notifications',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['customer', 'status'], name='notif_customer_status_idx'),
                    models.Index(fields=['customer', '-created_at'], name='notif_customer_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='OwnerNotification',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Last updated at')),
                ('title', models.CharField(help_text='Title', max_length=200)),
                ('message', models.TextField(help_text='Message')),
                ('comment_content', models.TextField(blank=True, default='', help_text='Full comment text')),
                ('status', models.CharField(choices=[('unread', 'Unread'), ('read', 'Read')], default='unread', help_text='Read status', max_length=10)),
                ('comment', models.OneToOneField(help_text='Source comment', on_delete=django.db.models.deletion.CASCADE, related_name='owner_notification', to='blog.blogcomment')),
                ('customer', models.ForeignKey(blank=True, help_text='Commenting customer', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('post', models.ForeignKey(help_text='Blog post', on_delete=django.db.models.deletion.CASCADE, related_name='owner_notifications', to='blog.blogpost')),
                ('restaurant', models.ForeignKey(help_text='Restaurant', on_delete=django.db.models.deletion.CASCADE, related_name='comment_notifications', to='restaurants.restaurant')),
            ],
            options={
                'verbose_name': 'Owner notification',
                'verbose_name_plural': 'Owner notifications',
                'db_table': 'blog_comment_notifications',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['restaurant', 'status'], name='owner_notif_rest_status_idx')],
            },
        ),
    ]
