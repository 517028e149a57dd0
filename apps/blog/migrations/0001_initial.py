# Initial schema for blog posts and comments

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
            name='BlogPost',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Last updated at')),
                ('title', models.CharField(help_text='Title', max_length=255)),
                ('slug', models.SlugField(blank=True, help_text='Derived from title', max_length=255)),
                ('content', models.TextField(help_text='Content')),
                ('excerpt', models.TextField(blank=True, help_text='Short teaser for listings', null=True)),
                ('hero_image_url', models.URLField(blank=True, help_text='Cover image URL', null=True)),
                ('is_published', models.BooleanField(default=True, help_text='Visible to customers')),
                ('is_pinned', models.BooleanField(default=False, help_text='Pinned to the top')),
                ('author', models.ForeignKey(blank=True, help_text='Author', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='blog_posts', to=settings.AUTH_USER_MODEL)),
                ('restaurant', models.ForeignKey(blank=True, help_text='Restaurant', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='blog_posts', to='restaurants.restaurant')),
            ],
            options={
                'verbose_name': 'Blog post',
                'verbose_name_plural': 'Blog posts',
                'db_table': 'blog_posts',
                'ordering': ['-is_pinned', '-created_at'],
                'indexes': [
                    models.Index(fields=['restaurant', '-created_at'], name='blog_post_rest_created_idx'),
                    models.Index(fields=['is_published', '-created_at'], name='blog_post_pub_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BlogComment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Last updated at')),
                ('content', models.TextField(help_text='Comment text')),
                ('is_reply', models.BooleanField(default=False, help_text='Is a reply')),
                ('is_edited', models.BooleanField(default=False, help_text='Edited by the author')),
                ('is_deleted', models.BooleanField(default=False, help_text='Hidden (soft deleted)')),
                ('author', models.ForeignKey(help_text='Author', on_delete=django.db.models.deletion.CASCADE, related_name='blog_comments', to=settings.AUTH_USER_MODEL)),
                ('parent', models.ForeignKey(blank=True, help_text='Parent comment (replies only)', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='replies', to='blog.blogcomment')),
                ('post', models.ForeignKey(help_text='Blog post', on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='blog.blogpost')),
            ],
            options={
                'verbose_name': 'Blog comment',
                'verbose_name_plural': 'Blog comments',
                'db_table': 'blog_comments',
                'ordering': ['created_at', 'id'],
                'indexes': [
                    models.Index(fields=['post', 'created_at'], name='blog_comment_post_created_idx'),
                    models.Index(fields=['author', '-created_at'], name='blog_comment_author_idx'),
                ],
            },
        ),
    ]
