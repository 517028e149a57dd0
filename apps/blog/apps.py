from django.apps import AppConfig


class BlogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.blog'
    verbose_name = 'Blog'

    def ready(self):
        """Import signal handlers when app is ready"""
        from . import signals  # noqa: F401
