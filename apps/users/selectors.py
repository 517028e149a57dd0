"""
User selectors - read-only queries
"""
from django.contrib.auth import get_user_model

User = get_user_model()


class UserSelector:
    """Read-only queries for users"""

    @staticmethod
    def get_user_by_id(user_id):
        if not user_id:
            return None
        return User.objects.select_related('profile').filter(id=user_id, is_active=True).first()

    @staticmethod
    def get_display_name(user_id, default=None):
        """
        Name shown to other parties: profile name, else email local part
        """
        user = UserSelector.get_user_by_id(user_id)
        if user is None:
            return default
        return user.display_name or default
