"""
User services - profile updates
"""
import logging
from django.db import transaction
from .models import Profile

logger = logging.getLogger(__name__)


class UserService:
    """Business logic for the current user's account"""

    @transaction.atomic
    def update_me(self, user, data):
        """
        Update email and profile fields of the current user

        Args:
            user: authenticated User
            data: validated data from UserUpdateSerializer
        """
        if 'email' in data:
            user.email = data['email'] or None
            user.save(update_fields=['email', 'updated_at'])

        profile, _ = Profile.objects.get_or_create(user=user)
        profile_fields = [field for field in ('full_name', 'phone_number', 'avatar_url') if field in data]
        for field in profile_fields:
            setattr(profile, field, data[field])
        if profile_fields:
            profile.save(update_fields=profile_fields + ['updated_at'])

        logger.info(f"User {user.id} updated profile fields: {', '.join(profile_fields) or '-'}")
        return user
