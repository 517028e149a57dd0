"""
JWT authentication for WebSocket connections.

The access token is passed as a query parameter: ws/notifications/?token=<jwt>
"""

import logging
from urllib.parse import parse_qs

from channels.db import database_sync_to_async
from channels.middleware import BaseMiddleware
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)
User = get_user_model()


@database_sync_to_async
def get_user_from_token(token_key):
    """
    Returns the active user the access token belongs to, or None
    """
    try:
        access_token = AccessToken(token_key)
    except (InvalidToken, TokenError) as e:
        logger.warning(f"Invalid JWT token on websocket: {e}")
        return None

    user_id = access_token.get(api_settings.USER_ID_CLAIM)
    if not user_id:
        return None

    return User.objects.filter(id=user_id, is_active=True).first()


class JWTAuthMiddleware(BaseMiddleware):
    """
    Puts the token's user (or AnonymousUser) into ``scope['user']``
    """

    async def __call__(self, scope, receive, send):
        query_params = parse_qs(scope.get('query_string', b'').decode('utf-8'))
        token = query_params.get('token', [None])[0]

        user = await get_user_from_token(token) if token else None
        scope['user'] = user or AnonymousUser()

        return await super().__call__(scope, receive, send)


def JWTAuthMiddlewareStack(inner):
    return JWTAuthMiddleware(inner)
