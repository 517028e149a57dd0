"""
WebSocket consumer for the live notification feed.

Customers receive their own notifications; owners additionally receive
blog comment notifications for every restaurant they own, and admins receive
those of every restaurant. Owned restaurants are resolved on connect, so an
owner who takes over a restaurant must reconnect to get its notifications.
"""

import logging
from channels.generic.websocket import AsyncJsonWebsocketConsumer
from channels.db import database_sync_to_async
from apps.restaurants.selectors import RestaurantSelector
from .services import OWNER_ADMIN_GROUP, customer_group_name, restaurant_group_name

logger = logging.getLogger(__name__)


class NotificationConsumer(AsyncJsonWebsocketConsumer):
    """
    Close codes:
        4001 - missing or invalid token
        4000 - unexpected error while subscribing
    """

    async def connect(self):
        self.notification_groups = []
        self.user = self.scope.get('user')

        if not self.user or self.user.is_anonymous:
            await self.close(code=4001)
            return

        try:
            await self.subscribe()
            await self.accept()
            logger.info(f"User {self.user.id} ({self.user.user_type}) connected to notifications")
        except Exception:
            logger.exception(f"Error subscribing user {self.user.id} to notifications")
            await self.close(code=4000)

    async def disconnect(self, close_code):
        for group_name in getattr(self, 'notification_groups', []):
            await self.channel_layer.group_discard(group_name, self.channel_name)

        user = getattr(self, 'user', None)
        if user and not user.is_anonymous:
            logger.info(f"User {user.id} disconnected from notifications ({close_code})")

    async def subscribe(self):
        groups = [customer_group_name(self.user.id)]
        if self.user.is_admin:
            groups.append(OWNER_ADMIN_GROUP)
        elif self.user.is_owner:
            restaurant_ids = await self.get_owned_restaurant_ids()
            groups.extend(restaurant_group_name(restaurant_id) for restaurant_id in restaurant_ids)

        for group_name in groups:
            await self.channel_layer.group_add(group_name, self.channel_name)
            self.notification_groups.append(group_name)

    async def receive_json(self, content):
        message_type = content.get('type')

        if message_type == 'ping':
            await self.send_json({'type': 'pong'})
        else:
            await self.send_json({
                'type': 'error',
                'data': {'message': f"Unknown message type: {message_type}"}
            })

    async def notification(self, event):
        """Forward a published notification to the socket."""
        await self.send_json({
            'type': 'notification',
            'data': {
                **event['notification'],
                'audience': event.get('audience'),
            }
        })

    @database_sync_to_async
    def get_owned_restaurant_ids(self):
        return RestaurantSelector().get_owned_restaurant_ids(self.user)
