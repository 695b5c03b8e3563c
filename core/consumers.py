# core/consumers.py

import json
from channels.generic.websocket import AsyncWebsocketConsumer

from .notifications import user_group_name

"""
The per-user notification socket. Every signed-in page opens one so the
header badge and toasts update live, e.g. when a teacher answers a
booking request or a learner sends a new one.
RT: This entire class handles real-time personal notifications.
"""
class NotificationConsumer(AsyncWebsocketConsumer):

    async def connect(self):
        user = self.scope.get("user")
        if user is None or not user.is_authenticated:
            await self.close()
            return
        self.group_name = user_group_name(user.pk)
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()

    async def disconnect(self, close_code):
        if hasattr(self, 'group_name'):
            await self.channel_layer.group_discard(self.group_name, self.channel_name)

    # Forwards a notification from the channel layer down to the browser
    async def send_notification(self, event):
        await self.send(text_data=json.dumps({'type': 'notification', 'message': event['message']}))
