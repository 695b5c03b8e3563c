# messaging/consumers.py

import json
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer
from django.db import DatabaseError

from core.notifications import user_group_name
from .exceptions import ChatError
from .models import ChatThread
from .services import backfill_participants_info, messages_for, send_message
from .subscriptions import (
    ThreadSnapshot,
    ThreadSubscription,
    message_created_event,
    new_message_notification,
    thread_updated_event,
)

logger = logging.getLogger(__name__)

"""
The live side of one conversation. A participant who opens a thread
gets a full snapshot first, then every new message and preview change
as they happen. Messages typed into the socket are stored with the
signed-in user as sender, whatever the frame claims.
RT: This entire class is for real-time private chat.
"""
class ChatConsumer(AsyncWebsocketConsumer):

    async def connect(self):
        self.subscription = None
        self.user = self.scope.get('user')
        if self.user is None or not self.user.is_authenticated:
            await self.close()
            return

        self.thread_id = int(self.scope['url_route']['kwargs']['thread_id'])
        self.thread = await self.get_thread_for_participant()
        if self.thread is None:
            await self.close()
            return

        self.subscription = await ThreadSubscription(self.channel_layer, self.channel_name, self.thread_id).start()
        await self.accept()
        snapshot = await self.build_snapshot()
        await self.send(text_data=json.dumps({'type': 'snapshot', 'thread': snapshot.as_dict()}))

    async def disconnect(self, close_code):
        if self.subscription is not None:
            await self.subscription.stop()

    """
    Frames from the browser. Only {"type": "chat_message", "text": ...}
    is understood; a refused send comes back as an error frame to this
    socket alone.
    """
    async def receive(self, text_data=None, bytes_data=None):
        try:
            data = json.loads(text_data or '{}')
        except ValueError:
            await self.send_error("Malformed frame.")
            return
        if not isinstance(data, dict):
            await self.send_error("Malformed frame.")
            return

        if data.get('type', 'chat_message') != 'chat_message':
            await self.send_error(f"Unsupported frame type: {data.get('type')}")
            return

        text = data.get('text', data.get('message', ''))
        if not isinstance(text, str):
            await self.send_error("Malformed frame.")
            return

        try:
            events, receiver_id, notification = await self.store_message(text)
        except ChatError as e:
            await self.send_error(str(e))
            return
        except DatabaseError:
            logger.exception("Storing a websocket message in thread %s failed", self.thread_id)
            await self.send_error("Could not send your message. Please try again.")
            return

        for event in events:
            await self.channel_layer.group_send(self.subscription.group_name, event)
        await self.channel_layer.group_send(
            user_group_name(receiver_id),
            {'type': 'send_notification', 'message': notification},
        )

    async def send_error(self, error):
        await self.send(text_data=json.dumps({'type': 'error', 'error': error}))

    async def message_created(self, event):
        await self.send(text_data=json.dumps({'type': 'message_created', 'message': event['message']}))

    async def thread_updated(self, event):
        await self.send(text_data=json.dumps({'type': 'thread_updated', 'thread': event['thread']}))

    @database_sync_to_async
    def get_thread_for_participant(self):
        return ChatThread.objects.filter(pk=self.thread_id, participants=self.user).first()

    @database_sync_to_async
    def build_snapshot(self):
        thread = ChatThread.objects.get(pk=self.thread_id)
        return ThreadSnapshot.from_thread(
            thread,
            messages=messages_for(thread),
            participants_info=backfill_participants_info(thread),
        )

    @database_sync_to_async
    def store_message(self, text):
        thread = ChatThread.objects.get(pk=self.thread_id)
        message = send_message(thread, self.user, text)
        logger.debug("Message %s stored in thread %s over websocket", message.pk, thread.pk)
        events = [message_created_event(message), thread_updated_event(thread)]
        return events, message.receiver_id, new_message_notification(message)
