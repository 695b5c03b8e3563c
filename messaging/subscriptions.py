# messaging/subscriptions.py

from dataclasses import dataclass, asdict
from typing import Optional

from core.notifications import broadcast_to_thread, notify_user, thread_group_name

"""
Everything a chat socket pushes to the browser is built here: immutable
snapshots of a thread and its messages, the two broadcast events, and
the handle that ties one socket to one thread's channel group.
RT: The chat consumer and the HTTP send view share these so both paths
produce identical frames.
"""


def _iso(value):
    return value.isoformat() if value else None


@dataclass(frozen=True)
class MessageSnapshot:
    id: int
    thread_id: int
    sender_id: int
    receiver_id: int
    text: str
    timestamp: Optional[str]
    is_read: bool

    @classmethod
    def from_message(cls, message):
        return cls(
            id=message.pk,
            thread_id=message.thread_id,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            text=message.text,
            timestamp=_iso(message.timestamp),
            is_read=message.is_read,
        )

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ThreadSnapshot:
    id: int
    participant_ids: tuple
    participants_info: dict
    last_message_text: str
    last_message_sender_id: Optional[int]
    last_message_at: Optional[str]
    updated_at: Optional[str]
    messages: tuple = ()

    @classmethod
    def from_thread(cls, thread, messages=(), participants_info=None):
        return cls(
            id=thread.pk,
            participant_ids=tuple(thread.participant_ids),
            participants_info=participants_info if participants_info is not None else dict(thread.participants_info),
            last_message_text=thread.last_message_text,
            last_message_sender_id=thread.last_message_sender_id,
            last_message_at=_iso(thread.last_message_at),
            updated_at=_iso(thread.updated_at),
            messages=tuple(MessageSnapshot.from_message(m) for m in messages),
        )

    def as_dict(self):
        return asdict(self)


def message_created_event(message):
    return {'type': 'message_created', 'message': MessageSnapshot.from_message(message).as_dict()}


# The preview only, without the message list
def thread_updated_event(thread):
    return {'type': 'thread_updated', 'thread': ThreadSnapshot.from_thread(thread).as_dict()}


def new_message_notification(message):
    return {
        'text': f"New message from {message.sender.name or message.sender.email}",
        'thread_id': message.thread_id,
    }


"""
Sync path used by views: pushes a stored message to the thread's group
and pings the receiver's notification socket.
"""
def publish_message(message):
    thread = message.thread
    broadcast_to_thread(thread.pk, message_created_event(message))
    broadcast_to_thread(thread.pk, thread_updated_event(thread))
    notify_user(message.receiver_id, new_message_notification(message))


"""
The explicit lifetime of one socket's interest in one thread. start()
joins the chat_<id> group, stop() leaves it and may be called any
number of times. Also usable as `async with ThreadSubscription(...)`.
RT: Owned by ChatConsumer for the life of the connection.
"""
class ThreadSubscription:

    def __init__(self, channel_layer, channel_name, thread_id):
        self.channel_layer = channel_layer
        self.channel_name = channel_name
        self.thread_id = thread_id
        self.group_name = thread_group_name(thread_id)
        self.active = False

    async def start(self):
        if not self.active:
            await self.channel_layer.group_add(self.group_name, self.channel_name)
            self.active = True
        return self

    async def stop(self):
        if self.active:
            await self.channel_layer.group_discard(self.group_name, self.channel_name)
            self.active = False

    async def __aenter__(self):
        return await self.start()

    async def __aexit__(self, exc_type, exc, tb):
        await self.stop()
