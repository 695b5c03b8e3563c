# messaging/services.py

import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.utils import timezone

from .exceptions import EmptyMessage, NotParticipant, SelfChatNotAllowed
from .models import ChatMessage, ChatThread

logger = logging.getLogger(__name__)

User = get_user_model()


"""
Finds the one thread two users share, or opens it. The lookup walks the
threads of user_a for one that also holds user_b, so (A, B) and (B, A)
land on the same thread.

The read and the create are separate steps with no lock between them;
two users opening a chat with each other at the same moment can end up
with two threads.
"""
def get_or_create_thread(user_a, user_b):
    if user_a.pk == user_b.pk:
        raise SelfChatNotAllowed()

    existing = ChatThread.objects.filter(participants=user_a).filter(participants=user_b).order_by('created_at').first()
    if existing is not None:
        logger.debug("Reusing chat thread %s for %s and %s", existing.pk, user_a.pk, user_b.pk)
        return existing, False

    first, second = sorted((user_a, user_b), key=lambda u: u.pk)
    thread = ChatThread.objects.create(
        participants_info={
            str(first.pk): first.display_info,
            str(second.pk): second.display_info,
        },
    )
    thread.participants.set([first, second])
    logger.info("Chat thread %s opened between %s and %s", thread.pk, first.pk, second.pk)
    return thread, True


def other_participant(thread, user):
    return thread.participants.exclude(pk=user.pk).first()


"""
Appends a message and then refreshes the thread's preview. These are
two separate writes: if the second one fails the message is stored but
the inbox preview stays one message behind until the next send.
"""
def send_message(thread, sender, text):
    text = (text or '').strip()
    if not text:
        raise EmptyMessage()
    if not thread.has_participant(sender):
        raise NotParticipant()

    receiver = other_participant(thread, sender)
    if receiver is None:
        raise NotParticipant("This chat has no one to receive the message.")

    message = ChatMessage.objects.create(thread=thread, sender=sender, receiver=receiver, text=text)

    thread.last_message_text = text
    thread.last_message_sender = sender
    thread.last_message_at = message.timestamp or timezone.now()
    try:
        thread.save(update_fields=['last_message_text', 'last_message_sender', 'last_message_at', 'updated_at'])
    except DatabaseError:
        logger.exception("Message %s stored but thread %s preview was not updated", message.pk, thread.pk)
        raise
    return message


"""
Returns a fresh copy of the thread's participants_info with any missing
or nameless entry filled in from the user table. Someone whose account
is gone shows up as "User (<id>)". Nothing is saved back to the thread.
"""
def backfill_participants_info(thread):
    info = {key: dict(value) for key, value in (thread.participants_info or {}).items()}
    wanted = {str(pk) for pk in thread.participant_ids} | set(info)
    missing = [key for key in wanted if not (info.get(key) or {}).get('name')]
    if not missing:
        return info

    users = {str(u.pk): u for u in User.objects.filter(pk__in=[int(k) for k in missing if k.isdigit()])}
    for key in missing:
        user = users.get(key)
        if user is not None:
            info[key] = user.display_info
        else:
            info[key] = {'name': f"User ({key[:6]})", 'avatar_url': (info.get(key) or {}).get('avatar_url', '')}
    return info


"""
The inbox list, most recently active first. Each thread comes back with
two extra attributes for the template: `info` (the backfilled names)
and `other_user` (the other participant, or None if they're gone).
"""
def threads_for(user):
    threads = list(user.chat_threads.prefetch_related('participants').order_by('-updated_at'))
    for thread in threads:
        thread.info = backfill_participants_info(thread)
        thread.other_user = next((p for p in thread.participants.all() if p.pk != user.pk), None)
    return threads


def messages_for(thread):
    return list(thread.messages.select_related('sender').order_by('timestamp', 'id'))


# Marks everything the reader has been sent in this thread as read
def mark_thread_read(thread, reader):
    return ChatMessage.objects.filter(thread=thread, receiver=reader, is_read=False).update(is_read=True)
