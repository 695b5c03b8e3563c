# messaging/views.py

import logging

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.shortcuts import render, get_object_or_404, redirect
from django.views.decorators.http import require_POST

from .exceptions import ChatError
from .forms import MessageForm
from .models import ChatThread
from .services import (
    backfill_participants_info,
    get_or_create_thread,
    mark_thread_read,
    messages_for,
    other_participant,
    send_message,
    threads_for,
)
from .subscriptions import publish_message

logger = logging.getLogger(__name__)

User = get_user_model()


"""
The inbox. Without a thread_id it's just the list of conversations;
with one it also shows that conversation and marks what was sent to
the viewer as read. Someone who isn't in the thread is sent back to
the plain inbox.
"""
@login_required
def inbox_view(request, thread_id=None):
    my_threads = threads_for(request.user)

    selected_thread = None
    thread_messages = []
    if thread_id:
        selected_thread = get_object_or_404(ChatThread, pk=thread_id)
        if not selected_thread.has_participant(request.user):
            return redirect('inbox')
        selected_thread.info = backfill_participants_info(selected_thread)
        selected_thread.other_user = other_participant(selected_thread, request.user)
        mark_thread_read(selected_thread, request.user)
        thread_messages = messages_for(selected_thread)

    context = {
        'my_threads': my_threads,
        'selected_thread': selected_thread,
        'thread_messages': thread_messages,
        'form': MessageForm(),
    }
    return render(request, 'messaging/inbox.html', context)


# "Message" button on profiles and session pages
@login_required
@require_POST
def start_chat_view(request, user_id):
    other = get_object_or_404(User, pk=user_id)
    try:
        thread, _ = get_or_create_thread(request.user, other)
    except ChatError as e:
        messages.error(request, str(e))
        return redirect('inbox')
    except DatabaseError as e:
        logger.exception("Could not open a chat between %s and %s", request.user.pk, user_id)
        messages.error(request, f"Could not start the chat: {e}")
        return redirect('inbox')
    return redirect('conversation', thread_id=thread.pk)


"""
Form fallback for sending when the websocket isn't connected. The
stored message is broadcast exactly as the socket path would, so other
open tabs still see it live.
"""
@login_required
@require_POST
def send_message_view(request, thread_id):
    thread = get_object_or_404(ChatThread, pk=thread_id)
    text = request.POST.get('text', '')
    try:
        message = send_message(thread, request.user, text)
    except ChatError as e:
        messages.error(request, str(e))
        return redirect('conversation', thread_id=thread.pk)
    except DatabaseError as e:
        logger.exception("Sending a message to thread %s failed", thread.pk)
        messages.error(request, f"Could not send message: {e}")
        return redirect('conversation', thread_id=thread.pk)

    try:
        publish_message(message)
    except Exception:
        logger.exception("Message %s stored but live delivery to thread %s failed", message.pk, thread.pk)
    return redirect('conversation', thread_id=thread.pk)
