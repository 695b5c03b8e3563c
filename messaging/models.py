# messaging/models.py

from django.db import models
from django.conf import settings

"""
A private conversation between exactly two users. Besides who is in it,
the thread carries a denormalized preview of its latest message so the
inbox can be listed without touching the message table, and a copy of
each participant's name and avatar taken when the thread was opened.
RT: The thread id names the chat_<id> channel group.
"""
class ChatThread(models.Model):
    participants = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name='chat_threads')
    # {"<user id>": {"name": ..., "avatar_url": ...}}
    participants_info = models.JSONField(default=dict, blank=True)
    last_message_text = models.TextField(blank=True)
    last_message_sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
    )
    last_message_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-updated_at']

    def __str__(self):
        return f"Thread {self.pk} ({', '.join(str(i) for i in self.participant_ids)})"

    @property
    def participant_ids(self):
        return sorted(self.participants.values_list('pk', flat=True))

    def has_participant(self, user):
        return self.participants.filter(pk=user.pk).exists()


"""
One message inside a ChatThread. Messages are only ever appended; the
timestamp is set by the server on insert and is what the conversation
is ordered by.
RT: Created by the chat websocket and by the send form, then broadcast
to the thread's group.
"""
class ChatMessage(models.Model):
    thread = models.ForeignKey(ChatThread, on_delete=models.CASCADE, related_name='messages')
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='sent_chat_messages')
    receiver = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='received_chat_messages')
    text = models.TextField()
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)
    is_read = models.BooleanField(default=False)

    class Meta:
        ordering = ['timestamp', 'id']

    def __str__(self):
        return f"Message from {self.sender_id} in thread {self.thread_id}"
