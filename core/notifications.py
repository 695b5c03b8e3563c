# core/notifications.py

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

"""
Small helpers around the channel layer so views, services and signal
handlers can push real-time updates without repeating the group naming.
RT: Every server-initiated push in the project goes through here.
"""


def user_group_name(user_id):
    return f'notifications_for_user_{user_id}'


def thread_group_name(thread_id):
    return f'chat_{thread_id}'


# Sends a notification to every open tab of one user
def notify_user(user_id, payload):
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return
    async_to_sync(channel_layer.group_send)(
        user_group_name(user_id),
        {'type': 'send_notification', 'message': payload},
    )


# Sends an event to everyone subscribed to a chat thread
def broadcast_to_thread(thread_id, event):
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return
    async_to_sync(channel_layer.group_send)(thread_group_name(thread_id), event)
