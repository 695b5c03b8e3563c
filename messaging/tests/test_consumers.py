from unittest import mock

import pytest
from channels.db import database_sync_to_async
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator
from django.contrib.auth.models import AnonymousUser
from django.db import DatabaseError

from config.asgi import application
from messaging.models import ChatMessage
from messaging.services import get_or_create_thread, send_message
from messaging.subscriptions import ThreadSubscription

pytestmark = pytest.mark.django_db(transaction=True)


def _communicator(thread_id, user):
    communicator = WebsocketCommunicator(application, f"/ws/chat/{thread_id}/")
    communicator.scope["user"] = user
    return communicator


@pytest.fixture
def thread(learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    send_message(thread, teacher, 'Welcome to the class!')
    return thread


async def test_participant_gets_snapshot_on_connect(thread, learner):
    communicator = _communicator(thread.pk, learner)
    connected, _ = await communicator.connect()
    assert connected

    frame = await communicator.receive_json_from()
    assert frame['type'] == 'snapshot'
    assert frame['thread']['id'] == thread.pk
    assert [m['text'] for m in frame['thread']['messages']] == ['Welcome to the class!']
    await communicator.disconnect()


async def test_non_participant_is_refused(thread, other_learner):
    communicator = _communicator(thread.pk, other_learner)
    connected, _ = await communicator.connect()
    assert not connected


async def test_anonymous_is_refused(thread):
    communicator = _communicator(thread.pk, AnonymousUser())
    connected, _ = await communicator.connect()
    assert not connected


async def test_message_is_stored_and_broadcast_to_both_sides(thread, learner, teacher):
    learner_socket = _communicator(thread.pk, learner)
    teacher_socket = _communicator(thread.pk, teacher)
    await learner_socket.connect()
    await teacher_socket.connect()
    await learner_socket.receive_json_from()
    await teacher_socket.receive_json_from()

    # The sender in the frame is ignored, the socket's user sends
    await learner_socket.send_json_to({'type': 'chat_message', 'text': 'On my way', 'sender_id': teacher.pk})

    created = await teacher_socket.receive_json_from()
    assert created['type'] == 'message_created'
    assert created['message']['text'] == 'On my way'
    assert created['message']['sender_id'] == learner.pk

    updated = await teacher_socket.receive_json_from()
    assert updated['type'] == 'thread_updated'
    assert updated['thread']['last_message_text'] == 'On my way'

    echoed = await learner_socket.receive_json_from()
    assert echoed['type'] == 'message_created'

    count = await database_sync_to_async(ChatMessage.objects.filter(thread=thread).count)()
    assert count == 2
    await learner_socket.disconnect()
    await teacher_socket.disconnect()


async def test_blank_message_gets_error_frame(thread, learner):
    communicator = _communicator(thread.pk, learner)
    await communicator.connect()
    await communicator.receive_json_from()

    await communicator.send_json_to({'type': 'chat_message', 'text': '   '})
    frame = await communicator.receive_json_from()
    assert frame == {'type': 'error', 'error': 'Message cannot be empty.'}
    await communicator.disconnect()


@pytest.mark.parametrize('frame', [{'type': 'chat_message', 'text': 5}, ['not', 'an', 'object']])
async def test_frame_with_wrong_shape_gets_error_frame(thread, learner, frame):
    communicator = _communicator(thread.pk, learner)
    await communicator.connect()
    await communicator.receive_json_from()

    await communicator.send_json_to(frame)
    assert await communicator.receive_json_from() == {'type': 'error', 'error': 'Malformed frame.'}

    count = await database_sync_to_async(ChatMessage.objects.filter(thread=thread).count)()
    assert count == 1
    await communicator.disconnect()


async def test_database_failure_gets_error_frame(thread, learner):
    communicator = _communicator(thread.pk, learner)
    await communicator.connect()
    await communicator.receive_json_from()

    with mock.patch('messaging.consumers.send_message', side_effect=DatabaseError('db down')):
        await communicator.send_json_to({'type': 'chat_message', 'text': 'Hello?'})
        frame = await communicator.receive_json_from()
    assert frame['type'] == 'error'
    assert 'Could not send your message' in frame['error']
    await communicator.disconnect()


async def test_subscription_stop_is_idempotent():
    layer = get_channel_layer()
    channel = await layer.new_channel()
    async with ThreadSubscription(layer, channel, 42) as subscription:
        assert subscription.active
        await layer.group_send('chat_42', {'type': 'thread_updated', 'thread': {}})
        assert (await layer.receive(channel))['type'] == 'thread_updated'
    assert not subscription.active
    await subscription.stop()
    assert not subscription.active
