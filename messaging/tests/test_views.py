from unittest import mock

from django.urls import reverse

from messaging.models import ChatMessage, ChatThread
from messaging.services import get_or_create_thread, send_message


def test_start_chat_creates_thread_once(learner_client, teacher):
    first = learner_client.post(reverse('start_chat', args=[teacher.pk]))
    second = learner_client.post(reverse('start_chat', args=[teacher.pk]))
    thread = ChatThread.objects.get()
    assert first.url == second.url == reverse('conversation', args=[thread.pk])


def test_start_chat_with_self_is_refused(learner_client, learner):
    response = learner_client.post(reverse('start_chat', args=[learner.pk]))
    assert response.url == reverse('inbox')
    assert not ChatThread.objects.exists()


def test_conversation_marks_incoming_read(learner_client, learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    message = send_message(thread, teacher, 'Bring an apron')

    response = learner_client.get(reverse('conversation', args=[thread.pk]))
    assert response.status_code == 200
    assert response.context['thread_messages'] == [message]
    message.refresh_from_db()
    assert message.is_read


def test_outsider_is_sent_back_to_inbox(client, learner, teacher, other_learner):
    thread, _ = get_or_create_thread(learner, teacher)
    client.force_login(other_learner)
    response = client.get(reverse('conversation', args=[thread.pk]))
    assert response.url == reverse('inbox')


def test_send_message_view_stores_and_broadcasts(learner_client, learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    with mock.patch('messaging.views.publish_message') as publish:
        response = learner_client.post(reverse('send_message', args=[thread.pk]), {'text': 'Hello!'})
    assert response.url == reverse('conversation', args=[thread.pk])
    message = ChatMessage.objects.get()
    publish.assert_called_once_with(message)


def test_send_message_view_rejects_blank(learner_client, learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    learner_client.post(reverse('send_message', args=[thread.pk]), {'text': '  '})
    assert not ChatMessage.objects.exists()


def test_inbox_renders_link_in_message(learner_client, learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    send_message(thread, teacher, 'Map: https://maps.example.com/hall')
    response = learner_client.get(reverse('conversation', args=[thread.pk]))
    assert 'href="https://maps.example.com/hall"' in response.content.decode()


def test_send_message_view_keeps_message_when_live_delivery_fails(learner_client, learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    with mock.patch('messaging.views.publish_message', side_effect=OSError('channel layer down')):
        response = learner_client.post(reverse('send_message', args=[thread.pk]), {'text': 'Still there?'})
    assert response.status_code == 302
    assert response.url == reverse('conversation', args=[thread.pk])
    assert ChatMessage.objects.get().text == 'Still there?'
