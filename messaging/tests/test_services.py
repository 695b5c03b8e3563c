from datetime import timedelta

import pytest
from django.utils import timezone

from messaging.exceptions import EmptyMessage, NotParticipant, SelfChatNotAllowed
from messaging.models import ChatMessage, ChatThread
from messaging.services import (
    backfill_participants_info,
    get_or_create_thread,
    mark_thread_read,
    messages_for,
    send_message,
    threads_for,
)


def test_thread_is_unique_per_pair_in_either_order(learner, teacher):
    thread, created = get_or_create_thread(learner, teacher)
    again, created_again = get_or_create_thread(learner, teacher)
    reversed_, _ = get_or_create_thread(teacher, learner)

    assert created and not created_again
    assert thread.pk == again.pk == reversed_.pk
    assert ChatThread.objects.count() == 1


def test_new_thread_is_seeded(learner, teacher):
    thread, _ = get_or_create_thread(teacher, learner)
    assert thread.participant_ids == sorted([learner.pk, teacher.pk])
    assert thread.last_message_text == ''
    assert thread.participants_info[str(teacher.pk)]['name'] == 'Tara Teacher'
    assert thread.participants_info[str(learner.pk)]['name'] == 'Lena Learner'


def test_nameless_user_is_seeded_with_email(make_user, teacher):
    quiet = make_user('quiet@example.com')
    quiet.name = ''
    quiet.save(update_fields=['name'])

    thread, _ = get_or_create_thread(quiet, teacher)
    assert thread.participants_info[str(quiet.pk)]['name'] == 'quiet@example.com'


def test_cannot_chat_with_self(learner):
    with pytest.raises(SelfChatNotAllowed):
        get_or_create_thread(learner, learner)


def test_send_message_appends_and_updates_preview(learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    message = send_message(thread, learner, '  Is there parking nearby?  ')

    assert message.text == 'Is there parking nearby?'
    assert message.receiver == teacher
    assert not message.is_read
    thread.refresh_from_db()
    assert thread.last_message_text == 'Is there parking nearby?'
    assert thread.last_message_sender == learner
    assert thread.last_message_at is not None


def test_blank_message_is_refused(learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    with pytest.raises(EmptyMessage):
        send_message(thread, learner, '   ')
    assert not ChatMessage.objects.exists()


def test_outsider_cannot_send(learner, teacher, other_learner):
    thread, _ = get_or_create_thread(learner, teacher)
    with pytest.raises(NotParticipant):
        send_message(thread, other_learner, 'hello')


def test_messages_come_back_in_server_timestamp_order(learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    later = send_message(thread, learner, 'second')
    earlier = send_message(thread, teacher, 'first')
    # Insertion order and timestamp order disagree on purpose
    ChatMessage.objects.filter(pk=earlier.pk).update(timestamp=timezone.now() - timedelta(minutes=5))

    assert [m.text for m in messages_for(thread)] == ['first', 'second']
    assert messages_for(thread)[-1].pk == later.pk


def test_backfill_fills_missing_names_without_saving(learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    thread.participants_info = {str(learner.pk): {'name': '', 'avatar_url': ''}}
    thread.save()

    info = backfill_participants_info(thread)
    assert info[str(learner.pk)]['name'] == 'Lena Learner'
    assert info[str(teacher.pk)]['name'] == 'Tara Teacher'

    thread.refresh_from_db()
    assert str(teacher.pk) not in thread.participants_info


def test_backfill_labels_deleted_users(learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    thread.participants_info = {'987654321': {}}
    thread.save()
    info = backfill_participants_info(thread)
    assert info['987654321']['name'] == 'User (987654)'


def test_threads_for_orders_by_latest_activity(learner, teacher, other_learner):
    quiet, _ = get_or_create_thread(learner, other_learner)
    busy, _ = get_or_create_thread(learner, teacher)
    send_message(quiet, other_learner, 'old news')
    send_message(busy, teacher, 'fresh news')

    threads = threads_for(learner)
    assert [t.pk for t in threads] == [busy.pk, quiet.pk]
    assert threads[0].other_user == teacher
    assert threads[0].info[str(teacher.pk)]['name'] == 'Tara Teacher'


def test_mark_thread_read_only_touches_incoming(learner, teacher):
    thread, _ = get_or_create_thread(learner, teacher)
    incoming = send_message(thread, teacher, 'see you saturday')
    outgoing = send_message(thread, learner, 'great')

    assert mark_thread_read(thread, learner) == 1
    incoming.refresh_from_db()
    outgoing.refresh_from_db()
    assert incoming.is_read
    assert not outgoing.is_read
