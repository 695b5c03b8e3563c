import pytest
from django.test import RequestFactory
from django.contrib.sessions.middleware import SessionMiddleware

from accounts.exceptions import AuthError, auth_error_message
from accounts.models import User
from accounts.services import sign_in, sign_up, update_profile
from conftest import PASSWORD


@pytest.fixture
def http_request(db):
    request = RequestFactory().post('/accounts/login/')
    SessionMiddleware(lambda r: None).process_request(request)
    request.session.save()
    return request


@pytest.mark.django_db
def test_sign_up_creates_profile_with_role(http_request):
    user = sign_up(http_request, 'New.Person@Example.com', PASSWORD, 'New Person', User.Role.TEACHER)

    assert user.email == 'new.person@example.com'
    assert user.is_teacher
    assert user.skills == []
    assert http_request.session['_auth_user_id'] == str(user.pk)


def test_sign_up_rejects_duplicate_email(http_request, learner):
    with pytest.raises(AuthError) as exc:
        sign_up(http_request, learner.email.upper(), PASSWORD, 'Someone', User.Role.LEARNER)
    assert exc.value.code == 'email-already-in-use'


@pytest.mark.django_db
def test_sign_up_rejects_weak_password(http_request):
    with pytest.raises(AuthError) as exc:
        sign_up(http_request, 'weak@example.com', '123456', 'Weak', User.Role.LEARNER)
    assert exc.value.code == 'weak-password'
    assert not User.objects.filter(email='weak@example.com').exists()


def test_sign_in_with_wrong_password_is_invalid_credential(http_request, learner):
    with pytest.raises(AuthError) as exc:
        sign_in(http_request, learner.email, 'not-the-password')
    assert exc.value.code == 'invalid-credential'
    assert exc.value.message == auth_error_message('invalid-credential')


def test_sign_in_is_throttled_after_repeated_failures(http_request, learner, settings):
    settings.SIGNIN_MAX_FAILURES = 3
    for _ in range(3):
        with pytest.raises(AuthError):
            sign_in(http_request, learner.email, 'wrong')

    # Even the right password is refused while locked out
    with pytest.raises(AuthError) as exc:
        sign_in(http_request, learner.email, PASSWORD)
    assert exc.value.code == 'too-many-requests'


def test_sign_in_refuses_disabled_account(http_request, learner):
    learner.is_active = False
    learner.save()
    with pytest.raises(AuthError) as exc:
        sign_in(http_request, learner.email, PASSWORD)
    assert exc.value.code == 'user-disabled'


def test_sign_in_success_clears_failures(http_request, learner):
    with pytest.raises(AuthError):
        sign_in(http_request, learner.email, 'wrong')
    user = sign_in(http_request, learner.email.upper(), PASSWORD)
    assert user == learner


def test_unknown_error_code_has_generic_message():
    assert auth_error_message('something-new') == "An unexpected error occurred. Please try again."


def test_update_profile_never_changes_role(learner):
    with pytest.raises(AuthError) as exc:
        update_profile(learner, role=User.Role.TEACHER)
    assert exc.value.code == 'role-immutable'
    learner.refresh_from_db()
    assert learner.is_learner


def test_update_profile_dedupes_skills_and_drops_learner_experience(learner):
    update_profile(learner, skills=['guitar', ' guitar', 'python', ''], experience='10 years', bio='Hi')
    learner.refresh_from_db()
    assert learner.skills == ['guitar', 'python']
    assert learner.experience == ''
    assert learner.bio == 'Hi'


def test_update_profile_keeps_teacher_experience(teacher):
    update_profile(teacher, experience='Taught art for 8 years')
    teacher.refresh_from_db()
    assert teacher.experience == 'Taught art for 8 years'


def test_update_profile_rejects_unknown_fields(learner):
    with pytest.raises(ValueError):
        update_profile(learner, is_staff=True)
