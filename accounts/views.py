# accounts/views.py

import logging

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.shortcuts import render, redirect, get_object_or_404
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .exceptions import AuthError
from .forms import SignupForm, LoginForm, ProfileUpdateForm, AvatarForm
from .services import sign_up, sign_in, sign_out, update_profile, upload_avatar
from catalog.models import Session

logger = logging.getLogger(__name__)

User = get_user_model()


# Only follow ?next= when it points back into this site
def _next_url(request, default):
    next_url = request.POST.get('next') or request.GET.get('next')
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return next_url
    return default


"""
Sign-up page. Creates the account with the chosen role, which can't be
changed later, then signs the new user straight in.
"""
def signup_view(request):
    if request.user.is_authenticated:
        return redirect('home')
    if request.method == 'POST':
        form = SignupForm(request.POST)
        if form.is_valid():
            data = form.cleaned_data
            try:
                sign_up(request, data['email'], data['password1'], data['name'], data['role'])
            except AuthError as e:
                messages.error(request, e.message)
            else:
                messages.success(request, f"Welcome to Local Hive, {data['name']}!")
                return redirect(_next_url(request, 'home'))
    else:
        form = SignupForm()
    return render(request, 'accounts/signup.html', {'form': form})


def login_view(request):
    if request.user.is_authenticated:
        return redirect('home')
    if request.method == 'POST':
        form = LoginForm(request.POST)
        if form.is_valid():
            try:
                sign_in(request, form.cleaned_data['email'], form.cleaned_data['password'])
            except AuthError as e:
                messages.error(request, e.message)
            else:
                return redirect(_next_url(request, 'home'))
    else:
        form = LoginForm()
    return render(request, 'accounts/login.html', {'form': form, 'next': request.GET.get('next', '')})


def logout_view(request):
    sign_out(request)
    return redirect('home')


"""
Shows a profile. With no pk it's the signed-in user's own page;
otherwise another member's public profile, which for teachers also
lists the sessions they currently offer.
"""
@login_required
def profile_view(request, pk=None):
    if pk:
        profile_user = get_object_or_404(User, pk=pk)
    else:
        profile_user = request.user

    offered_sessions = []
    if profile_user.is_teacher:
        offered_sessions = Session.objects.filter(
            teacher=profile_user, status=Session.Status.CONFIRMED
        ).order_by('date_time')

    context = {
        'profile_user': profile_user,
        'is_own_profile': profile_user == request.user,
        'offered_sessions': offered_sessions,
    }
    return render(request, 'accounts/profile.html', context)


@login_required
def edit_profile_view(request):
    if request.method == 'POST':
        form = ProfileUpdateForm(request.POST, instance=request.user)
        if form.is_valid():
            try:
                update_profile(request.user, **form.cleaned_data)
            except AuthError as e:
                messages.error(request, e.message)
            except DatabaseError as e:
                logger.exception("Profile update failed for user %s", request.user.pk)
                messages.error(request, f"Could not update profile: {e}")
            else:
                messages.success(request, "Your profile has been successfully updated.")
                return redirect('my_profile')
    else:
        form = ProfileUpdateForm(instance=request.user)
    context = {'form': form, 'avatar_form': AvatarForm()}
    return render(request, 'accounts/edit_profile.html', context)


"""
Handles the avatar picker on the edit page. The file goes to the blob
store; a failed upload leaves the old picture in place.
"""
@login_required
@require_POST
def upload_avatar_view(request):
    form = AvatarForm(request.POST, request.FILES, instance=request.user)
    if not form.is_valid() or not request.FILES.get('avatar'):
        messages.error(request, "Please choose a valid image file.")
        return redirect('edit_profile')
    try:
        upload_avatar(request.user, request.FILES['avatar'])
    except (OSError, DatabaseError) as e:
        logger.exception("Avatar upload failed for user %s", request.user.pk)
        messages.error(request, f"Could not upload profile picture. {e}")
    else:
        messages.success(request, "Profile picture updated.")
    return redirect('edit_profile')
