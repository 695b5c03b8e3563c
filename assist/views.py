# assist/views.py

import logging

from django.db import DatabaseError
from django.contrib import messages
from django.shortcuts import render

from accounts.decorators import learner_required, teacher_required
from bookings.models import BookingRequest
from catalog.services import available_sessions_for_ai
from .flows import recommend_sessions, suggest_session_content
from .forms import ContentAssistForm, RecommendationForm
from .schemas import ContentInput, RecommendationInput

logger = logging.getLogger(__name__)


def _past_session_titles(user, limit=10):
    return list(
        BookingRequest.objects.filter(learner=user)
        .order_by('-requested_at')
        .values_list('session_title', flat=True)[:limit]
    )


"""
"Recommended for you". The form starts filled in from the profile; on
submit the learner's answers and the currently open sessions go to the
AI, and whatever survives the id check is listed with the reasoning.
"""
@learner_required
def recommendations_view(request):
    result = None
    if request.method == 'POST':
        form = RecommendationForm(request.POST)
        if form.is_valid():
            learner_context = RecommendationInput(**form.cleaned_data)
            try:
                available = available_sessions_for_ai()
            except DatabaseError as e:
                logger.exception("Could not load sessions for recommendations")
                messages.error(request, f"Could not load available sessions: {e}")
                available = []
            result = recommend_sessions(learner_context, available)
    else:
        form = RecommendationForm(initial=RecommendationForm.initial_for(request.user, _past_session_titles(request.user)))
    return render(request, 'assist/recommendations.html', {'form': form, 'result': result})


@teacher_required
def content_assistant_view(request):
    result = None
    if request.method == 'POST':
        form = ContentAssistForm(request.POST)
        if form.is_valid():
            data = {k: (v or None) for k, v in form.cleaned_data.items()}
            result = suggest_session_content(ContentInput(**data))
    else:
        form = ContentAssistForm()
    return render(request, 'assist/content_assistant.html', {'form': form, 'result': result})
