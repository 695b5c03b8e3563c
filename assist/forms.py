# assist/forms.py

from django import forms

TONE_CHOICES = [
    ('', 'Default (friendly)'),
    ('friendly', 'Friendly'),
    ('professional', 'Professional'),
    ('enthusiastic', 'Enthusiastic'),
    ('technical', 'Technical'),
    ('simple', 'Simple'),
]


class RecommendationForm(forms.Form):
    user_profile = forms.CharField(
        label="About you",
        widget=forms.Textarea(attrs={'rows': 3}),
        help_text="Your skills, interests and learning goals.",
    )
    location = forms.CharField(max_length=255)
    past_activity = forms.CharField(widget=forms.Textarea(attrs={'rows': 2}), required=False)
    availability = forms.CharField(max_length=255, required=False)

    """
    Builds the initial values from the learner's saved profile and the
    sessions they've booked before, so the form is usable with one click.
    """
    @classmethod
    def initial_for(cls, user, past_titles=()):
        parts = []
        if user.bio:
            parts.append(user.bio)
        if user.skills:
            parts.append("Skills: " + ", ".join(user.skills))
        if user.preferences:
            parts.append("Interests: " + user.preferences)
        return {
            'user_profile': ". ".join(parts),
            'location': user.location_address,
            'past_activity': ("Attended: " + ", ".join(past_titles)) if past_titles else "",
            'availability': user.availability,
        }


class ContentAssistForm(forms.Form):
    session_topic = forms.CharField(min_length=3, max_length=200)
    keywords = forms.CharField(required=False, help_text="Comma separated, e.g. beginner, acrylics")
    target_audience = forms.CharField(required=False)
    current_draft_title = forms.CharField(required=False)
    current_draft_description = forms.CharField(widget=forms.Textarea(attrs={'rows': 3}), required=False)
    desired_tone = forms.ChoiceField(choices=TONE_CHOICES, required=False)
