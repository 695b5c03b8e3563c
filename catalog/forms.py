# catalog/forms.py

from django import forms
from .models import Session, CATEGORIES

"""
The create/edit form for a session. Mirrors what the teaching pages
check before anything is saved: sensible title and description
lengths, a real location, a non-negative price, room for at least one
learner, and coordinates given as a pair or not at all. The status
picker only appears when editing.
"""
class SessionForm(forms.ModelForm):
    title = forms.CharField(min_length=5, max_length=200)
    description = forms.CharField(min_length=20, widget=forms.Textarea(attrs={'rows': 5}))
    location = forms.CharField(min_length=3, max_length=255, label="Location address")
    date_time = forms.DateTimeField(
        label="Date and time",
        widget=forms.DateTimeInput(attrs={'type': 'datetime-local'}, format='%Y-%m-%dT%H:%M'),
        input_formats=['%Y-%m-%dT%H:%M', '%Y-%m-%d %H:%M', '%Y-%m-%d %H:%M:%S'],
    )
    max_participants = forms.IntegerField(min_value=1, required=False, label="Max participants")
    cover_image_url = forms.URLField(required=False, label="Cover image URL")

    class Meta:
        model = Session
        fields = [
            'title', 'description', 'category', 'location', 'latitude', 'longitude',
            'date_time', 'price', 'max_participants', 'cover_image_url', 'status',
        ]

    def __init__(self, *args, **kwargs):
        editing = kwargs.pop('editing', False)
        super().__init__(*args, **kwargs)
        if not editing:
            del self.fields['status']

    def clean(self):
        cleaned_data = super().clean()
        lat = cleaned_data.get('latitude')
        lng = cleaned_data.get('longitude')
        if (lat is None) != (lng is None):
            self.add_error('latitude', "Both latitude and longitude must be provided, or neither.")
        return cleaned_data


class SessionFilterForm(forms.Form):
    q = forms.CharField(required=False, label="Search")
    category = forms.ChoiceField(required=False, choices=[('', 'All categories')] + [(c, c) for c in CATEGORIES])
    date = forms.DateField(required=False, widget=forms.DateInput(attrs={'type': 'date'}))
    min_price = forms.DecimalField(required=False, min_value=0)
    max_price = forms.DecimalField(required=False, min_value=0)
