# accounts/forms.py

from django import forms
from .models import User


class SignupForm(forms.Form):
    name = forms.CharField(min_length=2, max_length=150)
    email = forms.EmailField()
    password1 = forms.CharField(label="Password", min_length=6, widget=forms.PasswordInput)
    password2 = forms.CharField(label="Confirm password", widget=forms.PasswordInput)
    role = forms.ChoiceField(choices=User.Role.choices, initial=User.Role.LEARNER, widget=forms.RadioSelect)

    def clean_email(self):
        return self.cleaned_data['email'].lower()

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('password1') and cleaned_data.get('password1') != cleaned_data.get('password2'):
            self.add_error('password2', "Passwords don't match.")
        return cleaned_data


class LoginForm(forms.Form):
    email = forms.EmailField(widget=forms.EmailInput(attrs={'autofocus': True}))
    password = forms.CharField(widget=forms.PasswordInput)


"""
The profile editor. Skills are typed as one comma-separated line and
stored as a list. The experience box only applies to teachers and is
dropped for learners.
"""
class ProfileUpdateForm(forms.ModelForm):
    name = forms.CharField(min_length=2, max_length=150)
    bio = forms.CharField(widget=forms.Textarea(attrs={'rows': 4}), max_length=500, required=False)
    skills = forms.CharField(
        required=False,
        help_text="Comma separated, e.g. watercolor, guitar, python",
    )

    class Meta:
        model = User
        fields = [
            'name', 'phone_number', 'bio', 'skills', 'availability', 'preferences',
            'experience', 'location_address',
        ]
        widgets = {
            'preferences': forms.Textarea(attrs={'rows': 3}),
            'experience': forms.Textarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance and self.instance.pk:
            self.initial['skills'] = ', '.join(self.instance.skills or [])
            if not self.instance.is_teacher:
                del self.fields['experience']

    def clean_skills(self):
        raw = self.cleaned_data.get('skills') or ''
        return [skill.strip() for skill in raw.split(',') if skill.strip()]


class AvatarForm(forms.ModelForm):
    class Meta:
        model = User
        fields = ['avatar']
        labels = {
            'avatar': 'Upload a new picture'
        }
