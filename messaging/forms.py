# messaging/forms.py

from django import forms
from .models import ChatMessage

"""
The message box under a conversation. Only the text is posted; the
sender, receiver and thread come from the request and the URL.
RT: The same box sends over the websocket when one is open.
"""
class MessageForm(forms.ModelForm):
    class Meta:
        model = ChatMessage
        fields = ['text']
        widgets = {
            'text': forms.TextInput(attrs={'placeholder': 'Write a message...', 'class': 'message-input', 'autofocus': True})
        }
        labels = {
            'text': ''
        }
