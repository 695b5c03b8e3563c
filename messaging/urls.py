# messaging/urls.py

from django.urls import path
from .views import inbox_view, start_chat_view, send_message_view

urlpatterns = [
    path('', inbox_view, name='inbox'),
    path('<int:thread_id>/', inbox_view, name='conversation'),
    path('<int:thread_id>/send/', send_message_view, name='send_message'),
    path('with/<int:user_id>/', start_chat_view, name='start_chat'),
]
