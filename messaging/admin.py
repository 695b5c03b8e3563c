# messaging/admin.py

from django.contrib import admin
from .models import ChatThread, ChatMessage


class ChatMessageInline(admin.TabularInline):
    model = ChatMessage
    extra = 0
    readonly_fields = ('sender', 'receiver', 'text', 'timestamp', 'is_read')


class ChatThreadAdmin(admin.ModelAdmin):
    list_display = ('id', 'last_message_text', 'last_message_at', 'updated_at')
    inlines = [ChatMessageInline]


admin.site.register(ChatThread, ChatThreadAdmin)
admin.site.register(ChatMessage)
