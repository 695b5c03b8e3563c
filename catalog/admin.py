# catalog/admin.py

from django.contrib import admin
from .models import Session


class SessionAdmin(admin.ModelAdmin):
    list_display = ('title', 'category', 'teacher_name', 'date_time', 'status', 'created_at')
    list_filter = ('status', 'category')
    search_fields = ('title', 'teacher_name', 'location')
    readonly_fields = ('teacher_name', 'teacher_avatar_url', 'created_at', 'updated_at')


admin.site.register(Session, SessionAdmin)
