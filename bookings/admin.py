# bookings/admin.py

from django.contrib import admin
from .models import BookingRequest


class BookingRequestAdmin(admin.ModelAdmin):
    list_display = ('session_title', 'learner_name', 'teacher_name', 'status', 'requested_at')
    list_filter = ('status',)
    search_fields = ('session_title', 'learner_name', 'teacher_name')


admin.site.register(BookingRequest, BookingRequestAdmin)
