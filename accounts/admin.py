# accounts/admin.py

from django.contrib import admin
from .models import User

"""
Lets an administrator look up members by email or name and filter
them by role. The role can be picked when adding a member but is
locked afterwards, same as on the site.
"""
class UserAdmin(admin.ModelAdmin):
    list_display = ('email', 'name', 'role', 'is_active', 'created_at')
    list_filter = ('role', 'is_active')
    search_fields = ('email', 'name')

    def get_readonly_fields(self, request, obj=None):
        if obj is not None:
            return ('role', 'created_at', 'updated_at')
        return ('created_at', 'updated_at')


admin.site.register(User, UserAdmin)
