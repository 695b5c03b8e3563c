import re
from django import template
from django.utils.html import escape, mark_safe

register = template.Library()

URL_REGEX = re.compile(r'(https?://\S+|www\.\S+)')


# Escapes a chat message, then turns bare links into anchors
@register.filter
def linkify(text):
    if not text:
        return ""
    safe_text = escape(text)

    def replace(match):
        url = match.group(0)
        href = url if url.startswith('http') else 'http://' + url
        return f'<a href="{href}" target="_blank" rel="noopener noreferrer">{url}</a>'

    return mark_safe(URL_REGEX.sub(replace, safe_text))


# Name of a thread participant from the backfilled info map
@register.filter
def participant_name(info, user_id):
    entry = (info or {}).get(str(user_id)) or {}
    return entry.get('name') or f"User ({str(user_id)[:6]})"
