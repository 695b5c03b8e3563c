# accounts/decorators.py

from functools import wraps

from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect

# Where each role lands when it opens a page meant for the other one
ROLE_HOME = {
    'teacher': 'teaching_dashboard',
    'learner': 'my_bookings',
}

"""
Gates a view to one role. Anonymous visitors go to the login page with
a ?next= back to where they were; signed-in users with the other role
are sent to their own home page instead of seeing an error.
"""
def role_required(role):
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return redirect_to_login(request.get_full_path())
            if request.user.role != role:
                return redirect(ROLE_HOME.get(request.user.role, 'home'))
            return view_func(request, *args, **kwargs)
        return _wrapped
    return decorator


teacher_required = role_required('teacher')
learner_required = role_required('learner')
