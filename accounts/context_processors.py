# accounts/context_processors.py

"""
Puts the signed-in profile and its role flags on every page so
templates never have to reach into request.user themselves.
"""
def current_profile(request):
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return {'current_profile': None, 'is_teacher': False, 'is_learner': False}
    return {
        'current_profile': user,
        'is_teacher': user.is_teacher,
        'is_learner': user.is_learner,
    }
